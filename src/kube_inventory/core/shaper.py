"""
Response shaping for list results and upstream failures.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from kubernetes.client import ApiException

from .errors import InventoryError

logger = logging.getLogger(__name__)

ERROR_CODE = "K8S_API_ERROR"


@dataclass
class ListEnvelope:
    """Uniform list response. ``items`` are relayed exactly as received."""

    count: int
    continue_token: Optional[str] = None
    resource_version: Optional[str] = None
    items: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "continue": self.continue_token,
            "resourceVersion": self.resource_version,
            "items": self.items,
        }


def shape_list(raw: Optional[Dict[str, Any]]) -> ListEnvelope:
    """Extract items and pagination metadata from a raw list response body."""
    body = raw or {}
    items = body.get("items") or []
    metadata = body.get("metadata") or {}
    return ListEnvelope(
        count=len(items),
        continue_token=metadata.get("continue") or None,
        resource_version=metadata.get("resourceVersion") or None,
        items=items,
    )


def _decode_body(body: Any) -> Any:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            return json.loads(body)
        except ValueError:
            return body
    return body


def shape_error(exc: BaseException) -> Tuple[int, Dict[str, Any]]:
    """Map any failure into ``(status, {error, status, details})``.

    Upstream API errors keep their HTTP status and response body (decoded
    when it is JSON, the text itself otherwise); anything
    else becomes a 500 carrying the local error message.
    """
    status = 500
    details: Any = None

    if isinstance(exc, ApiException):
        status = exc.status or 500
        if exc.body:
            details = _decode_body(exc.body)
        logger.warning(f"Kubernetes API error {status}: {exc.reason}")
    elif isinstance(exc, InventoryError):
        status = getattr(exc, "status", 500)
        logger.warning(f"Rejected request ({status}): {exc}")
    else:
        logger.error(f"Kubernetes API call failed: {exc}", exc_info=exc)

    if details is None:
        details = {"message": str(exc) or "Unknown error"}

    return status, {"error": ERROR_CODE, "status": status, "details": details}
