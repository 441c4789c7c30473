"""
Normalization of HTTP query parameters into Kubernetes list-call arguments.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidQueryError


@dataclass(frozen=True)
class ListQuery:
    """Parameters of a single list call.

    ``None`` means "use the API server default", never zero or empty.
    """

    namespace: Optional[str] = None
    label_selector: Optional[str] = None
    field_selector: Optional[str] = None
    limit: Optional[int] = None
    continue_token: Optional[str] = None
    resource_version: Optional[str] = None

    def to_call_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for a ``kubernetes.client`` list method (namespace excluded)."""
        kwargs = {
            "label_selector": self.label_selector,
            "field_selector": self.field_selector,
            "limit": self.limit,
            "_continue": self.continue_token,
            "resource_version": self.resource_version,
        }
        return {key: value for key, value in kwargs.items() if value is not None}


def _opt(params: Mapping[str, str], name: str) -> Optional[str]:
    value = params.get(name)
    return value if value else None


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidQueryError(f"limit must be an integer, got {raw!r}")


def parse_list_query(params: Mapping[str, str]) -> ListQuery:
    """Build a ListQuery from raw query-string values.

    Selectors, the continuation token and the resource version are passed
    through as opaque strings.

    Raises:
        InvalidQueryError: if ``limit`` is present but not an integer
    """
    return ListQuery(
        namespace=_opt(params, "namespace"),
        label_selector=_opt(params, "labelSelector"),
        field_selector=_opt(params, "fieldSelector"),
        limit=_parse_limit(params.get("limit")),
        continue_token=_opt(params, "continue"),
        resource_version=_opt(params, "resourceVersion"),
    )
