"""
Pydantic schemas for the Kube Inventory API.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class ListResponse(BaseModel):
    """Uniform envelope returned by every list route."""
    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(..., description="Number of items in this page")
    continue_: Optional[str] = Field(None, alias="continue", description="Token for the next page, if any")
    resourceVersion: Optional[str] = Field(None, description="Resource version of the list")
    items: List[Any] = Field(default_factory=list, description="Raw Kubernetes objects, unmodified")


class ErrorResponse(BaseModel):
    """Envelope returned when a list call fails."""
    error: str = Field("K8S_API_ERROR", description="Error kind")
    status: int = Field(..., description="HTTP status of the failure")
    details: Any = Field(..., description="Upstream response body or local error message")


class HealthResponse(BaseModel):
    ok: bool = True


class ServiceInfoResponse(BaseModel):
    service: str
    version: str
    resources: List[str]
    docs: str = "/docs"
