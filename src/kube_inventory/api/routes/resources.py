"""
Resource list routes.

One GET route per resource kind, all served by the same handler: parse the
query, make a single list call, shape the result.
"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ...core import ClusterInventory, ResourceKind, parse_list_query, shape_error, shape_list
from ..schemas import ErrorResponse, ListResponse


def _make_list_handler(inventory: ClusterInventory, kind: ResourceKind):
    def list_handler(
        namespace: Optional[str] = Query(None, description="Restrict to one namespace"),
        labelSelector: Optional[str] = Query(None, description="Label selector"),
        fieldSelector: Optional[str] = Query(None, description="Field selector"),
        limit: Optional[str] = Query(None, description="Maximum number of items to return"),
        continue_: Optional[str] = Query(None, alias="continue", description="Continuation token from a previous page"),
        resourceVersion: Optional[str] = Query(None, description="Resource version constraint"),
    ):
        params = {
            "namespace": namespace,
            "labelSelector": labelSelector,
            "fieldSelector": fieldSelector,
            "limit": limit,
            "continue": continue_,
            "resourceVersion": resourceVersion,
        }
        try:
            query = parse_list_query({k: v for k, v in params.items() if v is not None})
            raw = inventory.list_resource(kind.name, query)
        except Exception as e:  # noqa: BLE001 - every failure becomes an error envelope
            status, payload = shape_error(e)
            return JSONResponse(status_code=status, content=payload)

        return shape_list(raw).to_dict()

    list_handler.__name__ = f"list_{kind.name}"
    scope = "namespaced or cluster-wide" if kind.namespaced else "cluster-scoped"
    list_handler.__doc__ = f"List {kind.name} ({scope})"
    return list_handler


def create_router(inventory: ClusterInventory):
    """Create one list route per known resource kind"""
    router = APIRouter()

    for kind in inventory.kinds.values():
        router.add_api_route(
            f"/{kind.name}",
            _make_list_handler(inventory, kind),
            methods=["GET"],
            response_model=ListResponse,
            responses={"default": {"model": ErrorResponse}},
            summary=f"List {kind.name}",
        )

    return router
