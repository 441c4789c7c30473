"""
Read-only access to Kubernetes list APIs.

ClusterInventory owns one ApiClient shared by every request. List calls are
made with ``_preload_content=False`` so the raw JSON body is relayed to
callers without model deserialization.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from kubernetes import client

from .query import ListQuery
from .resources import RESOURCE_KINDS, ResourceKind, get_resource_kind

logger = logging.getLogger(__name__)


class ClusterInventory:
    """
    Dispatches list queries to the matching Kubernetes API object.
    """

    def __init__(self, apis: Mapping[str, Any], api_client: Optional[client.ApiClient] = None):
        """
        Args:
            apis: API objects keyed by group name (``core``, ``apps``, ``networking``)
            api_client: shared ApiClient, closed by ``close()``
        """
        self.apis = dict(apis)
        self.api_client = api_client

    @classmethod
    def from_configuration(cls, configuration: client.Configuration) -> "ClusterInventory":
        # one upstream attempt per request (urllib3 defaults to Retry(3))
        configuration.retries = 0
        api_client = client.ApiClient(configuration)
        apis = {
            "core": client.CoreV1Api(api_client),
            "apps": client.AppsV1Api(api_client),
            "networking": client.NetworkingV1Api(api_client),
        }
        logger.info(f"ClusterInventory initialized for {configuration.host}")
        return cls(apis, api_client)

    @property
    def kinds(self) -> Dict[str, ResourceKind]:
        return RESOURCE_KINDS

    def list_resource(self, kind: str, query: ListQuery) -> Dict[str, Any]:
        """Issue exactly one list call for ``kind`` and return the decoded body.

        The namespaced variant is used only when the query carries a namespace
        and the kind is namespaced; otherwise the cluster-wide call is made.
        Client exceptions propagate unchanged.
        """
        resource = get_resource_kind(kind)
        method_name = resource.call_for(query.namespace)
        method = getattr(self.apis[resource.api], method_name)

        kwargs = query.to_call_kwargs()
        if method_name == resource.namespaced_call:
            logger.debug(f"{method_name}(namespace={query.namespace}, {kwargs})")
            response = method(query.namespace, _preload_content=False, **kwargs)
        else:
            logger.debug(f"{method_name}({kwargs})")
            response = method(_preload_content=False, **kwargs)

        return self._decode(response)

    @staticmethod
    def _decode(response: Any) -> Dict[str, Any]:
        data = getattr(response, "data", response)
        if not data:
            return {}
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        if isinstance(data, str):
            return json.loads(data)
        return data

    def close(self) -> None:
        if self.api_client is not None:
            self.api_client.close()
            self.api_client = None
