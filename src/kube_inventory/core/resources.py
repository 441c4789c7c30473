"""
Table of resource kinds exposed by the inventory API.

Each kind names the API group object it lives on and the two list methods of
``kubernetes.client``. Cluster-scoped kinds have no namespaced variant.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .errors import UnknownResourceError


@dataclass(frozen=True)
class ResourceKind:
    name: str
    api: str
    cluster_call: str
    namespaced_call: Optional[str] = None

    @property
    def namespaced(self) -> bool:
        return self.namespaced_call is not None

    def call_for(self, namespace: Optional[str]) -> str:
        """Return the list method to use for the given namespace scope."""
        if namespace and self.namespaced_call:
            return self.namespaced_call
        return self.cluster_call


RESOURCE_KINDS: Dict[str, ResourceKind] = {
    kind.name: kind
    for kind in (
        ResourceKind("namespaces", "core", "list_namespace"),
        ResourceKind("pods", "core", "list_pod_for_all_namespaces", "list_namespaced_pod"),
        ResourceKind("services", "core", "list_service_for_all_namespaces", "list_namespaced_service"),
        ResourceKind("nodes", "core", "list_node"),
        ResourceKind("deployments", "apps", "list_deployment_for_all_namespaces", "list_namespaced_deployment"),
        ResourceKind("daemonsets", "apps", "list_daemon_set_for_all_namespaces", "list_namespaced_daemon_set"),
        ResourceKind("statefulsets", "apps", "list_stateful_set_for_all_namespaces", "list_namespaced_stateful_set"),
        ResourceKind("ingresses", "networking", "list_ingress_for_all_namespaces", "list_namespaced_ingress"),
        ResourceKind("events", "core", "list_event_for_all_namespaces", "list_namespaced_event"),
    )
}


def get_resource_kind(name: str) -> ResourceKind:
    try:
        return RESOURCE_KINDS[name]
    except KeyError:
        raise UnknownResourceError(f"Unknown resource kind: {name}")
