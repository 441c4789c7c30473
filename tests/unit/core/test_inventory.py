"""
ClusterInventory tests.

Mock: the Kubernetes API group objects. Verifies which list method is called
and with which arguments; shaping is covered separately.
"""

from unittest.mock import MagicMock, patch

import pytest
from kubernetes import client
from kubernetes.client import ApiException

from kube_inventory.core import ClusterInventory, UnknownResourceError, parse_list_query


NAMESPACED = [
    ("pods", "core", "list_namespaced_pod", "list_pod_for_all_namespaces"),
    ("services", "core", "list_namespaced_service", "list_service_for_all_namespaces"),
    ("events", "core", "list_namespaced_event", "list_event_for_all_namespaces"),
    ("deployments", "apps", "list_namespaced_deployment", "list_deployment_for_all_namespaces"),
    ("daemonsets", "apps", "list_namespaced_daemon_set", "list_daemon_set_for_all_namespaces"),
    ("statefulsets", "apps", "list_namespaced_stateful_set", "list_stateful_set_for_all_namespaces"),
    ("ingresses", "networking", "list_namespaced_ingress", "list_ingress_for_all_namespaces"),
]

CLUSTER_SCOPED = [
    ("namespaces", "core", "list_namespace"),
    ("nodes", "core", "list_node"),
]


@pytest.mark.parametrize("kind,group,namespaced_call,cluster_call", NAMESPACED)
def test_namespace_selects_namespaced_call(inventory, apis, make_response, kind, group, namespaced_call, cluster_call):
    getattr(apis[group], namespaced_call).return_value = make_response({"items": []})

    inventory.list_resource(kind, parse_list_query({"namespace": "team-a"}))

    getattr(apis[group], namespaced_call).assert_called_once_with("team-a", _preload_content=False)
    getattr(apis[group], cluster_call).assert_not_called()


@pytest.mark.parametrize("kind,group,namespaced_call,cluster_call", NAMESPACED)
def test_no_namespace_selects_cluster_call(inventory, apis, make_response, kind, group, namespaced_call, cluster_call):
    getattr(apis[group], cluster_call).return_value = make_response({"items": []})

    inventory.list_resource(kind, parse_list_query({}))

    getattr(apis[group], cluster_call).assert_called_once_with(_preload_content=False)
    getattr(apis[group], namespaced_call).assert_not_called()


@pytest.mark.parametrize("kind,group,cluster_call", CLUSTER_SCOPED)
def test_cluster_scoped_kinds_ignore_namespace(inventory, apis, make_response, kind, group, cluster_call):
    getattr(apis[group], cluster_call).return_value = make_response({"items": []})

    inventory.list_resource(kind, parse_list_query({"namespace": "default", "limit": "3"}))

    getattr(apis[group], cluster_call).assert_called_once_with(_preload_content=False, limit=3)


def test_query_parameters_are_forwarded(inventory, apis, make_response):
    apis["core"].list_namespaced_pod.return_value = make_response({"items": []})

    inventory.list_resource("pods", parse_list_query({
        "namespace": "kube-system",
        "labelSelector": "k8s-app=kube-dns",
        "fieldSelector": "spec.nodeName=node-1",
        "limit": "2",
        "continue": "token",
        "resourceVersion": "0",
    }))

    apis["core"].list_namespaced_pod.assert_called_once_with(
        "kube-system",
        _preload_content=False,
        label_selector="k8s-app=kube-dns",
        field_selector="spec.nodeName=node-1",
        limit=2,
        _continue="token",
        resource_version="0",
    )


def test_raw_body_is_decoded(inventory, apis, make_response):
    body = {"kind": "NodeList", "metadata": {"resourceVersion": "99"},
            "items": [{"metadata": {"name": "node-1", "creationTimestamp": "2024-01-01T00:00:00Z"}}]}
    apis["core"].list_node.return_value = make_response(body)

    assert inventory.list_resource("nodes", parse_list_query({})) == body


def test_empty_body_decodes_to_empty_dict(inventory, apis):
    response = MagicMock()
    response.data = b""
    apis["core"].list_node.return_value = response

    assert inventory.list_resource("nodes", parse_list_query({})) == {}


def test_api_exception_propagates(inventory, apis):
    apis["apps"].list_deployment_for_all_namespaces.side_effect = ApiException(status=401, reason="Unauthorized")

    with pytest.raises(ApiException):
        inventory.list_resource("deployments", parse_list_query({}))


def test_unknown_kind(inventory):
    with pytest.raises(UnknownResourceError):
        inventory.list_resource("secrets", parse_list_query({}))


def test_from_configuration_shares_one_api_client():
    configuration = client.Configuration()
    configuration.host = "https://10.0.0.1:6443"

    inventory = ClusterInventory.from_configuration(configuration)

    assert isinstance(inventory.apis["core"], client.CoreV1Api)
    assert isinstance(inventory.apis["apps"], client.AppsV1Api)
    assert isinstance(inventory.apis["networking"], client.NetworkingV1Api)
    assert inventory.apis["core"].api_client is inventory.api_client
    assert inventory.apis["networking"].api_client is inventory.api_client

    with patch.object(inventory.api_client, "close") as close:
        inventory.close()
    close.assert_called_once()
    assert inventory.api_client is None


def test_from_configuration_disables_client_retries():
    configuration = client.Configuration()
    configuration.host = "https://10.0.0.1:6443"

    inventory = ClusterInventory.from_configuration(configuration)

    pool_kw = inventory.api_client.rest_client.pool_manager.connection_pool_kw
    assert pool_kw["retries"] == 0
