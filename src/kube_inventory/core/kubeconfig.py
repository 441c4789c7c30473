"""
Kubernetes client configuration discovery.

Strategies are tried in a fixed order and the first one that succeeds wins:

1. In-cluster service account, only when ``KUBERNETES_SERVICE_HOST`` is set and
   both the token and the CA bundle exist.
2. The first kubeconfig file that exists among the known candidates
   (``$KUBECONFIG`` first).
3. The client's own default discovery rules.

If every strategy fails a bare default configuration is returned, so callers
always get something usable and connectivity problems surface per request.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from ..settings import InventorySettings

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_DIR = Path("/var/run/secrets/kubernetes.io/serviceaccount")

WELL_KNOWN_KUBECONFIGS = (
    "/etc/kubernetes/admin.conf",
    "{home}/.kube/config",
    "/root/.kube/config",
    "/home/administrator/.kube/config",
)


@dataclass
class LoadedConfig:
    configuration: client.Configuration
    source: str


def in_cluster_available(settings: InventorySettings, service_account_dir: Path = SERVICE_ACCOUNT_DIR) -> bool:
    """True when running inside a pod with a mounted service account."""
    if not settings.kubernetes_service_host:
        return False
    return (service_account_dir / "token").exists() and (service_account_dir / "ca.crt").exists()


def kubeconfig_candidates(settings: InventorySettings) -> List[str]:
    """Candidate kubeconfig paths in priority order, before existence checks."""
    home = settings.home or "/root"
    candidates = [settings.kubeconfig] if settings.kubeconfig else []
    candidates.extend(path.format(home=home) for path in WELL_KNOWN_KUBECONFIGS)
    return candidates


def first_existing_kubeconfig(settings: InventorySettings) -> Optional[str]:
    for candidate in kubeconfig_candidates(settings):
        if Path(candidate).is_file():
            return candidate
    return None


def load_client_configuration(
    settings: InventorySettings,
    service_account_dir: Path = SERVICE_ACCOUNT_DIR,
) -> LoadedConfig:
    """Resolve the client configuration. Never raises on missing credentials."""
    configuration = client.Configuration()

    if in_cluster_available(settings, service_account_dir):
        try:
            config.load_incluster_config(client_configuration=configuration)
            logger.info("Using in-cluster service account configuration")
            return LoadedConfig(configuration, "in-cluster")
        except ConfigException as e:
            logger.warning(f"In-cluster configuration failed: {e}")

    kubeconfig = first_existing_kubeconfig(settings)
    if kubeconfig:
        try:
            config.load_kube_config(config_file=kubeconfig, client_configuration=configuration)
            logger.info(f"Using kubeconfig {kubeconfig}")
            return LoadedConfig(configuration, kubeconfig)
        except ConfigException as e:
            logger.warning(f"Failed to load kubeconfig {kubeconfig}: {e}")

    try:
        config.load_kube_config(client_configuration=configuration)
        logger.info("Using default kubeconfig discovery")
        return LoadedConfig(configuration, "default")
    except ConfigException as e:
        logger.warning(f"No Kubernetes configuration found ({e}); using client defaults")

    return LoadedConfig(client.Configuration(), "fallback")
