"""
Main entry point for the Kube Inventory API.
Loads the Kubernetes client configuration once and serves the list routes.
"""

import logging

import uvicorn

from .api import create_app
from .core import ClusterInventory, load_client_configuration
from .logging_setup import setup_logging, uvicorn_log_config
from .settings import get_settings

logger = logging.getLogger(__name__)


def build_app(settings=None):
    """Resolve cluster access and build the FastAPI app."""
    settings = settings or get_settings()
    loaded = load_client_configuration(settings)
    logger.info(f"Kubernetes configuration source: {loaded.source}")
    inventory = ClusterInventory.from_configuration(loaded.configuration)
    return create_app(inventory)


def main():
    """Main entry point"""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = build_app(settings)

    logger.info(f"K8s Inventory API listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=uvicorn_log_config(),
    )


if __name__ == "__main__":
    main()
