"""
FastAPI application factory for the Kube Inventory API
"""

from fastapi import FastAPI
import logging

from .. import __version__
from ..core import ClusterInventory
from ..logging_setup import install_access_log
from .schemas import ServiceInfoResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "Kube Inventory API"


def create_app(inventory: ClusterInventory) -> FastAPI:
    """
    Create and configure the FastAPI application

    Args:
        inventory: ClusterInventory shared by every request

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=SERVICE_NAME,
        version=__version__,
        description="Read-only listing of Kubernetes resources",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    install_access_log(app)

    @app.on_event("shutdown")
    async def shutdown_event():
        inventory.close()
        logger.info("Kubernetes API client closed")

    @app.get("/", response_model=ServiceInfoResponse)
    async def root():
        """Root endpoint with service information."""
        return {
            "service": SERVICE_NAME,
            "version": __version__,
            "resources": [f"/api/{name}" for name in inventory.kinds],
            "docs": "/docs",
        }

    # Register route modules
    from .routes import health, resources

    app.include_router(health.create_router(), prefix="/api", tags=["Health"])
    app.include_router(resources.create_router(inventory), prefix="/api", tags=["Resources"])

    return app
