"""
Liveness route. Never touches the control plane.
"""

from fastapi import APIRouter

from ..schemas import HealthResponse


def create_router():
    """Create health routes"""
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    async def health():
        """Liveness check"""
        return {"ok": True}

    return router
