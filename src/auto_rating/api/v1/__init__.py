"""API v1 router aggregation.

This module combines all v1 API routers into a single router
that can be mounted on the main FastAPI application.
"""

from fastapi import APIRouter

from .health import router as health_router
from .premiums import router as premiums_router

# Create main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(health_router, tags=["health"])
router.include_router(premiums_router, tags=["premiums"])


__all__ = ["router"]
