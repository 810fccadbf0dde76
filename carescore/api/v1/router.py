"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from carescore.api.v1 import assessments, health, instruments, monitoring

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Instrument catalog
api_router.include_router(
    instruments.router,
    prefix="/instruments",
    tags=["instruments"],
)

# Scoring and change detection
api_router.include_router(
    assessments.router,
    prefix="/assessments",
    tags=["assessments"],
)

# Daily wellness monitoring
api_router.include_router(
    monitoring.router,
    prefix="/monitoring",
    tags=["monitoring"],
)
