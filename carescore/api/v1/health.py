"""Liveness and readiness probes."""

from fastapi import APIRouter
from pydantic import BaseModel

from carescore.api.deps import Catalog
from carescore.models.enums import InstrumentKey

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness probe body."""

    status: str


class ReadinessResponse(HealthResponse):
    """Readiness probe body listing the loaded instruments."""

    instruments: list[InstrumentKey]


@router.get("", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    """Report that the process is serving requests."""
    return HealthResponse(status="ok")


@router.get("/ready", response_model=ReadinessResponse, summary="Readiness probe")
async def readiness_check(catalog: Catalog) -> ReadinessResponse:
    """Report whether any instruments are available to score.

    Status is "empty" when the catalog holds no instruments, so a
    misconfigured deployment can be kept out of rotation.
    """
    return ReadinessResponse(
        status="ok" if len(catalog) else "empty",
        instruments=list(catalog.keys),
    )
