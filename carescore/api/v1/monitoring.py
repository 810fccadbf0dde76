"""Daily wellness monitoring API endpoints."""

from fastapi import APIRouter

from carescore.schemas.monitoring import (
    ChartRequest,
    WellnessStatsRead,
    WellnessStatsRequest,
)
from carescore.services.wellness import (
    DIMENSIONS,
    ChartPoint,
    aggregate_entries,
    chart_series,
    metric_tier,
)

router = APIRouter()


@router.post(
    "/stats",
    response_model=WellnessStatsRead | None,
)
async def wellness_stats(request: WellnessStatsRequest) -> WellnessStatsRead | None:
    """Summarise a window of check-ins.

    Returns null when the window has no entries.
    """
    stats = aggregate_entries(request.entries)
    if stats is None:
        return None

    tiers = {
        name: metric_tier(getattr(stats, f"average_{name}"))
        for name in DIMENSIONS
    }
    return WellnessStatsRead(**stats.model_dump(), tiers=tiers)


@router.post(
    "/chart",
    response_model=list[ChartPoint],
)
async def wellness_chart(request: ChartRequest) -> list[ChartPoint]:
    """Build the line-chart series for the most recent check-ins."""
    return chart_series(request.entries, request.limit)
