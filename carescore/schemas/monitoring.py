"""Pydantic schemas for daily wellness monitoring.

Check-ins are validated by `WellnessEntry` itself, so requests carry the
domain model directly.
"""

from pydantic import BaseModel, Field

from carescore.services.wellness import WellnessEntry, WellnessStats


class WellnessStatsRequest(BaseModel):
    """Request to summarise a window of check-ins."""

    entries: list[WellnessEntry]


class WellnessStatsRead(WellnessStats):
    """Summary statistics with display tiers for each average."""

    tiers: dict[str, str]


class ChartRequest(BaseModel):
    """Request to build a chart series."""

    entries: list[WellnessEntry]
    limit: int | None = Field(None, ge=0)
