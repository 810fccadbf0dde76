"""Pydantic schemas for request/response validation."""

from carescore.schemas.assessment import (
    ChangeRequest,
    ChangeResultRead,
    InstrumentRead,
    InstrumentSummary,
    NextDueRequest,
    NextDueResponse,
    ScorePointSchema,
    ScoreRequest,
    ScoreResultRead,
    TrendAnalysisRead,
    TrendRequest,
)
from carescore.schemas.monitoring import (
    ChartRequest,
    WellnessStatsRead,
    WellnessStatsRequest,
)

__all__ = [
    "ChangeRequest",
    "ChangeResultRead",
    "ChartRequest",
    "InstrumentRead",
    "InstrumentSummary",
    "NextDueRequest",
    "NextDueResponse",
    "ScorePointSchema",
    "ScoreRequest",
    "ScoreResultRead",
    "TrendAnalysisRead",
    "TrendRequest",
    "WellnessStatsRead",
    "WellnessStatsRequest",
]
