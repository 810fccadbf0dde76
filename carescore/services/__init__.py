"""Scoring, change detection and wellness aggregation services."""

from carescore.services.change import (
    ChangeResult,
    ScorePoint,
    TrendAnalysis,
    analyze_trend,
    detect_change,
    trend_series,
)
from carescore.services.presentation import display_tier
from carescore.services.schedule import is_overdue, next_due_at
from carescore.services.scoring import ScoreResult, ScoringService, score_assessment
from carescore.services.wellness import (
    ChartPoint,
    WellnessEntry,
    WellnessStats,
    aggregate_entries,
    chart_series,
)

__all__ = [
    "ChangeResult",
    "ChartPoint",
    "ScorePoint",
    "ScoreResult",
    "ScoringService",
    "TrendAnalysis",
    "WellnessEntry",
    "WellnessStats",
    "aggregate_entries",
    "analyze_trend",
    "chart_series",
    "detect_change",
    "display_tier",
    "is_overdue",
    "next_due_at",
    "score_assessment",
    "trend_series",
]
