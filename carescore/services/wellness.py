"""Daily wellness check-in aggregation.

Turns a window of daily check-ins into the summary statistics shown on
monitoring dashboards (per-dimension averages, the most common exercise
duration) and the series plotted on trend charts.
"""

import logging
from collections import Counter
from datetime import date
from typing import Annotated, Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from carescore.core.config import settings
from carescore.core.exceptions import ValidationError
from carescore.models.enums import ExerciseDuration

logger = logging.getLogger(__name__)

RATING_MIN = 0
RATING_MAX = 10

# Numeric dimensions, in display order
DIMENSIONS = (
    "water_intake",
    "sunlight_exposure",
    "healthy_meals",
    "sleep_hours",
    "social_interactions",
)

# Stat-card thresholds for an average rating
GOOD_THRESHOLD = 7
FAIR_THRESHOLD = 5

# Whole-number rating; floats and booleans are rejected
Rating = Annotated[StrictInt, Field(ge=RATING_MIN, le=RATING_MAX)]


class WellnessEntry(BaseModel):
    """One daily check-in for one client.

    Used directly as the request body of the monitoring endpoints. When
    built in code, invalid values raise the engine's ValidationError
    naming the first offending field.
    """

    model_config = ConfigDict(frozen=True)

    water_intake: Rating
    sunlight_exposure: Rating
    healthy_meals: Rating
    sleep_hours: Rating
    social_interactions: Rating
    exercise_duration: ExerciseDuration
    entry_date: date
    task_notes: str = Field("", max_length=2000)
    task_remarks: str = Field("", max_length=2000)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            raise ValidationError(f"{field}: {error['msg']}", field=field) from None


class WellnessStats(BaseModel):
    """Summary statistics over a window of check-ins."""

    model_config = ConfigDict(frozen=True)

    average_water_intake: float
    average_sunlight_exposure: float
    average_healthy_meals: float
    average_sleep_hours: float
    average_social_interactions: float
    most_common_exercise_duration: ExerciseDuration
    total_entries: int


class ChartPoint(BaseModel):
    """One check-in projected for line-chart rendering."""

    model_config = ConfigDict(frozen=True)

    date: str
    water_intake: int
    sunlight_exposure: int
    healthy_meals: int
    sleep_hours: int
    social_interactions: int


def aggregate_entries(entries: Sequence[WellnessEntry]) -> WellnessStats | None:
    """Compute averages and the most common exercise duration.

    Returns None when there are no entries. Averages are not rounded;
    rounding for display is the caller's concern.
    """
    if not entries:
        return None

    count = len(entries)
    averages = {
        name: sum(getattr(entry, name) for entry in entries) / count
        for name in DIMENSIONS
    }

    logger.debug(f"Aggregated {count} wellness entries")

    return WellnessStats(
        average_water_intake=averages["water_intake"],
        average_sunlight_exposure=averages["sunlight_exposure"],
        average_healthy_meals=averages["healthy_meals"],
        average_sleep_hours=averages["sleep_hours"],
        average_social_interactions=averages["social_interactions"],
        most_common_exercise_duration=most_common_exercise_duration(entries),
        total_entries=count,
    )


def most_common_exercise_duration(entries: Sequence[WellnessEntry]) -> ExerciseDuration:
    """Return the most frequent duration.

    Ties go to the duration encountered first in `entries`.

    Raises:
        ValidationError: If `entries` is empty
    """
    if not entries:
        raise ValidationError("No entries to summarise", field="entries")

    # Counter keeps first-seen order among equal counts
    counts = Counter(entry.exercise_duration for entry in entries)
    return counts.most_common(1)[0][0]


def chart_label(day: date) -> str:
    """Short month-day label, e.g. "Mar 4"."""
    return f"{day.strftime('%b')} {day.day}"


def chart_series(
    entries: Sequence[WellnessEntry],
    limit: int | None = None,
) -> list[ChartPoint]:
    """Most recent `limit` entries in ascending date order.

    Args:
        entries: Check-ins in any order
        limit: Number of entries to plot (defaults to the configured window)

    Raises:
        ValidationError: If `limit` is negative
    """
    if limit is None:
        limit = settings.chart_window_entries
    if limit < 0:
        raise ValidationError(f"limit must be >= 0, got {limit}", field="limit")

    recent = sorted(entries, key=lambda entry: entry.entry_date, reverse=True)[:limit]
    recent.reverse()

    return [
        ChartPoint(
            date=chart_label(entry.entry_date),
            water_intake=entry.water_intake,
            sunlight_exposure=entry.sunlight_exposure,
            healthy_meals=entry.healthy_meals,
            sleep_hours=entry.sleep_hours,
            social_interactions=entry.social_interactions,
        )
        for entry in recent
    ]


def exercise_duration_from_minutes(minutes: int) -> ExerciseDuration:
    """Bucket a recorded number of exercise minutes."""
    if minutes <= 0:
        return ExerciseDuration.NONE
    if minutes < 15:
        return ExerciseDuration.UNDER_15
    if minutes < 30:
        return ExerciseDuration.UNDER_30
    return ExerciseDuration.ABOVE_30


def metric_tier(value: float) -> str:
    """Classify an average rating for stat-card colouring."""
    if value >= GOOD_THRESHOLD:
        return "good"
    if value >= FAIR_THRESHOLD:
        return "fair"
    return "poor"
