"""Change detection between administrations of the same instrument.

Uses simplified Reliable Change Index thresholds stored on each
instrument (PHQ-9: 5, GAD-7: 4, WHODAS-2.0: 10, DSM-5-CC: 3). These are
fixed values, not derived from measurement error.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from carescore.core.exceptions import InstrumentNotFoundError, ValidationError
from carescore.models.enums import ChangeDirection, InstrumentKey, SeverityLevel
from carescore.scoring.catalog import InstrumentCatalog, get_default_catalog


@dataclass(frozen=True)
class ChangeResult:
    """Outcome of comparing two scores."""

    is_significant: bool
    direction: ChangeDirection
    magnitude: float
    threshold: int


@dataclass(frozen=True)
class ScorePoint:
    """A stored score for one administration, as read back from storage."""

    completed_at: datetime
    score: float
    instrument: InstrumentKey
    severity_level: SeverityLevel | None = None


@dataclass(frozen=True)
class TrendAnalysis:
    """Latest two administrations and the change between them."""

    previous: ScorePoint
    latest: ScorePoint
    change: ChangeResult


def detect_change(
    instrument_key: InstrumentKey | str,
    previous_score: float,
    current_score: float,
    catalog: InstrumentCatalog | None = None,
) -> ChangeResult:
    """Classify the change from `previous_score` to `current_score`.

    A decrease is an improvement. A change equal to the threshold counts
    as significant.

    Raises:
        InstrumentNotFoundError: If the instrument is not in the catalog
        ValidationError: If either score is NaN or infinite
    """
    for name, value in (
        ("previous_score", previous_score),
        ("current_score", current_score),
    ):
        if not math.isfinite(value):
            raise ValidationError(
                f"{name} must be a finite number, got {value!r}",
                field=name,
            )

    catalog = catalog if catalog is not None else get_default_catalog()
    threshold = catalog.get_instrument(instrument_key).change_threshold

    delta = previous_score - current_score
    magnitude = abs(delta)

    if delta > 0:
        direction = ChangeDirection.IMPROVEMENT
    elif delta < 0:
        direction = ChangeDirection.DETERIORATION
    else:
        direction = ChangeDirection.STABLE

    return ChangeResult(
        is_significant=magnitude >= threshold,
        direction=direction,
        magnitude=magnitude,
        threshold=threshold,
    )


def trend_series(
    instrument_key: InstrumentKey | str,
    points: Iterable[ScorePoint],
) -> list[ScorePoint]:
    """Points for one instrument in ascending chronological order."""
    try:
        key = InstrumentKey(instrument_key)
    except ValueError:
        raise InstrumentNotFoundError(instrument_key) from None
    return sorted(
        (point for point in points if point.instrument == key),
        key=lambda point: point.completed_at,
    )


def analyze_trend(
    instrument_key: InstrumentKey | str,
    points: Iterable[ScorePoint],
    catalog: InstrumentCatalog | None = None,
) -> TrendAnalysis | None:
    """Compare the two most recent administrations of an instrument.

    Returns None when fewer than two administrations are available.
    """
    catalog = catalog if catalog is not None else get_default_catalog()
    instrument = catalog.get_instrument(instrument_key)

    series = trend_series(instrument.key, points)
    if len(series) < 2:
        return None

    previous, latest = series[-2], series[-1]
    return TrendAnalysis(
        previous=previous,
        latest=latest,
        change=detect_change(instrument.key, previous.score, latest.score, catalog),
    )
