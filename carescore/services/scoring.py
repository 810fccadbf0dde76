"""Clinical assessment scoring service.

Scores one administration of a catalog instrument:
- PHQ-9, GAD-7, DSM-5-CC: sum of item values
- WHODAS-2.0: sum of item values rescaled to a 0-100 percentage

The reported score is classified into the instrument's severity band and
paired with the band's interpretation sentence. Scoring is deterministic
and has no side effects.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from carescore.core.exceptions import ValidationError
from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    InstrumentCatalog,
    get_default_catalog,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    """Result of a score calculation."""

    instrument: InstrumentKey
    score: int
    interpretation: str
    severity_level: SeverityLevel
    raw_score: int
    max_score: int


class ScoringService:
    """Service for scoring questionnaire answer sets."""

    def __init__(self, catalog: InstrumentCatalog | None = None):
        self.catalog = catalog if catalog is not None else get_default_catalog()

    def score(
        self,
        instrument_key: InstrumentKey | str,
        answers: Mapping[str, Any],
    ) -> ScoreResult:
        """Score an answer set for one instrument.

        Args:
            instrument_key: Instrument to score against
            answers: Dict mapping question IDs to the selected option value.
                     Keys that are not questions of this instrument are ignored.

        Returns:
            ScoreResult with reported score, severity level and interpretation

        Raises:
            InstrumentNotFoundError: If the instrument is not in the catalog
            ValidationError: If a question is unanswered or has an invalid value
        """
        instrument = self.catalog.get_instrument(instrument_key)
        item_scores = self.validate_answers(instrument, answers)

        raw = sum(item_scores.values())
        score = instrument.reported_score(raw)
        band = instrument.band_for(score)

        logger.debug(
            f"Scored {instrument.key.value}: score={score} level={band.level.value}",
            extra={
                "instrument": instrument.key.value,
                "severity_level": band.level.value,
            },
        )

        return ScoreResult(
            instrument=instrument.key,
            score=score,
            interpretation=band.interpretation,
            severity_level=band.level,
            raw_score=raw,
            max_score=instrument.max_score,
        )

    @staticmethod
    def validate_answers(
        instrument: Instrument,
        answers: Mapping[str, Any],
    ) -> dict[str, int]:
        """Check that every question has a defined option value.

        Returns:
            Item scores in question order

        Raises:
            ValidationError: Naming the first missing or invalid question id
        """
        item_scores: dict[str, int] = {}

        for question in instrument.questions:
            if question.id not in answers:
                raise ValidationError(
                    f"Missing {instrument.key.value} answer for {question.id}",
                    field=question.id,
                )

            value = answers[question.id]
            # bool is an int subclass but never a valid answer
            if (
                isinstance(value, bool)
                or not isinstance(value, int)
                or value not in question.option_values
            ):
                allowed = ", ".join(str(v) for v in sorted(question.option_values))
                raise ValidationError(
                    f"{instrument.key.value} {question.id} must be one of "
                    f"{allowed}, got {value!r}",
                    field=question.id,
                )

            item_scores[question.id] = value

        return item_scores


def score_assessment(
    instrument_key: InstrumentKey | str,
    answers: Mapping[str, Any],
) -> ScoreResult:
    """Score an answer set using the default catalog."""
    return ScoringService().score(instrument_key, answers)
