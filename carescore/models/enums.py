"""Closed enumerations shared across the engine.

String values are the keys used at the serialization boundary.
"""

from enum import Enum


class InstrumentKey(str, Enum):
    """Supported clinical questionnaires."""

    PHQ9 = "PHQ-9"  # Patient Health Questionnaire-9 (depression)
    GAD7 = "GAD-7"  # Generalized Anxiety Disorder-7
    WHODAS2 = "WHODAS-2.0"  # WHO Disability Assessment Schedule 2.0, 12-item
    DSM5_CC = "DSM-5-CC"  # DSM-5 Cross-Cutting Symptom Measure


class SeverityLevel(str, Enum):
    """Severity band classifications."""

    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    MODERATELY_SEVERE = "moderately-severe"
    SEVERE = "severe"


class ChangeDirection(str, Enum):
    """Direction of change between two administrations.

    A lower score is an improvement for every supported instrument.
    """

    IMPROVEMENT = "improvement"
    DETERIORATION = "deterioration"
    STABLE = "stable"


class ExerciseDuration(str, Enum):
    """Exercise duration bucket recorded on a daily wellness check-in."""

    NONE = "none"
    UNDER_15 = "under15"
    UNDER_30 = "under30"
    ABOVE_30 = "above30"


class AssessmentSchedule(str, Enum):
    """How often an assigned instrument is re-administered."""

    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    ONCE = "once"
