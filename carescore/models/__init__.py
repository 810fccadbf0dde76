"""Domain enumerations for CareScore."""

from carescore.models.enums import (
    AssessmentSchedule,
    ChangeDirection,
    ExerciseDuration,
    InstrumentKey,
    SeverityLevel,
)

__all__ = [
    "AssessmentSchedule",
    "ChangeDirection",
    "ExerciseDuration",
    "InstrumentKey",
    "SeverityLevel",
]
