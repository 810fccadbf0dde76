"""WHODAS 2.0 (WHO Disability Assessment Schedule, 12-item) definition.

Functional disability over the past 30 days. Each item is scored 1-5,
so the raw sum ranges 12-60. The reported score is the raw sum rescaled
linearly to a 0-100 percentage, and severity bands apply to that
percentage:
- 0-10: Minimal
- 11-25: Mild
- 26-50: Moderate
- 51-75: Moderately Severe
- 76-100: Severe
"""

import math

from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    Question,
    SeverityBand,
    frequency_options,
)

DIFFICULTY_LABELS = (
    "None",
    "Mild",
    "Moderate",
    "Severe",
    "Extreme or cannot do",
)

# Item 5 asks about emotional impact rather than difficulty
IMPACT_LABELS = (
    "Not at all",
    "Mildly",
    "Moderately",
    "Severely",
    "Extremely",
)

ITEMS = [
    ("whodas_1", "Standing for long periods such as 30 minutes?"),
    ("whodas_2", "Taking care of your household responsibilities?"),
    (
        "whodas_3",
        "Learning a new task, for example, learning how to get to a new place?",
    ),
    (
        "whodas_4",
        "How much of a problem did you have joining in community activities "
        "(for example, festivities, religious or other activities) in the same "
        "way as anyone else can?",
    ),
    ("whodas_5", "How much have you been emotionally affected by your health problems?"),
    ("whodas_6", "Concentrating on doing something for ten minutes?"),
    ("whodas_7", "Walking a long distance such as a kilometre [or equivalent]?"),
    ("whodas_8", "Washing your whole body?"),
    ("whodas_9", "Getting dressed?"),
    ("whodas_10", "Dealing with people you do not know?"),
    ("whodas_11", "Maintaining a friendship?"),
    ("whodas_12", "Your day-to-day work?"),
]

RAW_MIN = 12
RAW_MAX = 60


def to_percentage(raw: int) -> int:
    """Rescale a raw 12-60 sum to 0-100, rounding halves up."""
    return math.floor((raw - RAW_MIN) / (RAW_MAX - RAW_MIN) * 100 + 0.5)


SEVERITY_BANDS = (
    SeverityBand(
        0, 10, SeverityLevel.MINIMAL,
        "No significant disability. Normal functioning.",
    ),
    SeverityBand(
        11, 25, SeverityLevel.MILD,
        "Mild disability. Some difficulty with daily activities.",
    ),
    SeverityBand(
        26, 50, SeverityLevel.MODERATE,
        "Moderate disability. Significant limitations in functioning.",
    ),
    SeverityBand(
        51, 75, SeverityLevel.MODERATELY_SEVERE,
        "Severe disability. Major limitations in most areas of functioning.",
    ),
    SeverityBand(
        76, 100, SeverityLevel.SEVERE,
        "Extreme disability. Unable to carry out most activities.",
    ),
)

RELIABLE_CHANGE = 10

WHODAS2 = Instrument(
    key=InstrumentKey.WHODAS2,
    name="WHO Disability Assessment Schedule 2.0",
    description="Assessment of functioning and disability over the past 30 days",
    questions=tuple(
        Question(
            id=item_id,
            text=text,
            options=frequency_options(
                IMPACT_LABELS if item_id == "whodas_5" else DIFFICULTY_LABELS,
                start=1,
            ),
        )
        for item_id, text in ITEMS
    ),
    bands=SEVERITY_BANDS,
    change_threshold=RELIABLE_CHANGE,
    rescale=to_percentage,
)
