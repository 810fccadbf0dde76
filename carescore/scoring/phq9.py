"""PHQ-9 (Patient Health Questionnaire-9) definition.

The PHQ-9 is a validated 9-item depression screening instrument covering
the past 2 weeks. Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-27.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-19: Moderately Severe
- 20-27: Severe

A change of 5 points or more between administrations is treated as
reliable.
"""

from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    Question,
    SeverityBand,
    frequency_options,
)

FREQUENCY_LABELS = (
    "Not at all",
    "Several days",
    "More than half the days",
    "Nearly every day",
)

ITEMS = [
    ("phq9_1", "Little interest or pleasure in doing things"),
    ("phq9_2", "Feeling down, depressed, or hopeless"),
    ("phq9_3", "Trouble falling or staying asleep, or sleeping too much"),
    ("phq9_4", "Feeling tired or having little energy"),
    ("phq9_5", "Poor appetite or overeating"),
    (
        "phq9_6",
        "Feeling bad about yourself - or that you are a failure or have let "
        "yourself or your family down",
    ),
    (
        "phq9_7",
        "Trouble concentrating on things, such as reading the newspaper or "
        "watching television",
    ),
    (
        "phq9_8",
        "Moving or speaking so slowly that other people could have noticed. "
        "Or the opposite - being so fidgety or restless that you have been "
        "moving around a lot more than usual",
    ),
    (
        "phq9_9",
        "Thoughts that you would be better off dead, or of hurting yourself "
        "in some way",
    ),
]

SEVERITY_BANDS = (
    SeverityBand(
        0, 4, SeverityLevel.MINIMAL,
        "Minimal depression symptoms. Monitor and consider support as needed.",
    ),
    SeverityBand(
        5, 9, SeverityLevel.MILD,
        "Mild depression. Consider counseling, follow-up monitoring.",
    ),
    SeverityBand(
        10, 14, SeverityLevel.MODERATE,
        "Moderate depression. Treatment with counseling and/or medication is "
        "recommended.",
    ),
    SeverityBand(
        15, 19, SeverityLevel.MODERATELY_SEVERE,
        "Moderately severe depression. Active treatment with medication and/or "
        "psychotherapy is recommended.",
    ),
    SeverityBand(
        20, 27, SeverityLevel.SEVERE,
        "Severe depression. Immediate treatment with medication and "
        "psychotherapy is strongly recommended.",
    ),
)

RELIABLE_CHANGE = 5

PHQ9 = Instrument(
    key=InstrumentKey.PHQ9,
    name="Patient Health Questionnaire-9",
    description="Screening tool for depression severity over the past 2 weeks",
    questions=tuple(
        Question(id=item_id, text=text, options=frequency_options(FREQUENCY_LABELS))
        for item_id, text in ITEMS
    ),
    bands=SEVERITY_BANDS,
    change_threshold=RELIABLE_CHANGE,
)
