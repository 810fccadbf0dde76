"""GAD-7 (Generalized Anxiety Disorder-7) definition.

The GAD-7 is a validated 7-item anxiety screening instrument covering the
past 2 weeks. Items use the same 0-3 frequency scale as the PHQ-9.

Total score ranges 0-21.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-21: Severe

There is no moderately severe band.
"""

from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    Question,
    SeverityBand,
    frequency_options,
)
from carescore.scoring.phq9 import FREQUENCY_LABELS

ITEMS = [
    ("gad7_1", "Feeling nervous, anxious, or on edge"),
    ("gad7_2", "Not being able to stop or control worrying"),
    ("gad7_3", "Worrying too much about different things"),
    ("gad7_4", "Trouble relaxing"),
    ("gad7_5", "Being so restless that it is hard to sit still"),
    ("gad7_6", "Becoming easily annoyed or irritable"),
    ("gad7_7", "Feeling afraid, as if something awful might happen"),
]

SEVERITY_BANDS = (
    SeverityBand(
        0, 4, SeverityLevel.MINIMAL,
        "Minimal anxiety symptoms. No specific treatment indicated.",
    ),
    SeverityBand(
        5, 9, SeverityLevel.MILD,
        "Mild anxiety. Consider monitoring, stress management techniques.",
    ),
    SeverityBand(
        10, 14, SeverityLevel.MODERATE,
        "Moderate anxiety. Consider counseling or treatment.",
    ),
    SeverityBand(
        15, 21, SeverityLevel.SEVERE,
        "Severe anxiety. Active treatment is recommended.",
    ),
)

RELIABLE_CHANGE = 4

GAD7 = Instrument(
    key=InstrumentKey.GAD7,
    name="Generalized Anxiety Disorder 7-item",
    description="Screening tool for anxiety symptoms over the past 2 weeks",
    questions=tuple(
        Question(id=item_id, text=text, options=frequency_options(FREQUENCY_LABELS))
        for item_id, text in ITEMS
    ),
    bands=SEVERITY_BANDS,
    change_threshold=RELIABLE_CHANGE,
)
