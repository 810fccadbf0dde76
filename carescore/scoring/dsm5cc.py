"""DSM-5 Cross-Cutting Symptom Measure definition.

A brief 5-domain screen. Each item is scored 0-4 (None, Slight, Mild,
Moderate, Severe), total 0-20.
"""

from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    Question,
    SeverityBand,
    frequency_options,
)

INTENSITY_LABELS = ("None", "Slight", "Mild", "Moderate", "Severe")

ITEMS = [
    ("dsm5_1", "Depression (feeling sad, empty, hopeless, or worthless)"),
    ("dsm5_2", "Anxiety (feeling nervous, anxious, fearful, or panicky)"),
    (
        "dsm5_3",
        "Repetitive thoughts and behaviors (having repeated thoughts, urges, "
        "or behaviors that interfere with your life)",
    ),
    (
        "dsm5_4",
        "Substance use (drinking alcohol or using drugs more than you meant "
        "to, or interference with your life)",
    ),
    (
        "dsm5_5",
        "Sleep problems (trouble falling asleep, staying asleep, sleeping too "
        "much, or nightmares)",
    ),
]

SEVERITY_BANDS = (
    SeverityBand(
        0, 2, SeverityLevel.MINIMAL,
        "Minimal symptoms across domains. Continue monitoring.",
    ),
    SeverityBand(
        3, 5, SeverityLevel.MILD,
        "Mild symptoms present. Consider targeted interventions.",
    ),
    SeverityBand(
        6, 10, SeverityLevel.MODERATE,
        "Moderate symptoms. Treatment recommendations indicated.",
    ),
    SeverityBand(
        11, 15, SeverityLevel.MODERATELY_SEVERE,
        "Moderately severe symptoms. Active treatment strongly recommended.",
    ),
    SeverityBand(
        16, 20, SeverityLevel.SEVERE,
        "Severe symptoms across multiple domains. Immediate comprehensive "
        "treatment needed.",
    ),
)

RELIABLE_CHANGE = 3

DSM5_CC = Instrument(
    key=InstrumentKey.DSM5_CC,
    name="DSM-5 Cross-Cutting Symptom Measure",
    description="Brief assessment of mental health symptoms across multiple domains",
    questions=tuple(
        Question(id=item_id, text=text, options=frequency_options(INTENSITY_LABELS))
        for item_id, text in ITEMS
    ),
    bands=SEVERITY_BANDS,
    change_threshold=RELIABLE_CHANGE,
)
