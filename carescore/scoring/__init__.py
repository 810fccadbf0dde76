"""Definitions of the validated clinical instruments."""

from carescore.scoring.catalog import (
    AnswerOption,
    Instrument,
    InstrumentCatalog,
    Question,
    SeverityBand,
    build_default_catalog,
    get_default_catalog,
    get_instrument,
)

__all__ = [
    "AnswerOption",
    "Instrument",
    "InstrumentCatalog",
    "Question",
    "SeverityBand",
    "build_default_catalog",
    "get_default_catalog",
    "get_instrument",
]
