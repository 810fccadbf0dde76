"""Instrument catalog.

Static definitions of each supported questionnaire: ordered questions,
per-question answer options with integer values, severity bands and the
reliable-change threshold used when comparing two administrations.

Definitions are immutable. The catalog is built once and handed to the
services that need it, so tests can substitute a smaller fixture catalog.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from carescore.core.exceptions import CatalogError, InstrumentNotFoundError
from carescore.models.enums import InstrumentKey, SeverityLevel


@dataclass(frozen=True)
class AnswerOption:
    """One selectable answer and its score contribution."""

    value: int
    label: str


@dataclass(frozen=True)
class Question:
    """A single questionnaire item."""

    id: str
    text: str
    options: tuple[AnswerOption, ...]

    @property
    def option_values(self) -> frozenset[int]:
        return frozenset(option.value for option in self.options)

    @property
    def min_value(self) -> int:
        return min(self.option_values)

    @property
    def max_value(self) -> int:
        return max(self.option_values)


@dataclass(frozen=True)
class SeverityBand:
    """Inclusive score range mapped to a severity level."""

    low: int
    high: int
    level: SeverityLevel
    interpretation: str

    def contains(self, score: int) -> bool:
        return self.low <= score <= self.high


@dataclass(frozen=True)
class Instrument:
    """A standardized clinical questionnaire.

    `rescale` converts the raw item sum into the reported score. Bands
    apply to the reported score, never to the raw sum.
    """

    key: InstrumentKey
    name: str
    description: str
    questions: tuple[Question, ...]
    bands: tuple[SeverityBand, ...]
    change_threshold: int
    rescale: Callable[[int], int] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise CatalogError(f"{self.key.value}: duplicate question ids")
        if any(not q.options for q in self.questions):
            raise CatalogError(f"{self.key.value}: question without options")
        self._check_bands()

    def _check_bands(self) -> None:
        """Bands must cover [min_score, max_score] with no gaps or overlaps."""
        if not self.bands:
            raise CatalogError(f"{self.key.value}: no severity bands")

        ordered = sorted(self.bands, key=lambda band: band.low)
        expected_low = self.min_score
        for band in ordered:
            if band.low != expected_low or band.high < band.low:
                raise CatalogError(
                    f"{self.key.value}: severity bands do not partition the "
                    f"score range at {expected_low}"
                )
            expected_low = band.high + 1

        if ordered[-1].high != self.max_score:
            raise CatalogError(
                f"{self.key.value}: severity bands end at {ordered[-1].high}, "
                f"expected {self.max_score}"
            )

        levels = [band.level for band in self.bands]
        if len(levels) != len(set(levels)):
            raise CatalogError(f"{self.key.value}: duplicate severity levels")

    @property
    def question_ids(self) -> tuple[str, ...]:
        return tuple(q.id for q in self.questions)

    @property
    def raw_min(self) -> int:
        return sum(q.min_value for q in self.questions)

    @property
    def raw_max(self) -> int:
        return sum(q.max_value for q in self.questions)

    @property
    def min_score(self) -> int:
        return self.reported_score(self.raw_min)

    @property
    def max_score(self) -> int:
        return self.reported_score(self.raw_max)

    @property
    def severity_levels(self) -> tuple[SeverityLevel, ...]:
        return tuple(band.level for band in self.bands)

    def reported_score(self, raw: int) -> int:
        """Convert a raw item sum into the score that bands apply to."""
        if self.rescale is None:
            return raw
        return self.rescale(raw)

    def band_for(self, score: int) -> SeverityBand:
        """Return the band containing a reported score.

        Raises:
            CatalogError: If the score is outside the instrument's range.
        """
        for band in self.bands:
            if band.contains(score):
                return band
        raise CatalogError(
            f"{self.key.value}: score {score} outside "
            f"{self.min_score}-{self.max_score}"
        )

    def interpretation_for(self, level: SeverityLevel) -> str:
        for band in self.bands:
            if band.level == level:
                return band.interpretation
        raise CatalogError(f"{self.key.value}: no {level.value} band")

    def reference_lines(self) -> dict[SeverityLevel, int]:
        """Lower bounds of the clinical cutoffs drawn on trend charts."""
        lines = {}
        for band in self.bands:
            if band.level in (
                SeverityLevel.MILD,
                SeverityLevel.MODERATE,
                SeverityLevel.MODERATELY_SEVERE,
            ):
                lines[band.level] = band.low
        return lines


def frequency_options(labels: tuple[str, ...], start: int = 0) -> tuple[AnswerOption, ...]:
    """Build an option set with consecutive values starting at `start`."""
    return tuple(
        AnswerOption(value=start + offset, label=label)
        for offset, label in enumerate(labels)
    )


class InstrumentCatalog:
    """Read-only registry of instrument definitions keyed by InstrumentKey."""

    def __init__(self, instruments: Mapping[InstrumentKey, Instrument] | list[Instrument]):
        if isinstance(instruments, Mapping):
            items = dict(instruments)
        else:
            items = {instrument.key: instrument for instrument in instruments}

        for key, instrument in items.items():
            if key != instrument.key:
                raise CatalogError(
                    f"Catalog key {key.value} does not match {instrument.key.value}"
                )

        self._instruments = MappingProxyType(items)

    def get_instrument(self, key: InstrumentKey | str) -> Instrument:
        """Look up an instrument by key or its string value.

        Raises:
            InstrumentNotFoundError: If the key is not in this catalog.
        """
        try:
            instrument_key = InstrumentKey(key)
        except ValueError:
            raise InstrumentNotFoundError(key) from None

        instrument = self._instruments.get(instrument_key)
        if instrument is None:
            raise InstrumentNotFoundError(instrument_key.value)
        return instrument

    @property
    def keys(self) -> tuple[InstrumentKey, ...]:
        return tuple(self._instruments)

    def __contains__(self, key: object) -> bool:
        try:
            return InstrumentKey(key) in self._instruments
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._instruments.values())

    def __len__(self) -> int:
        return len(self._instruments)


def build_default_catalog() -> InstrumentCatalog:
    """Construct the catalog of all supported instruments."""
    from carescore.scoring.dsm5cc import DSM5_CC
    from carescore.scoring.gad7 import GAD7
    from carescore.scoring.phq9 import PHQ9
    from carescore.scoring.whodas import WHODAS2

    return InstrumentCatalog([PHQ9, GAD7, WHODAS2, DSM5_CC])


@lru_cache
def get_default_catalog() -> InstrumentCatalog:
    """Get the cached process-wide catalog."""
    return build_default_catalog()


def get_instrument(key: InstrumentKey | str) -> Instrument:
    """Look up an instrument in the default catalog."""
    return get_default_catalog().get_instrument(key)
