"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from carescore.api.deps import get_catalog
from carescore.main import app
from carescore.models.enums import ExerciseDuration, InstrumentKey, SeverityLevel
from carescore.scoring.catalog import (
    Instrument,
    InstrumentCatalog,
    Question,
    SeverityBand,
    build_default_catalog,
    frequency_options,
)
from carescore.services.wellness import WellnessEntry


@pytest.fixture(scope="session")
def catalog() -> InstrumentCatalog:
    """Full catalog of supported instruments."""
    return build_default_catalog()


@pytest.fixture
def mini_catalog() -> InstrumentCatalog:
    """A one-instrument catalog with a two-item GAD-7 stand-in."""
    instrument = Instrument(
        key=InstrumentKey.GAD7,
        name="Two-item anxiety screen",
        description="Fixture instrument",
        questions=(
            Question("q1", "Nervous", frequency_options(("No", "Some", "Often", "Always"))),
            Question("q2", "Worrying", frequency_options(("No", "Some", "Often", "Always"))),
        ),
        bands=(
            SeverityBand(0, 2, SeverityLevel.MINIMAL, "Low."),
            SeverityBand(3, 6, SeverityLevel.SEVERE, "High."),
        ),
        change_threshold=2,
    )
    return InstrumentCatalog([instrument])


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mini_client(mini_catalog: InstrumentCatalog) -> Generator[TestClient, None, None]:
    """Test client whose handlers see the fixture catalog."""
    app.dependency_overrides[get_catalog] = lambda: mini_catalog

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def make_entry(
    day: date = date(2024, 3, 1),
    rating: int = 5,
    exercise: ExerciseDuration = ExerciseDuration.NONE,
    **overrides,
) -> WellnessEntry:
    """Build a wellness entry with every rating set to `rating`."""
    fields = {
        "water_intake": rating,
        "sunlight_exposure": rating,
        "healthy_meals": rating,
        "sleep_hours": rating,
        "social_interactions": rating,
        "exercise_duration": exercise,
        "entry_date": day,
    }
    fields.update(overrides)
    return WellnessEntry(**fields)


@pytest.fixture
def fortnight_entries() -> list[WellnessEntry]:
    """Twenty daily entries, newest first, rating = day index % 11."""
    start = date(2024, 3, 1)
    return [
        make_entry(day=start + timedelta(days=i), rating=i % 11)
        for i in reversed(range(20))
    ]


@pytest.fixture
def entry_factory():
    """Factory for wellness entries."""
    return make_entry
