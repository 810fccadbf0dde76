"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends

from carescore.scoring.catalog import InstrumentCatalog, get_default_catalog
from carescore.services.scoring import ScoringService


def get_catalog() -> InstrumentCatalog:
    """Get the instrument catalog used by request handlers.

    Tests override this dependency to inject a fixture catalog.
    """
    return get_default_catalog()


def get_scoring_service(
    catalog: Annotated[InstrumentCatalog, Depends(get_catalog)],
) -> ScoringService:
    """Get a scoring service bound to the request catalog."""
    return ScoringService(catalog)


# Type aliases for cleaner dependency injection
Catalog = Annotated[InstrumentCatalog, Depends(get_catalog)]
Scoring = Annotated[ScoringService, Depends(get_scoring_service)]
