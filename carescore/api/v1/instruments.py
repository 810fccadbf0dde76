"""Instrument catalog endpoints."""

from fastapi import APIRouter, HTTPException, status

from carescore.api.deps import Catalog
from carescore.core.exceptions import InstrumentNotFoundError
from carescore.schemas.assessment import InstrumentRead, InstrumentSummary

router = APIRouter()


@router.get(
    "",
    response_model=list[InstrumentSummary],
)
async def list_instruments(catalog: Catalog) -> list[InstrumentSummary]:
    """List the instruments available for assignment."""
    return [InstrumentSummary.model_validate(instrument) for instrument in catalog]


@router.get(
    "/{key}",
    response_model=InstrumentRead,
)
async def get_instrument(key: str, catalog: Catalog) -> InstrumentRead:
    """Get the full definition of an instrument for form rendering."""
    try:
        instrument = catalog.get_instrument(key)
    except InstrumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return InstrumentRead.model_validate(instrument)
