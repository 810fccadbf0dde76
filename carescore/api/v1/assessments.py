"""Assessment scoring API endpoints.

Scores are always computed server-side from the submitted answers.
"""

from fastapi import APIRouter, HTTPException, status

from carescore.api.deps import Catalog, Scoring
from carescore.core.exceptions import InstrumentNotFoundError, ValidationError
from carescore.schemas.assessment import (
    ChangeRequest,
    ChangeResultRead,
    NextDueRequest,
    NextDueResponse,
    ScorePointSchema,
    ScoreRequest,
    ScoreResultRead,
    TrendAnalysisRead,
    TrendRequest,
)
from carescore.services.change import (
    ScorePoint,
    analyze_trend,
    detect_change,
    trend_series,
)
from carescore.services.presentation import display_tier
from carescore.services.schedule import is_overdue, next_due_at
from carescore.utils.time import as_utc, utc_now

router = APIRouter()


@router.post(
    "/score",
    response_model=ScoreResultRead,
)
async def score_answers(request: ScoreRequest, scoring: Scoring) -> ScoreResultRead:
    """Score a completed questionnaire."""
    try:
        result = scoring.score(request.instrument, request.answers)
    except InstrumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "field": e.field},
        )

    return ScoreResultRead(
        instrument=result.instrument,
        score=result.score,
        interpretation=result.interpretation,
        severity_level=result.severity_level,
        display_tier=display_tier(result.severity_level),
        raw_score=result.raw_score,
        max_score=result.max_score,
    )


@router.post(
    "/change",
    response_model=ChangeResultRead,
)
async def compare_scores(request: ChangeRequest, catalog: Catalog) -> ChangeResultRead:
    """Classify the change between two administrations."""
    try:
        change = detect_change(
            request.instrument,
            request.previous_score,
            request.current_score,
            catalog,
        )
    except InstrumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "field": e.field},
        )

    return ChangeResultRead.model_validate(change)


@router.post(
    "/trend",
    response_model=TrendAnalysisRead | None,
)
async def analyse_trend(request: TrendRequest, catalog: Catalog) -> TrendAnalysisRead | None:
    """Analyse the latest change in a client's score history.

    Returns null when fewer than two administrations are available.
    """
    points = [
        ScorePoint(
            completed_at=as_utc(point.completed_at),
            score=point.score,
            instrument=point.instrument,
            severity_level=point.severity_level,
        )
        for point in request.points
    ]

    try:
        instrument = catalog.get_instrument(request.instrument)
        analysis = analyze_trend(instrument.key, points, catalog)
    except InstrumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    if analysis is None:
        return None

    return TrendAnalysisRead(
        previous=ScorePointSchema.model_validate(analysis.previous),
        latest=ScorePointSchema.model_validate(analysis.latest),
        change=ChangeResultRead.model_validate(analysis.change),
        series=[
            ScorePointSchema.model_validate(point)
            for point in trend_series(instrument.key, points)
        ],
        reference_lines=instrument.reference_lines(),
    )


@router.post(
    "/next-due",
    response_model=NextDueResponse,
)
async def compute_next_due(request: NextDueRequest) -> NextDueResponse:
    """Compute when an assessment should next be administered."""
    due = next_due_at(request.schedule, as_utc(request.completed_at))
    return NextDueResponse(
        next_due_at=due,
        is_overdue=is_overdue(due, utc_now()),
    )
