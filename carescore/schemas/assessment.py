"""Pydantic schemas for assessment scoring operations."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, FiniteFloat

from carescore.models.enums import (
    AssessmentSchedule,
    ChangeDirection,
    InstrumentKey,
    SeverityLevel,
)


class AnswerOptionRead(BaseModel):
    """Schema for reading an answer option."""

    value: int
    label: str

    model_config = {"from_attributes": True}


class QuestionRead(BaseModel):
    """Schema for reading a question."""

    id: str
    text: str
    options: list[AnswerOptionRead]

    model_config = {"from_attributes": True}


class SeverityBandRead(BaseModel):
    """Schema for reading a severity band."""

    low: int
    high: int
    level: SeverityLevel
    interpretation: str

    model_config = {"from_attributes": True}


class InstrumentSummary(BaseModel):
    """Schema for listing instruments."""

    key: InstrumentKey
    name: str
    description: str

    model_config = {"from_attributes": True}


class InstrumentRead(InstrumentSummary):
    """Schema for reading a full instrument definition."""

    questions: list[QuestionRead]
    bands: list[SeverityBandRead]
    change_threshold: int
    min_score: int
    max_score: int


class ScoreRequest(BaseModel):
    """Request to score an answer set."""

    instrument: str
    answers: dict[str, Any] = Field(..., description="Question id to selected option value")


class ScoreResultRead(BaseModel):
    """Schema for a scored administration."""

    instrument: InstrumentKey
    score: int
    interpretation: str
    severity_level: SeverityLevel
    display_tier: str
    raw_score: int
    max_score: int

    model_config = {"from_attributes": True}


class ChangeRequest(BaseModel):
    """Request to compare two scores of the same instrument."""

    instrument: str
    previous_score: FiniteFloat
    current_score: FiniteFloat


class ChangeResultRead(BaseModel):
    """Schema for a change classification."""

    is_significant: bool
    direction: ChangeDirection
    magnitude: float
    threshold: int

    model_config = {"from_attributes": True}


class ScorePointSchema(BaseModel):
    """A stored score for one administration."""

    completed_at: datetime
    score: FiniteFloat
    instrument: InstrumentKey
    severity_level: SeverityLevel | None = None

    model_config = {"from_attributes": True}


class TrendRequest(BaseModel):
    """Request to analyse the latest change in a score history."""

    instrument: str
    points: list[ScorePointSchema]


class TrendAnalysisRead(BaseModel):
    """Schema for the latest-change analysis of a score history."""

    previous: ScorePointSchema
    latest: ScorePointSchema
    change: ChangeResultRead
    series: list[ScorePointSchema]
    reference_lines: dict[SeverityLevel, int]


class NextDueRequest(BaseModel):
    """Request to compute when an assessment is next due."""

    schedule: AssessmentSchedule
    completed_at: datetime


class NextDueResponse(BaseModel):
    """Next due date for an assessment."""

    next_due_at: datetime | None
    is_overdue: bool
