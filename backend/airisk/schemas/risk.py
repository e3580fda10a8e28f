"""Pydantic schemas for questionnaire and scoring endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from airisk.models.enums import AutonomyLevel, DataSensitivity, ImpactScope, TransparencyLevel


class QuestionOption(BaseModel):
    """Single answer option of a question."""

    value: str
    label: str
    approved: bool | None = Field(
        None, description="Only set for AI tool options: whether the tool is pre-approved"
    )


class Question(BaseModel):
    """Single questionnaire question."""

    id: str
    label: str
    multiple: bool
    scored: bool
    options: list[QuestionOption]


class Questionnaire(BaseModel):
    """Response schema for the questionnaire catalog."""

    version: str
    language: str
    questions: list[Question]


class RiskInput(BaseModel):
    """Questionnaire answers used for scoring.

    Scored answers are optional at the schema level so that an incomplete
    questionnaire is reported as such (400) rather than as a schema error.
    Unknown enum values are rejected with 422.
    """

    model_config = ConfigDict(extra="forbid")

    ai_tool: str | None = Field(None, max_length=100, examples=["m365_copilot"])
    ai_use_cases: list[str] = Field(default_factory=list, max_length=20)
    data_types: list[DataSensitivity] = Field(default_factory=list, max_length=6)
    autonomy: AutonomyLevel | None = None
    impact: ImpactScope | None = None
    transparency: TransparencyLevel | None = None


class MeasureResponse(BaseModel):
    """Recommended measure with localized text."""

    tag: str
    title: str
    description: str


class CategoryScoreResponse(BaseModel):
    """Points contributed by one category."""

    category: str
    score: int
    max_score: int


class RiskResultResponse(BaseModel):
    """Response schema for a scored questionnaire."""

    score: int
    max_score: int
    tier: str
    tier_label: str
    explanation: str
    tool_approved: bool
    breakdown: list[CategoryScoreResponse]
    compliance_requirements: list[str]
    measures: list[MeasureResponse]
