"""Pydantic schemas for stored assessment endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from airisk.models.enums import ProjectType
from airisk.schemas.risk import MeasureResponse, RiskInput


class AssessmentCreate(RiskInput):
    """Request schema for storing a completed assessment.

    Score, tier and measures are always computed by the server.
    """

    project_type: ProjectType | None = None


class AssessmentResponse(BaseModel):
    """Response schema for a stored assessment."""

    id: UUID
    user_id: str
    user_email: str | None = None
    user_name: str | None = None
    project_type: str
    ai_tool: str
    ai_use_cases: list[str]
    data_types: list[str]
    autonomy: str
    impact: str
    transparency: str
    risk_score: int
    max_score: int
    risk_level: str
    risk_label: str
    measures: list[MeasureResponse] = []
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AssessmentListResponse(BaseModel):
    """Response schema for the caller's assessment history."""

    assessments: list[AssessmentResponse]
    total: int = Field(..., description="Number of assessments returned")


class DeleteResponse(BaseModel):
    """Response schema for a deleted assessment."""

    message: str = "Assessment deleted successfully"
