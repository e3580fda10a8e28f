"""API routes for stored assessments."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from airisk.api.deps import get_current_user, get_language
from airisk.core.database import get_db
from airisk.core.security import TokenUser
from airisk.models.enums import Language
from airisk.schemas.assessment import (
    AssessmentCreate,
    AssessmentListResponse,
    AssessmentResponse,
    DeleteResponse,
)
from airisk.services.assessment_service import AssessmentService
from airisk.services.export_service import ExportService
from airisk.services.risk_service import RiskService

router = APIRouter()


@router.post(
    "",
    response_model=AssessmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Store assessment",
)
async def create_assessment(
    submission: AssessmentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
    language: Language = Depends(get_language),
) -> AssessmentResponse:
    """Score a completed questionnaire and store the result for the caller."""
    service = AssessmentService(db, RiskService(language))
    assessment = await service.create_assessment(submission, current_user)
    await db.commit()
    return service.to_response(assessment)


@router.get(
    "",
    response_model=AssessmentListResponse,
    summary="List assessments",
)
async def list_assessments(
    db: AsyncSession = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
    language: Language = Depends(get_language),
) -> AssessmentListResponse:
    """Get the caller's assessments, newest first."""
    service = AssessmentService(db, RiskService(language))
    assessments = await service.list_assessments(current_user.user_id)
    return AssessmentListResponse(
        assessments=[service.to_response(a) for a in assessments],
        total=len(assessments),
    )


@router.get(
    "/{assessment_id}",
    response_model=AssessmentResponse,
    summary="Get assessment",
)
async def get_assessment(
    assessment_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
    language: Language = Depends(get_language),
) -> AssessmentResponse:
    """Get one of the caller's assessments."""
    service = AssessmentService(db, RiskService(language))
    assessment = await service.get_assessment(assessment_id, current_user.user_id)
    return service.to_response(assessment)


@router.delete(
    "/{assessment_id}",
    response_model=DeleteResponse,
    summary="Delete assessment",
)
async def delete_assessment(
    assessment_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
) -> DeleteResponse:
    """Delete one of the caller's assessments."""
    service = AssessmentService(db)
    await service.delete_assessment(assessment_id, current_user.user_id)
    await db.commit()
    return DeleteResponse()


@router.get(
    "/{assessment_id}/export",
    summary="Export assessment as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_assessment(
    assessment_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
    language: Language = Depends(get_language),
) -> Response:
    """Download one of the caller's assessments as a semicolon-delimited CSV file."""
    assessment = await AssessmentService(db).get_assessment(
        assessment_id, current_user.user_id
    )
    exporter = ExportService(language)
    return Response(
        content=exporter.to_csv(assessment),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": (
                f'attachment; filename="{exporter.get_filename(assessment)}"'
            )
        },
    )
