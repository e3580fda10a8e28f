"""Assessment service for storing and retrieving questionnaire results."""

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from airisk.core.measures import get_tier_label
from airisk.core.risk_scoring import MAX_RISK_SCORE
from airisk.core.security import TokenUser
from airisk.core.structured_logging import log_json
from airisk.models.assessment import Assessment
from airisk.schemas.assessment import AssessmentCreate, AssessmentResponse
from airisk.services.risk_service import RiskService

logger = logging.getLogger(__name__)


class AssessmentService:
    """Service for managing a user's stored assessments."""

    def __init__(self, db: AsyncSession, risk_service: RiskService | None = None):
        """Initialize assessment service.

        Args:
            db: Database session
            risk_service: Risk service used for scoring and localization
        """
        self.db = db
        self.risk_service = risk_service or RiskService()

    async def create_assessment(
        self,
        submission: AssessmentCreate,
        current_user: TokenUser,
    ) -> Assessment:
        """Score a completed questionnaire and store the result.

        Args:
            submission: Questionnaire answers
            current_user: User submitting the assessment

        Returns:
            Created Assessment

        Raises:
            HTTPException: 400 if a required answer is missing
        """
        # project_type is stored but not scored
        result = self.risk_service.score(
            submission,
            missing=["project_type"] if submission.project_type is None else None,
        )

        assessment = Assessment(
            user_id=current_user.user_id,
            user_email=current_user.email,
            user_name=current_user.name,
            project_type=submission.project_type.value,
            ai_tool=submission.ai_tool.strip(),
            ai_use_cases=[u for u in submission.ai_use_cases if u],
            data_types=[d.value for d in submission.data_types],
            autonomy=submission.autonomy.value,
            impact=submission.impact.value,
            transparency=submission.transparency.value,
            risk_score=result.score,
            risk_level=result.tier,
            measures=[tag.value for tag in result.measures],
        )

        self.db.add(assessment)
        await self.db.flush()
        await self.db.refresh(assessment)

        log_json(
            logger,
            logging.INFO,
            "assessment_created",
            assessment_id=str(assessment.id),
            user_id=current_user.user_id,
            risk_level=result.tier.value,
            risk_score=result.score,
        )
        return assessment

    async def get_assessment(self, assessment_id: UUID, user_id: str) -> Assessment:
        """Get assessment by ID with owner scoping.

        Args:
            assessment_id: Assessment ID
            user_id: Owner user ID

        Returns:
            Assessment if found

        Raises:
            HTTPException: 404 if not found or owned by another user
        """
        query = (
            select(Assessment)
            .where(Assessment.id == assessment_id)
            .where(Assessment.user_id == user_id)
        )
        result = await self.db.execute(query)
        assessment = result.scalar_one_or_none()

        if not assessment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Assessment not found",
            )
        return assessment

    async def list_assessments(self, user_id: str) -> list[Assessment]:
        """Get a user's assessments.

        Args:
            user_id: Owner user ID

        Returns:
            List of assessments ordered by creation date (newest first)
        """
        query = (
            select(Assessment)
            .where(Assessment.user_id == user_id)
            .order_by(Assessment.created_at.desc(), Assessment.id.desc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def delete_assessment(self, assessment_id: UUID, user_id: str) -> None:
        """Delete an assessment owned by the user.

        Raises:
            HTTPException: 404 if not found or owned by another user
        """
        assessment = await self.get_assessment(assessment_id, user_id)
        await self.db.delete(assessment)
        await self.db.flush()

        log_json(
            logger,
            logging.INFO,
            "assessment_deleted",
            assessment_id=str(assessment_id),
            user_id=user_id,
        )

    def to_response(self, assessment: Assessment) -> AssessmentResponse:
        """Convert Assessment model to a localized response."""
        language = self.risk_service.language
        return AssessmentResponse(
            id=assessment.id,
            user_id=assessment.user_id,
            user_email=assessment.user_email,
            user_name=assessment.user_name,
            project_type=assessment.project_type,
            ai_tool=assessment.ai_tool,
            ai_use_cases=list(assessment.ai_use_cases or []),
            data_types=list(assessment.data_types or []),
            autonomy=assessment.autonomy,
            impact=assessment.impact,
            transparency=assessment.transparency,
            risk_score=assessment.risk_score,
            max_score=MAX_RISK_SCORE,
            risk_level=assessment.risk_level.value,
            risk_label=get_tier_label(assessment.risk_level, language),
            measures=self.risk_service.get_measures(list(assessment.measures or [])),
            created_at=assessment.created_at,
        )
