"""Risk service for questionnaire scoring and result presentation."""

import logging

from fastapi import HTTPException, status

from airisk.core.measures import (
    COMPLIANCE_TEXTS,
    STANDARD_COMPLIANCE_TEXT,
    get_compliance_requirements,
    get_measure_text,
    get_tier_explanation,
    get_tier_label,
)
from airisk.core.metrics import observe_assessment_scored
from airisk.core.questionnaire import get_questionnaire
from airisk.core.risk_scoring import (
    MAX_RISK_SCORE,
    IncompleteAssessmentError,
    RiskResult,
    score_assessment,
)
from airisk.core.structured_logging import log_json
from airisk.models.enums import Language
from airisk.schemas.risk import (
    CategoryScoreResponse,
    MeasureResponse,
    Question,
    Questionnaire,
    RiskInput,
    RiskResultResponse,
)

logger = logging.getLogger(__name__)


class RiskService:
    """Service wrapping the risk scorer for the HTTP layer."""

    def __init__(self, language: Language = Language.EN):
        """Initialize risk service.

        Args:
            language: Presentation language for labels and measure texts
        """
        self.language = language

    def get_questionnaire(self) -> Questionnaire:
        """Get the localized questionnaire catalog."""
        data = get_questionnaire(self.language)
        return Questionnaire(
            version=data["version"],
            language=data["language"],
            questions=[Question(**q) for q in data["questions"]],
        )

    def score(self, answers: RiskInput, missing: list[str] | None = None) -> RiskResult:
        """Score questionnaire answers.

        Args:
            answers: Submitted answers
            missing: Unscored answers the caller already found missing; they
                are reported ahead of the scorer's own missing answers

        Returns:
            RiskResult from the scorer

        Raises:
            HTTPException: 400 if a required answer is missing
        """
        missing = list(missing or [])
        try:
            result = score_assessment(
                tool=answers.ai_tool,
                autonomy=answers.autonomy,
                data_types=answers.data_types,
                impact=answers.impact,
                transparency=answers.transparency,
                use_cases=answers.ai_use_cases,
            )
        except IncompleteAssessmentError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(IncompleteAssessmentError(missing + e.missing)),
            ) from e

        if missing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(IncompleteAssessmentError(missing)),
            )

        observe_assessment_scored(result.tier.value)
        log_json(
            logger,
            logging.INFO,
            "assessment_scored",
            tier=result.tier.value,
            score=result.score,
            tool_approved=result.tool_approved,
        )
        return result

    def get_measures(self, tags: list[str]) -> list[MeasureResponse]:
        """Localize a list of measure tags.

        Args:
            tags: Measure tags in presentation order

        Returns:
            List of measures with title and description
        """
        measures = []
        for tag in tags:
            text = get_measure_text(tag, self.language)
            measures.append(MeasureResponse(tag=getattr(tag, "value", tag), **text))
        return measures

    def to_response(self, result: RiskResult, data_types: list[str]) -> RiskResultResponse:
        """Convert a scorer result into the localized API response.

        Args:
            result: Scorer output
            data_types: Data-sensitivity values that were scored

        Returns:
            RiskResultResponse
        """
        requirements = get_compliance_requirements(result.tier, result.tool_approved, data_types)
        return RiskResultResponse(
            score=result.score,
            max_score=MAX_RISK_SCORE,
            tier=result.tier.value,
            tier_label=get_tier_label(result.tier, self.language),
            explanation=get_tier_explanation(result.tier, self.language),
            tool_approved=result.tool_approved,
            breakdown=[
                CategoryScoreResponse(
                    category=item.category,
                    score=item.score,
                    max_score=item.max_score,
                )
                for item in result.breakdown
            ],
            compliance_requirements=[
                COMPLIANCE_TEXTS[key][self.language.value] for key in requirements
            ]
            or [STANDARD_COMPLIANCE_TEXT[self.language.value]],
            measures=self.get_measures([tag.value for tag in result.measures]),
        )
