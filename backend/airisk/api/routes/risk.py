"""API routes for the questionnaire and stateless scoring."""

from fastapi import APIRouter, Depends

from airisk.api.deps import get_language
from airisk.models.enums import Language
from airisk.schemas.risk import Questionnaire, RiskInput, RiskResultResponse
from airisk.services.risk_service import RiskService

router = APIRouter()


@router.get(
    "/questionnaire",
    response_model=Questionnaire,
    summary="Get questionnaire",
)
async def get_questionnaire(
    language: Language = Depends(get_language),
) -> Questionnaire:
    """Get all questions and answer options with localized labels."""
    return RiskService(language).get_questionnaire()


@router.post(
    "/score",
    response_model=RiskResultResponse,
    summary="Score questionnaire answers",
)
async def score_answers(
    answers: RiskInput,
    language: Language = Depends(get_language),
) -> RiskResultResponse:
    """Score questionnaire answers without storing them.

    Returns the risk score, tier, per-category breakdown and the recommended
    measures. Responds 400 when a required answer is missing.
    """
    service = RiskService(language)
    result = service.score(answers)
    return service.to_response(result, [d.value for d in answers.data_types])
