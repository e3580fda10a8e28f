"""AI usage risk scoring.

Scores a planned use of an AI tool from five categorical answers and derives
the ordered list of recommended measures. The module has no I/O and no state,
so results depend only on the arguments.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from airisk.models.enums import (
    AutonomyLevel,
    DataSensitivity,
    ImpactScope,
    MeasureTag,
    RiskTier,
    TransparencyLevel,
    UseCase,
)

# Tools cleared for use without IT review
APPROVED_TOOLS = frozenset({"m365_copilot", "ai_builder"})

UNAPPROVED_TOOL_PENALTY = 3

AUTONOMY_SCORES = {
    AutonomyLevel.SUPPORT_ONLY.value: 1,
    AutonomyLevel.INTERACTIVE.value: 2,
    AutonomyLevel.SEMI_AUTOMATED.value: 3,
    AutonomyLevel.AUTOMATED.value: 4,
    AutonomyLevel.CRITICAL_AUTOMATED.value: 5,
}

DATA_SCORES = {
    DataSensitivity.PUBLIC_ONLY.value: 0,
    DataSensitivity.COMPANY_GENERAL.value: 1,
    DataSensitivity.CLIENT_CONFIDENTIAL.value: 2,
    DataSensitivity.STRATEGIC_SENSITIVE.value: 3,
    DataSensitivity.PERSONAL_DATA.value: 4,
    DataSensitivity.SPECIAL_CATEGORIES.value: 5,
}

IMPACT_SCORES = {
    ImpactScope.INTERNAL_EFFICIENCY.value: 1,
    ImpactScope.PROJECT_SUPPORT.value: 2,
    ImpactScope.CLIENT_DELIVERABLE.value: 3,
    ImpactScope.STRATEGIC_DECISION.value: 4,
    ImpactScope.CRITICAL_OPERATIONS.value: 5,
}

TRANSPARENCY_SCORES = {
    TransparencyLevel.HIGH.value: 0,
    TransparencyLevel.MEDIUM.value: 1,
    TransparencyLevel.LOW.value: 2,
}

# autonomy(5) + data(5) + impact(5) + transparency(2) + unapproved tool(3)
MAX_RISK_SCORE = 20

# Inclusive lower bounds, checked top-down after the unapproved-tool guard
TIER_THRESHOLDS: tuple[tuple[int, RiskTier], ...] = (
    (13, RiskTier.CRITICAL),
    (10, RiskTier.HIGH),
    (7, RiskTier.MEDIUM),
    (4, RiskTier.LOW),
)

PERSONAL_DATA_TYPES = frozenset(
    {DataSensitivity.PERSONAL_DATA.value, DataSensitivity.SPECIAL_CATEGORIES.value}
)
CONFIDENTIAL_DATA_TYPES = frozenset(
    {DataSensitivity.CLIENT_CONFIDENTIAL.value, DataSensitivity.STRATEGIC_SENSITIVE.value}
)
AUTOMATED_AUTONOMY_LEVELS = frozenset(
    {AutonomyLevel.AUTOMATED.value, AutonomyLevel.CRITICAL_AUTOMATED.value}
)


class IncompleteAssessmentError(ValueError):
    """Raised when a required questionnaire answer is missing or empty."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Incomplete input: missing {', '.join(missing)}")


@dataclass(frozen=True)
class CategoryScore:
    """Points contributed by one category, with its maximum."""

    category: str
    score: int
    max_score: int


@dataclass(frozen=True)
class RiskResult:
    """Outcome of scoring one questionnaire submission."""

    score: int
    tier: RiskTier
    measures: tuple[MeasureTag, ...]
    breakdown: tuple[CategoryScore, ...]
    tool_approved: bool


def _value(item: str | Enum | None) -> str:
    if isinstance(item, Enum):
        return str(item.value)
    return (item or "").strip()


def is_tool_approved(tool: str | None) -> bool:
    """Check whether a tool identifier is in the approved set."""
    return _value(tool) in APPROVED_TOOLS


def data_sensitivity_score(data_types: Iterable[str | DataSensitivity]) -> int:
    """Score a data-type selection by its single most sensitive entry.

    Args:
        data_types: Selected data-sensitivity tags

    Returns:
        Maximum tag score (0 for an empty selection or unknown tags)
    """
    return max((DATA_SCORES.get(_value(t), 0) for t in data_types), default=0)


def get_risk_tier(score: int, tool_approved: bool) -> RiskTier:
    """Get risk tier for a total score.

    Args:
        score: Total risk score
        tool_approved: Whether the assessed tool is pre-approved

    Returns:
        RiskTier (always CRITICAL for unapproved tools)
    """
    if not tool_approved:
        return RiskTier.CRITICAL

    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return RiskTier.MINIMAL


def get_measures(
    tier: RiskTier,
    tool_approved: bool,
    autonomy: str,
    data_types: Iterable[str],
    transparency: str,
    use_cases: Iterable[str] = (),
) -> list[MeasureTag]:
    """Derive the ordered list of recommended measures.

    Every matching rule contributes; the list always ends with the
    documentation and stakeholder-communication measures.

    Args:
        tier: Assigned risk tier
        tool_approved: Whether the tool is pre-approved
        autonomy: Autonomy level value
        data_types: Selected data-sensitivity values
        transparency: Transparency level value
        use_cases: Selected use-case values

    Returns:
        List of measure tags in presentation order
    """
    data = {_value(t) for t in data_types}
    cases = {_value(u) for u in use_cases}
    measures: list[MeasureTag] = []

    if tool_approved:
        measures.append(MeasureTag.TOOL_PRE_APPROVED)
    else:
        measures.append(MeasureTag.IT_APPROVAL_REQUIRED)

    if tier == RiskTier.CRITICAL:
        measures.append(MeasureTag.HIGH_RISK_CONFORMITY_ASSESSMENT)
        measures.append(MeasureTag.EXECUTIVE_APPROVAL)

    if tier in (RiskTier.HIGH, RiskTier.CRITICAL):
        measures.append(MeasureTag.HUMAN_OVERSIGHT)
        measures.append(MeasureTag.BIAS_FAIRNESS_TESTING)

    if data & PERSONAL_DATA_TYPES:
        measures.append(MeasureTag.DATA_PROTECTION_IMPACT_ASSESSMENT)
        measures.append(MeasureTag.DATA_MINIMIZATION)

    if data & CONFIDENTIAL_DATA_TYPES:
        measures.append(MeasureTag.CONFIDENTIALITY_IP_PROTECTION)

    if _value(transparency) == TransparencyLevel.LOW.value:
        measures.append(MeasureTag.EXPLAINABILITY_ENHANCEMENT)

    if _value(autonomy) in AUTOMATED_AUTONOMY_LEVELS:
        measures.append(MeasureTag.MONITORING_AUDIT_TRAIL)

    if UseCase.RISK_ASSESSMENT.value in cases:
        measures.append(MeasureTag.VALIDATION_BACKTESTING)

    if UseCase.CODE_GENERATION.value in cases:
        measures.append(MeasureTag.SECURITY_REVIEW)

    measures.append(MeasureTag.DOCUMENTATION_GOVERNANCE)
    measures.append(MeasureTag.STAKEHOLDER_COMMUNICATION)
    return measures


def _check_complete(
    tool: str | None,
    autonomy: str | None,
    data_types: list[str],
    impact: str | None,
    transparency: str | None,
) -> None:
    missing = [
        name
        for name, value in (
            ("tool", tool),
            ("autonomy", autonomy),
            ("data_types", data_types),
            ("impact", impact),
            ("transparency", transparency),
        )
        if not value
    ]
    if missing:
        raise IncompleteAssessmentError(missing)


def score_assessment(
    tool: str | None,
    autonomy: str | AutonomyLevel | None,
    data_types: Iterable[str | DataSensitivity] | None,
    impact: str | ImpactScope | None,
    transparency: str | TransparencyLevel | None,
    use_cases: Iterable[str | UseCase] | None = None,
) -> RiskResult:
    """Score a completed questionnaire.

    Args:
        tool: AI tool identifier
        autonomy: Autonomy level
        data_types: Non-empty selection of data-sensitivity tags
        impact: Impact scope
        transparency: Transparency level
        use_cases: Selected use cases (optional)

    Returns:
        RiskResult with score, tier, measures and per-category breakdown

    Raises:
        IncompleteAssessmentError: If any required answer is missing or empty
    """
    tool_value = _value(tool)
    autonomy_value = _value(autonomy)
    impact_value = _value(impact)
    transparency_value = _value(transparency)
    data_values = [v for v in (_value(t) for t in (data_types or [])) if v]
    case_values = [v for v in (_value(u) for u in (use_cases or [])) if v]

    _check_complete(tool_value, autonomy_value, data_values, impact_value, transparency_value)

    tool_approved = is_tool_approved(tool_value)
    breakdown = (
        CategoryScore("autonomy", AUTONOMY_SCORES.get(autonomy_value, 0), 5),
        CategoryScore("data_sensitivity", data_sensitivity_score(data_values), 5),
        CategoryScore("impact", IMPACT_SCORES.get(impact_value, 0), 5),
        CategoryScore("transparency", TRANSPARENCY_SCORES.get(transparency_value, 0), 2),
        CategoryScore(
            "tool_approval",
            0 if tool_approved else UNAPPROVED_TOOL_PENALTY,
            UNAPPROVED_TOOL_PENALTY,
        ),
    )
    score = sum(item.score for item in breakdown)
    tier = get_risk_tier(score, tool_approved)
    measures = get_measures(
        tier,
        tool_approved,
        autonomy_value,
        data_values,
        transparency_value,
        case_values,
    )

    return RiskResult(
        score=score,
        tier=tier,
        measures=tuple(measures),
        breakdown=breakdown,
        tool_approved=tool_approved,
    )
