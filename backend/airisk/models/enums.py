"""Enumerations for questionnaire answers, risk tiers and measures."""

from enum import Enum


class AutonomyLevel(str, Enum):
    """How independently the AI system acts, ordered from least to most autonomous."""

    SUPPORT_ONLY = "support_only"  # Generates suggestions/insights
    INTERACTIVE = "interactive"  # Communicates with stakeholders
    SEMI_AUTOMATED = "semi_automated"  # Makes preliminary decisions
    AUTOMATED = "automated"  # Makes final decisions
    CRITICAL_AUTOMATED = "critical_automated"  # Makes high-impact decisions


class DataSensitivity(str, Enum):
    """Data categories processed by the AI system, ordered by sensitivity."""

    PUBLIC_ONLY = "public_only"
    COMPANY_GENERAL = "company_general"
    CLIENT_CONFIDENTIAL = "client_confidential"
    STRATEGIC_SENSITIVE = "strategic_sensitive"
    PERSONAL_DATA = "personal_data"
    SPECIAL_CATEGORIES = "special_categories"  # GDPR Article 9


class ImpactScope(str, Enum):
    """Reach of the AI system's output, ordered from lowest to highest impact."""

    INTERNAL_EFFICIENCY = "internal_efficiency"
    PROJECT_SUPPORT = "project_support"
    CLIENT_DELIVERABLE = "client_deliverable"
    STRATEGIC_DECISION = "strategic_decision"
    CRITICAL_OPERATIONS = "critical_operations"


class TransparencyLevel(str, Enum):
    """How traceable the AI system's decisions are."""

    HIGH = "high"  # Decisions fully traceable
    MEDIUM = "medium"  # Key factors explainable
    LOW = "low"  # Black-box system


class ProjectType(str, Enum):
    """Project context of the assessment. Not scored."""

    STRATEGY = "strategy"
    DIGITAL_TRANSFORMATION = "digital_transformation"
    PROCESS_OPTIMIZATION = "process_optimization"
    SOFTWARE_DEVELOPMENT = "software_development"
    DATA_ANALYTICS = "data_analytics"
    AUTOMOTIVE = "automotive"
    INTERNAL_OPERATIONS = "internal_operations"


class UseCase(str, Enum):
    """Known AI use cases offered by the questionnaire.

    Use cases are stored as free-form strings; only RISK_ASSESSMENT and
    CODE_GENERATION change the recommended measures.
    """

    CLIENT_ADVISORY = "client_advisory"
    PREDICTIVE_ANALYTICS = "predictive_analytics"
    AUTOMATION = "automation"
    DECISION_SUPPORT = "decision_support"
    NLP_ANALYSIS = "nlp_analysis"
    CODE_GENERATION = "code_generation"
    RESOURCE_ALLOCATION = "resource_allocation"
    RISK_ASSESSMENT = "risk_assessment"


class RiskTier(str, Enum):
    """Risk severity tiers.

    Ordering (lowest to highest):
    MINIMAL < LOW < MEDIUM < HIGH < CRITICAL
    """

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def get_severity_level(cls, tier: "RiskTier") -> int:
        """Get numeric severity for tier comparison.

        Args:
            tier: RiskTier to get level for

        Returns:
            Integer level (higher = more severe)
        """
        levels = {
            cls.MINIMAL: 1,
            cls.LOW: 2,
            cls.MEDIUM: 3,
            cls.HIGH: 4,
            cls.CRITICAL: 5,
        }
        return levels.get(tier, 0)

    def is_at_least(self, other: "RiskTier") -> bool:
        """Check if this tier is as severe as or more severe than another."""
        return self.get_severity_level(self) >= self.get_severity_level(other)


class MeasureTag(str, Enum):
    """Identifiers of recommended mitigation measures."""

    IT_APPROVAL_REQUIRED = "it_approval_required"
    TOOL_PRE_APPROVED = "tool_pre_approved"
    HIGH_RISK_CONFORMITY_ASSESSMENT = "high_risk_conformity_assessment"
    EXECUTIVE_APPROVAL = "executive_approval"
    HUMAN_OVERSIGHT = "human_oversight"
    BIAS_FAIRNESS_TESTING = "bias_fairness_testing"
    DATA_PROTECTION_IMPACT_ASSESSMENT = "data_protection_impact_assessment"
    DATA_MINIMIZATION = "data_minimization"
    CONFIDENTIALITY_IP_PROTECTION = "confidentiality_ip_protection"
    EXPLAINABILITY_ENHANCEMENT = "explainability_enhancement"
    MONITORING_AUDIT_TRAIL = "monitoring_audit_trail"
    VALIDATION_BACKTESTING = "validation_backtesting"
    SECURITY_REVIEW = "security_review"
    DOCUMENTATION_GOVERNANCE = "documentation_governance"
    STAKEHOLDER_COMMUNICATION = "stakeholder_communication"


class Language(str, Enum):
    """Supported presentation languages."""

    EN = "en"
    DE = "de"

    @classmethod
    def resolve(cls, code: str | None) -> "Language":
        """Resolve a language code, falling back to English for unknown codes."""
        if code:
            normalized = code.strip().lower()[:2]
            for language in cls:
                if language.value == normalized:
                    return language
        return cls.EN
