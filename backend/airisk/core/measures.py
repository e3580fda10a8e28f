"""Localized texts for recommended measures, risk tiers and compliance requirements."""

from airisk.models.enums import DataSensitivity, Language, MeasureTag, RiskTier

MEASURE_TEXTS = {
    MeasureTag.IT_APPROVAL_REQUIRED: {
        "en": {
            "title": "IT Approval Required",
            "description": (
                "This AI system is not approved! According to the AI policy, this tool "
                "must be reviewed and approved by the IT department before deployment. "
                "Please contact the IT team for an assessment."
            ),
        },
        "de": {
            "title": "IT-Genehmigung erforderlich",
            "description": (
                "Dieses KI-System ist nicht freigegeben! Gemäß AI Policy muss dieses Tool "
                "vor dem Einsatz durch die IT-Abteilung geprüft und genehmigt werden. "
                "Bitte kontaktieren Sie das IT-Team für eine Bewertung."
            ),
        },
    },
    MeasureTag.TOOL_PRE_APPROVED: {
        "en": {
            "title": "Approved Tool",
            "description": (
                "This AI system is approved according to the AI policy and can be deployed "
                "following security and compliance guidelines."
            ),
        },
        "de": {
            "title": "Freigegebenes Tool",
            "description": (
                "Dieses KI-System ist gemäß AI Policy freigegeben und kann nach Beachtung "
                "der Sicherheits- und Compliance-Richtlinien eingesetzt werden."
            ),
        },
    },
    MeasureTag.HIGH_RISK_CONFORMITY_ASSESSMENT: {
        "en": {
            "title": "High-risk System under EU AI Act",
            "description": (
                "Comprehensive conformity assessment required. Documentation of all "
                "technical specifications, risk management and quality assurance."
            ),
        },
        "de": {
            "title": "Hochrisiko-System gemäß EU AI Act",
            "description": (
                "Umfassende Konformitätsbewertung erforderlich. Dokumentation aller "
                "technischen Spezifikationen, Risikomanagement und Qualitätssicherung."
            ),
        },
    },
    MeasureTag.EXECUTIVE_APPROVAL: {
        "en": {
            "title": "Executive Approval",
            "description": (
                "Project requires approval from management and possibly client C-Level "
                "before deployment."
            ),
        },
        "de": {
            "title": "Executive Approval",
            "description": (
                "Projekt erfordert Freigabe durch das Management und ggf. Client C-Level "
                "vor Deployment."
            ),
        },
    },
    MeasureTag.HUMAN_OVERSIGHT: {
        "en": {
            "title": "Human Oversight",
            "description": (
                "Implementation of a robust Human-in-the-Loop system. Critical AI decisions "
                "must be validated by qualified consultants."
            ),
        },
        "de": {
            "title": "Human Oversight",
            "description": (
                "Implementierung eines robusten Human-in-the-Loop Systems. Kritische "
                "KI-Entscheidungen müssen von qualifizierten Consultants validiert werden."
            ),
        },
    },
    MeasureTag.BIAS_FAIRNESS_TESTING: {
        "en": {
            "title": "Bias & Fairness Testing",
            "description": (
                "Systematic review for bias and discrimination. Especially important for "
                "decisions with personnel impact."
            ),
        },
        "de": {
            "title": "Bias & Fairness Testing",
            "description": (
                "Systematische Überprüfung auf Verzerrungen und Diskriminierung. Besonders "
                "wichtig bei Entscheidungen mit personellem Impact."
            ),
        },
    },
    MeasureTag.DATA_PROTECTION_IMPACT_ASSESSMENT: {
        "en": {
            "title": "GDPR Compliance",
            "description": (
                "Conduct Data Protection Impact Assessment (DPIA). Review legal basis, "
                "ensure data subject rights."
            ),
        },
        "de": {
            "title": "DSGVO Compliance",
            "description": (
                "Data Protection Impact Assessment (DPIA) durchführen. Rechtsgrundlage "
                "prüfen, Betroffenenrechte sicherstellen."
            ),
        },
    },
    MeasureTag.DATA_MINIMIZATION: {
        "en": {
            "title": "Data Minimization",
            "description": (
                "Process only absolutely necessary data. Implement "
                "anonymization/pseudonymization where possible."
            ),
        },
        "de": {
            "title": "Data Minimization",
            "description": (
                "Nur absolut notwendige Daten verarbeiten. Anonymisierung/Pseudonymisierung "
                "wo möglich implementieren."
            ),
        },
    },
    MeasureTag.CONFIDENTIALITY_IP_PROTECTION: {
        "en": {
            "title": "Confidentiality & IP Protection",
            "description": (
                "Ensure NDA compliance. For external AI services: prefer on-premise or "
                "private cloud solutions. Review data residency requirements."
            ),
        },
        "de": {
            "title": "Vertraulichkeit & IP-Schutz",
            "description": (
                "NDA-Compliance sicherstellen. Bei externen KI-Services: On-Premise oder "
                "Private-Cloud Lösung bevorzugen. Data Residency Requirements prüfen."
            ),
        },
    },
    MeasureTag.EXPLAINABILITY_ENHANCEMENT: {
        "en": {
            "title": "Explainability Enhancement",
            "description": (
                "Implement Explainable AI techniques (LIME, SHAP). Document model logic "
                "for client transparency."
            ),
        },
        "de": {
            "title": "Explainability Enhancement",
            "description": (
                "Explainable AI Techniken implementieren (LIME, SHAP). Dokumentation der "
                "Modell-Logik für Client Transparency."
            ),
        },
    },
    MeasureTag.MONITORING_AUDIT_TRAIL: {
        "en": {
            "title": "Monitoring & Audit Trail",
            "description": (
                "Continuous monitoring of AI decisions. Complete logging infrastructure "
                "for audits and error analysis."
            ),
        },
        "de": {
            "title": "Monitoring & Audit Trail",
            "description": (
                "Continuous Monitoring der KI-Entscheidungen. Vollständige "
                "Logging-Infrastruktur für Audits und Fehleranalyse."
            ),
        },
    },
    MeasureTag.VALIDATION_BACKTESTING: {
        "en": {
            "title": "Validation & Backtesting",
            "description": (
                "Regular validation of risk assessment models against real-world outcomes. "
                "Communicate confidence intervals transparently."
            ),
        },
        "de": {
            "title": "Validierung & Backtesting",
            "description": (
                "Regelmäßige Validierung der Risk-Assessment-Modelle gegen Real-World "
                "Outcomes. Confidence Intervals transparent kommunizieren."
            ),
        },
    },
    MeasureTag.SECURITY_REVIEW: {
        "en": {
            "title": "Security Review",
            "description": (
                "Mandatory code reviews for AI-generated code. Integrate security scanning "
                "and vulnerability assessment."
            ),
        },
        "de": {
            "title": "Security Review",
            "description": (
                "Code-Reviews für KI-generierten Code verpflichtend. Security Scanning und "
                "Vulnerability Assessment integrieren."
            ),
        },
    },
    MeasureTag.DOCUMENTATION_GOVERNANCE: {
        "en": {
            "title": "Documentation & Governance",
            "description": (
                "Create AI Model Card: purpose, limitations, training data, performance "
                "metrics. Version control for model updates."
            ),
        },
        "de": {
            "title": "Dokumentation & Governance",
            "description": (
                "AI Model Card erstellen: Zweck, Limitationen, Training Data, Performance "
                "Metrics. Version Control für Model Updates."
            ),
        },
    },
    MeasureTag.STAKEHOLDER_COMMUNICATION: {
        "en": {
            "title": "Stakeholder Communication",
            "description": (
                "Transparent communication about AI deployment to clients and affected "
                "persons. Define clear responsibilities."
            ),
        },
        "de": {
            "title": "Stakeholder Communication",
            "description": (
                "Transparente Kommunikation über KI-Einsatz gegenüber Kunden und "
                "betroffenen Personen. Klare Verantwortlichkeiten definieren."
            ),
        },
    },
}

TIER_TEXTS = {
    RiskTier.MINIMAL: {
        "en": (
            "Minimal Risk",
            "The AI system poses only minimal risk. Standard security measures can be applied.",
        ),
        "de": (
            "Minimales Risiko",
            "Das KI-System stellt nur ein minimales Risiko dar. Es können "
            "Standardsicherheitsmaßnahmen angewendet werden.",
        ),
    },
    RiskTier.LOW: {
        "en": (
            "Low Risk",
            "The AI system has low risk. Basic monitoring and documentation are required.",
        ),
        "de": (
            "Geringes Risiko",
            "Das KI-System hat ein geringes Risiko. Grundlegende Überwachung und "
            "Dokumentation sind erforderlich.",
        ),
    },
    RiskTier.MEDIUM: {
        "en": (
            "Medium Risk",
            "The AI system has medium risk. Enhanced controls and regular reviews are necessary.",
        ),
        "de": (
            "Mittleres Risiko",
            "Das KI-System hat ein mittleres Risiko. Erweiterte Kontrollen und regelmäßige "
            "Überprüfungen sind notwendig.",
        ),
    },
    RiskTier.HIGH: {
        "en": (
            "High Risk",
            "The AI system has high risk. Comprehensive risk management measures and "
            "continuous monitoring are required.",
        ),
        "de": (
            "Hohes Risiko",
            "Das KI-System hat ein hohes Risiko. Umfassende Risikomanagement-Maßnahmen und "
            "kontinuierliche Überwachung sind erforderlich.",
        ),
    },
    RiskTier.CRITICAL: {
        "en": (
            "Critical Risk",
            "The AI system has critical risk. Full compliance assessment, management "
            "approval, and strict controls are mandatory.",
        ),
        "de": (
            "Kritisches Risiko",
            "Das KI-System hat ein kritisches Risiko. Vollständige Compliance-Bewertung, "
            "Management-Genehmigung und strenge Kontrollen sind zwingend erforderlich.",
        ),
    },
}

COMPLIANCE_TEXTS = {
    "gdpr": {"en": "GDPR Compliance", "de": "DSGVO/GDPR Compliance"},
    "eu_ai_act_high_risk": {
        "en": "EU AI Act - High-Risk System",
        "de": "EU AI Act - Hochrisiko-System",
    },
    "it_approval": {"en": "IT Approval Required", "de": "IT-Genehmigung erforderlich"},
    "nda": {"en": "NDA Compliance", "de": "NDA Compliance"},
}

# Compliance notice used when no specific requirement applies
STANDARD_COMPLIANCE_TEXT = {
    "en": "Standard compliance requirements apply.",
    "de": "Standard-Compliance-Anforderungen gelten.",
}


def get_measure_text(tag: MeasureTag | str, language: Language = Language.EN) -> dict[str, str]:
    """Get localized title and description for a measure.

    Args:
        tag: Measure tag
        language: Presentation language

    Returns:
        Dict with "title" and "description"
    """
    return dict(MEASURE_TEXTS[MeasureTag(tag)][language.value])


def get_tier_label(tier: RiskTier | str, language: Language = Language.EN) -> str:
    """Get the localized display label for a risk tier."""
    return TIER_TEXTS[RiskTier(tier)][language.value][0]


def get_tier_explanation(tier: RiskTier | str, language: Language = Language.EN) -> str:
    """Get the localized explanation paragraph for a risk tier."""
    return TIER_TEXTS[RiskTier(tier)][language.value][1]


def get_compliance_requirements(
    tier: RiskTier | str,
    tool_approved: bool,
    data_types: list[str],
) -> list[str]:
    """Get compliance requirement keys that apply to an assessment.

    Args:
        tier: Assigned risk tier
        tool_approved: Whether the tool is pre-approved
        data_types: Selected data-sensitivity values

    Returns:
        Ordered list of requirement keys (see COMPLIANCE_TEXTS)
    """
    data = {getattr(t, "value", t) for t in data_types}
    requirements = []
    if data & {DataSensitivity.PERSONAL_DATA.value, DataSensitivity.SPECIAL_CATEGORIES.value}:
        requirements.append("gdpr")
    if RiskTier(tier).is_at_least(RiskTier.HIGH):
        requirements.append("eu_ai_act_high_risk")
    if not tool_approved:
        requirements.append("it_approval")
    if data & {
        DataSensitivity.CLIENT_CONFIDENTIAL.value,
        DataSensitivity.STRATEGIC_SENSITIVE.value,
    }:
        requirements.append("nda")
    return requirements
