"""Questionnaire catalog: questions, answer options and their localized labels."""

from airisk.core.risk_scoring import APPROVED_TOOLS
from airisk.models.enums import Language

QUESTIONNAIRE_VERSION = "1.0"


def _option(value: str, en: str, de: str | None = None) -> dict:
    return {"value": value, "labels": {"en": en, "de": de or en}}


QUESTIONS = [
    {
        "id": "project_type",
        "labels": {"en": "Project Type", "de": "Projekttyp"},
        "multiple": False,
        "scored": False,
        "options": [
            _option(
                "strategy",
                "Strategy Consulting & Business Development",
                "Strategieberatung & Business Development",
            ),
            _option("digital_transformation", "Digital Transformation", "Digitale Transformation"),
            _option(
                "process_optimization",
                "Process Optimization & Change Management",
                "Prozessoptimierung & Change Management",
            ),
            _option(
                "software_development",
                "Software Development & Implementation",
                "Softwareentwicklung & Implementation",
            ),
            _option("data_analytics", "Data Analytics & AI Solutions"),
            _option("automotive", "Automotive Engineering & Mobility"),
            _option("internal_operations", "Internal Operations", "Interne Operationen"),
        ],
    },
    {
        "id": "ai_tool",
        "labels": {"en": "AI Tool", "de": "KI-Tool"},
        "multiple": False,
        "scored": True,
        "options": [
            _option("m365_copilot", "M365 Copilot"),
            _option("ai_builder", "AI Builder in Power Platform"),
            _option("chatgpt", "ChatGPT (OpenAI)"),
            _option("gpt4", "GPT-4 / GPT-4o (OpenAI)"),
            _option("claude", "Claude (Anthropic)"),
            _option("gemini", "Google Gemini / Bard"),
            _option("github_copilot", "GitHub Copilot"),
            _option("azure_openai", "Azure OpenAI Service"),
            _option("aws_bedrock", "AWS Bedrock"),
            _option("huggingface", "HuggingFace Models"),
            _option(
                "midjourney",
                "Midjourney / DALL-E (Image Gen)",
                "Midjourney / DALL-E (Bildgenerierung)",
            ),
            _option("jasper", "Jasper AI"),
            _option("notion_ai", "Notion AI"),
            _option("perplexity", "Perplexity AI"),
            _option("other", "Other AI System", "Anderes KI-System"),
        ],
    },
    {
        "id": "ai_use_cases",
        "labels": {"en": "AI Use Case", "de": "KI-Anwendungsfall"},
        "multiple": True,
        "scored": False,
        "options": [
            _option("client_advisory", "Client Advisory & Insight Generation"),
            _option("predictive_analytics", "Predictive Analytics & Forecasting"),
            _option("automation", "Process Automation", "Prozessautomatisierung"),
            _option("decision_support", "Decision Support System"),
            _option("nlp_analysis", "NLP & Document Analysis"),
            _option("code_generation", "Code Generation & Testing"),
            _option("resource_allocation", "Resource & Project Allocation"),
            _option("risk_assessment", "Risk Assessment & Compliance"),
        ],
    },
    {
        "id": "data_types",
        "labels": {"en": "Data Type", "de": "Datentyp"},
        "multiple": True,
        "scored": True,
        "options": [
            _option("public_only", "Public data only", "Ausschließlich öffentliche Daten"),
            _option(
                "company_general",
                "General company data (anonymized)",
                "Allgemeine Unternehmensdaten (anonymisiert)",
            ),
            _option("client_confidential", "Confidential client data", "Vertrauliche Kundendaten"),
            _option(
                "strategic_sensitive",
                "Strategically sensitive information",
                "Strategisch sensible Informationen",
            ),
            _option(
                "personal_data",
                "Personal data (employees/clients)",
                "Personenbezogene Daten (Mitarbeiter/Kunden)",
            ),
            _option(
                "special_categories",
                "Special categories of personal data",
                "Besondere Kategorien personenbezogener Daten",
            ),
        ],
    },
    {
        "id": "autonomy",
        "labels": {"en": "Autonomy Level", "de": "Autonomiegrad"},
        "multiple": False,
        "scored": True,
        "options": [
            _option(
                "support_only",
                "Support: AI generates suggestions/insights",
                "Unterstützung: KI generiert Vorschläge/Insights",
            ),
            _option(
                "interactive",
                "Interactive: AI communicates with stakeholders",
                "Interaktiv: KI kommuniziert mit Stakeholdern",
            ),
            _option(
                "semi_automated",
                "Semi-automated: AI makes preliminary decisions",
                "Semi-automatisiert: KI trifft Vorentscheidungen",
            ),
            _option(
                "automated",
                "Automated: AI makes final decisions",
                "Automatisiert: KI trifft finale Entscheidungen",
            ),
            _option(
                "critical_automated",
                "Critical: AI makes high-impact decisions",
                "Kritisch: KI trifft Entscheidungen mit hoher Tragweite",
            ),
        ],
    },
    {
        "id": "impact",
        "labels": {"en": "Impact", "de": "Impact"},
        "multiple": False,
        "scored": True,
        "options": [
            _option(
                "internal_efficiency",
                "Internal efficiency (low impact)",
                "Interne Effizienz (low impact)",
            ),
            _option(
                "project_support",
                "Project support (medium impact)",
                "Projektunterstützung (medium impact)",
            ),
            _option(
                "client_deliverable",
                "Client deliverable (high impact)",
                "Client Deliverable (high impact)",
            ),
            _option(
                "strategic_decision",
                "Strategic decision basis",
                "Strategische Entscheidungsgrundlage",
            ),
            _option(
                "critical_operations",
                "Critical business processes",
                "Kritische Geschäftsprozesse",
            ),
        ],
    },
    {
        "id": "transparency",
        "labels": {"en": "Transparency", "de": "Transparenz"},
        "multiple": False,
        "scored": True,
        "options": [
            _option(
                "high",
                "High: Decisions fully traceable",
                "Hoch: Entscheidungen vollständig nachvollziehbar",
            ),
            _option(
                "medium",
                "Medium: Key factors explainable",
                "Mittel: Wesentliche Faktoren erklärbar",
            ),
            _option("low", "Low: Black-box system", "Gering: Black-Box System"),
        ],
    },
]

QUESTIONS_BY_ID = {q["id"]: q for q in QUESTIONS}


def get_question_label(question_id: str, language: Language = Language.EN) -> str:
    """Get the localized label of a question."""
    return QUESTIONS_BY_ID[question_id]["labels"][language.value]


def get_option_label(question_id: str, value: str, language: Language = Language.EN) -> str:
    """Get the localized label of an answer option.

    Args:
        question_id: Question ID (e.g. "autonomy")
        value: Option value
        language: Presentation language

    Returns:
        Localized label, or the raw value when the option is not in the catalog
    """
    for option in QUESTIONS_BY_ID[question_id]["options"]:
        if option["value"] == value:
            return option["labels"][language.value]
    return value


def get_questionnaire(language: Language = Language.EN) -> dict:
    """Get the questionnaire localized to one language.

    Returns:
        Dict with version and questions list; tool options carry an
        "approved" flag
    """
    questions = []
    for question in QUESTIONS:
        options = []
        for option in question["options"]:
            item = {"value": option["value"], "label": option["labels"][language.value]}
            if question["id"] == "ai_tool":
                item["approved"] = option["value"] in APPROVED_TOOLS
            options.append(item)
        questions.append(
            {
                "id": question["id"],
                "label": question["labels"][language.value],
                "multiple": question["multiple"],
                "scored": question["scored"],
                "options": options,
            }
        )
    return {"version": QUESTIONNAIRE_VERSION, "language": language.value, "questions": questions}
