"""Service layer for CSV export of stored assessments."""

import csv
import io

from airisk.core.measures import get_measure_text, get_tier_label
from airisk.core.questionnaire import get_option_label, get_question_label
from airisk.core.risk_scoring import MAX_RISK_SCORE
from airisk.models.assessment import Assessment
from airisk.models.enums import Language

CSV_DELIMITER = ";"
CSV_LINE_TERMINATOR = "\n"
UTF8_BOM = "\ufeff"
MULTI_VALUE_SEPARATOR = " | "

EXPORT_TEXTS = {
    "en": {
        "header": ("Category", "Value"),
        "risk_level": "Risk Level",
        "risk_score": "Risk Score",
        "measures": "Recommended Measures",
    },
    "de": {
        "header": ("Kategorie", "Wert"),
        "risk_level": "Risikostufe",
        "risk_score": "Risk Score",
        "measures": "Empfohlene Maßnahmen",
    },
}


class ExportService:
    """Service for serializing assessments to delimited text files."""

    def __init__(self, language: Language = Language.EN):
        """Initialize export service.

        Args:
            language: Language used for labels and measure texts
        """
        self.language = language

    def _label(self, question_id: str, value: str) -> str:
        return get_option_label(question_id, value, self.language)

    def _labels(self, question_id: str, values: list[str]) -> str:
        return MULTI_VALUE_SEPARATOR.join(self._label(question_id, v) for v in values)

    def build_rows(self, assessment: Assessment) -> list[list[str]]:
        """Build the export rows for an assessment.

        Rows are (category, value) pairs, followed by an empty row and the
        numbered list of recommended measures.

        Args:
            assessment: Stored assessment

        Returns:
            List of rows
        """
        texts = EXPORT_TEXTS[self.language.value]
        lang = self.language

        rows = [
            list(texts["header"]),
            [texts["risk_level"], get_tier_label(assessment.risk_level, lang)],
            [texts["risk_score"], f"{assessment.risk_score}/{MAX_RISK_SCORE}"],
            [
                get_question_label("project_type", lang),
                self._label("project_type", assessment.project_type),
            ],
            [get_question_label("ai_tool", lang), self._label("ai_tool", assessment.ai_tool)],
            [
                get_question_label("ai_use_cases", lang),
                self._labels("ai_use_cases", list(assessment.ai_use_cases or [])),
            ],
            [
                get_question_label("data_types", lang),
                self._labels("data_types", list(assessment.data_types or [])),
            ],
            [get_question_label("autonomy", lang), self._label("autonomy", assessment.autonomy)],
            [get_question_label("impact", lang), self._label("impact", assessment.impact)],
            [
                get_question_label("transparency", lang),
                self._label("transparency", assessment.transparency),
            ],
            [],
            [texts["measures"]],
        ]

        for index, tag in enumerate(assessment.measures or [], start=1):
            text = get_measure_text(tag, lang)
            rows.append([f"{index}. {text['title']}", text["description"]])

        return rows

    def to_csv(self, assessment: Assessment) -> bytes:
        """Serialize an assessment as semicolon-delimited CSV.

        The output starts with a UTF-8 byte order mark so spreadsheet
        applications detect the encoding.

        Args:
            assessment: Stored assessment

        Returns:
            UTF-8 encoded CSV document
        """
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=CSV_DELIMITER,
            quotechar='"',
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=CSV_LINE_TERMINATOR,
        )
        writer.writerows(self.build_rows(assessment))
        # Rows are separated by newlines, not terminated by them
        content = buffer.getvalue().removesuffix(CSV_LINE_TERMINATOR)
        return (UTF8_BOM + content).encode("utf-8")

    @staticmethod
    def get_filename(assessment: Assessment) -> str:
        """Get the download filename, dated by the assessment's creation day."""
        return f"AI_Risk_Assessment_{assessment.created_at.date().isoformat()}.csv"
