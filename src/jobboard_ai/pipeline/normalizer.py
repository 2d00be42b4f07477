"""Turn raw model output into typed results.

Text operations become a tagged ``TextResult``. ATS analysis output is
untrusted JSON: anything absent or malformed is replaced by a fixed
fallback so callers always receive a complete ``ATSAnalysisResult``.
"""

from __future__ import annotations

import logging
from typing import Any

from jobboard_ai.models.analysis import ATSAnalysisResult, SectionsAnalysis
from jobboard_ai.models.generation import EmptyGeneration, GeneratedText, TextResult
from jobboard_ai.operations import Operation
from jobboard_ai.utils.json_parser import extract_json_object

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 50

# Placeholder sub-scores; arbitrary but fixed.
DEFAULT_SECTION_SCORES: dict[str, int] = {
    "contact": 70,
    "summary": 60,
    "experience": 65,
    "education": 75,
    "skills": 55,
}

# (wire key, model field)
LIST_FIELDS: tuple[tuple[str, str], ...] = (
    ("recommendations", "recommendations"),
    ("keywordMatches", "keyword_matches"),
    ("missingKeywords", "missing_keywords"),
    ("formatIssues", "format_issues"),
)


def normalize_text(text: str | None, operation: Operation) -> TextResult:
    if text is None or not text.strip():
        logger.warning("Model returned no text for %s", operation.value)
        return EmptyGeneration(operation=operation)
    return GeneratedText(text=text)


def parse_ats_payload(raw: str | None) -> dict:
    """Parse the model's JSON reply, returning ``{}`` when it is unusable."""
    try:
        return extract_json_object(raw)
    except ValueError:
        logger.warning("ATS analysis reply is not a JSON object; using defaults")
        return {}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def fill_ats_defaults(data: dict) -> tuple[ATSAnalysisResult, list[str]]:
    """Build a complete result from *data*.

    Returns the result and the wire names of every field that fell back
    to its default (sub-scores as ``sectionsAnalysis.<name>``).
    """
    defaulted: list[str] = []

    score = data.get("score")
    if not _is_number(score):
        score = DEFAULT_SCORE
        defaulted.append("score")

    lists: dict[str, list[str]] = {}
    for wire_key, attr in LIST_FIELDS:
        value = data.get(wire_key)
        if isinstance(value, list):
            lists[attr] = [str(item) for item in value if item is not None]
        else:
            lists[attr] = []
            defaulted.append(wire_key)

    sections_raw = data.get("sectionsAnalysis")
    if not isinstance(sections_raw, dict):
        sections_raw = {}
    sections: dict[str, int | float] = {}
    for name, fallback in DEFAULT_SECTION_SCORES.items():
        value = sections_raw.get(name)
        if _is_number(value):
            sections[name] = value
        else:
            sections[name] = fallback
            defaulted.append(f"sectionsAnalysis.{name}")

    result = ATSAnalysisResult(
        score=score,
        sections_analysis=SectionsAnalysis(**sections),
        **lists,
    )
    return result, defaulted


def normalize_ats_analysis(raw: str | None) -> tuple[ATSAnalysisResult, list[str]]:
    """Parse and complete an ATS reply; also returns the defaulted field names."""
    result, defaulted = fill_ats_defaults(parse_ats_payload(raw))
    if defaulted:
        logger.warning("ATS analysis defaults substituted for: %s", ", ".join(defaulted))
    return result, defaulted
