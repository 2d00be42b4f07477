"""Tests for the response normalizer."""

import json

import pytest

from jobboard_ai.models.generation import EmptyGeneration, GeneratedText
from jobboard_ai.operations import Operation
from jobboard_ai.pipeline.normalizer import (
    DEFAULT_SCORE,
    DEFAULT_SECTION_SCORES,
    fill_ats_defaults,
    normalize_ats_analysis,
    normalize_text,
    parse_ats_payload,
)

SECTION_KEYS = {"contact", "summary", "experience", "education", "skills"}


class TestNormalizeText:
    def test_text_passes_through(self):
        assert normalize_text("Dear Hiring Manager", Operation.COVER_LETTER) == GeneratedText(
            text="Dear Hiring Manager"
        )

    @pytest.mark.parametrize("text", [None, "", "  \n"])
    def test_empty_output_is_tagged(self, text):
        result = normalize_text(text, Operation.RESUME)
        assert isinstance(result, EmptyGeneration)
        assert result.operation is Operation.RESUME


class TestNormalizeATSAnalysis:
    def test_invalid_json_uses_all_fallbacks(self):
        result, _ = normalize_ats_analysis("this is not json {")
        assert result.score == DEFAULT_SCORE == 50
        assert result.recommendations == []
        assert result.keyword_matches == []
        assert result.missing_keywords == []
        assert result.format_issues == []
        assert result.sections_analysis.model_dump() == DEFAULT_SECTION_SCORES

    def test_partial_fill_keeps_valid_score(self):
        result, defaulted = normalize_ats_analysis('{"score": 91}')
        assert result.score == 91
        assert result.recommendations == []
        assert result.sections_analysis.model_dump() == DEFAULT_SECTION_SCORES
        assert "score" not in defaulted
        assert len(defaulted) == 9

    def test_complete_payload_unchanged(self):
        payload = {
            "score": 82,
            "recommendations": ["Add metrics"],
            "keywordMatches": ["Python"],
            "missingKeywords": ["Kubernetes"],
            "formatIssues": ["Tables"],
            "sectionsAnalysis": {
                "contact": 95, "summary": 80, "experience": 85, "education": 90, "skills": 70,
            },
        }
        result, defaulted = fill_ats_defaults(payload)
        assert defaulted == []
        assert result.model_dump(by_alias=True) == payload

    def test_out_of_range_score_not_clamped(self):
        assert normalize_ats_analysis('{"score": 140}')[0].score == 140

    def test_zero_score_is_kept(self):
        result, defaulted = fill_ats_defaults({"score": 0, "sectionsAnalysis": {"skills": 0}})
        assert result.score == 0
        assert result.sections_analysis.skills == 0
        assert "score" not in defaulted

    def test_malformed_values_fall_back(self):
        result, defaulted = fill_ats_defaults({
            "score": "high",
            "recommendations": "add keywords",
            "sectionsAnalysis": {"contact": True, "summary": "80", "experience": 77.5},
        })
        assert result.score == DEFAULT_SCORE
        assert result.recommendations == []
        assert result.sections_analysis.contact == DEFAULT_SECTION_SCORES["contact"]
        assert result.sections_analysis.summary == DEFAULT_SECTION_SCORES["summary"]
        assert result.sections_analysis.experience == 77.5
        assert "score" in defaulted
        assert "recommendations" in defaulted
        assert "sectionsAnalysis.contact" in defaulted
        assert "sectionsAnalysis.experience" not in defaulted

    def test_list_items_coerced_to_strings(self):
        result, _ = fill_ats_defaults({"keywordMatches": ["Python", 3, None]})
        assert result.keyword_matches == ["Python", "3"]

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "[]",
            "{}",
            '{"sectionsAnalysis": null}',
            '{"sectionsAnalysis": [1, 2, 3]}',
            '{"sectionsAnalysis": {"contact": 90, "extra": 10}}',
            json.dumps({"score": 70, "sectionsAnalysis": {"skills": 99}}),
        ],
    )
    def test_sections_always_have_five_keys(self, raw):
        result, _ = normalize_ats_analysis(raw)
        assert set(result.sections_analysis.model_dump()) == SECTION_KEYS

    def test_defaults_logged(self, caplog):
        with caplog.at_level("WARNING"):
            normalize_ats_analysis('{"score": 91}')
        assert "defaults substituted" in caplog.text


class TestParseATSPayload:
    def test_fenced_json(self):
        assert parse_ats_payload('```json\n{"score": 60}\n```') == {"score": 60}

    def test_garbage_returns_empty(self):
        assert parse_ats_payload("Sorry, I cannot help with that.") == {}
