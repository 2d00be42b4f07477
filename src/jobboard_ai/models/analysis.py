"""Pydantic models for ATS analysis output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Score = int | float


class SectionsAnalysis(BaseModel):
    contact: Score
    summary: Score
    experience: Score
    education: Score
    skills: Score


class ATSAnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: Score  # 0-100 expected, not clamped
    recommendations: list[str] = Field(default_factory=list)
    keyword_matches: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    format_issues: list[str] = Field(default_factory=list)
    sections_analysis: SectionsAnalysis
