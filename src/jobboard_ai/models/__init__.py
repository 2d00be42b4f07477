"""Data models for the AI assistance endpoints."""

from jobboard_ai.models.analysis import ATSAnalysisResult, SectionsAnalysis
from jobboard_ai.models.generation import EmptyGeneration, GeneratedText, TextResult
from jobboard_ai.models.requests import (
    ATSAnalysisRequest,
    CoverLetterRequest,
    Education,
    Experience,
    ImprovementRequest,
    PersonalInfo,
    ResumeRequest,
)

__all__ = [
    "ATSAnalysisRequest",
    "ATSAnalysisResult",
    "CoverLetterRequest",
    "Education",
    "EmptyGeneration",
    "Experience",
    "GeneratedText",
    "ImprovementRequest",
    "PersonalInfo",
    "ResumeRequest",
    "SectionsAnalysis",
    "TextResult",
]
