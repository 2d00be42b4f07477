"""The four AI operations and their decoding settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    COVER_LETTER = "cover_letter"
    RESUME = "resume"
    ATS_ANALYSIS = "ats_analysis"
    IMPROVE_COVER_LETTER = "improve_cover_letter"


@dataclass(frozen=True)
class GenerationSettings:
    """Per-call decoding parameters sent to the model provider."""

    temperature: float
    max_tokens: int | None = None  # None -> client default
    json_mode: bool = False


GENERATION_SETTINGS: dict[Operation, GenerationSettings] = {
    Operation.COVER_LETTER: GenerationSettings(temperature=0.7, max_tokens=800),
    Operation.RESUME: GenerationSettings(temperature=0.6, max_tokens=1200),
    Operation.ATS_ANALYSIS: GenerationSettings(temperature=0.3, json_mode=True),
    Operation.IMPROVE_COVER_LETTER: GenerationSettings(temperature=0.7, max_tokens=800),
}
