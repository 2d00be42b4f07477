"""Tagged result of a text-generating operation."""

from __future__ import annotations

from dataclasses import dataclass

from jobboard_ai.operations import Operation


@dataclass(frozen=True)
class GeneratedText:
    """The model produced non-empty text."""

    text: str


@dataclass(frozen=True)
class EmptyGeneration:
    """The model answered but produced no text."""

    operation: Operation


TextResult = GeneratedText | EmptyGeneration
