"""Utility to pull a JSON object out of an LLM reply."""

from __future__ import annotations

import json


def extract_json_object(text: str | None) -> dict:
    """Extract a JSON object from *text*.

    Tries a direct parse, then the body of a fenced code block, then the
    span from the first '{' to the last '}'. Raises ValueError when no
    attempt yields a JSON object.
    """
    if not text or not text.strip():
        raise ValueError("Could not extract JSON object from empty text")
    text = text.strip()

    candidates = [text, _strip_code_fences(text)]
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()
