"""Recovers a JSON object from free-form model output."""

import json
from typing import Any

from docintel.analysis.exceptions import AnalysisParseError

_DECODER = json.JSONDecoder()


def strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned


def extract_json_object(raw: str) -> dict[str, Any]:
    """Return the first decodable JSON object embedded in ``raw``.

    Tolerates code fences and prose around the object. Each ``{`` is tried
    in turn, so a stray brace in leading prose does not hide a later object.

    Raises:
        AnalysisParseError: if no JSON object can be decoded.
    """
    text = strip_code_fences(raw or "")
    start = text.find("{")
    while start != -1:
        try:
            parsed, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        if isinstance(parsed, dict):
            return parsed
        start = text.find("{", start + 1)
    raise AnalysisParseError("No JSON object found in provider response")
