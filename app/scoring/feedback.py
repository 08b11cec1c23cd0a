"""Turns a raw scoring reply into the feedback value stored on a record."""

import json
from collections.abc import Mapping
from typing import Any

from app.logging.logger import Log
from app.scoring.exceptions import ScoringError, ScoringValidationError
from app.scoring.models import ScoringResponse
from app.scoring.validator import validate_feedback


def feedback_text(response: ScoringResponse) -> str:
    """Return the reply text: the string content, or the first block's text."""
    content = response.content
    if isinstance(content, str):
        return content
    if not content:
        raise ScoringError("AI returned an empty content list")
    first = content[0]
    text = first.get("text") if isinstance(first, Mapping) else getattr(first, "text", None)
    if not isinstance(text, str):
        raise ScoringError("First content block carries no text")
    return text


def normalize_feedback(response: ScoringResponse) -> Any:
    """Parse feedback from either response shape.

    Any value that parses is returned as is. A value that does not match
    the feedback format is kept and only logged as a warning.

    Raises:
        ScoringError: if the reply carries no text or the text is not JSON.
    """
    parsed = parse_json_payload(feedback_text(response))
    try:
        validate_feedback(parsed)
    except ScoringValidationError as exc:
        Log.warning(f"Feedback does not match the expected format: {exc}")
    return parsed


def parse_json_payload(raw: str) -> Any:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ScoringError(f"Invalid JSON response: {exc}") from exc
