"""Validates parsed AI feedback against the expected response format."""

from typing import Any

from app.scoring.exceptions import ScoringValidationError

SECTIONS = ("ATS", "toneAndStyle", "content", "structure", "skills")
_MAX_SCORE = 100
_VALID_TIP_TYPES = frozenset({"good", "improve"})


def validate_feedback(data: Any) -> dict[str, Any]:
    """Check parsed feedback and return it unchanged.

    The returned value is the same object that was passed in, so the
    persisted feedback is exactly what the provider produced.

    Raises:
        ScoringValidationError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise ScoringValidationError("Feedback must be a JSON object")
    _require_score(data.get("overallScore"), "overallScore")
    for name in SECTIONS:
        _validate_section(data.get(name), name)
    return data


def _require_score(raw: Any, path: str) -> None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ScoringValidationError(f"'{path}' must be a number")
    if not 0 <= raw <= _MAX_SCORE:
        raise ScoringValidationError(
            f"'{path}' must be between 0 and {_MAX_SCORE}, got {raw}"
        )


def _validate_section(raw: Any, name: str) -> None:
    if not isinstance(raw, dict):
        raise ScoringValidationError(f"Missing or invalid section: {name}")
    _require_score(raw.get("score"), f"{name}.score")
    tips = raw.get("tips")
    if not isinstance(tips, list):
        raise ScoringValidationError(f"'{name}.tips' must be a list")
    for i, tip in enumerate(tips):
        _validate_tip(tip, name, i)


def _validate_tip(raw: Any, section: str, index: int) -> None:
    if not isinstance(raw, dict):
        raise ScoringValidationError(f"Tip {index} in {section} must be an object")
    if raw.get("type") not in _VALID_TIP_TYPES:
        raise ScoringValidationError(
            f"Tip {index} in {section}: 'type' must be one of "
            f"{sorted(_VALID_TIP_TYPES)}, got {raw.get('type')!r}"
        )
    tip = raw.get("tip")
    if not tip or not isinstance(tip, str):
        raise ScoringValidationError(
            f"Tip {index} in {section}: 'tip' must be a non-empty string"
        )
    explanation = raw.get("explanation")
    if explanation is not None and not isinstance(explanation, str):
        raise ScoringValidationError(
            f"Tip {index} in {section}: 'explanation' must be a string"
        )
