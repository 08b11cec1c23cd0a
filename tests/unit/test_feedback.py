"""Tests for turning raw scoring replies into record feedback."""

import json
import logging
from typing import Any

import pytest

from app.scoring.exceptions import ScoringError
from app.scoring.feedback import feedback_text, normalize_feedback
from app.scoring.models import ContentPart, ScoringResponse


class TestFeedbackText:
    def test_string_content(self) -> None:
        assert feedback_text(ScoringResponse(content="x")) == "x"

    def test_first_content_part(self) -> None:
        response = ScoringResponse(content=[ContentPart(text="first"), ContentPart(text="second")])
        assert feedback_text(response) == "first"

    def test_first_mapping_part(self) -> None:
        assert feedback_text(ScoringResponse(content=[{"text": "x"}])) == "x"

    def test_empty_list_raises(self) -> None:
        with pytest.raises(ScoringError, match="empty content list"):
            feedback_text(ScoringResponse(content=[]))

    def test_part_without_text_raises(self) -> None:
        with pytest.raises(ScoringError, match="no text"):
            feedback_text(ScoringResponse(content=[{"type": "image"}]))


class TestNormalizeFeedback:
    def test_string_and_list_shapes_converge(self, valid_feedback: dict[str, Any]) -> None:
        raw = json.dumps(valid_feedback)
        from_string = normalize_feedback(ScoringResponse(content=raw))
        from_list = normalize_feedback(ScoringResponse(content=[{"text": raw}]))
        assert from_string == from_list == valid_feedback

    def test_strips_markdown_code_fences(self, valid_feedback: dict[str, Any]) -> None:
        content = "```json\n" + json.dumps(valid_feedback) + "\n```"
        assert normalize_feedback(ScoringResponse(content=content)) == valid_feedback

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ScoringError, match="Invalid JSON"):
            normalize_feedback(ScoringResponse(content="not json"))

    def test_json_array_is_kept(self) -> None:
        assert normalize_feedback(ScoringResponse(content="[1, 2]")) == [1, 2]

    def test_off_format_object_is_kept_with_warning(
        self, valid_feedback: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        valid_feedback["overallScore"] = "85"
        with caplog.at_level(logging.WARNING, logger="resume_analyzer"):
            result = normalize_feedback(ScoringResponse(content=json.dumps(valid_feedback)))
        assert result == valid_feedback
        assert "'overallScore' must be a number" in caplog.text

    def test_missing_section_is_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="resume_analyzer"):
            result = normalize_feedback(ScoringResponse(content='{"overallScore": 72}'))
        assert result == {"overallScore": 72}
        assert "Missing or invalid section: ATS" in caplog.text
