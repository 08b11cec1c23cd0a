"""Tests for scoring prompt loading and instruction rendering."""

from pathlib import Path

import pytest

from app.scoring.exceptions import ScoringError
from app.scoring.prompt_loader import (
    load_prompt_template,
    load_response_format,
    prepare_instructions,
)


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{job_title}" in template
        assert "{job_description}" in template
        assert "{response_format}" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Rate for {job_title}")
        assert load_prompt_template(custom) == "Rate for {job_title}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ScoringError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadResponseFormat:
    def test_default_format_lists_sections(self) -> None:
        response_format = load_response_format()
        for section in ("overallScore", "ATS", "toneAndStyle", "content", "structure", "skills"):
            assert section in response_format

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ScoringError, match="Failed to load response format"):
            load_response_format(Path("/nonexistent/format.txt"))


class TestPrepareInstructions:
    def test_includes_job_title_and_description(self) -> None:
        instructions = prepare_instructions("Data Engineer", "Build pipelines with Spark.")
        assert "Data Engineer" in instructions
        assert "Build pipelines with Spark." in instructions
        assert "overallScore" in instructions

    def test_marks_missing_description(self) -> None:
        instructions = prepare_instructions("Data Engineer", "   ")
        assert "(not provided)" in instructions

    def test_keeps_braces_in_job_description(self) -> None:
        instructions = prepare_instructions("Dev", "Use {curly} braces")
        assert "Use {curly} braces" in instructions

    def test_uses_custom_template(self, tmp_path: Path) -> None:
        template = tmp_path / "t.txt"
        template.write_text("{job_title}|{job_description}|{response_format}")
        response_format = tmp_path / "f.txt"
        response_format.write_text("FORMAT\n")
        result = prepare_instructions("T", "D", template, response_format)
        assert result == "T|D|FORMAT"
