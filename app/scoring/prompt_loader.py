from pathlib import Path

from app.scoring.exceptions import ScoringError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the feedback prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled feedback_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        ScoringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "feedback_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringError(f"Failed to load prompt template: {exc}") from exc


def load_response_format(path: Path | None = None) -> str:
    """Load the feedback response format description.

    Raises:
        ScoringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "feedback_format.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ScoringError(f"Failed to load response format: {exc}") from exc


def prepare_instructions(
    job_title: str,
    job_description: str,
    template_path: Path | None = None,
    format_path: Path | None = None,
) -> str:
    """Render scoring instructions for one job context."""
    template = load_prompt_template(template_path)
    return template.format(
        job_title=job_title.strip() or "(not provided)",
        job_description=job_description.strip() or "(not provided)",
        response_format=load_response_format(format_path),
    )
