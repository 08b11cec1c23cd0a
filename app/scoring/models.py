from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ContentPart:
    """One block of a structured AI response."""

    text: str
    type: str = "text"


@dataclass(frozen=True)
class ScoringResponse:
    """Raw AI reply: a plain string, or a list of content blocks."""

    content: str | Sequence[ContentPart | Mapping[str, object]]


@dataclass(frozen=True)
class Attachment:
    """Document sent to the AI provider alongside the instructions."""

    name: str
    content: bytes
    mime_type: str
