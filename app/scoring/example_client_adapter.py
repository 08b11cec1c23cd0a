"""Example scoring client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseScoringClient and register the provider in ScorerFactory.
"""

import json
from typing import ClassVar

from app.scoring.client_base import BaseScoringClient
from app.scoring.models import Attachment, ContentPart, ScoringResponse


def _section(score: int, tip: str) -> dict[str, object]:
    return {
        "score": score,
        "tips": [{"type": "improve", "tip": tip, "explanation": "Example feedback."}],
    }


class ExampleClientAdapter(BaseScoringClient):
    """Example adapter that returns fixed, valid feedback.

    No network calls. The reply uses the content-block list shape so local
    runs exercise the same normalization path as block-based providers.
    """

    DEFAULT_FEEDBACK: ClassVar[dict[str, object]] = {
        "overallScore": 50,
        "ATS": {"score": 50, "tips": [{"type": "improve", "tip": "Add keywords from the job description."}]},
        "toneAndStyle": _section(50, "Use a consistent tense."),
        "content": _section(50, "Quantify achievements."),
        "structure": _section(50, "Keep sections in a conventional order."),
        "skills": _section(50, "List skills relevant to the role."),
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment,
    ) -> ScoringResponse | None:
        _ = model, temperature, system_prompt, user_prompt, attachment
        return ScoringResponse(content=[ContentPart(text=json.dumps(self.DEFAULT_FEEDBACK))])
