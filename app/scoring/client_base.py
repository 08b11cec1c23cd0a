from abc import ABC, abstractmethod

from app.scoring.models import Attachment, ScoringResponse


class BaseScoringClient(ABC):
    """Contract for provider-specific scoring AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment,
    ) -> ScoringResponse | None:
        """Return the provider reply, or None when it carries no content."""
