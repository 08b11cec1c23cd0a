from abc import ABC, abstractmethod

from app.scoring.models import ScoringResponse


class BaseScorer(ABC):
    """Contract for all scoring adapters."""

    @abstractmethod
    def score(self, reference: str, instructions: str) -> ScoringResponse | None:
        """Submit an uploaded document with instructions to the AI provider.

        Args:
            reference: Storage reference of the uploaded original.
            instructions: Prompt built from the job context.

        Returns:
            The provider's raw reply, or None if it produced no result.

        Raises:
            ScoringError: on provider or storage failure.
        """
