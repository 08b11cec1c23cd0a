from abc import ABC, abstractmethod

from app.processor.models import BatchReport


class BaseCompletionNotifier(ABC):
    """Contract for the terminal transition fired once a batch finishes."""

    @abstractmethod
    def on_batch_done(self, report: BatchReport) -> None:
        """Signal batch completion. Must not raise."""
