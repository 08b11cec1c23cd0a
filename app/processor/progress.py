from collections.abc import Callable
from dataclasses import dataclass

from app.processor.models import STAGE_DESCRIPTIONS, FileStage

COMPLETED_LABEL = "Analysis complete!"


@dataclass(frozen=True)
class ProgressState:
    """Snapshot of batch progress emitted after every stage transition."""

    completed_count: int = 0
    total_count: int = 0
    label: str = ""

    @property
    def current_position(self) -> int:
        """1-based position of the file in flight, capped at the batch size."""
        return min(self.completed_count + 1, self.total_count)

    @classmethod
    def for_stage(cls, completed_count: int, total_count: int, stage: FileStage) -> "ProgressState":
        position = min(completed_count + 1, total_count)
        return cls(
            completed_count=completed_count,
            total_count=total_count,
            label=f"Processing {position} of {total_count}: {STAGE_DESCRIPTIONS[stage]}",
        )

    @classmethod
    def completed(cls, completed_count: int, total_count: int) -> "ProgressState":
        return cls(
            completed_count=completed_count,
            total_count=total_count,
            label=COMPLETED_LABEL,
        )


ProgressListener = Callable[[ProgressState], None]
