from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from app.processor.models import FileStage, JobContext, ProcessingRecord, SourceFile
from app.scoring.models import ScoringResponse


@dataclass(slots=True)
class FileContext:
    """Accumulates data as one file moves through the pipeline steps."""

    file: SourceFile
    job: JobContext
    stage: FileStage = FileStage.IDLE
    original_path: str = ""
    artifact: SourceFile | None = None
    artifact_path: str = ""
    record: ProcessingRecord | None = None
    response: ScoringResponse | None = None


class PipelineStep(ABC):
    stage: ClassVar[FileStage]

    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
