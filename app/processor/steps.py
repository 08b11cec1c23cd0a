from collections.abc import Callable

from app.database.repositories.record_store import BaseRecordStore
from app.identifiers.generator import IdentifierGenerator
from app.logging.logger import Log
from app.pdf.base import BasePreviewRenderer
from app.processor.exceptions import ConversionError, StageOrderError, UploadError
from app.processor.models import FileStage, ProcessingRecord
from app.processor.pipeline import FileContext, PipelineStep
from app.scoring.base import BaseScorer
from app.scoring.exceptions import ScoringError
from app.scoring.feedback import normalize_feedback
from app.scoring.prompt_loader import prepare_instructions
from app.storage.base import BaseStorage

InstructionsBuilder = Callable[[str, str], str]


class UploadOriginalStep(PipelineStep):
    stage = FileStage.UPLOADING_ORIGINAL

    def __init__(self, storage: BaseStorage) -> None:
        self._storage = storage

    def run(self, context: FileContext) -> FileContext:
        reference = self._storage.upload(context.file)
        if not reference:
            raise UploadError(f"Failed to upload {context.file.name}")
        context.original_path = reference
        Log.info(f"Uploaded {context.file.name}", path=reference)
        return context


class ConvertArtifactStep(PipelineStep):
    stage = FileStage.CONVERTING_ARTIFACT

    def __init__(self, renderer: BasePreviewRenderer) -> None:
        self._renderer = renderer

    def run(self, context: FileContext) -> FileContext:
        result = self._renderer.convert(context.file)
        if result.artifact is None:
            detail = f": {result.error}" if result.error else ""
            raise ConversionError(f"Failed to convert {context.file.name}{detail}")
        context.artifact = result.artifact
        return context


class UploadArtifactStep(PipelineStep):
    stage = FileStage.UPLOADING_ARTIFACT

    def __init__(self, storage: BaseStorage) -> None:
        self._storage = storage

    def run(self, context: FileContext) -> FileContext:
        if context.artifact is None:
            raise StageOrderError("FileContext.artifact must be set before uploading it")
        reference = self._storage.upload(context.artifact)
        if not reference:
            raise UploadError(f"Failed to upload image for {context.file.name}")
        context.artifact_path = reference
        return context


class PersistPartialStep(PipelineStep):
    """Writes the record before scoring so every uploaded file leaves a trace."""

    stage = FileStage.PERSISTING_PARTIAL

    def __init__(
        self,
        record_store: BaseRecordStore,
        id_generator: IdentifierGenerator,
    ) -> None:
        self._record_store = record_store
        self._id_generator = id_generator

    def run(self, context: FileContext) -> FileContext:
        if not context.original_path or not context.artifact_path:
            raise StageOrderError("Both upload paths must be set before persisting a record")
        record = ProcessingRecord(
            id=self._id_generator.next(),
            original_path=context.original_path,
            artifact_path=context.artifact_path,
            context=context.job,
        )
        self._record_store.set(record.key, record.to_json())
        context.record = record
        Log.info(f"Saved record for {context.file.name}", key=record.key)
        return context


class ScoreStep(PipelineStep):
    stage = FileStage.SCORING

    def __init__(
        self,
        scorer: BaseScorer,
        instructions_builder: InstructionsBuilder = prepare_instructions,
    ) -> None:
        self._scorer = scorer
        self._instructions_builder = instructions_builder

    def run(self, context: FileContext) -> FileContext:
        instructions = self._instructions_builder(
            context.job.job_title,
            context.job.job_description,
        )
        response = self._scorer.score(context.original_path, instructions)
        if response is None:
            raise ScoringError(f"Failed to analyze {context.file.name}")
        context.response = response
        return context


class PersistFinalStep(PipelineStep):
    stage = FileStage.PERSISTING_FINAL

    def __init__(self, record_store: BaseRecordStore) -> None:
        self._record_store = record_store

    def run(self, context: FileContext) -> FileContext:
        if context.record is None or context.response is None:
            raise StageOrderError("Record and scoring response must be set before final persist")
        context.record.feedback = normalize_feedback(context.response)
        self._record_store.set(context.record.key, context.record.to_json())
        return context


def default_steps(
    *,
    storage: BaseStorage,
    renderer: BasePreviewRenderer,
    record_store: BaseRecordStore,
    scorer: BaseScorer,
    id_generator: IdentifierGenerator | None = None,
) -> list[PipelineStep]:
    """Build the fixed stage sequence every file runs through."""
    return [
        UploadOriginalStep(storage),
        ConvertArtifactStep(renderer),
        UploadArtifactStep(storage),
        PersistPartialStep(record_store, id_generator or IdentifierGenerator()),
        ScoreStep(scorer),
        PersistFinalStep(record_store),
    ]
