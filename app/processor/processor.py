from collections.abc import Callable, Sequence

from app.database.exceptions import RecordStoreError
from app.logging.logger import Log
from app.pdf.exceptions import PdfRenderError
from app.processor.exceptions import ConversionError, UploadError
from app.processor.models import FileResult, FileStage, JobContext, SkipReason, SourceFile
from app.processor.pipeline import FileContext, PipelineStep
from app.scoring.exceptions import ScoringError
from app.storage.exceptions import StorageError

StageCallback = Callable[[FileStage], None]

_SKIP_REASONS: tuple[tuple[tuple[type[Exception], ...], SkipReason], ...] = (
    ((UploadError, StorageError), SkipReason.UPLOAD_FAILURE),
    ((ConversionError, PdfRenderError), SkipReason.CONVERSION_FAILURE),
    ((ScoringError,), SkipReason.SCORING_FAILURE),
    ((RecordStoreError,), SkipReason.PERSISTENCE_FAILURE),
)


def skip_reason_for(exc: Exception) -> SkipReason:
    """Classify a per-file failure."""
    for exc_types, reason in _SKIP_REASONS:
        if isinstance(exc, exc_types):
            return reason
    return SkipReason.UNEXPECTED_ERROR


class FileProcessor:
    """Runs one file through the stage sequence.

    Stages: upload original -> render preview -> upload preview ->
    persist partial record -> score -> persist final record.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(
        self,
        file: SourceFile,
        job: JobContext,
        on_stage: StageCallback | None = None,
    ) -> FileResult:
        """Run every step for one file; failures become a SKIPPED result."""
        context = FileContext(file=file, job=job)
        try:
            for step in self._steps:
                context.stage = step.stage
                if on_stage is not None:
                    on_stage(step.stage)
                context = step.run(context)
        except Exception as exc:
            return self._skipped(context, exc)

        context.stage = FileStage.DONE
        Log.info(f"Finished {file.name}", record=self._record_id(context))
        return FileResult(
            file_name=file.name,
            status=FileStage.DONE,
            record_id=self._record_id(context),
        )

    def _skipped(self, context: FileContext, exc: Exception) -> FileResult:
        reason = skip_reason_for(exc)
        failed_stage = context.stage
        log = Log.exception if reason is SkipReason.UNEXPECTED_ERROR else Log.error
        log(
            f"Error processing {context.file.name}: {exc}",
            stage=failed_stage.value,
            reason=reason.value,
        )
        context.stage = FileStage.SKIPPED
        return FileResult(
            file_name=context.file.name,
            status=FileStage.SKIPPED,
            record_id=self._record_id(context),
            failed_stage=failed_stage,
            skip_reason=reason,
            error_message=str(exc),
        )

    @staticmethod
    def _record_id(context: FileContext) -> str | None:
        return context.record.id if context.record is not None else None
