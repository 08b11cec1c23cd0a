import time
from collections.abc import Callable

from app.config.settings import Settings
from app.database.repositories.factory import RecordStoreFactory
from app.database.repositories.record_store import BaseRecordStore
from app.logging.logger import Log
from app.notification.base import BaseCompletionNotifier
from app.notification.factory import CompletionNotifierFactory
from app.pdf.factory import PreviewRendererFactory
from app.processor.models import BatchReport, BatchRequest, BatchState, FileStage
from app.processor.processor import FileProcessor
from app.processor.progress import ProgressListener, ProgressState
from app.processor.steps import default_steps
from app.scoring.factory import ScorerFactory
from app.storage.factory import StorageFactory


class BatchOrchestrator:
    """Drives a batch of files through the pipeline, one file at a time.

    A failing file is skipped and never stops the batch. Progress is emitted
    to subscribers before each stage starts; once every file has been
    attempted the terminal label is shown, and after a short delay the
    completion notifier fires exactly once.
    """

    def __init__(
        self,
        file_processor: FileProcessor,
        notifier: BaseCompletionNotifier,
        completion_delay_seconds: float = 1.0,
    ) -> None:
        self._file_processor = file_processor
        self._notifier = notifier
        self._completion_delay_seconds = completion_delay_seconds
        self._listeners: list[ProgressListener] = []
        self._progress = ProgressState()
        self._state = BatchState.IDLE
        self._completed_count = 0
        self._total_count = 0

    @property
    def progress(self) -> ProgressState:
        return self._progress

    @property
    def state(self) -> BatchState:
        return self._state

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """Register a progress listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def run(self, request: BatchRequest) -> BatchReport:
        """Process every file of the batch and return the per-file results."""
        self._state = BatchState.RUNNING
        self._completed_count = 0
        self._total_count = len(request.files)
        self._set_progress(ProgressState())
        Log.info(
            f"Starting batch of {self._total_count} files",
            company=request.context.company_name,
            job_title=request.context.job_title,
        )

        results = []
        for file in request.files:
            result = self._file_processor.process(file, request.context, on_stage=self._on_stage)
            if result.succeeded:
                self._completed_count += 1
            results.append(result)
        report = BatchReport(results=tuple(results))

        self._set_progress(ProgressState.completed(self._completed_count, self._total_count))
        self._state = BatchState.COMPLETED
        time.sleep(self._completion_delay_seconds)
        self._notify(report)
        return report

    def _on_stage(self, stage: FileStage) -> None:
        self._set_progress(
            ProgressState.for_stage(self._completed_count, self._total_count, stage)
        )

    def _set_progress(self, progress: ProgressState) -> None:
        self._progress = progress
        if progress.label:
            Log.info(progress.label)
        for listener in list(self._listeners):
            try:
                listener(progress)
            except Exception:
                Log.exception("Progress listener failed", label=progress.label)

    def _notify(self, report: BatchReport) -> None:
        try:
            self._notifier.on_batch_done(report)
        except Exception:
            Log.exception("Completion notifier failed")


def build_orchestrator(
    settings: Settings,
    record_store: BaseRecordStore | None = None,
) -> BatchOrchestrator:
    """Build a BatchOrchestrator with all required adapters."""
    storage = StorageFactory.create(settings)
    steps = default_steps(
        storage=storage,
        renderer=PreviewRendererFactory.create(settings),
        record_store=record_store or RecordStoreFactory.create(settings),
        scorer=ScorerFactory.create(settings, storage),
    )
    return BatchOrchestrator(
        file_processor=FileProcessor(steps),
        notifier=CompletionNotifierFactory.create(settings),
        completion_delay_seconds=settings.completion_delay_seconds,
    )
