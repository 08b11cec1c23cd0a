import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from app.database.repositories.record_store import InMemoryRecordStore
from app.pdf.pymupdf_adapter import PyMuPdfRenderer
from app.processor.models import (
    BatchRequest,
    BatchState,
    FileStage,
    JobContext,
    ProcessingRecord,
    SkipReason,
    SourceFile,
)
from app.processor.orchestrator import BatchOrchestrator
from app.processor.processor import FileProcessor
from app.processor.progress import COMPLETED_LABEL, ProgressState
from app.processor.steps import default_steps
from app.scoring.example_client_adapter import ExampleClientAdapter
from app.scoring.scorer import Scorer
from app.storage.local_adapter import LocalStorageAdapter


@pytest.fixture(autouse=True)
def mock_sleep() -> Generator[MagicMock, None, None]:
    with patch("app.processor.orchestrator.time.sleep") as sleep:
        yield sleep


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def orchestrator(tmp_path: Path, store: InMemoryRecordStore) -> BatchOrchestrator:
    storage = LocalStorageAdapter(root=tmp_path)
    scorer = Scorer(storage=storage, client=ExampleClientAdapter(), model="example")
    steps = default_steps(
        storage=storage,
        renderer=PyMuPdfRenderer(scale=1.0),
        record_store=store,
        scorer=scorer,
    )
    return BatchOrchestrator(
        file_processor=FileProcessor(steps),
        notifier=MagicMock(),
        completion_delay_seconds=0.5,
    )


class TestOrchestratorIntegration:
    def test_valid_and_broken_pdf(
        self,
        orchestrator: BatchOrchestrator,
        store: InMemoryRecordStore,
        tmp_path: Path,
        job_context: JobContext,
        sample_pdf_file: SourceFile,
        mock_sleep: MagicMock,
    ) -> None:
        labels: list[str] = []
        orchestrator.subscribe(lambda state: labels.append(state.label))
        broken = SourceFile(name="broken.pdf", content=b"not a pdf")

        report = orchestrator.run(BatchRequest(context=job_context, files=(sample_pdf_file, broken)))

        assert [result.status for result in report.results] == [FileStage.DONE, FileStage.SKIPPED]
        assert report.results[1].skip_reason is SkipReason.CONVERSION_FAILURE
        assert report.completed_count == 1

        keys = store.list_keys(ProcessingRecord.KEY_PREFIX)
        assert keys == [f"resume:{report.results[0].record_id}"]
        raw = store.get(keys[0])
        assert raw is not None
        record = ProcessingRecord.from_json(raw)
        assert record.context == job_context
        assert record.feedback == json.loads(json.dumps(ExampleClientAdapter.DEFAULT_FEEDBACK))
        assert (tmp_path / record.original_path).read_bytes() == sample_pdf_file.content
        assert (tmp_path / record.artifact_path).read_bytes().startswith(b"\x89PNG")

        assert labels[1] == "Processing 1 of 2: Uploading file..."
        assert "Processing 2 of 2: Converting to image..." in labels
        assert labels[-1] == COMPLETED_LABEL
        assert orchestrator.progress == ProgressState(1, 2, COMPLETED_LABEL)
        assert orchestrator.state is BatchState.COMPLETED
        mock_sleep.assert_called_once_with(0.5)
