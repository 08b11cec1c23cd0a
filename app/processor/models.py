import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """A file moving through the pipeline: a submitted original or a rendered preview."""

    name: str
    content: bytes
    mime_type: str = "application/pdf"


@dataclass(frozen=True)
class JobContext:
    """Caller-supplied job metadata shared by every file of a batch."""

    company_name: str
    job_title: str
    job_description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "companyName": self.company_name,
            "jobTitle": self.job_title,
            "jobDescription": self.job_description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobContext":
        return cls(
            company_name=data["companyName"],
            job_title=data["jobTitle"],
            job_description=data["jobDescription"],
        )


@dataclass(frozen=True)
class BatchRequest:
    """Ordered files submitted together with one shared job context."""

    context: JobContext
    files: tuple[SourceFile, ...]


@dataclass
class ProcessingRecord:
    """Persisted outcome for one file, stored as JSON under ``resume:<id>``."""

    id: str
    original_path: str
    artifact_path: str
    context: JobContext
    feedback: Any = field(default_factory=dict)

    KEY_PREFIX = "resume:"

    @property
    def key(self) -> str:
        return f"{self.KEY_PREFIX}{self.id}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "originalPath": self.original_path,
            "artifactPath": self.artifact_path,
            "context": self.context.to_dict(),
            "feedback": self.feedback,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "ProcessingRecord":
        data = json.loads(raw)
        return cls(
            id=data["id"],
            original_path=data["originalPath"],
            artifact_path=data["artifactPath"],
            context=JobContext.from_dict(data["context"]),
            feedback=data.get("feedback", {}),
        )


class FileStage(str, Enum):
    """Per-file pipeline state."""

    IDLE = "idle"
    UPLOADING_ORIGINAL = "uploading_original"
    CONVERTING_ARTIFACT = "converting_artifact"
    UPLOADING_ARTIFACT = "uploading_artifact"
    PERSISTING_PARTIAL = "persisting_partial"
    SCORING = "scoring"
    PERSISTING_FINAL = "persisting_final"
    DONE = "done"
    SKIPPED = "skipped"


STAGE_DESCRIPTIONS: dict[FileStage, str] = {
    FileStage.UPLOADING_ORIGINAL: "Uploading file...",
    FileStage.CONVERTING_ARTIFACT: "Converting to image...",
    FileStage.UPLOADING_ARTIFACT: "Uploading image...",
    FileStage.PERSISTING_PARTIAL: "Preparing data...",
    FileStage.SCORING: "Analyzing with AI...",
    FileStage.PERSISTING_FINAL: "Saving feedback...",
}


class BatchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class SkipReason(str, Enum):
    """Why a file left the pipeline before reaching DONE."""

    UPLOAD_FAILURE = "upload_failure"
    CONVERSION_FAILURE = "conversion_failure"
    SCORING_FAILURE = "scoring_failure"
    PERSISTENCE_FAILURE = "persistence_failure"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class FileResult:
    """Outcome of one file's pipeline run."""

    file_name: str
    status: FileStage
    record_id: str | None = None
    failed_stage: FileStage | None = None
    skip_reason: SkipReason | None = None
    error_message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status is FileStage.DONE


@dataclass(frozen=True)
class BatchReport:
    """Aggregated results of one batch run, in submission order."""

    results: tuple[FileResult, ...] = ()

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def completed_count(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @property
    def skipped(self) -> tuple[FileResult, ...]:
        return tuple(result for result in self.results if not result.succeeded)
