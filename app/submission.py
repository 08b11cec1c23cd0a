import mimetypes
from collections.abc import Sequence
from pathlib import Path

from app.processor.exceptions import EmptyBatchError
from app.processor.models import BatchRequest, JobContext, SourceFile


def load_source_file(path: Path) -> SourceFile:
    """Read a submitted file from disk."""
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return SourceFile(name=path.name, content=path.read_bytes(), mime_type=mime_type)


def build_batch_request(
    *,
    company_name: str,
    job_title: str,
    job_description: str,
    paths: Sequence[Path],
) -> BatchRequest:
    """Validate a submission and turn it into a BatchRequest.

    Raises:
        EmptyBatchError: if no files were submitted.
        FileNotFoundError: if a submitted path does not exist.
    """
    if not paths:
        raise EmptyBatchError("Please upload at least one resume.")
    missing = [str(path) for path in paths if not path.is_file()]
    if missing:
        raise FileNotFoundError(f"Files not found: {', '.join(missing)}")
    return BatchRequest(
        context=JobContext(
            company_name=company_name,
            job_title=job_title,
            job_description=job_description,
        ),
        files=tuple(load_source_file(path) for path in paths),
    )
