import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.database.repositories.record_store import PostgresRecordStore
from app.logging.logger import Log
from app.processor.exceptions import EmptyBatchError
from app.processor.models import BatchReport
from app.processor.orchestrator import build_orchestrator
from app.submission import build_batch_request

EXIT_OK = 0
EXIT_REJECTED = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resume-analyzer",
        description="Analyze one or more resumes against a job description.",
    )
    parser.add_argument("--company-name", required=True)
    parser.add_argument("--job-title", required=True)
    description = parser.add_mutually_exclusive_group(required=True)
    description.add_argument("--job-description")
    description.add_argument("--job-description-file", type=Path)
    parser.add_argument("files", nargs="*", type=Path, help="Resume files (PDF)")
    return parser.parse_args(argv)


def print_report(report: BatchReport) -> None:
    for result in report.results:
        if result.succeeded:
            print(f"OK      {result.file_name} -> resume:{result.record_id}")
        else:
            reason = result.skip_reason.value if result.skip_reason else "unknown"
            print(f"SKIPPED {result.file_name} ({reason}): {result.error_message}")
    print(f"{report.completed_count} of {report.total_count} files analyzed")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> submission -> orchestrator -> report."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        job_description = (
            args.job_description_file.read_text(encoding="utf-8")
            if args.job_description_file is not None
            else args.job_description
        )
        request = build_batch_request(
            company_name=args.company_name,
            job_title=args.job_title,
            job_description=job_description,
            paths=args.files,
        )
    except (EmptyBatchError, OSError) as exc:
        Log.error(f"Submission rejected: {exc}")
        return EXIT_REJECTED

    uses_postgres = settings.record_store.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)
    try:
        if uses_postgres:
            PostgresRecordStore().ensure_table()
        orchestrator = build_orchestrator(settings)
        report = orchestrator.run(request)
    finally:
        if uses_postgres:
            close_pool()

    print_report(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
