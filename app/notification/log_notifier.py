from app.logging.logger import Log
from app.notification.base import BaseCompletionNotifier
from app.processor.models import BatchReport


class LogCompletionNotifier(BaseCompletionNotifier):
    """Reports batch completion through the application log."""

    def on_batch_done(self, report: BatchReport) -> None:
        Log.info(
            f"Batch done: {report.completed_count} of {report.total_count} files analyzed",
            skipped=len(report.skipped),
        )
