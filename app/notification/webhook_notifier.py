from typing import Any

import httpx

from app.logging.logger import Log
from app.notification.base import BaseCompletionNotifier
from app.processor.models import BatchReport


def report_payload(report: BatchReport) -> dict[str, Any]:
    """Build the JSON body posted when a batch completes."""
    return {
        "event": "batch.completed",
        "total": report.total_count,
        "completed": report.completed_count,
        "results": [
            {
                "file": result.file_name,
                "status": result.status.value,
                "recordId": result.record_id,
                "skipReason": result.skip_reason.value if result.skip_reason else None,
            }
            for result in report.results
        ],
    }


class WebhookCompletionNotifier(BaseCompletionNotifier):
    """POSTs a batch summary to a webhook; delivery problems are only logged."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._client = client

    def on_batch_done(self, report: BatchReport) -> None:
        try:
            response = self._post(report_payload(report))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            Log.warning(f"Completion webhook delivery failed: {exc}", url=self._url)
            return
        Log.info("Completion webhook delivered", url=self._url, status=response.status_code)

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self._url, json=payload)
        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.post(self._url, json=payload)
