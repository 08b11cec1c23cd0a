from app.config.settings import Settings
from app.notification.base import BaseCompletionNotifier
from app.notification.log_notifier import LogCompletionNotifier
from app.notification.webhook_notifier import WebhookCompletionNotifier


class CompletionNotifierFactory:
    """Creates the completion notifier: webhook when configured, log otherwise."""

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionNotifier:
        url = settings.completion_webhook_url.strip()
        if url:
            return WebhookCompletionNotifier(url)
        return LogCompletionNotifier()
