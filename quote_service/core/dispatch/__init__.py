"""Queue consumer: render and deliver quote notifications."""

from quote_service.core.dispatch.dispatcher import (
    DispatchResult,
    NotificationDispatcher,
    parse_quote,
)
from quote_service.core.dispatch.worker import QueueWorker

__all__ = ["DispatchResult", "NotificationDispatcher", "QueueWorker", "parse_quote"]
