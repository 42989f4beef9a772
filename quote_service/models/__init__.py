"""Pipeline data models."""

from quote_service.models.common import QuoteSubmissionResponse
from quote_service.models.notification import NotificationContent
from quote_service.models.queue_message import QueueMessage
from quote_service.models.quote import ContactInfo, QuoteItem, QuoteMetadata, QuoteRequest

__all__ = [
    "ContactInfo",
    "NotificationContent",
    "QueueMessage",
    "QuoteItem",
    "QuoteMetadata",
    "QuoteRequest",
    "QuoteSubmissionResponse",
]
