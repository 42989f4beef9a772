"""
Notification dispatcher.

Consumes one queued quote request per unit of work:
deserialize → render → send to the sales rep with reply-to = submitter.

The outcome is reported as an explicit DispatchResult rather than a raised
exception; the host (Lambda adapter or local worker) maps it onto
acknowledge / release. Sending is at-least-once: a redelivery after an
unacknowledged success produces a duplicate email.

Dependencies: pydantic, quote_service.core.notification
System role: Asynchronous half of the pipeline (queue consumer)
"""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from quote_service.core.exceptions import MessageParseError
from quote_service.core.notification.renderer import render
from quote_service.core.notification.transport import EmailTransport
from quote_service.models.quote import QuoteRequest
from quote_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one delivery attempt."""

    message_id: str
    success: bool
    email_message_id: str | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, message_id: str, email_message_id: str) -> "DispatchResult":
        return cls(message_id=message_id, success=True, email_message_id=email_message_id)

    @classmethod
    def failed(cls, message_id: str, error: str) -> "DispatchResult":
        return cls(message_id=message_id, success=False, error=error)


def parse_quote(body: str) -> QuoteRequest:
    """
    Deserialize a queue message body.

    Raises:
        MessageParseError: Body is not a serialized QuoteRequest
    """
    try:
        return QuoteRequest.model_validate_json(body)
    except ValidationError as e:
        raise MessageParseError(
            "Invalid quote request in message body",
            details={"errors": e.error_count()},
        ) from e


class NotificationDispatcher:
    """Renders queued quote requests and emails them to the sales rep."""

    def __init__(self, transport: EmailTransport, sender: str, recipient: str) -> None:
        """
        Initialize dispatcher.

        Args:
            transport: Outbound email transport
            sender: Verified sender address
            recipient: Sales rep address (single recipient)
        """
        self.transport = transport
        self.sender = sender
        self.recipient = recipient

    def process(self, message_id: str, body: str) -> DispatchResult:
        """
        Deliver one queued quote request.

        Args:
            message_id: Queue message ID, used for logging and the result
            body: JSON-serialized QuoteRequest

        Returns:
            DispatchResult: success with the provider message ID, or failure
            with the error text
        """
        try:
            quote = parse_quote(body)
            content = render(quote)
            email_message_id = self.transport.send(
                sender=self.sender,
                recipient=self.recipient,
                reply_to=quote.contact_info.email,
                content=content,
            )
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger,
                "process - Failed to deliver quote notification",
                e,
                message_id=message_id,
            )
            return DispatchResult.failed(message_id, str(e))

        logger.info(
            "process - Quote notification sent",
            extra={"message_id": message_id, "email_message_id": email_message_id},
        )
        return DispatchResult.succeeded(message_id, email_message_id)
