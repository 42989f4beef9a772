"""
Quote request intake handler.

Synchronous request/response unit behind POST /quote:
parse → validate → enqueue → respond.

Exactly one enqueue happens per valid request and none on a parse or
validation failure. Internal failures are logged in full and answered with
a generic 500 body.

Dependencies: pydantic, quote_service.core
System role: Edge-facing entry point of the pipeline (hosted by FastAPI and Lambda)
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from quote_service.core.queue.base import DurableQueue
from quote_service.core.validation import validate
from quote_service.models.common import QuoteSubmissionResponse
from quote_service.models.quote import QuoteRequest
from quote_service.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

INVALID_JSON_ERROR = "Invalid JSON in request body"
VALIDATION_ERROR = "Validation failed"
INTERNAL_ERROR = "Internal server error. Please try again later."
SUCCESS_MESSAGE = "Quote request submitted successfully"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntakeResponse:
    """Status code and JSON body returned to the caller."""

    status_code: int
    body: dict[str, Any]

    @classmethod
    def build(cls, status_code: int, **fields: Any) -> "IntakeResponse":
        return cls(status_code, QuoteSubmissionResponse(**fields).to_body())


def invalid_json_response() -> IntakeResponse:
    """400 response for a body that is not valid JSON."""
    return IntakeResponse.build(400, success=False, error=INVALID_JSON_ERROR)


def _model_errors(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    ]


class IntakeHandler:
    """Validates quote submissions and places them on the durable queue."""

    def __init__(self, queue: DurableQueue) -> None:
        """
        Initialize handler.

        Args:
            queue: Durable queue receiving validated requests
        """
        self.queue = queue

    def handle(
        self,
        raw_body: str | bytes | None,
        source_ip: str | None = None,
        user_agent: str | None = None,
    ) -> IntakeResponse:
        """
        Process one quote submission.

        Args:
            raw_body: Request body as received (empty body parses as {})
            source_ip: Caller IP, logged only
            user_agent: Caller user agent, logged only

        Returns:
            IntakeResponse: 200 on enqueue, 400 on bad input, 500 otherwise
        """
        try:
            try:
                payload = json.loads(raw_body or "{}")
            except ValueError:
                logger.info("handle - Rejected body: invalid JSON")
                return invalid_json_response()

            errors = validate(payload)
            if not errors:
                try:
                    quote = QuoteRequest.model_validate(payload)
                except ValidationError as e:
                    errors = _model_errors(e)

            if errors:
                log_with_context(
                    logger,
                    logging.INFO,
                    "handle - Rejected body: validation failed",
                    error_count=len(errors),
                )
                return IntakeResponse.build(
                    400, success=False, error=VALIDATION_ERROR, details=errors
                )

            log_with_context(
                logger,
                logging.INFO,
                "handle - Putting request in queue",
                source_ip=source_ip or UNKNOWN,
                user_agent=user_agent or UNKNOWN,
            )
            message_id = self.queue.enqueue(
                quote.to_message_body(),
                attributes={"email": quote.contact_info.email},
            )
            logger.info("handle - Quote request queued", extra={"message_id": message_id})

            return IntakeResponse.build(200, success=True, message=SUCCESS_MESSAGE)

        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger,
                "handle - Error processing quote request",
                e,
                source_ip=source_ip or UNKNOWN,
            )
            return IntakeResponse.build(500, success=False, error=INTERNAL_ERROR)
