"""
Lambda handler for SQS-triggered quote notifications.

Processes each SQS record through NotificationDispatcher and reports
failed records as a partial batch response, so only those are made
visible again (and counted towards the dead-letter threshold).

Environment variables:
- SALES_REP_EMAIL: Notification recipient (required)
- SENDER_EMAIL: Verified sender address (required)
- SES_REGION: Region of the SES identities (defaults to QUEUE_REGION)
- LOG_LEVEL: Logging level

Dependencies: python-dotenv, quote_service.core.dispatch, quote_service.boundary.aws
System role: Lambda entry point for asynchronous notification delivery
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from pydantic import ValidationError

from quote_service.boundary.aws.ses_client import SesEmailTransport
from quote_service.configs import get_settings, require_notification_settings
from quote_service.core.dispatch.dispatcher import NotificationDispatcher
from quote_service.models.sqs_event import SQSRecord

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))


def build_dispatcher() -> NotificationDispatcher:
    """
    Build the dispatcher from settings.

    Raises:
        ConfigurationError: SALES_REP_EMAIL or SENDER_EMAIL missing
    """
    settings = get_settings()
    notification = require_notification_settings(settings)
    transport = SesEmailTransport(region=notification.ses_region or settings.queue.region)
    return NotificationDispatcher(
        transport=transport,
        sender=notification.sender_email,
        recipient=notification.sales_rep_email,
    )


def init() -> NotificationDispatcher:
    """Build the dispatcher once per execution environment and reuse it."""
    if not hasattr(handler, "_dispatcher"):
        handler._dispatcher = build_dispatcher()
    return handler._dispatcher


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for SQS quote notification events.

    Args:
        event: SQS event with Records array
        context: Lambda context object

    Returns:
        Dict with batchItemFailures listing the records to redeliver
    """
    records = event.get("Records") or []
    logger.info("handler - Received SQS event", extra={"record_count": len(records)})

    dispatcher = init()
    failures = []

    for raw_record in records:
        try:
            record = SQSRecord.model_validate(raw_record)
        except ValidationError as e:
            logger.error("handler - Malformed SQS record: %s", e)
            if isinstance(raw_record, dict) and raw_record.get("messageId"):
                failures.append({"itemIdentifier": raw_record["messageId"]})
            continue

        logger.info(
            "handler - Processing message",
            extra={
                "message_id": record.messageId,
                "receive_count": record.approximate_receive_count,
            },
        )
        result = dispatcher.process(record.messageId, record.body)
        if not result.success:
            failures.append({"itemIdentifier": record.messageId})

    logger.info(
        "handler - Processing complete",
        extra={"success_count": len(records) - len(failures), "failed_count": len(failures)},
    )
    return {"batchItemFailures": failures}


# Cold start inside Lambda: missing configuration fails the init phase
if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
    init()
