"""
SQS-backed durable queue.

Implements the DurableQueue contract on a managed SQS standard queue.
Lease duration, receive counting, and dead-letter routing are enforced by
the queue itself (visibility timeout and redrive policy declared in IAC).

Dependencies: boto3
System role: Production queue boundary for intake and local dispatch
"""

import logging
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from quote_service.core.exceptions import LeaseNotFoundError, QueueError
from quote_service.core.queue.base import DurableQueue
from quote_service.models.queue_message import QueueMessage

logger = logging.getLogger(__name__)

_INVALID_HANDLE_CODES = {"ReceiptHandleIsInvalid", "InvalidParameterValue", "MessageNotInflight"}


class SqsDurableQueue(DurableQueue):
    """SQS standard queue exposed through the DurableQueue contract."""

    def __init__(
        self,
        queue_url: str,
        region: str = "ap-southeast-2",
        wait_time_seconds: int = 0,
        client=None,
    ) -> None:
        """
        Initialize SQS queue client.

        Args:
            queue_url: SQS queue URL
            region: AWS region of the queue
            wait_time_seconds: Long-poll wait for receive calls (0-20)
            client: Pre-built boto3 SQS client (built from region if None)
        """
        self._queue_url = queue_url
        self._wait_time_seconds = wait_time_seconds
        self._client = client or boto3.client("sqs", region_name=region)

    def enqueue(self, body: str, attributes: dict[str, str] | None = None) -> str:
        """
        Send a message with string attributes.

        Raises:
            QueueError: SQS rejected the message or was unreachable
        """
        message_attributes = {
            name: {"DataType": "String", "StringValue": value}
            for name, value in (attributes or {}).items()
        }
        try:
            response = self._client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=body,
                MessageAttributes=message_attributes,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("enqueue - %s: %s", type(e).__name__, e)
            raise QueueError(f"Failed to send message: {e}", operation="enqueue") from e

        message_id = response["MessageId"]
        logger.info("enqueue - Sent message", extra={"message_id": message_id})
        return message_id

    def receive(self, batch_size: int = 1) -> list[QueueMessage]:
        """
        Lease up to batch_size messages.

        SQS reports ApproximateReceiveCount including the current delivery;
        receive_count is normalized to the number of earlier attempts.
        """
        try:
            response = self._client.receive_message(
                QueueUrl=self._queue_url,
                MaxNumberOfMessages=batch_size,
                WaitTimeSeconds=self._wait_time_seconds,
                AttributeNames=["ApproximateReceiveCount", "SentTimestamp"],
                MessageAttributeNames=["All"],
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("receive - %s: %s", type(e).__name__, e)
            raise QueueError(f"Failed to receive messages: {e}", operation="receive") from e

        return [self._to_queue_message(raw) for raw in response.get("Messages", [])]

    def acknowledge(self, receipt_handle: str) -> None:
        """Delete a leased message."""
        try:
            self._client.delete_message(QueueUrl=self._queue_url, ReceiptHandle=receipt_handle)
        except ClientError as e:
            self._raise_for_handle(e, receipt_handle, "acknowledge")
        except BotoCoreError as e:
            raise QueueError(f"Failed to delete message: {e}", operation="acknowledge") from e

    def release_with_failure(self, receipt_handle: str) -> None:
        """End the lease now so SQS redelivers (and counts) the message."""
        try:
            self._client.change_message_visibility(
                QueueUrl=self._queue_url,
                ReceiptHandle=receipt_handle,
                VisibilityTimeout=0,
            )
        except ClientError as e:
            self._raise_for_handle(e, receipt_handle, "release")
        except BotoCoreError as e:
            raise QueueError(f"Failed to release message: {e}", operation="release") from e

    @staticmethod
    def _raise_for_handle(error: ClientError, receipt_handle: str, operation: str) -> None:
        code = error.response.get("Error", {}).get("Code", "")
        logger.error("%s - ClientError %s: %s", operation, code, error)
        if code in _INVALID_HANDLE_CODES:
            raise LeaseNotFoundError(receipt_handle, operation=operation) from error
        raise QueueError(f"SQS {operation} failed: {error}", operation=operation) from error

    @staticmethod
    def _to_queue_message(raw: dict) -> QueueMessage:
        system_attributes = raw.get("Attributes", {})
        sent_ms = int(system_attributes.get("SentTimestamp", "0"))
        receive_count = int(system_attributes.get("ApproximateReceiveCount", "1"))
        return QueueMessage(
            message_id=raw["MessageId"],
            body=raw["Body"],
            attributes={
                name: value.get("StringValue", "")
                for name, value in raw.get("MessageAttributes", {}).items()
            },
            receive_count=max(receive_count - 1, 0),
            enqueued_at=datetime.fromtimestamp(sent_ms / 1000, tz=timezone.utc),
            receipt_handle=raw["ReceiptHandle"],
        )
