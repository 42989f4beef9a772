"""
In-memory durable queue.

Process-local implementation of the DurableQueue contract for local
development and tests. Mirrors the managed queue's semantics: leases,
redelivery on expiry or explicit failure, dead-lettering after
max_receive_count failed attempts, and retention windows.

Expired leases and retention are evaluated lazily on every operation
against an injectable clock.

Dependencies: quote_service.core.queue
System role: Local stand-in for the managed queue
"""

import logging
import threading
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from quote_service.core.exceptions import LeaseNotFoundError, QueueError
from quote_service.core.queue.base import DurableQueue
from quote_service.core.queue.policy import RedrivePolicy
from quote_service.models.queue_message import QueueMessage

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 10


@dataclass
class _StoredMessage:
    message_id: str
    body: str
    attributes: dict[str, str]
    enqueued_at: datetime
    stored_at: float
    receive_count: int = 0
    receipt_handle: str | None = None
    lease_deadline: float | None = None

    def snapshot(self) -> QueueMessage:
        return QueueMessage(
            message_id=self.message_id,
            body=self.body,
            attributes=dict(self.attributes),
            receive_count=self.receive_count,
            enqueued_at=self.enqueued_at,
            receipt_handle=self.receipt_handle,
            visible_at=self.lease_deadline,
        )


class InMemoryDurableQueue(DurableQueue):
    """Lease-based queue with a separate dead-letter area, held in memory."""

    def __init__(
        self,
        policy: RedrivePolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize an empty queue.

        Args:
            policy: Lease/retry/retention policy (defaults to RedrivePolicy())
            clock: Monotonic clock in seconds, injectable for tests
        """
        self.policy = policy or RedrivePolicy()
        self._clock = clock
        self._lock = threading.RLock()
        self._messages: OrderedDict[str, _StoredMessage] = OrderedDict()
        self._dead_letters: OrderedDict[str, _StoredMessage] = OrderedDict()
        self._leases: dict[str, str] = {}

    def enqueue(self, body: str, attributes: dict[str, str] | None = None) -> str:
        if not isinstance(body, str):
            raise QueueError("Message body must be a string", operation="enqueue")

        with self._lock:
            now = self._clock()
            self._reclaim(now)
            message = _StoredMessage(
                message_id=str(uuid.uuid4()),
                body=body,
                attributes=dict(attributes or {}),
                enqueued_at=datetime.now(timezone.utc),
                stored_at=now,
            )
            self._messages[message.message_id] = message
            queue_depth = len(self._messages)

        logger.info(
            "enqueue - Stored message",
            extra={"message_id": message.message_id, "queue_depth": queue_depth},
        )
        return message.message_id

    def receive(self, batch_size: int = 1) -> list[QueueMessage]:
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise QueueError(
                f"batch_size must be between 1 and {MAX_BATCH_SIZE}",
                operation="receive",
            )

        leased: list[QueueMessage] = []
        with self._lock:
            now = self._clock()
            self._reclaim(now)
            for message in self._messages.values():
                if len(leased) >= batch_size:
                    break
                if message.lease_deadline is not None:
                    continue
                message.receipt_handle = uuid.uuid4().hex
                message.lease_deadline = now + self.policy.visibility_timeout_seconds
                self._leases[message.receipt_handle] = message.message_id
                leased.append(message.snapshot())

        if leased:
            logger.debug("receive - Leased %d message(s)", len(leased))
        return leased

    def acknowledge(self, receipt_handle: str) -> None:
        with self._lock:
            self._reclaim(self._clock())
            message = self._take_lease(receipt_handle, "acknowledge")
            del self._messages[message.message_id]

        logger.info("acknowledge - Removed message", extra={"message_id": message.message_id})

    def release_with_failure(self, receipt_handle: str) -> None:
        with self._lock:
            self._reclaim(self._clock())
            message = self._take_lease(receipt_handle, "release")
            message.receive_count += 1
            self._return_or_dead_letter(message)

    def dead_letters(self) -> list[QueueMessage]:
        """List messages held in the dead-letter area."""
        with self._lock:
            self._reclaim(self._clock())
            return [message.snapshot() for message in self._dead_letters.values()]

    def redrive_dead_letters(self) -> int:
        """
        Move every dead-lettered message back onto the main path.

        Receive counts are reset so each message gets its full set of retries again.

        Returns:
            int: Number of messages moved
        """
        with self._lock:
            now = self._clock()
            self._reclaim(now)
            moved = list(self._dead_letters.values())
            self._dead_letters.clear()
            for message in moved:
                message.receive_count = 0
                message.stored_at = now
                self._messages[message.message_id] = message

        logger.info("redrive_dead_letters - Redrove %d message(s)", len(moved))
        return len(moved)

    def stats(self) -> dict[str, int]:
        """Count visible, in-flight, and dead-lettered messages."""
        with self._lock:
            self._reclaim(self._clock())
            in_flight = len(self._leases)
            return {
                "visible": len(self._messages) - in_flight,
                "in_flight": in_flight,
                "dead_lettered": len(self._dead_letters),
            }

    def _take_lease(self, receipt_handle: str, operation: str) -> _StoredMessage:
        message_id = self._leases.pop(receipt_handle, None)
        if message_id is None:
            raise LeaseNotFoundError(receipt_handle, operation=operation)
        message = self._messages[message_id]
        message.receipt_handle = None
        message.lease_deadline = None
        return message

    def _return_or_dead_letter(self, message: _StoredMessage) -> None:
        if message.receive_count < self.policy.max_receive_count:
            logger.info(
                "_return_or_dead_letter - Message visible for redelivery",
                extra={"message_id": message.message_id, "receive_count": message.receive_count},
            )
            return

        del self._messages[message.message_id]
        message.stored_at = self._clock()
        self._dead_letters[message.message_id] = message
        logger.warning(
            "_return_or_dead_letter - Message moved to dead-letter area",
            extra={"message_id": message.message_id, "receive_count": message.receive_count},
        )

    def _reclaim(self, now: float) -> None:
        expired = [
            handle
            for handle, message_id in self._leases.items()
            if self._messages[message_id].lease_deadline <= now
        ]
        for handle in expired:
            message = self._take_lease(handle, "reclaim")
            message.receive_count += 1
            self._return_or_dead_letter(message)

        for message_id, message in list(self._messages.items()):
            if message.lease_deadline is None and now - message.stored_at >= self.policy.retention_seconds:
                del self._messages[message_id]
                logger.warning(
                    "_reclaim - Message dropped after retention window",
                    extra={"message_id": message_id},
                )

        for message_id, message in list(self._dead_letters.items()):
            if now - message.stored_at >= self.policy.dead_letter_retention_seconds:
                del self._dead_letters[message_id]
                logger.warning(
                    "_reclaim - Dead letter dropped after retention window",
                    extra={"message_id": message_id},
                )
