"""
Durable queue contract.

At-least-once delivery with leases: a received message stays invisible to
other consumers until it is acknowledged, explicitly failed, or its lease
expires. No ordering is guaranteed across messages.

Dependencies: abc (stdlib)
System role: Seam between intake/dispatcher and the queue implementation
"""

from abc import ABC, abstractmethod

from quote_service.models.queue_message import QueueMessage


class DurableQueue(ABC):
    """Abstract durable queue used by the intake handler and dispatcher hosts."""

    @abstractmethod
    def enqueue(self, body: str, attributes: dict[str, str] | None = None) -> str:
        """
        Store a message for later delivery.

        Args:
            body: Serialized message body
            attributes: String attributes for filtering/observability

        Returns:
            str: Message ID assigned by the queue

        Raises:
            QueueError: The message could not be stored
        """

    @abstractmethod
    def receive(self, batch_size: int = 1) -> list[QueueMessage]:
        """
        Lease up to batch_size visible messages.

        Returns:
            list[QueueMessage]: Leased messages, each with a receipt handle
        """

    @abstractmethod
    def acknowledge(self, receipt_handle: str) -> None:
        """Permanently remove a leased message."""

    @abstractmethod
    def release_with_failure(self, receipt_handle: str) -> None:
        """Make a leased message immediately redeliverable and count the failure."""
