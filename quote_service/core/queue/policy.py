"""
Redelivery and dead-letter policy.

The lease (visibility timeout) must outlive the slowest legitimate delivery
attempt, and the main retention window must outlive every attempt a message
is allowed before dead-lettering.

Dependencies: dataclasses (stdlib)
System role: Timing contract shared by the queue, the dispatcher, and IAC
"""

from dataclasses import dataclass

LEASE_SAFETY_FACTOR = 6
DEFAULT_PROCESSING_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RECEIVE_COUNT = 3
DEFAULT_RETENTION_SECONDS = 7 * 24 * 3600
DEFAULT_DEAD_LETTER_RETENTION_SECONDS = 14 * 24 * 3600


@dataclass(frozen=True)
class RedrivePolicy:
    """
    Lease, retry, and retention settings of a durable queue.

    Attributes:
        processing_timeout_seconds: Hard timeout of one dispatcher attempt
        visibility_timeout_seconds: Lease duration granted on receive
        max_receive_count: Failed attempts after which a message is dead-lettered
        retention_seconds: Main queue retention
        dead_letter_retention_seconds: Dead-letter area retention
    """

    processing_timeout_seconds: float = DEFAULT_PROCESSING_TIMEOUT_SECONDS
    visibility_timeout_seconds: float = (
        DEFAULT_PROCESSING_TIMEOUT_SECONDS * LEASE_SAFETY_FACTOR
    )
    max_receive_count: int = DEFAULT_MAX_RECEIVE_COUNT
    retention_seconds: float = DEFAULT_RETENTION_SECONDS
    dead_letter_retention_seconds: float = DEFAULT_DEAD_LETTER_RETENTION_SECONDS

    def __post_init__(self) -> None:
        if self.processing_timeout_seconds <= 0:
            raise ValueError("processing_timeout_seconds must be positive")
        if self.visibility_timeout_seconds <= self.processing_timeout_seconds:
            raise ValueError(
                "visibility_timeout_seconds must exceed processing_timeout_seconds "
                f"({self.visibility_timeout_seconds} <= {self.processing_timeout_seconds})"
            )
        if self.max_receive_count < 1:
            raise ValueError("max_receive_count must be at least 1")
        if self.retention_seconds <= self.max_receive_count * self.visibility_timeout_seconds:
            raise ValueError(
                "retention_seconds must exceed max_receive_count x visibility_timeout_seconds"
            )
        if self.dead_letter_retention_seconds <= self.retention_seconds:
            raise ValueError("dead_letter_retention_seconds must exceed retention_seconds")

    @classmethod
    def for_processing_timeout(cls, processing_timeout_seconds: float, **overrides) -> "RedrivePolicy":
        """Build a policy whose lease is LEASE_SAFETY_FACTOR x the processing timeout."""
        return cls(
            processing_timeout_seconds=processing_timeout_seconds,
            visibility_timeout_seconds=processing_timeout_seconds * LEASE_SAFETY_FACTOR,
            **overrides,
        )

    @classmethod
    def from_settings(cls, settings) -> "RedrivePolicy":
        """
        Build the policy from application settings.

        The lease always follows the dispatcher timeout.

        Args:
            settings: quote_service.configs.Settings

        Returns:
            RedrivePolicy: Validated policy

        Raises:
            ValueError: Configured timings violate the lease/retention relations
        """
        return cls.for_processing_timeout(
            settings.dispatcher.timeout_seconds,
            max_receive_count=settings.queue.max_receive_count,
            retention_seconds=settings.queue.retention_seconds,
            dead_letter_retention_seconds=settings.queue.dead_letter_retention_seconds,
        )
