"""
Exception hierarchy for the quote request pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class QuotePipelineException(Exception):
    """Base exception for all quote pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(QuotePipelineException):
    """Raised at startup when required configuration is missing."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            missing: Names of the missing settings
            details: Additional context
        """
        details = details or {}
        if missing:
            details["missing"] = missing
        super().__init__(message, details)


class QueueError(QuotePipelineException):
    """Raised when a durable queue operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize queue error.

        Args:
            message: Error message
            operation: Operation that failed (enqueue, receive, acknowledge, release)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class LeaseNotFoundError(QueueError):
    """Raised when a receipt handle is unknown or its lease has expired."""

    def __init__(self, receipt_handle: str, operation: str | None = None) -> None:
        super().__init__(
            f"No active lease for receipt handle: {receipt_handle}",
            operation=operation,
            details={"receipt_handle": receipt_handle},
        )


class EmailDeliveryError(QuotePipelineException):
    """Raised when the outbound email transport rejects a message."""

    def __init__(
        self,
        message: str,
        recipient: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize email delivery error.

        Args:
            message: Error message
            recipient: Address the email was sent to
            details: Additional context
        """
        details = details or {}
        if recipient:
            details["recipient"] = recipient
        super().__init__(message, details)


class MessageParseError(QuotePipelineException):
    """Raised when a queue message body cannot be parsed into a quote request."""
