"""Payload validation."""

from quote_service.core.validation.validator import EMAIL_PATTERN, validate

__all__ = ["EMAIL_PATTERN", "validate"]
