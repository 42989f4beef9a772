"""Quote intake: parse, validate, enqueue, respond."""

from quote_service.core.intake.handler import IntakeHandler, IntakeResponse

__all__ = ["IntakeHandler", "IntakeResponse"]
