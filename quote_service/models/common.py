"""
Intake response models.

Dependencies: pydantic
System role: Public response contract of POST /quote
"""

from pydantic import BaseModel, Field


class QuoteSubmissionResponse(BaseModel):
    """Response body for a quote submission."""

    success: bool
    message: str | None = None
    error: str | None = Field(default=None, description="Error message")
    details: list[str] | None = Field(
        default=None, description="Itemized validation errors"
    )

    def to_body(self) -> dict:
        """Return the JSON object sent to the caller, omitting unset fields."""
        return self.model_dump(exclude_none=True)
