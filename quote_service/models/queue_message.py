"""
Durable queue message model.

Dependencies: pydantic
System role: Unit of delivery handed from the queue to a consumer
"""

from datetime import datetime

from pydantic import BaseModel, Field


class QueueMessage(BaseModel):
    """A leased delivery of one serialized quote request."""

    message_id: str
    body: str = Field(..., description="JSON-serialized QuoteRequest")
    attributes: dict[str, str] = Field(default_factory=dict)
    receive_count: int = Field(
        default=0, description="Failed delivery attempts before this one"
    )
    enqueued_at: datetime
    receipt_handle: str | None = Field(
        default=None, description="Lease handle for acknowledge/release"
    )
    visible_at: float | None = Field(
        default=None, description="Lease deadline on the queue clock"
    )
