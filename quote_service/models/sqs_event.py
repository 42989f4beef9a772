"""
SQS Lambda event schema.

Validates the event envelope delivered to the dispatcher Lambda by the SQS
event source mapping.

Dependencies: pydantic
System role: Data validation and contract definition
"""

from pydantic import BaseModel, Field


class SQSRecord(BaseModel):
    """Single SQS record wrapper."""

    messageId: str
    receiptHandle: str
    body: str  # JSON string containing a QuoteRequest
    attributes: dict = Field(default_factory=dict)
    messageAttributes: dict = Field(default_factory=dict)
    md5OfBody: str | None = None

    @property
    def approximate_receive_count(self) -> int:
        """Receive count reported by SQS (1 on the first delivery)."""
        return int(self.attributes.get("ApproximateReceiveCount", "1"))


class SQSEvent(BaseModel):
    """Complete SQS Lambda event."""

    Records: list[SQSRecord]
