"""
Durable queue configuration.

Selects the queue backend and carries the retry and dead-letter policy.
The lease is not configured here: it is always derived from the
dispatcher timeout (see RedrivePolicy.from_settings).

Dependencies: pydantic_settings
System role: Queue configuration for intake and dispatch
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueueSettings(BaseSettings):
    """Settings for the quote request queue."""

    model_config = SettingsConfigDict(
        env_prefix="QUEUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="memory",
        description="Queue backend: 'memory' (local dev) or 'sqs' (production)",
    )
    url: str | None = Field(
        default=None,
        description="SQS queue URL (required for the sqs backend)",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for the queue",
    )
    wait_time_seconds: int = Field(
        default=0,
        description="Long-poll wait time for SQS receive calls",
    )
    max_receive_count: int = Field(
        default=3,
        description="Failed delivery attempts before dead-lettering",
    )
    retention_seconds: int = Field(
        default=604800,
        description="Main queue retention (7 days)",
    )
    dead_letter_retention_seconds: int = Field(
        default=1209600,
        description="Dead-letter retention (14 days)",
    )
