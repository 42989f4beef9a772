"""
Notification email configuration.

Sender and sales-rep recipient addresses for quote notifications.
Both addresses must be verified identities in the email provider.

Dependencies: pydantic_settings
System role: Outbound email configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationSettings(BaseSettings):
    """Settings for the quote notification email."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    sales_rep_email: str | None = Field(
        default=None,
        description="Recipient of quote notifications (SALES_REP_EMAIL)",
    )
    sender_email: str | None = Field(
        default=None,
        description="Verified sender address (SENDER_EMAIL)",
    )
    ses_region: str | None = Field(
        default=None,
        description="Region of the SES identities, defaults to the queue region",
    )

    @property
    def is_configured(self) -> bool:
        """Check both addresses are present."""
        return bool(self.sales_rep_email and self.sender_email)
