"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the Lambda handlers.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from quote_service.configs.base import BaseSettings
from quote_service.configs.intake import DispatcherSettings, IntakeSettings
from quote_service.configs.notification import NotificationSettings
from quote_service.configs.queue import QueueSettings
from quote_service.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    queue: QueueSettings = Field(default_factory=QueueSettings)
    intake: IntakeSettings = Field(default_factory=IntakeSettings)
    dispatcher: DispatcherSettings = Field(default_factory=DispatcherSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from quote_service.configs import get_settings
        settings = get_settings()
    """
    return Settings()


def require_notification_settings(settings: Settings) -> NotificationSettings:
    """
    Fail fast when the notification addresses are not configured.

    Args:
        settings: Application settings

    Returns:
        NotificationSettings: Settings with both addresses present

    Raises:
        ConfigurationError: SALES_REP_EMAIL or SENDER_EMAIL missing
    """
    notification = settings.notification
    missing = [
        name
        for name, value in (
            ("SALES_REP_EMAIL", notification.sales_rep_email),
            ("SENDER_EMAIL", notification.sender_email),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}",
            missing=missing,
        )
    return notification


def require_intake_settings(settings: Settings) -> IntakeSettings:
    """
    Fail fast when the HTTP intake has no CORS allow-list.

    Args:
        settings: Application settings

    Returns:
        IntakeSettings: Settings with at least one allowed origin

    Raises:
        ConfigurationError: ALLOWED_ORIGINS missing or blank
    """
    if not settings.intake.allowed_origins:
        raise ConfigurationError(
            "Missing required environment variables: ALLOWED_ORIGINS",
            missing=["ALLOWED_ORIGINS"],
        )
    return settings.intake
