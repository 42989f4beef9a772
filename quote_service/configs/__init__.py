"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from quote_service.configs.settings import (
    Settings,
    get_settings,
    require_intake_settings,
    require_notification_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "require_intake_settings",
    "require_notification_settings",
]
