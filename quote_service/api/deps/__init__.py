"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_intake_handler,
    get_queue,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_intake_handler",
    "get_queue",
    "get_service_cache",
    "get_settings_dependency",
]
