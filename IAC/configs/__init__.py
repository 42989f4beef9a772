"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from IAC.configs.base import EnvironmentConfig
from IAC.configs.environment import get_config
from IAC.configs.timeouts import validate_timeouts
from IAC.configs.constants import (
    API_THROTTLING,
    DEFAULT_TAGS,
    LAMBDA_DEFAULTS,
    SQS_DEFAULTS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "validate_timeouts",
    "API_THROTTLING",
    "DEFAULT_TAGS",
    "LAMBDA_DEFAULTS",
    "SQS_DEFAULTS",
]
