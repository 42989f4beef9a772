"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import LAMBDA_DEFAULTS


def _require_origins(config: pulumi.Config) -> list[str]:
    origins = [
        origin.strip() for origin in config.require("allowed_origins").split(",") if origin.strip()
    ]
    if not origins:
        raise ValueError("allowed_origins must list at least one origin")
    return origins


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If allowed_origins lists no origin
    """
    config = pulumi.Config()

    return EnvironmentConfig(
        environment=config.require("environment"),
        sales_rep_email=config.require("sales_rep_email"),
        sender_email=config.require("sender_email"),
        allowed_origins=_require_origins(config),
        lambda_memory=int(config.get("lambda_memory") or LAMBDA_DEFAULTS["memory_mb"]),
        intake_timeout=int(
            config.get("intake_timeout") or LAMBDA_DEFAULTS["intake_timeout_seconds"]
        ),
        dispatcher_timeout=int(
            config.get("dispatcher_timeout") or LAMBDA_DEFAULTS["dispatcher_timeout_seconds"]
        ),
        code_path=config.get("code_path") or "./build/lambda",
    )
