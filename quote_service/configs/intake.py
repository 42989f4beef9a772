"""
Intake endpoint and dispatcher timing configuration.

Dependencies: pydantic_settings
System role: HTTP intake (CORS, timeout) and dispatcher timeout settings
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class IntakeSettings(BaseSettings):
    """Settings for the POST /quote intake endpoint."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="CORS allow-list (ALLOWED_ORIGINS, comma-separated)",
    )
    intake_timeout_seconds: float = Field(
        default=10.0,
        description="Hard timeout for one intake request",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        """Parse a comma-separated origin list, dropping blanks."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class DispatcherSettings(BaseSettings):
    """Settings for the notification dispatcher."""

    model_config = SettingsConfigDict(
        env_prefix="DISPATCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Hard timeout for one delivery attempt",
    )
