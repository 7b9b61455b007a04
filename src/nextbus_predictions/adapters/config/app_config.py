"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nextbus_predictions.adapters.nextbus_api.constants import WEB_SERVICES_URI


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="NEXTBUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Feed configuration
    base_url: str = Field(
        default=WEB_SERVICES_URI, description="NextBus XML feed endpoint"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Upper bound in seconds per directory call, applied by the CLI",
    )

    # Pre-selected tags; each one skips the matching prompt
    agency: str | None = Field(default=None, description="Agency tag, e.g. 'sf-muni'")
    route: str | None = Field(default=None, description="Route tag, e.g. 'N'")
    direction: str | None = Field(default=None, description="Direction tag, e.g. 'N____O_F00'")
    stop: str | None = Field(default=None, description="Stop tag, e.g. '5240'")

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level
