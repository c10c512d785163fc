"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        ORGMEMBERSHIP_LOG_LEVEL: Minimum log level (default: INFO)
        ORGMEMBERSHIP_LOG_FORCE_COLOR: Colored console output even without a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="ORGMEMBERSHIP_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level")
    force_color: bool = Field(
        default=False,
        description="Use colored console output even when stdout is not a TTY",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize and validate the log level name."""
        normalized = value.upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return normalized


class MembershipSettings(BaseSettings):
    """Organization membership settings.

    Environment variables:
        ORGMEMBERSHIP_INCLUDE_PROVIDER_IN_OWNER_CHECK: Count a managing
            provider as an owner when removing the last confirmed owner
            (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="ORGMEMBERSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    include_provider_in_owner_check: bool = Field(
        default=True,
        description="Count a managing provider as a fallback owner",
    )


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()


@lru_cache
def get_membership_settings() -> MembershipSettings:
    """Get cached membership settings."""
    return MembershipSettings()
