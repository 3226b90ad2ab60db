"""Configuration management for the lending analytics engine.

Settings are read from the environment (``LIBRARY_ANALYTICS_`` prefix) or an
optional ``.env`` file and validated with pydantic-settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ZERO_DURATION_INFINITY = "infinity"
ZERO_DURATION_UNKNOWN = "unknown"


class AnalyticsConfig(BaseSettings):
    """Tunable behavior of the analytics operations."""

    model_config = SettingsConfigDict(
        # Use LIBRARY_ANALYTICS_ prefix for all env vars
        env_prefix="LIBRARY_ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Association Analysis ===

    min_co_borrow_count: int = Field(
        default=2,
        description="Smallest co-borrow count reported as an association",
        ge=2,
    )

    # === Reading Pace ===

    zero_duration_pace: str = Field(
        default=ZERO_DURATION_INFINITY,
        description="Pace reported when a loan was returned the instant it was made",
        pattern=r"^(infinity|unknown)$",
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for analytics operations",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("zero_duration_pace", mode="before")
    @classmethod
    def normalize_zero_duration_pace(cls, v: object) -> object:
        """Accept the pace policy in any case."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names from the environment."""
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: AnalyticsConfig | None = None


def get_config() -> AnalyticsConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = AnalyticsConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
