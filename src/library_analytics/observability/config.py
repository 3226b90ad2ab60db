"""Logfire settings for the analytics engine.

Field names follow Logfire's own ``LOGFIRE_*`` environment variables, so a
deployment that already sets them for Logfire configures this too.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import AnalyticsConfig


class ObservabilityConfig(BaseSettings):
    """Where analytics spans and metrics are sent."""

    model_config = SettingsConfigDict(
        env_prefix="LOGFIRE_",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Configure Logfire at all")
    token: str = Field(default="", description="Write token; empty keeps data local")
    service_name: str = "library-analytics"
    environment: str = "development"
    send_to_logfire: bool = False
    console: bool = Field(default=False, description="Print spans to the console")

    @classmethod
    def for_analytics(cls, config: AnalyticsConfig) -> "ObservabilityConfig":
        """Settings from the environment, with console spans while debugging."""
        settings = cls()
        if config.is_development and "console" not in settings.model_fields_set:
            return settings.model_copy(update={"console": True})
        return settings
