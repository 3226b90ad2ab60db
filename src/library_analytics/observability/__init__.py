"""Logfire observability for the lending analytics engine."""

import logging
import sys

import logfire

from ..config import AnalyticsConfig, get_config
from .config import ObservabilityConfig
from .decorators import trace_analytics

logger = logging.getLogger(__name__)


def initialize_observability(config: ObservabilityConfig | None = None) -> None:
    """Initialize Logfire.

    Without explicit settings, they are read from the environment and follow
    the analytics debug setting for console output.
    """
    config = config or ObservabilityConfig.for_analytics(get_config())

    if not config.enabled:
        logger.debug("Observability disabled via configuration")
        return

    logfire.configure(
        service_name=config.service_name,
        token=config.token or None,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        console=None if config.console else False,
    )


def configure_logging(config: AnalyticsConfig) -> None:
    """Route library logs to stderr at the configured level."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.getLogger("library_analytics").setLevel(level)


__all__ = [
    "ObservabilityConfig",
    "configure_logging",
    "initialize_observability",
    "trace_analytics",
]
