"""
Library Analytics Package.

This package turns a library's lending history into ordered statistics:
which books are borrowed most, which patrons borrow most often, how fast a
patron reads, and which books travel together.

Key Components:
- models: Pydantic models for books, patrons, loans and result rows
- analytics: ranking, interval merging, reading pace and co-borrowing logic
- repositories: collaborator contracts that supply loan snapshots
- service: repository-backed entry points over the analytics facade
- config: Configuration management with pydantic-settings
- observability: Logfire tracing and metrics
"""

__version__ = "0.1.0"

from .analytics import LibraryAnalytics
from .exceptions import AnalyticsError, InvalidArgumentError, NotFoundError
from .service import LibraryAnalyticsService

__all__ = [
    "AnalyticsError",
    "InvalidArgumentError",
    "LibraryAnalytics",
    "LibraryAnalyticsService",
    "NotFoundError",
    "__version__",
]
