"""Exceptions raised by the lending analytics engine."""


class AnalyticsError(Exception):
    """Base exception for analytics operations."""


class InvalidArgumentError(AnalyticsError, ValueError):
    """Raised when a caller violates an operation's preconditions.

    These failures are deterministic: retrying with the same arguments
    fails the same way.
    """

    def __init__(self, argument: str, message: str):
        super().__init__(f"Invalid {argument}: {message}")
        self.argument = argument


class NotFoundError(AnalyticsError):
    """Raised when a requested entity is not found."""
