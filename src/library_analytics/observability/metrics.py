"""Custom metrics for the lending analytics engine."""

import logfire

analytics_operations = logfire.metric_counter(
    "analytics.operations.total", description="Analytics operations by name and outcome"
)

analytics_result_size = logfire.metric_histogram(
    "analytics.result.size", unit="rows", description="Rows returned by analytics operations"
)


def record_operation(operation: str, success: bool) -> None:
    """Record one analytics operation."""
    analytics_operations.add(1, {"operation": operation, "success": success})


def record_result_size(operation: str, size: int) -> None:
    """Record how many rows an operation returned."""
    analytics_result_size.record(size, {"operation": operation})
