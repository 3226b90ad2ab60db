"""Decorators for tracing analytics operations."""

import functools
import time
from collections.abc import Callable
from typing import Any

import logfire

from .metrics import record_operation, record_result_size


def trace_analytics(operation: str):
    """Decorator to trace a synchronous analytics operation."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with logfire.span(f"analytics.{operation}", operation=operation) as span:
                start = time.perf_counter()
                _add_attributes(span, "input", kwargs)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("analytics.success", False)
                    span.set_attribute("analytics.error", str(e))
                    record_operation(operation, success=False)
                    raise

                span.set_attribute("analytics.success", True)
                span.set_attribute("analytics.duration_ms", (time.perf_counter() - start) * 1000)
                record_operation(operation, success=True)
                _add_result_metrics(span, operation, result)
                return result

        return wrapper

    return decorator


def _add_attributes(span, prefix: str, data: dict):
    """Add scalar keyword arguments to the span."""
    for key, value in data.items():
        if isinstance(value, str | int | float | bool):
            span.set_attribute(f"{prefix}.{key}", value)


def _add_result_metrics(span, operation: str, result: Any):
    if isinstance(result, list):
        span.set_attribute("result.item_count", len(result))
        record_result_size(operation, len(result))
    elif result is None:
        span.set_attribute("result.known", False)
