"""Argument checks shared by the facade and the service.

Each check logs the rejected value and raises ``InvalidArgumentError``
naming the argument, before any loan data is looked at.
"""

import logging
from datetime import datetime

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# A single shared loan is indistinguishable from noise.
MIN_CO_BORROW_FLOOR = 2


def validate_max_results(max_results: int | None) -> None:
    """Reject an explicit result limit that is not positive.

    ``None`` means "no limit" and is always accepted.
    """
    if max_results is not None and max_results <= 0:
        logger.warning("Rejected max_results=%d: must be greater than 0", max_results)
        raise InvalidArgumentError("max_results", f"must be greater than 0, got {max_results}")


def validate_date_range(start_date: datetime, end_date: datetime) -> None:
    """Reject a window whose start is not strictly before its end."""
    if start_date >= end_date:
        logger.warning("Rejected date range: start %s must be before end %s", start_date, end_date)
        raise InvalidArgumentError(
            "date range", f"start {start_date} must be before end {end_date}"
        )


def validate_positive_id(argument: str, value: int) -> None:
    """Reject ids that cannot identify a record."""
    if value <= 0:
        logger.warning("Rejected %s=%d: must be positive", argument, value)
        raise InvalidArgumentError(argument, f"must be positive, got {value}")


def validate_target_book_id(target_book_id: int) -> None:
    validate_positive_id("target_book_id", target_book_id)


def validate_min_co_borrow_count(min_count: int) -> None:
    """Reject a threshold that would report single co-borrows."""
    if min_count < MIN_CO_BORROW_FLOOR:
        logger.warning("Rejected min_count=%d: must be at least %d", min_count, MIN_CO_BORROW_FLOOR)
        raise InvalidArgumentError(
            "min_count", f"must be at least {MIN_CO_BORROW_FLOOR}, got {min_count}"
        )
