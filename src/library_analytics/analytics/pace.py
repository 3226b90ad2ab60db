"""Reading pace in pages per day.

Pace assumes continuous reading between the loan date and the return date.
Only loans that were returned and whose book has a known page count say
anything about pace; every other loan is skipped, and when nothing qualifies
the pace is unknown (``None``) rather than zero.
"""

import logging
import math
from collections.abc import Iterable
from datetime import timedelta

from ..config import ZERO_DURATION_INFINITY, ZERO_DURATION_UNKNOWN
from ..exceptions import InvalidArgumentError
from ..models import Loan, PatronPace
from .intervals import total_duration

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def is_pace_eligible(loan: Loan) -> bool:
    """Whether a loan carries enough data to measure pace."""
    return (
        loan.is_returned
        and loan.return_date is not None
        and loan.book is not None
        and loan.book.page_count is not None
    )


def _divide_pages(pages: int, elapsed: timedelta, zero_duration: str) -> float | None:
    days = elapsed.total_seconds() / SECONDS_PER_DAY
    if days > 0:
        return pages / days
    if zero_duration == ZERO_DURATION_INFINITY:
        return math.inf
    if zero_duration == ZERO_DURATION_UNKNOWN:
        return None
    raise InvalidArgumentError("zero_duration", f"unsupported policy {zero_duration!r}")


def pages_per_day(loan: Loan, zero_duration: str = ZERO_DURATION_INFINITY) -> float | None:
    """Pace of a single loan.

    Args:
        loan: The loan to measure
        zero_duration: What a loan returned at the instant it was made
            yields: ``"infinity"`` or ``"unknown"``

    Returns:
        Pages per day, or None if the loan is not returned or the page
        count is unknown
    """
    if not is_pace_eligible(loan):
        return None
    return _divide_pages(loan.book.page_count, loan.return_date - loan.loan_date, zero_duration)


def pages_per_day_for_loans(
    loans: Iterable[Loan], zero_duration: str = ZERO_DURATION_INFINITY
) -> float | None:
    """Aggregate pace over one patron's loans.

    The days spent reading are the union of the qualifying loan periods, so
    books borrowed at the same time do not double-count the shared days.
    """
    qualifying = [loan for loan in loans if is_pace_eligible(loan)]
    if not qualifying:
        return None

    total_pages = sum(loan.book.page_count for loan in qualifying)
    elapsed = total_duration((loan.loan_date, loan.return_date) for loan in qualifying)

    logger.debug(
        "Aggregate pace over %d loans: %d pages in %s", len(qualifying), total_pages, elapsed
    )
    return _divide_pages(total_pages, elapsed, zero_duration)


def pages_per_day_by_patron(
    loans: Iterable[Loan], zero_duration: str = ZERO_DURATION_INFINITY
) -> list[PatronPace]:
    """Aggregate pace for every patron appearing in the loans.

    Patrons are keyed by id and reported in order of first appearance.
    Patrons without a known pace are left out.
    """
    loans_by_patron: dict[int, list[Loan]] = {}
    patrons = {}
    for loan in loans:
        if loan.patron is None:
            continue
        patrons.setdefault(loan.patron.id, loan.patron)
        loans_by_patron.setdefault(loan.patron.id, []).append(loan)

    paces = []
    for patron_id, patron_loans in loans_by_patron.items():
        pace = pages_per_day_for_loans(patron_loans, zero_duration)
        if pace is not None:
            paces.append(PatronPace(patron=patrons[patron_id], pages_per_day=pace))
    return paces
