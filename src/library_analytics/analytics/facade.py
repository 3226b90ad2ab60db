"""
Lending analytics facade.

Composes ranking, interval merging, pace calculation and association
analysis into the operations callers use. Every operation is a pure
function of its arguments: callers fetch the loan snapshots, the facade
computes over them, nothing is cached or written back.

Loans missing the field an operation needs (book or patron) are skipped.
Preconditions are checked before any loan is looked at, so a bad argument
is rejected even when there is no data.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from ..config import AnalyticsConfig, get_config
from ..models import AssociationEntry, CoBorrowCount, Loan, Patron, PatronPace, RankedEntry
from ..observability import trace_analytics
from .associations import rank_associated_books
from .pace import pages_per_day, pages_per_day_by_patron, pages_per_day_for_loans
from .ranking import rank_by_key
from .validation import validate_date_range, validate_max_results, validate_target_book_id

logger = logging.getLogger(__name__)


class LibraryAnalytics:
    """Entry point for the four lending analytics questions."""

    def __init__(self, config: AnalyticsConfig | None = None):
        self.config = config or get_config()

    @trace_analytics("most_loaned_books")
    def most_loaned_books(
        self, loans: Iterable[Loan], max_results: int | None = None
    ) -> list[RankedEntry]:
        """Books ranked by how many times they were loaned.

        Args:
            loans: Loan snapshot to rank
            max_results: Keep only the N most loaned books

        Returns:
            Entries whose ``item`` is a Book, most loaned first
        """
        validate_max_results(max_results)

        return rank_by_key(
            (loan for loan in loans if loan.book is not None),
            key=lambda loan: loan.book.id,
            select=lambda loan: loan.book,
            max_results=max_results,
        )

    @trace_analytics("most_active_patrons")
    def most_active_patrons(
        self,
        loans: Iterable[Loan],
        start_date: datetime,
        end_date: datetime,
        max_results: int | None = None,
    ) -> list[RankedEntry]:
        """Patrons ranked by loans made in ``[start_date, end_date)``.

        Raises:
            InvalidArgumentError: If start_date is not before end_date or
                max_results is not positive
        """
        validate_date_range(start_date, end_date)
        validate_max_results(max_results)

        logger.debug("Ranking patrons by loans from %s to %s", start_date, end_date)
        return rank_by_key(
            (
                loan
                for loan in loans
                if loan.patron is not None and start_date <= loan.loan_date < end_date
            ),
            key=lambda loan: loan.patron.id,
            select=lambda loan: loan.patron,
            max_results=max_results,
        )

    @trace_analytics("reading_pace")
    def reading_pace(self, loan: Loan) -> float | None:
        """Pages per day for one loan, or None when unknown."""
        return pages_per_day(loan, self.config.zero_duration_pace)

    @trace_analytics("reading_pace_for_patron")
    def reading_pace_for_patron(self, patron: Patron, loans: Iterable[Loan]) -> float | None:
        """Pages per day across a patron's returned loans, or None when unknown.

        Loans belonging to other patrons are ignored.
        """
        own_loans = [
            loan for loan in loans if loan.patron is not None and loan.patron.id == patron.id
        ]
        return pages_per_day_for_loans(own_loans, self.config.zero_duration_pace)

    @trace_analytics("reading_pace_by_patron")
    def reading_pace_by_patron(self, loans: Iterable[Loan]) -> list[PatronPace]:
        """Aggregate pace for every patron with a known pace."""
        return pages_per_day_by_patron(loans, self.config.zero_duration_pace)

    @trace_analytics("associated_books")
    def associated_books(
        self,
        target_book_id: int,
        loans_of_target_book: Iterable[Loan],
        co_borrow_data: Iterable[CoBorrowCount],
    ) -> list[AssociationEntry]:
        """Books borrowed by the patrons who borrowed the target book.

        Args:
            target_book_id: The book to find associations for
            loans_of_target_book: Every loan of the target book
            co_borrow_data: Per-book loan counts among the target's borrowers

        Returns:
            Associations with a ratio against the target's loan count,
            most co-borrowed first

        Raises:
            InvalidArgumentError: If the id is not positive or the target
                book has no loans
        """
        validate_target_book_id(target_book_id)

        target_loan_count = sum(1 for _ in loans_of_target_book)
        return rank_associated_books(
            target_book_id,
            target_loan_count,
            co_borrow_data,
            min_count=self.config.min_co_borrow_count,
        )
