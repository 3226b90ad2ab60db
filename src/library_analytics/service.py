"""
Repository-backed analytics service.

Fetches loan snapshots through the collaborator contracts and hands them to
``LibraryAnalytics``. Arguments are validated before any repository call,
so a caller bug never costs a query. Repository failures are not caught:
without the complete input there is no correct result to fall back to.
"""

import logging
from datetime import datetime

from .analytics import LibraryAnalytics
from .analytics.validation import (
    validate_date_range,
    validate_max_results,
    validate_positive_id,
    validate_target_book_id,
)
from .models import AssociationEntry, PatronPace, RankedEntry
from .repositories import BorrowingPatternRepository, LoanRepository

logger = logging.getLogger(__name__)


class LibraryAnalyticsService:
    """Answers the lending analytics questions from repository data."""

    def __init__(
        self,
        loans: LoanRepository,
        patterns: BorrowingPatternRepository,
        analytics: LibraryAnalytics | None = None,
    ):
        self.loans = loans
        self.patterns = patterns
        self.analytics = analytics or LibraryAnalytics()

    def get_books_sorted_by_most_loaned(self, max_results: int | None = None) -> list[RankedEntry]:
        """Most borrowed books, most loaned first."""
        validate_max_results(max_results)

        all_loans = self.loans.get_all_loans()
        logger.info("Ranking books across %d loans (max: %s)", len(all_loans), max_results)
        return self.analytics.most_loaned_books(all_loans, max_results=max_results)

    def get_patrons_ordered_by_loan_frequency(
        self, start_date: datetime, end_date: datetime, max_results: int | None = None
    ) -> list[RankedEntry]:
        """Patrons with the most loans in ``[start_date, end_date)``."""
        validate_date_range(start_date, end_date)
        validate_max_results(max_results)

        loans = self.loans.get_loans_by_time(start_date, end_date)
        logger.info(
            "Ranking patrons across %d loans from %s to %s", len(loans), start_date, end_date
        )
        return self.analytics.most_active_patrons(
            loans, start_date=start_date, end_date=end_date, max_results=max_results
        )

    def get_pages_per_day(self, loan_id: int) -> float | None:
        """Reading pace of one loan; None if not returned or page count unknown."""
        validate_positive_id("loan_id", loan_id)

        loan = self.loans.get_loan_by_id(loan_id)
        pace = self.analytics.reading_pace(loan)
        if pace is None:
            logger.info("Loan %d has not been returned or its page count is unknown", loan_id)
        return pace

    def get_pages_per_day_for_patron(self, patron_id: int) -> float | None:
        """Aggregate reading pace of one patron."""
        validate_positive_id("patron_id", patron_id)

        loans = self.loans.get_loans_by_patron_id(patron_id)
        if not loans:
            logger.info("Patron %d has no loans", patron_id)
            return None
        return self.analytics.reading_pace_for_patron(loans[0].patron, loans)

    def get_pages_per_day_by_patron(self) -> list[PatronPace]:
        """Aggregate reading pace of every patron with a known pace."""
        return self.analytics.reading_pace_by_patron(self.loans.get_all_loans())

    def get_other_books_borrowed(self, book_id: int) -> list[AssociationEntry]:
        """Books frequently borrowed by the patrons who borrowed ``book_id``."""
        validate_target_book_id(book_id)

        target_loans = self.loans.get_loans_by_book_id(book_id)
        co_borrowed = self.patterns.get_other_books_borrowed(book_id)
        logger.info(
            "Analyzing %d co-borrowed books against %d loans of book %d",
            len(co_borrowed),
            len(target_loans),
            book_id,
        )
        return self.analytics.associated_books(book_id, target_loans, co_borrowed)
