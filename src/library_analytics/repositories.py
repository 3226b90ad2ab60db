"""
Collaborator contracts that supply loan snapshots.

The analytics engine never queries storage itself. Whatever owns the data
implements these interfaces and hands back fully materialized collections;
errors raised here reach the caller untouched.

``InMemoryLoanRepository`` implements both contracts over a list of loans.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from .analytics.associations import count_co_borrowed_books
from .exceptions import NotFoundError
from .models import CoBorrowCount, Loan

logger = logging.getLogger(__name__)


class LoanRepository(ABC):
    """Retrieves loan records."""

    @abstractmethod
    def get_all_loans(self) -> list[Loan]:
        """Return every loan."""

    @abstractmethod
    def get_loan_by_id(self, loan_id: int) -> Loan:
        """Return one loan.

        Raises:
            NotFoundError: If no loan has the id
        """

    @abstractmethod
    def get_loans_by_time(self, start_date: datetime, end_date: datetime) -> list[Loan]:
        """Return loans made in ``[start_date, end_date)``."""

    @abstractmethod
    def get_loans_by_book_id(self, book_id: int) -> list[Loan]:
        """Return loans of one book."""

    @abstractmethod
    def get_loans_by_patron_id(self, patron_id: int) -> list[Loan]:
        """Return loans made by one patron."""


class BorrowingPatternRepository(ABC):
    """Aggregates co-borrowing across patrons."""

    @abstractmethod
    def get_other_books_borrowed(self, book_id: int) -> list[CoBorrowCount]:
        """Per-book loan counts among the patrons who borrowed ``book_id``.

        The target book itself is not part of the result.
        """


class InMemoryLoanRepository(LoanRepository, BorrowingPatternRepository):
    """Both collaborator contracts over a materialized list of loans."""

    def __init__(self, loans: Iterable[Loan]):
        self._loans = list(loans)
        logger.debug("In-memory loan repository holding %d loans", len(self._loans))

    def get_all_loans(self) -> list[Loan]:
        return list(self._loans)

    def get_loan_by_id(self, loan_id: int) -> Loan:
        for loan in self._loans:
            if loan.id == loan_id:
                return loan
        raise NotFoundError(f"Loan with id {loan_id} not found")

    def get_loans_by_time(self, start_date: datetime, end_date: datetime) -> list[Loan]:
        return [loan for loan in self._loans if start_date <= loan.loan_date < end_date]

    def get_loans_by_book_id(self, book_id: int) -> list[Loan]:
        return [loan for loan in self._loans if loan.book_id == book_id]

    def get_loans_by_patron_id(self, patron_id: int) -> list[Loan]:
        return [loan for loan in self._loans if loan.patron_id == patron_id]

    def get_other_books_borrowed(self, book_id: int) -> list[CoBorrowCount]:
        return count_co_borrowed_books(self._loans, book_id)
