"""Books borrowed by the same population as a target book.

The co-borrow table is normally aggregated by the data layer; this module
filters and ranks it. ``count_co_borrowed_books`` performs the same
aggregation over an in-memory loan snapshot.
"""

import logging
from collections.abc import Iterable

from ..exceptions import InvalidArgumentError
from ..models import AssociationEntry, Book, CoBorrowCount, Loan
from .ranking import sort_by_count
from .validation import (
    MIN_CO_BORROW_FLOOR,
    validate_min_co_borrow_count,
    validate_target_book_id,
)

logger = logging.getLogger(__name__)


def rank_associated_books(
    target_book_id: int,
    target_loan_count: int,
    co_borrow_counts: Iterable[CoBorrowCount],
    min_count: int = MIN_CO_BORROW_FLOOR,
) -> list[AssociationEntry]:
    """Rank books co-borrowed with a target book.

    Args:
        target_book_id: The book the associations are computed for
        target_loan_count: Number of loans of the target book
        co_borrow_counts: Per-book loan counts among the target's borrowers
        min_count: Rows with fewer co-borrows are treated as noise; never
            below 2, so a single co-borrow is always filtered

    Returns:
        Associations ordered by co-borrow count, highest first; ties keep
        their input order

    Raises:
        InvalidArgumentError: If the target book id is not positive, the
            target book has no loans or min_count is below 2
    """
    validate_target_book_id(target_book_id)
    validate_min_co_borrow_count(min_count)
    if target_loan_count <= 0:
        logger.warning("Rejected associations for book %d: it has no loans", target_book_id)
        raise InvalidArgumentError(
            "target_loan_count", f"book {target_book_id} has no loans to compare against"
        )

    rows = [
        row
        for row in co_borrow_counts
        if row.book.id != target_book_id and row.count >= min_count
    ]
    return [
        AssociationEntry(
            book=row.book,
            co_borrow_count=row.count,
            ratio=row.count / target_loan_count,
        )
        for row in sort_by_count(rows, lambda row: row.count)
    ]


def count_co_borrowed_books(loans: Iterable[Loan], target_book_id: int) -> list[CoBorrowCount]:
    """Count other books' loans among the patrons who borrowed a target book.

    Every patron with at least one loan of the target book is a borrower.
    Each of their loans of a different book counts once. Rows are ordered by
    the first appearance of each book in ``loans``.
    """
    snapshot = [loan for loan in loans if loan.book is not None and loan.patron is not None]
    borrowers = {loan.patron.id for loan in snapshot if loan.book.id == target_book_id}

    counts: dict[int, int] = {}
    books: dict[int, Book] = {}
    for loan in snapshot:
        if loan.book.id == target_book_id or loan.patron.id not in borrowers:
            continue
        books.setdefault(loan.book.id, loan.book)
        counts[loan.book.id] = counts.get(loan.book.id, 0) + 1

    return [CoBorrowCount(book=books[book_id], count=count) for book_id, count in counts.items()]
