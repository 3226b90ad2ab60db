"""
Tests for the in-memory collaborator implementation.

These tests verify each retrieval the analytics service relies on.
"""

from datetime import datetime

import pytest

from library_analytics.exceptions import NotFoundError
from library_analytics.repositories import InMemoryLoanRepository


def jan(day: int) -> datetime:
    return datetime(2024, 1, day)


@pytest.fixture
def library(make_book, make_loan, alice, bob):
    """Two books, two patrons and four loans."""
    dune, emma = make_book("Dune", page_count=412), make_book("Emma", page_count=474)
    loans = [
        make_loan(dune, alice, jan(1), return_date=jan(8)),
        make_loan(emma, alice, jan(9)),
        make_loan(dune, bob, jan(15), return_date=jan(20)),
        make_loan(emma, bob, jan(25)),
    ]
    return dune, emma, loans


class TestInMemoryLoanRepository:
    """Test suite for InMemoryLoanRepository."""

    def test_get_all_loans_returns_copy(self, library):
        _dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        fetched = repo.get_all_loans()
        fetched.clear()

        assert repo.get_all_loans() == loans

    def test_get_loan_by_id(self, library):
        _dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        assert repo.get_loan_by_id(loans[2].id) is loans[2]

    def test_get_loan_by_id_not_found(self, library):
        _dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        with pytest.raises(NotFoundError):
            repo.get_loan_by_id(10_000)

    def test_get_loans_by_time_half_open(self, library):
        _dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        assert repo.get_loans_by_time(jan(1), jan(15)) == loans[:2]

    def test_get_loans_by_book_id(self, library):
        dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        assert repo.get_loans_by_book_id(dune.id) == [loans[0], loans[2]]

    def test_get_loans_by_patron_id(self, library, bob):
        _dune, _emma, loans = library
        repo = InMemoryLoanRepository(loans)

        assert repo.get_loans_by_patron_id(bob.id) == loans[2:]

    def test_get_other_books_borrowed(self, library):
        dune, emma, loans = library
        repo = InMemoryLoanRepository(loans)

        rows = repo.get_other_books_borrowed(dune.id)

        assert [(row.book.id, row.count) for row in rows] == [(emma.id, 2)]
