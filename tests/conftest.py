"""Test configuration and fixtures for the lending analytics engine.

This conftest.py provides:
1. Configuration isolation - each test gets a fresh AnalyticsConfig
2. Test data factories - books, patrons and loans built from an explicit
   id sequence instead of a shared global counter
3. Observability - Logfire configured once, with nothing sent anywhere
"""

import itertools
import os
from collections.abc import Callable, Generator, Iterator
from datetime import date, datetime, timedelta

import logfire
import pytest

from library_analytics.analytics import LibraryAnalytics
from library_analytics.config import AnalyticsConfig, reset_config
from library_analytics.models import Book, Loan, Patron

# === Observability ===


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire() -> None:
    """Configure Logfire so spans and metrics stay in-process."""
    logfire.configure(send_to_logfire=False, console=False)


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without LIBRARY_ANALYTICS_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_ANALYTICS_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(clean_env) -> Generator[AnalyticsConfig, None, None]:
    """Provide a default configuration isolated from the global instance."""
    reset_config()

    config = AnalyticsConfig(_env_file=None)

    yield config

    reset_config()


@pytest.fixture
def analytics(test_config: AnalyticsConfig) -> LibraryAnalytics:
    """Analytics facade using the test configuration."""
    return LibraryAnalytics(test_config)


# === Test Data Factories ===


@pytest.fixture
def id_sequence() -> Iterator[int]:
    """Identifier sequence shared by the factories of one test."""
    return itertools.count(1)


@pytest.fixture
def make_book(id_sequence: Iterator[int]) -> Callable[..., Book]:
    """Factory for books; ids come from the test's sequence."""

    def _make_book(title: str = "Test Book", page_count: int | None = None, **fields) -> Book:
        fields.setdefault("id", next(id_sequence))
        return Book(title=title, page_count=page_count, **fields)

    return _make_book


@pytest.fixture
def make_patron(id_sequence: Iterator[int]) -> Callable[..., Patron]:
    """Factory for patrons; ids come from the test's sequence."""

    def _make_patron(first_name: str = "Test", last_name: str = "Patron", **fields) -> Patron:
        fields.setdefault("id", next(id_sequence))
        fields.setdefault("email", f"{first_name}.{last_name}@example.com".lower())
        fields.setdefault("membership_date", date(2023, 1, 1))
        return Patron(first_name=first_name, last_name=last_name, **fields)

    return _make_patron


@pytest.fixture
def make_loan(id_sequence: Iterator[int]) -> Callable[..., Loan]:
    """Factory for loans; returned exactly when a return date is given."""

    def _make_loan(
        book: Book | None,
        patron: Patron | None,
        loan_date: datetime,
        return_date: datetime | None = None,
        **fields,
    ) -> Loan:
        fields.setdefault("id", next(id_sequence))
        fields.setdefault("due_date", loan_date + timedelta(days=14))
        return Loan(
            book=book,
            patron=patron,
            loan_date=loan_date,
            return_date=return_date,
            is_returned=return_date is not None,
            **fields,
        )

    return _make_loan


@pytest.fixture
def alice(make_patron) -> Patron:
    return make_patron("Alice", "Johnson")


@pytest.fixture
def bob(make_patron) -> Patron:
    return make_patron("Bob", "Smith")
