"""
Lending analytics components.

Leaves first:
- ranking: group by key, count, rank with stable ties
- intervals: union of overlapping date ranges
- pace: pages per day for a loan or a patron
- associations: books co-borrowed with a target book
- validation: argument checks shared with the service
- facade: the public operations composed from the above
"""

from .associations import count_co_borrowed_books, rank_associated_books
from .facade import LibraryAnalytics
from .intervals import Interval, merge_intervals, total_duration
from .pace import pages_per_day, pages_per_day_by_patron, pages_per_day_for_loans
from .ranking import rank_by_key, sort_by_count
from .validation import validate_max_results

__all__ = [
    "Interval",
    "LibraryAnalytics",
    "count_co_borrowed_books",
    "merge_intervals",
    "pages_per_day",
    "pages_per_day_by_patron",
    "pages_per_day_for_loans",
    "rank_associated_books",
    "rank_by_key",
    "sort_by_count",
    "total_duration",
    "validate_max_results",
]
