"""
Tests for interval merging.

These tests verify that merge_intervals:
1. Merges overlapping and touching spans
2. Keeps disjoint spans apart
3. Ignores zero-length and reversed spans
4. Does not depend on input order
"""

from datetime import date, datetime, timedelta

from library_analytics.analytics.intervals import Interval, merge_intervals, total_duration


def jan(day: int) -> datetime:
    return datetime(2024, 1, day)


class TestMergeIntervals:
    """Test suite for merge_intervals and total_duration."""

    def test_overlapping_intervals_merge(self):
        pairs = [(jan(1), jan(11)), (jan(5), jan(15))]

        assert merge_intervals(pairs) == [Interval(jan(1), jan(15))]
        assert total_duration(pairs) == timedelta(days=14)

    def test_disjoint_intervals_stay_separate(self):
        pairs = [(jan(1), jan(10)), (jan(20), jan(25))]

        assert merge_intervals(pairs) == [Interval(jan(1), jan(10)), Interval(jan(20), jan(25))]
        assert total_duration(pairs) == timedelta(days=14)

    def test_touching_intervals_merge(self):
        """An interval starting where the previous one ends is merged."""
        pairs = [(jan(1), jan(5)), (jan(5), jan(8))]
        assert merge_intervals(pairs) == [Interval(jan(1), jan(8))]

    def test_contained_interval_does_not_shrink_merge(self):
        pairs = [(jan(1), jan(20)), (jan(5), jan(10))]

        assert merge_intervals(pairs) == [Interval(jan(1), jan(20))]
        assert total_duration(pairs) == timedelta(days=19)

    def test_contained_interval_followed_by_extension(self):
        pairs = [(jan(1), jan(20)), (jan(5), jan(10)), (jan(15), jan(25))]
        assert merge_intervals(pairs) == [Interval(jan(1), jan(25))]

    def test_degenerate_intervals_discarded(self):
        """Zero-length and reversed pairs cover no time."""
        pairs = [(jan(3), jan(3)), (jan(9), jan(4)), (jan(1), jan(2))]

        assert merge_intervals(pairs) == [Interval(jan(1), jan(2))]
        assert total_duration(pairs) == timedelta(days=1)

    def test_duplicate_intervals(self):
        pairs = [(jan(1), jan(4)), (jan(1), jan(4))]
        assert total_duration(pairs) == timedelta(days=3)

    def test_order_independent(self):
        pairs = [(jan(20), jan(25)), (jan(5), jan(15)), (jan(1), jan(11))]

        assert merge_intervals(pairs) == merge_intervals(sorted(pairs))
        assert total_duration(pairs) == timedelta(days=19)

    def test_empty_input(self):
        assert merge_intervals([]) == []
        assert total_duration([]) == timedelta(0)

    def test_partial_days(self):
        pairs = [(datetime(2024, 1, 1, 8), datetime(2024, 1, 1, 20))]
        assert total_duration(pairs) == timedelta(hours=12)

    def test_dates(self):
        pairs = [(date(2024, 1, 1), date(2024, 1, 11)), (date(2024, 1, 5), date(2024, 1, 15))]
        assert total_duration(pairs) == timedelta(days=14)

    def test_interval_duration(self):
        assert Interval(jan(1), jan(11)).duration == timedelta(days=10)
