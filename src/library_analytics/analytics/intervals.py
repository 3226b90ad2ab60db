"""Union of time intervals.

Used to measure how many days a patron actually had books out: concurrent
loans must not be counted twice.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import NamedTuple

Instant = datetime | date


class Interval(NamedTuple):
    """Half-open span of time between two instants."""

    start: Instant
    end: Instant

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


def merge_intervals(pairs: Iterable[tuple[Instant, Instant]]) -> list[Interval]:
    """Merge overlapping or touching intervals into disjoint spans.

    Pairs whose start is not before their end cover no time and are
    discarded. The result is sorted by start and does not depend on the
    order of the input.
    """
    spans = sorted(Interval(start, end) for start, end in pairs if start < end)

    merged: list[Interval] = []
    for span in spans:
        if merged and span.start <= merged[-1].end:
            # Contained spans must not pull the end backwards
            if span.end > merged[-1].end:
                merged[-1] = Interval(merged[-1].start, span.end)
        else:
            merged.append(span)
    return merged


def total_duration(pairs: Iterable[tuple[Instant, Instant]]) -> timedelta:
    """Total time covered by the union of the given intervals."""
    return sum((span.duration for span in merge_intervals(pairs)), timedelta())
