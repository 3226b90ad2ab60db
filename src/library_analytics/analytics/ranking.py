"""Group-count-rank over any keyed items.

Ranking uses two properties of the language rather than an explicit
first-seen list: dicts keep insertion order, and ``sorted`` is stable even
with ``reverse=True``. Together they guarantee that groups with equal counts
keep the order in which their keys first appeared in the input.
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

from ..models import RankedEntry
from .validation import validate_max_results

logger = logging.getLogger(__name__)

ItemType = TypeVar("ItemType")
RowType = TypeVar("RowType")
SelectedType = TypeVar("SelectedType")


def sort_by_count(rows: Iterable[RowType], count: Callable[[RowType], int]) -> list[RowType]:
    """Sort rows by descending count, keeping input order among ties."""
    return sorted(rows, key=count, reverse=True)


def rank_by_key(
    items: Iterable[ItemType],
    key: Callable[[ItemType], Hashable],
    select: Callable[[ItemType], SelectedType] | None = None,
    max_results: int | None = None,
) -> list[RankedEntry]:
    """Group items by key, count each group and rank groups by count.

    Args:
        items: Items to group
        key: Extracts the grouping key, e.g. ``lambda patron: patron.id``
        select: Picks the item reported for a group from the first element
            seen with that key. Defaults to the element itself.
        max_results: Keep only the first N ranked groups

    Returns:
        Ranked entries, highest count first

    Raises:
        InvalidArgumentError: If max_results is given and not positive
    """
    validate_max_results(max_results)

    counts: dict[Hashable, int] = {}
    representatives: dict[Hashable, object] = {}
    for element in items:
        group_key = key(element)
        if group_key not in counts:
            counts[group_key] = 0
            representatives[group_key] = select(element) if select is not None else element
        counts[group_key] += 1

    ranked_keys = sort_by_count(counts, counts.__getitem__)
    if max_results is not None:
        ranked_keys = ranked_keys[:max_results]

    logger.debug("Ranked %d groups, returning %d", len(counts), len(ranked_keys))

    return [
        RankedEntry(rank=position, item=representatives[group_key], count=counts[group_key])
        for position, group_key in enumerate(ranked_keys, 1)
    ]
