"""
Saturating favorite counter.

The arithmetic is a pure function of the current value. Record-level
helpers return an updated copy so the caller decides when to persist.
"""

from dataclasses import replace
from typing import Optional, Tuple

from bookstore.domain.entities import CatalogRecord
from bookstore.domain.value_objects import CounterOutcome, CounterUpdate

FAVORITE_COUNT_FLOOR = 0
FAVORITE_COUNT_CEILING = 1000


def increment(current: Optional[int]) -> CounterUpdate:
    """
    Add one favorite.

    An unset counter counts as zero. At or above the ceiling the update is
    rejected and the value is left as it was.
    """
    value = current if current is not None else FAVORITE_COUNT_FLOOR

    if value >= FAVORITE_COUNT_CEILING:
        return CounterUpdate(CounterOutcome.REJECTED, current)

    return CounterUpdate(CounterOutcome.CHANGED, value + 1)


def decrement(current: Optional[int]) -> CounterUpdate:
    """
    Remove one favorite.

    An unset counter is repaired to zero, and a stored value outside
    [floor, ceiling] is pulled back to the nearest bound. A counter already
    at the floor stays there, and that still counts as a completed operation.
    """
    if current is None or current < FAVORITE_COUNT_FLOOR:
        return CounterUpdate(CounterOutcome.CHANGED, FAVORITE_COUNT_FLOOR)

    if current > FAVORITE_COUNT_CEILING:
        return CounterUpdate(CounterOutcome.CHANGED, FAVORITE_COUNT_CEILING)

    if current > FAVORITE_COUNT_FLOOR:
        return CounterUpdate(CounterOutcome.CHANGED, current - 1)

    return CounterUpdate(CounterOutcome.UNCHANGED, current)


def _apply(record: CatalogRecord, update: CounterUpdate) -> CatalogRecord:
    if not update.changed:
        return record
    return replace(record, favorite_count=update.value)


def apply_increment(record: CatalogRecord) -> Tuple[CatalogRecord, CounterUpdate]:
    """Increment a record's counter, returning the record to persist and the outcome."""
    update = increment(record.favorite_count)
    return _apply(record, update), update


def apply_decrement(record: CatalogRecord) -> Tuple[CatalogRecord, CounterUpdate]:
    """Decrement a record's counter, returning the record to persist and the outcome."""
    update = decrement(record.favorite_count)
    return _apply(record, update), update
