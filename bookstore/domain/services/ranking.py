"""
Ordering of candidate records.

All sorts here are stable and total: absent counters read as zero, and
absent timestamps or titles are pushed behind present ones instead of
being compared.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from bookstore.domain.entities import CatalogRecord
from bookstore.domain.value_objects import SortDirection, TieBreak

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def _as_aware(value: datetime) -> datetime:
    # Naive values are read as UTC so they compare with aware ones.
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _recency_key(record: CatalogRecord) -> Tuple[bool, datetime]:
    if record.last_updated is None:
        return (False, _UNDATED)
    return (True, _as_aware(record.last_updated))


def _title_key(record: CatalogRecord) -> Tuple[bool, str]:
    if record.title is None:
        return (True, "")
    return (False, record.title.casefold())


def sort_by_recency(records: Iterable[CatalogRecord]) -> List[CatalogRecord]:
    """Order records by last_updated, newest first; undated records go last."""
    # reverse=True keeps equal keys in input order
    return sorted(records, key=_recency_key, reverse=True)


def tie_break_for(direction: SortDirection) -> TieBreak:
    """Secondary ordering used by the favorite-ranked search for a direction."""
    if direction == SortDirection.ASCENDING:
        return TieBreak.TITLE
    return TieBreak.RECENCY


def _apply_tie_break(
    records: Iterable[CatalogRecord],
    tie_break: TieBreak,
) -> List[CatalogRecord]:
    if tie_break == TieBreak.RECENCY:
        return sort_by_recency(records)
    if tie_break == TieBreak.TITLE:
        return sorted(records, key=_title_key)
    return list(records)


def rank_by_favorites(
    records: Iterable[CatalogRecord],
    direction: SortDirection = SortDirection.DESCENDING,
    tie_break: Optional[TieBreak] = None,
) -> List[CatalogRecord]:
    """
    Order records by favorite count.

    The secondary key is applied first and the primary sort is stable, so
    records with equal counts keep their tie-break order. The tie-break
    itself does not depend on the primary direction: undated records are
    last among ties whether the counts ascend or descend.

    Args:
        records: Candidate records
        direction: Ascending or descending favorite count
        tie_break: Ordering among equal counts (defaults to the one the
            favorite-ranked search uses for ``direction``)

    Returns:
        A new list in ranked order
    """
    if tie_break is None:
        tie_break = tie_break_for(direction)

    ordered = _apply_tie_break(records, tie_break)
    return sorted(
        ordered,
        key=CatalogRecord.effective_favorite_count,
        reverse=direction == SortDirection.DESCENDING,
    )
