"""
Catalog query operations over an explicit snapshot.

Each function takes the full catalog snapshot as its first argument and
returns a new list or PagedResult. Nothing here holds catalog state between
calls, and the snapshot records are never modified.
"""

from dataclasses import replace
from decimal import Decimal
import logging
from typing import List, Optional, Sequence

from bookstore.domain.entities import CatalogRecord, PagedResult
from bookstore.domain.value_objects import (
    AdvancedSearchFilters,
    ClampPolicy,
    SortDirection,
    TieBreak,
)
from bookstore.domain.services.pager import paginate
from bookstore.domain.services.predicates import matches_filters, matches_free_text
from bookstore.domain.services.ranking import rank_by_favorites, sort_by_recency

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown author"
UNCATEGORIZED = "Uncategorized"
ZERO_PRICE = Decimal("0.00")


def is_valid_id(book_id: object) -> bool:
    """Check that an identifier is a positive integer."""
    return isinstance(book_id, int) and not isinstance(book_id, bool) and book_id > 0


def filter_free_text(
    snapshot: Sequence[CatalogRecord],
    query: Optional[str],
) -> List[CatalogRecord]:
    """Records matching a free-text query, in snapshot order."""
    return [record for record in snapshot if matches_free_text(record, query)]


def list_all(
    snapshot: Sequence[CatalogRecord],
    query: Optional[str] = None,
) -> List[CatalogRecord]:
    """
    Free-text search over the whole catalog, without pagination.

    Results are ordered by last_updated, newest first, with undated
    records last.
    """
    matches = filter_free_text(snapshot, query)
    logger.debug(f"list_all matched {len(matches)} of {len(snapshot)} records")
    return sort_by_recency(matches)


def advanced_search(
    snapshot: Sequence[CatalogRecord],
    filters: AdvancedSearchFilters,
    page: int,
    size: int,
) -> PagedResult:
    """
    Structured search with per-field filters.

    Matches are ordered by last_updated (newest first, undated last). A page
    past the end is clamped back to the last full page.

    Args:
        snapshot: Full catalog
        filters: Title/author/category filters, combined with AND
        page: 1-based page index
        size: Page capacity

    Returns:
        PagedResult with the requested page of matches
    """
    matches = [record for record in snapshot if matches_filters(record, filters)]
    logger.debug(
        f"advanced_search matched {len(matches)} of {len(snapshot)} records "
        f"(filters={filters})"
    )
    ordered = sort_by_recency(matches)
    return paginate(ordered, page, size, ClampPolicy.LAST_FULL_PAGE)


def search_ranked_by_favorites(
    snapshot: Sequence[CatalogRecord],
    page: int,
    size: int,
    query: Optional[str] = None,
    direction: SortDirection = SortDirection.DESCENDING,
) -> PagedResult:
    """
    Free-text search ranked by favorite count.

    Equal counts are ordered by title in ascending mode and by recency in
    descending mode. A page past the end is clamped back to the first page.
    """
    direction = SortDirection.parse(direction)
    matches = filter_free_text(snapshot, query)
    ordered = rank_by_favorites(matches, direction)
    return paginate(ordered, page, size, ClampPolicy.ZERO)


def list_all_ranked_by_favorites(
    snapshot: Sequence[CatalogRecord],
    query: Optional[str] = None,
    direction: SortDirection = SortDirection.DESCENDING,
) -> List[CatalogRecord]:
    """
    Free-text search ranked by favorite count, without pagination.

    Equal counts keep their snapshot order.
    """
    direction = SortDirection.parse(direction)
    matches = filter_free_text(snapshot, query)
    return rank_by_favorites(matches, direction, TieBreak.NONE)


def normalize_detail(record: CatalogRecord) -> CatalogRecord:
    """
    Copy of a record with display defaults applied.

    Empty author and category get placeholder labels and a missing or
    negative price reads as zero. The input record is left untouched.
    """
    author = record.author if record.author else UNKNOWN_AUTHOR
    category = record.category if record.category else UNCATEGORIZED
    price = record.price
    if price is None or price < 0:
        price = ZERO_PRICE

    return replace(record, author=author, category=category, price=price)


def get_detail(
    snapshot: Sequence[CatalogRecord],
    book_id: Optional[int],
) -> Optional[CatalogRecord]:
    """
    Look up one record for display.

    Returns None for an invalid identifier or when no record has it;
    otherwise a normalized copy (see normalize_detail).
    """
    if not is_valid_id(book_id):
        return None

    for record in snapshot:
        if record.id == book_id:
            return normalize_detail(record)

    return None
