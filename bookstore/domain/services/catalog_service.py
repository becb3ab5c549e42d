"""
Catalog service binding the query operations to a repository.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They coordinate between entities and ports to implement use cases.

This service fetches one snapshot per call and hands it to the pure
functions in ``catalog_query``. For favorite counters it resolves the
record, runs the saturating arithmetic and writes the record back through
the port when the value actually moved.
"""

import logging
from typing import Callable, List, Optional, Tuple

from bookstore.domain.entities import CatalogRecord, PagedResult
from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.value_objects import (
    AdvancedSearchFilters,
    CounterUpdate,
    SortDirection,
)
from bookstore.domain.services import catalog_query
from bookstore.domain.services.counter import apply_decrement, apply_increment

logger = logging.getLogger(__name__)


class CatalogQueryService:
    """
    Catalog queries and favorite counter updates over a repository port.

    Every query returns a negative result (None, False, an empty list or
    page) for invalid input instead of raising. Repository errors are not
    caught here.

    Usage:
        service = CatalogQueryService(catalog_repo=sqlite_repo)
        page = service.search_ranked_by_favorites(1, 10, "java", "desc")
        service.increment_favorite_count(page.records[0].id)
    """

    def __init__(self, catalog_repo: BookCatalogRepository) -> None:
        """
        Initialize the service with its repository.

        Args:
            catalog_repo: Source of catalog snapshots and target of
                counter write-backs
        """
        self._catalog_repo = catalog_repo

    def list_all(self, query: Optional[str] = None) -> List[CatalogRecord]:
        """Free-text search over the whole catalog, newest first."""
        return catalog_query.list_all(self._catalog_repo.snapshot(), query)

    def list_paged(
        self,
        page: int,
        size: int,
        query: Optional[str] = None,
    ) -> PagedResult:
        """Free-text search with pagination done by the store, newest first."""
        return self._catalog_repo.find_page(page, size, query)

    def advanced_search(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        category: Optional[str] = None,
        page: int = 1,
        size: int = 10,
    ) -> PagedResult:
        """Structured search; see catalog_query.advanced_search."""
        filters = AdvancedSearchFilters(title=title, author=author, category=category)
        result = catalog_query.advanced_search(
            self._catalog_repo.snapshot(), filters, page, size
        )
        logger.info(
            f"Advanced search returned {len(result.records)} of {result.total} "
            f"matches (page={page}, size={size})"
        )
        return result

    def search_ranked_by_favorites(
        self,
        page: int,
        size: int,
        query: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> PagedResult:
        """Free-text search ranked by favorite count, paginated."""
        result = catalog_query.search_ranked_by_favorites(
            self._catalog_repo.snapshot(),
            page,
            size,
            query,
            SortDirection.parse(direction),
        )
        logger.info(
            f"Favorite-ranked search returned {len(result.records)} of "
            f"{result.total} matches (page={page}, size={size})"
        )
        return result

    def list_all_ranked_by_favorites(
        self,
        query: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> List[CatalogRecord]:
        """Free-text search ranked by favorite count, without pagination."""
        return catalog_query.list_all_ranked_by_favorites(
            self._catalog_repo.snapshot(),
            query,
            SortDirection.parse(direction),
        )

    def get_detail(self, book_id: Optional[int]) -> Optional[CatalogRecord]:
        """
        Fetch one record with display defaults applied.

        Returns None for a missing, zero or negative id and for ids the
        store does not know.
        """
        if not catalog_query.is_valid_id(book_id):
            return None

        record = self._catalog_repo.find_by_id(book_id)
        if record is None:
            return None

        return catalog_query.normalize_detail(record)

    def increment_favorite_count(self, book_id: Optional[int]) -> bool:
        """
        Add one favorite to a book.

        Returns False for an invalid or unknown id and when the counter is
        already at its ceiling.
        """
        return self._update_counter(book_id, apply_increment, "increment")

    def decrement_favorite_count(self, book_id: Optional[int]) -> bool:
        """
        Remove one favorite from a book.

        Returns False for an invalid or unknown id. A counter already at
        zero is left alone and still reports True.
        """
        return self._update_counter(book_id, apply_decrement, "decrement")

    def apply_favorite_delta(self, book_id: Optional[int], delta: int) -> bool:
        """
        FavoriteCountDelta callback for the favorite bookkeeping.

        Args:
            book_id: The book whose counter moves
            delta: +1 or -1; any other value is refused

        Returns:
            The outcome of the matching counter operation
        """
        if delta == 1:
            return self.increment_favorite_count(book_id)
        if delta == -1:
            return self.decrement_favorite_count(book_id)

        logger.warning(f"Refusing favorite delta {delta} for book_id={book_id}")
        return False

    def _update_counter(
        self,
        book_id: Optional[int],
        operation: Callable[[CatalogRecord], Tuple[CatalogRecord, CounterUpdate]],
        name: str,
    ) -> bool:
        if not catalog_query.is_valid_id(book_id):
            return False

        record = self._catalog_repo.find_by_id(book_id)
        if record is None:
            logger.debug(f"Favorite {name} skipped: book_id={book_id} not found")
            return False

        updated, update = operation(record)

        if not update.succeeded:
            logger.warning(
                f"Favorite {name} rejected for book_id={book_id} "
                f"(count={record.favorite_count})"
            )
            return False

        if not update.changed:
            return True

        persisted = self._catalog_repo.persist(updated)
        if not persisted:
            logger.warning(f"Favorite {name} for book_id={book_id} was not persisted")
        return persisted
