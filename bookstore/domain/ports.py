"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

The query engine itself only ever reads a snapshot; the repository port
exists so that the service layer can fetch that snapshot and write back
a record after a counter update.
"""

from typing import List, Optional, Protocol

from .entities import CatalogRecord, PagedResult


class BookCatalogRepository(Protocol):
    """
    Port for reading and writing catalog records.

    It abstracts away the persistence mechanism (SQLite, an ORM, a remote
    service). Implementations are responsible for their own update
    discipline when two callers modify the same record concurrently.
    """

    def snapshot(self) -> List[CatalogRecord]:
        """
        Return the full current catalog.

        The returned list is owned by the caller for the duration of one
        query; the domain never keeps a reference to it.

        Returns:
            Every record in the catalog, in store order
        """
        ...

    def find_by_id(self, book_id: int) -> Optional[CatalogRecord]:
        """
        Retrieve a record by its identifier.

        Args:
            book_id: The store-assigned identifier

        Returns:
            The CatalogRecord if found, None otherwise
        """
        ...

    def persist(self, record: CatalogRecord) -> bool:
        """
        Write back an existing record after an in-memory change.

        Args:
            record: The record to update (must already have an id)

        Returns:
            True if the store accepted the update, False otherwise
        """
        ...

    def find_page(
        self,
        page: int,
        size: int,
        query: Optional[str] = None,
    ) -> PagedResult:
        """
        Store-backed pagination over a free-text filter.

        Matches the query as a substring of title, author or category and
        orders by last_updated, newest first.

        Args:
            page: 1-based page index
            size: Page capacity
            query: Optional free-text filter; blank means no filter

        Returns:
            PagedResult for the requested page
        """
        ...

    def save(self, record: CatalogRecord) -> CatalogRecord:
        """
        Insert or replace a record.

        Args:
            record: The record to store; an id is assigned when it has none

        Returns:
            The stored record, carrying its id

        Raises:
            ValueError: If the record violates catalog constraints
            RuntimeError: If a database error occurs
        """
        ...

    def count(self) -> int:
        """
        Get the total number of records in the catalog.

        Returns:
            Total record count
        """
        ...

    def delete(self, book_id: int) -> bool:
        """
        Delete a record from the catalog.

        Args:
            book_id: ID of the record to delete

        Returns:
            True if the record was deleted, False if not found
        """
        ...


class FavoriteCountDelta(Protocol):
    """
    Callback the favorite-relationship bookkeeping uses to move a counter.

    The join table between users and books lives outside this package.
    When a favorite is added or removed there, it reports the change
    through this callback with a delta of +1 or -1.
    """

    def __call__(self, book_id: Optional[int], delta: int) -> bool:
        """
        Apply a single-step change to a book's favorite counter.

        Args:
            book_id: The book whose counter moves
            delta: +1 for a new favorite, -1 for a removed one

        Returns:
            The boolean outcome of the corresponding counter operation
        """
        ...
