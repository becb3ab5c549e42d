"""
Domain entities for the bookstore catalog.

Entities are objects with a unique identity that runs through time and
different representations. A catalog record keeps its identity across
snapshots even when its counters or text fields change.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass
class CatalogRecord:
    """
    Represents one book in the catalog.

    Every text field may be absent: records come from a store that does not
    enforce presence, and the query engine treats missing values as
    non-matching rather than as errors.
    """

    id: Optional[int]
    """Store-assigned identifier (None until the record is first saved)"""

    title: Optional[str] = None
    """Book title"""

    author: Optional[str] = None
    """Author name(s) as free text"""

    category: Optional[str] = None
    """Category/genre label"""

    description: Optional[str] = None
    """Book description/summary"""

    price: Optional[Decimal] = None
    """Unit price"""

    favorite_count: Optional[int] = None
    """Popularity counter (None means unset)"""

    last_updated: Optional[datetime] = None
    """When this record was last modified in the store"""

    def __post_init__(self) -> None:
        """Validate record identity."""
        if self.id is not None and self.id <= 0:
            raise ValueError(f"id must be a positive integer, got {self.id}")

    def __eq__(self, other: object) -> bool:
        """Two records are equal if they have the same ID."""
        if not isinstance(other, CatalogRecord):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on record ID."""
        if self.id is None:
            return id(self)
        return hash(self.id)

    def effective_favorite_count(self) -> int:
        """Favorite count with the unset value read as zero."""
        return self.favorite_count if self.favorite_count is not None else 0

    def searchable_fields(self) -> List[Optional[str]]:
        """Fields consulted by free-text search, in match order."""
        return [self.title, self.author, self.category, self.description]


@dataclass(frozen=True)
class PagedResult:
    """
    A bounded slice of an ordered candidate sequence plus count metadata.

    ``page`` and ``size`` echo what the caller asked for; ``total`` is the
    size of the whole filtered sequence, so callers can render pagination
    controls regardless of which slice was returned.
    """

    records: List[CatalogRecord] = field(default_factory=list)
    """Records on this page, in ranked order"""

    page: int = 1
    """Requested 1-based page index"""

    size: int = 10
    """Requested page capacity"""

    total: int = 0
    """Number of candidates before pagination"""

    def __post_init__(self) -> None:
        """Validate paged result data."""
        if self.total < 0:
            raise ValueError(f"total cannot be negative, got {self.total}")

        if len(self.records) > self.total:
            raise ValueError(
                f"page holds {len(self.records)} records but total is {self.total}"
            )

    @property
    def pages(self) -> int:
        """Number of pages needed to show ``total`` records at ``size`` per page."""
        if self.size < 1:
            return 0
        return (self.total + self.size - 1) // self.size

    def is_empty(self) -> bool:
        """Check if this page carries no records."""
        return not self.records
