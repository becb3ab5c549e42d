"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity: sort and pagination policies,
search filters, and the outcome of a counter update.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SortDirection(str, Enum):
    """Direction of the favorite-count ordering."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        """
        Read a caller-supplied direction.

        Only "asc" (any case) selects ascending order. Anything else,
        including None and unknown strings, falls back to descending.
        """
        if isinstance(value, SortDirection):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.ASCENDING.value:
            return cls.ASCENDING
        return cls.DESCENDING


class TieBreak(str, Enum):
    """Secondary ordering applied between records with equal favorite counts."""

    RECENCY = "recency"
    """Newest last_updated first; records without a timestamp go last"""

    TITLE = "title"
    """Title ascending, case-insensitive; records without a title go last"""

    NONE = "none"
    """Keep the input order"""


class ClampPolicy(str, Enum):
    """What the pager does when the requested page starts past the end."""

    LAST_FULL_PAGE = "last_full_page"
    """Restart at max(0, total - size), i.e. show the last full page"""

    ZERO = "zero"
    """Restart at the first record"""


class MatchStrategy(str, Enum):
    """How a structured filter string is compared to a record field."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"


class CounterOutcome(str, Enum):
    """Tagged result of a saturating counter operation."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AdvancedSearchFilters:
    """
    Per-field filters for structured search.

    All filters are optional. A blank filter (None, empty or whitespace
    only) means "no restriction" on that field.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None

    def is_empty(self) -> bool:
        """Check if no filters are set."""
        return all(
            value is None or (isinstance(value, str) and not value.strip())
            for value in (self.title, self.author, self.category)
        )


@dataclass(frozen=True)
class CounterUpdate:
    """
    Result of applying one increment or decrement to a favorite counter.

    ``value`` is the counter after the operation. For REJECTED and
    UNCHANGED outcomes it equals the value before the operation (with an
    unset counter reported as None).
    """

    outcome: CounterOutcome
    value: Optional[int]

    def __post_init__(self) -> None:
        """Validate update constraints."""
        if self.outcome == CounterOutcome.CHANGED and self.value is None:
            raise ValueError("value is required when outcome=CHANGED")

    @property
    def succeeded(self) -> bool:
        """
        Boolean contract exposed to callers.

        True means the operation completed as specified, which includes
        the no-op at the floor. It does not mean the counter moved.
        """
        return self.outcome != CounterOutcome.REJECTED

    @property
    def changed(self) -> bool:
        """Check if the counter value needs to be written back."""
        return self.outcome == CounterOutcome.CHANGED
