"""
Domain layer - Core business logic and entities.

This layer contains the catalog entities, value objects, and defines
the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import CatalogRecord, PagedResult
from .value_objects import (
    AdvancedSearchFilters,
    ClampPolicy,
    CounterOutcome,
    CounterUpdate,
    MatchStrategy,
    SortDirection,
    TieBreak,
)

__all__ = [
    # Entities
    "CatalogRecord",
    "PagedResult",
    # Value Objects
    "AdvancedSearchFilters",
    "ClampPolicy",
    "CounterOutcome",
    "CounterUpdate",
    "MatchStrategy",
    "SortDirection",
    "TieBreak",
]
