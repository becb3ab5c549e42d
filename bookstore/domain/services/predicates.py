"""
Record predicates for free-text and structured catalog search.

Structured filters pick their comparison by filter length. The choice is
kept in small decision tables so each field's policy can be read (and
tested) without walking through the matching code.
"""

from typing import Optional, Sequence, Tuple

from bookstore.domain.entities import CatalogRecord
from bookstore.domain.value_objects import AdvancedSearchFilters, MatchStrategy

# (max filter length, strategy); a None bound catches every longer filter.
StrategyTable = Sequence[Tuple[Optional[int], MatchStrategy]]

TITLE_STRATEGIES: StrategyTable = (
    (2, MatchStrategy.EXACT),
    (5, MatchStrategy.PREFIX),
    (None, MatchStrategy.SUBSTRING),
)

AUTHOR_STRATEGIES: StrategyTable = (
    (None, MatchStrategy.SUBSTRING),
)

CATEGORY_STRATEGIES: StrategyTable = (
    (3, MatchStrategy.EXACT),
    (None, MatchStrategy.SUBSTRING),
)


def has_text(value: Optional[str]) -> bool:
    """Check if a query or filter carries at least one non-blank character."""
    return isinstance(value, str) and bool(value.strip())


def is_blank(value: Optional[str]) -> bool:
    """Check if a query or filter places no restriction: None, empty or whitespace only."""
    return value is None or (isinstance(value, str) and not value.strip())


def select_strategy(filter_text: str, table: StrategyTable) -> MatchStrategy:
    """
    Look up the strategy for a filter string.

    The length is measured on the filter as given, without stripping.

    Args:
        filter_text: The caller's filter string
        table: Ordered (max length, strategy) rows

    Returns:
        The strategy of the first row whose bound covers the filter length
    """
    length = len(filter_text)
    for max_length, strategy in table:
        if max_length is None or length <= max_length:
            return strategy
    raise ValueError("strategy table must end with an unbounded row")


def apply_strategy(
    strategy: MatchStrategy,
    value: Optional[str],
    filter_text: str,
) -> bool:
    """
    Compare a record field to a filter string, ignoring case.

    An absent field never matches.
    """
    if value is None:
        return False

    value = value.casefold()
    filter_text = filter_text.casefold()

    if strategy == MatchStrategy.EXACT:
        return value == filter_text
    if strategy == MatchStrategy.PREFIX:
        return value.startswith(filter_text)
    return filter_text in value


def matches_free_text(record: CatalogRecord, query: Optional[str]) -> bool:
    """
    Check a record against a single free-text query.

    The query matches when it is a case-insensitive substring of the
    title, author, category or description. A blank query matches every
    record; a query that is not a string matches none.
    """
    if is_blank(query):
        return True
    if not has_text(query):
        return False

    return any(
        apply_strategy(MatchStrategy.SUBSTRING, value, query)
        for value in record.searchable_fields()
    )


def _field_passes(
    value: Optional[str],
    filter_text: Optional[str],
    table: StrategyTable,
) -> bool:
    if is_blank(filter_text):
        return True
    if not has_text(filter_text):
        return False
    return apply_strategy(select_strategy(filter_text, table), value, filter_text)


def matches_filters(record: CatalogRecord, filters: AdvancedSearchFilters) -> bool:
    """
    Check a record against every supplied structured filter.

    Filters are combined with AND; a record missing a filtered field is
    excluded by that filter.
    """
    return (
        _field_passes(record.title, filters.title, TITLE_STRATEGIES)
        and _field_passes(record.author, filters.author, AUTHOR_STRATEGIES)
        and _field_passes(record.category, filters.category, CATEGORY_STRATEGIES)
    )
