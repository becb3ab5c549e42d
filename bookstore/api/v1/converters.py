"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from dataclasses import asdict

from bookstore.domain import entities as domain
from bookstore.domain import value_objects as domain_vo
from bookstore.api.v1 import schemas as api


def domain_record_to_api(record: domain.CatalogRecord) -> api.BookResponse:
    """
    Convert a domain CatalogRecord entity to an API BookResponse model.

    Args:
        record: Domain CatalogRecord entity

    Returns:
        API BookResponse model
    """
    return api.BookResponse(**asdict(record))


def domain_page_to_api(result: domain.PagedResult) -> api.PagedBooksResponse:
    """
    Convert a domain PagedResult to an API PagedBooksResponse model.

    Args:
        result: Domain PagedResult

    Returns:
        API PagedBooksResponse model
    """
    return api.PagedBooksResponse(
        records=[domain_record_to_api(r) for r in result.records],
        page=result.page,
        size=result.size,
        total=result.total,
        pages=result.pages,
    )


def api_filters_to_domain(
    request: api.AdvancedSearchRequest,
) -> domain_vo.AdvancedSearchFilters:
    """
    Convert an API AdvancedSearchRequest to domain AdvancedSearchFilters.

    Args:
        request: API AdvancedSearchRequest model

    Returns:
        Domain AdvancedSearchFilters value object
    """
    return domain_vo.AdvancedSearchFilters(
        title=request.title,
        author=request.author,
        category=request.category,
    )


def api_sort_type_to_domain(
    request: api.FavoriteRankedSearchRequest,
) -> domain_vo.SortDirection:
    """
    Read the sort direction of a favorite-ranked search request.

    Args:
        request: API FavoriteRankedSearchRequest model

    Returns:
        Domain SortDirection (descending unless 'asc' was asked for)
    """
    return domain_vo.SortDirection.parse(request.sort_type)
