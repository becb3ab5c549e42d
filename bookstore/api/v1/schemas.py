"""
Transfer models for callers of the catalog service.

These are the shapes an HTTP controller returns for catalog queries.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookstore import config


class AdvancedSearchRequest(BaseModel):
    """
    Query parameters for structured search.
    """
    title: str | None = Field(default=None, description="Title filter (length picks exact/prefix/substring)")
    author: str | None = Field(default=None, description="Author substring filter")
    category: str | None = Field(default=None, description="Category filter (exact up to 3 chars)")
    page: int = Field(default=1, description="1-based page index")
    size: int = Field(default=config.DEFAULT_PAGE_SIZE, description="Page capacity")


class FavoriteRankedSearchRequest(BaseModel):
    """
    Query parameters for favorite-ranked search.
    """
    query: str | None = Field(default=None, description="Free-text query")
    page: int = Field(default=1, description="1-based page index")
    size: int = Field(default=config.DEFAULT_PAGE_SIZE, description="Page capacity")
    sort_type: str | None = Field(
        default=None,
        description="'asc' for ascending favorite count; anything else is descending",
    )


class BookResponse(BaseModel):
    """
    API representation of a CatalogRecord entity.
    """

    id: int | None = Field(description="Store-assigned identifier")
    title: str | None = Field(default=None, description="Book title")
    author: str | None = Field(default=None, description="Author name(s)")
    category: str | None = Field(default=None, description="Category/genre")
    description: str | None = Field(default=None, description="Book description/summary")
    price: Decimal | None = Field(default=None, description="Unit price")
    favorite_count: int | None = Field(default=None, description="Number of users who favorited this book")
    last_updated: datetime | None = Field(default=None, description="Last modification time")


class PagedBooksResponse(BaseModel):
    """
    One page of books plus the counts needed to render pagination controls.
    """
    records: list[BookResponse] = Field(description="Books on this page")
    page: int = Field(description="Requested 1-based page index")
    size: int = Field(description="Requested page capacity")
    total: int = Field(ge=0, description="Matches across all pages")
    pages: int = Field(ge=0, description="Number of pages for total at this size")
