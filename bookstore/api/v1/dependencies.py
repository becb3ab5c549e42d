"""
Dependency providers for callers of the catalog service.

This module provides singleton instances of the repository and service,
created lazily on first use so importing it has no side effects.
"""

from pathlib import Path
from typing import Optional

from bookstore import config
from bookstore.domain.ports import BookCatalogRepository
from bookstore.domain.services import CatalogQueryService
from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

# Module-level singletons (initialized lazily)
_catalog_repository: Optional[BookCatalogRepository] = None
_catalog_query_service: Optional[CatalogQueryService] = None


def get_catalog_repository(db_path: Optional[Path] = None) -> BookCatalogRepository:
    """Provide a singleton instance of the catalog repository."""
    global _catalog_repository
    if _catalog_repository is None:
        _catalog_repository = SqliteBookCatalogRepository(db_path or config.DB_PATH)
    return _catalog_repository


def get_catalog_query_service() -> CatalogQueryService:
    """Provide the catalog query service with its repository wired."""
    global _catalog_query_service
    if _catalog_query_service is None:
        _catalog_query_service = CatalogQueryService(
            catalog_repo=get_catalog_repository(),
        )
    return _catalog_query_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to point the providers at a temporary database
    by resetting the module state between test cases.
    """
    global _catalog_repository, _catalog_query_service

    _catalog_repository = None
    _catalog_query_service = None
