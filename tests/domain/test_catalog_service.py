"""
Tests for CatalogQueryService.

Uses a fake repository with spy capabilities to verify that each query
takes a single snapshot and that counter updates are written back only
when the value actually moved.
"""

import pytest
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from bookstore.domain.entities import CatalogRecord, PagedResult
from bookstore.domain.services import CatalogQueryService
from bookstore.domain.services.catalog_query import UNKNOWN_AUTHOR


# =============================================================================
# Fake implementations for testing
# =============================================================================


class FakeBookCatalogRepository:
    """Fake catalog repository with spy capabilities."""

    def __init__(
        self,
        initial_records: Optional[List[CatalogRecord]] = None,
        persist_succeeds: bool = True,
    ):
        self._records: Dict[int, CatalogRecord] = {}
        for record in initial_records or []:
            self._records[record.id] = record
        self._persist_succeeds = persist_succeeds

        # Spy tracking
        self.snapshot_calls: int = 0
        self.find_by_id_calls: List[int] = []
        self.persist_calls: List[CatalogRecord] = []
        self.find_page_calls: List[dict] = []

    def snapshot(self) -> List[CatalogRecord]:
        self.snapshot_calls += 1
        return list(self._records.values())

    def find_by_id(self, book_id: int) -> Optional[CatalogRecord]:
        self.find_by_id_calls.append(book_id)
        return self._records.get(book_id)

    def persist(self, record: CatalogRecord) -> bool:
        self.persist_calls.append(record)
        if not self._persist_succeeds or record.id not in self._records:
            return False
        self._records[record.id] = record
        return True

    def find_page(self, page: int, size: int, query: Optional[str] = None) -> PagedResult:
        self.find_page_calls.append({"page": page, "size": size, "query": query})
        records = list(self._records.values())
        return PagedResult(records=records[:size], page=page, size=size, total=len(records))

    def save(self, record: CatalogRecord) -> CatalogRecord:
        self._records[record.id] = record
        return record

    def count(self) -> int:
        return len(self._records)

    def delete(self, book_id: int) -> bool:
        return self._records.pop(book_id, None) is not None


# =============================================================================
# Fixtures
# =============================================================================

BASE_TIME = datetime(2024, 6, 1)


@pytest.fixture
def records():
    return [
        CatalogRecord(id=1, title="Java Basics", author="Ann", category="Programming",
                      favorite_count=100, last_updated=BASE_TIME),
        CatalogRecord(id=2, title="Effective Java", author="Joshua Bloch", category="Programming",
                      favorite_count=80, last_updated=BASE_TIME + timedelta(days=1)),
        CatalogRecord(id=3, title="Nameless", author="", category=None,
                      price=None, favorite_count=None),
        CatalogRecord(id=4, title="Saturated", favorite_count=1000),
        CatalogRecord(id=5, title="Nobody likes me", favorite_count=0),
        CatalogRecord(id=6, title="Almost there", favorite_count=999),
    ]


@pytest.fixture
def repo(records):
    return FakeBookCatalogRepository(records)


@pytest.fixture
def service(repo):
    return CatalogQueryService(catalog_repo=repo)


# =============================================================================
# Query operations
# =============================================================================


class TestQueries:
    """Tests for the read operations."""

    def test_list_all_uses_one_snapshot(self, service, repo):
        result = service.list_all("java")

        assert [r.id for r in result] == [2, 1]
        assert repo.snapshot_calls == 1

    def test_list_paged_delegates_to_store(self, service, repo):
        result = service.list_paged(2, 3, "java")

        assert repo.find_page_calls == [{"page": 2, "size": 3, "query": "java"}]
        assert repo.snapshot_calls == 0
        assert result.size == 3

    def test_advanced_search(self, service, repo):
        result = service.advanced_search(title="Effective", author="bloch", page=1, size=10)

        assert [r.id for r in result.records] == [2]
        assert repo.snapshot_calls == 1

    def test_search_ranked_by_favorites_with_string_direction(self, service):
        result = service.search_ranked_by_favorites(1, 2, "java", "asc")

        assert [r.id for r in result.records] == [2, 1]
        assert result.total == 2

    def test_search_ranked_by_favorites_defaults_to_descending(self, service):
        result = service.search_ranked_by_favorites(1, 10, "java", None)

        assert [r.id for r in result.records] == [1, 2]

    def test_list_all_ranked_by_favorites(self, service):
        result = service.list_all_ranked_by_favorites("java", "desc")

        assert [r.title for r in result] == ["Java Basics", "Effective Java"]


class TestGetDetail:
    """Tests for detail lookup through the repository."""

    @pytest.mark.parametrize("book_id", [None, 0, -3])
    def test_invalid_ids_skip_the_store(self, service, repo, book_id):
        assert service.get_detail(book_id) is None
        assert repo.find_by_id_calls == []

    def test_missing_id(self, service, repo):
        assert service.get_detail(404) is None
        assert repo.find_by_id_calls == [404]

    def test_normalized_copy(self, service, repo):
        detail = service.get_detail(3)

        assert detail.author == UNKNOWN_AUTHOR
        assert detail.price == Decimal("0.00")
        assert repo.find_by_id(3).author == ""


# =============================================================================
# Counter operations
# =============================================================================


class TestIncrementFavoriteCount:
    """Tests for the increment boundary contract."""

    @pytest.mark.parametrize("book_id", [None, 0, -1])
    def test_invalid_id(self, service, repo, book_id):
        assert service.increment_favorite_count(book_id) is False
        assert repo.persist_calls == []

    def test_missing_record(self, service, repo):
        assert service.increment_favorite_count(99999) is False
        assert repo.persist_calls == []

    def test_normal_increment_persists(self, service, repo):
        assert service.increment_favorite_count(2) is True

        assert repo.find_by_id(2).favorite_count == 81
        assert len(repo.persist_calls) == 1

    def test_unset_counter_becomes_one(self, service, repo):
        assert service.increment_favorite_count(3) is True
        assert repo.find_by_id(3).favorite_count == 1

    def test_999_reaches_ceiling(self, service, repo):
        assert service.increment_favorite_count(6) is True
        assert repo.find_by_id(6).favorite_count == 1000

    def test_at_ceiling_fails_without_write(self, service, repo):
        assert service.increment_favorite_count(4) is False

        assert repo.find_by_id(4).favorite_count == 1000
        assert repo.persist_calls == []

    def test_failed_persist_is_reported(self, records):
        repo = FakeBookCatalogRepository(records, persist_succeeds=False)
        service = CatalogQueryService(catalog_repo=repo)

        assert service.increment_favorite_count(2) is False
        assert len(repo.persist_calls) == 1

    def test_snapshot_record_is_not_mutated(self, service, repo, records):
        service.increment_favorite_count(1)

        assert records[0].favorite_count == 100
        assert repo.find_by_id(1).favorite_count == 101


class TestDecrementFavoriteCount:
    """Tests for the decrement boundary contract."""

    @pytest.mark.parametrize("book_id", [None, 0, -1])
    def test_invalid_id(self, service, book_id):
        assert service.decrement_favorite_count(book_id) is False

    def test_missing_record(self, service):
        assert service.decrement_favorite_count(99999) is False

    def test_positive_counter_decrements(self, service, repo):
        assert service.decrement_favorite_count(2) is True
        assert repo.find_by_id(2).favorite_count == 79

    def test_unset_counter_is_repaired(self, service, repo):
        assert service.decrement_favorite_count(3) is True

        assert repo.find_by_id(3).favorite_count == 0
        assert len(repo.persist_calls) == 1

    def test_zero_counter_succeeds_without_write(self, service, repo):
        assert service.decrement_favorite_count(5) is True

        assert repo.find_by_id(5).favorite_count == 0
        assert repo.persist_calls == []


class TestApplyFavoriteDelta:
    """Tests for the FavoriteCountDelta callback."""

    def test_plus_one_increments(self, service, repo):
        assert service.apply_favorite_delta(1, 1) is True
        assert repo.find_by_id(1).favorite_count == 101

    def test_minus_one_decrements(self, service, repo):
        assert service.apply_favorite_delta(1, -1) is True
        assert repo.find_by_id(1).favorite_count == 99

    @pytest.mark.parametrize("delta", [0, 2, -2])
    def test_other_deltas_are_refused(self, service, repo, delta):
        assert service.apply_favorite_delta(1, delta) is False
        assert repo.persist_calls == []

    def test_usable_as_plain_callable(self, service, repo):
        """Test that the bound method can be handed to favorite bookkeeping as a callback."""
        callback = service.apply_favorite_delta

        results = [callback(2, 1), callback(2, 1), callback(2, -1)]

        assert results == [True, True, True]
        assert repo.find_by_id(2).favorite_count == 81

    def test_repeated_favorites_stop_at_ceiling(self, records):
        repo = FakeBookCatalogRepository([replace(records[5])])
        service = CatalogQueryService(catalog_repo=repo)

        assert service.apply_favorite_delta(6, 1) is True
        assert service.apply_favorite_delta(6, 1) is False
        assert repo.find_by_id(6).favorite_count == 1000
