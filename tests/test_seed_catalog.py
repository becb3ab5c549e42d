"""
Tests for the catalog seeding script.
"""

import json
from datetime import datetime
from decimal import Decimal

from scripts.seed_catalog import load_records, main
from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository


def _write_books(path, books):
    path.write_text(json.dumps(books), encoding="utf-8")
    return path


def test_load_records_parses_types(tmp_path):
    input_path = _write_books(tmp_path / "books.json", [
        {
            "title": "Effective Java",
            "author": "Joshua Bloch",
            "price": 89.5,
            "favorite_count": 80,
            "last_updated": "2024-01-02T03:04:05",
        },
        {"title": "Sparse"},
    ])

    records = load_records(input_path)

    assert records[0].id is None
    assert records[0].price == Decimal("89.5")
    assert records[0].last_updated == datetime(2024, 1, 2, 3, 4, 5)
    assert records[1].price is None
    assert records[1].favorite_count is None


def test_main_saves_every_record(tmp_path):
    input_path = _write_books(tmp_path / "books.json", [
        {"title": "One"},
        {"title": "Two", "favorite_count": 3},
    ])
    db_path = tmp_path / "catalog.db"

    saved = main(input_path, db_path)

    repo = SqliteBookCatalogRepository(db_path)
    assert saved == 2
    assert sorted(r.title for r in repo.snapshot()) == ["One", "Two"]
