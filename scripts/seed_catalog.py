#!/usr/bin/env python3
"""
Catalog seeding script.

Loads book records from a JSON file (a list of objects with title, author,
category, description, price, favorite_count and last_updated keys) into
the SQLite catalog.

Usage:
    python -m scripts.seed_catalog --input books.json
    python -m scripts.seed_catalog --input books.json --db-path data/catalog.db
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import List

from bookstore import config
from bookstore.domain.entities import CatalogRecord
from bookstore.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

logger = logging.getLogger(__name__)


def load_records(input_path: Path) -> List[CatalogRecord]:
    """Read records from a JSON file; ids are always assigned by the store."""
    with open(input_path, "r", encoding="utf-8") as f:
        items = json.load(f)

    records = []
    for item in items:
        price = item.get("price")
        last_updated = item.get("last_updated")
        records.append(
            CatalogRecord(
                id=None,
                title=item.get("title"),
                author=item.get("author"),
                category=item.get("category"),
                description=item.get("description"),
                price=Decimal(str(price)) if price is not None else None,
                favorite_count=item.get("favorite_count"),
                last_updated=datetime.fromisoformat(last_updated) if last_updated else None,
            )
        )
    return records


def main(input_path: Path, db_path: Path) -> int:
    """
    Seed the catalog.

    Args:
        input_path: JSON file with book objects
        db_path: SQLite database to write to

    Returns:
        Number of records saved
    """
    logger.info(f"Seeding catalog {db_path} from {input_path}")

    repo = SqliteBookCatalogRepository(db_path)
    records = load_records(input_path)

    for record in records:
        repo.save(record)

    logger.info(f"Saved {len(records)} records (catalog now holds {repo.count()})")
    return len(records)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the bookstore catalog from JSON")
    parser.add_argument("--input", type=Path, required=True, help="JSON file with book objects")
    parser.add_argument("--db-path", type=Path, default=config.DB_PATH, help="SQLite database path")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    args = parser.parse_args()

    config.configure_logging(args.log_level)

    try:
        main(args.input, args.db_path)
    except (OSError, ValueError) as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)
