"""
SQLite implementation of the BookCatalogRepository port.

This adapter persists CatalogRecord entities to a SQLite database and
serves the store-backed pagination used by the plain paged listing.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from bookstore.domain.entities import CatalogRecord, PagedResult
from bookstore.domain.ports import BookCatalogRepository

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, title, author, category, description, price, favorite_count, last_updated"
)


class SqliteBookCatalogRepository(BookCatalogRepository):
    """
    Prices are stored as TEXT so Decimal values round-trip exactly.
    Timestamps are stored as ISO-8601 strings; NULL means "never updated".
    """

    def __init__(self, db_path: Path) -> None:
        """
        Initialize the repository with a database path
        """
        self._db_path = db_path
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Create the books table if it doesn't exist."""
        with self._get_connection() as conn:
            conn.execute("""
            CREATE TABLE IF NOT EXISTS books (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT,
                author TEXT,
                category TEXT,
                description TEXT,
                price TEXT,
                favorite_count INTEGER,
                last_updated TEXT
            )
        """)

            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_books_last_updated ON books(last_updated)"
            )
        conn.commit()

    def _record_to_row(self, record: CatalogRecord) -> dict:
        """Convert a CatalogRecord entity to a database row dict."""
        return {
            "id": record.id,
            "title": record.title,
            "author": record.author,
            "category": record.category,
            "description": record.description,
            "price": str(record.price) if record.price is not None else None,
            "favorite_count": record.favorite_count,
            "last_updated": self._format_date(record.last_updated),
        }

    def _format_date(self, value: Optional[datetime]) -> Optional[str]:
        """Render a timestamp for storage; aware values are stored in UTC so the text sorts by instant."""
        if value is None:
            return None
        if value.utcoffset() is not None:
            value = value.astimezone(timezone.utc)
        return value.isoformat()

    def _parse_price_safe(self, price_str: Optional[str]) -> Optional[Decimal]:
        """Parse a stored price, reading unparseable text as absent."""
        if price_str is None:
            return None
        try:
            return Decimal(price_str)
        except InvalidOperation:
            logger.warning(f"Ignoring unparseable price {price_str!r}")
            return None

    def _parse_date_safe(self, date_str: Optional[str]) -> Optional[datetime]:
        """Parse a stored timestamp, reading unparseable text as absent."""
        if not date_str:
            return None
        try:
            return datetime.fromisoformat(date_str)
        except ValueError:
            return None

    def _row_to_record(self, row: sqlite3.Row) -> CatalogRecord:
        """Convert a database row to a CatalogRecord entity."""
        return CatalogRecord(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            category=row["category"],
            description=row["description"],
            price=self._parse_price_safe(row["price"]),
            favorite_count=row["favorite_count"],
            last_updated=self._parse_date_safe(row["last_updated"]),
        )

    def count(self) -> int:
        """Get the total number of records in the catalog."""
        with self._get_connection() as conn:
            result = conn.execute("SELECT COUNT(*) as cnt FROM books").fetchone()
            return result["cnt"]

    def snapshot(self) -> List[CatalogRecord]:
        """Retrieve every record, in id order."""
        with self._get_connection() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM books ORDER BY id").fetchall()
            return [self._row_to_record(row) for row in rows]

    def find_by_id(self, book_id: int) -> Optional[CatalogRecord]:
        """Retrieve a record by its identifier."""
        with self._get_connection() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM books WHERE id = ?",
                (book_id,)
            ).fetchone()

            if row is None:
                return None

            return self._row_to_record(row)

    def find_page(
        self,
        page: int,
        size: int,
        query: Optional[str] = None,
    ) -> PagedResult:
        """
        One page of records matching ``query`` in title, author or category.

        Ordered by last_updated descending; SQLite sorts NULL lowest, so
        undated records come last.
        """
        where = ""
        params: list = []
        if query and query.strip():
            # LIKE is case-insensitive for ASCII in SQLite
            pattern = f"%{_escape_like(query)}%"
            where = (
                "WHERE title LIKE ? ESCAPE '\\' "
                "OR author LIKE ? ESCAPE '\\' "
                "OR category LIKE ? ESCAPE '\\'"
            )
            params = [pattern, pattern, pattern]

        with self._get_connection() as conn:
            total = conn.execute(
                f"SELECT COUNT(*) as cnt FROM books {where}", params
            ).fetchone()["cnt"]

            if page < 1 or size < 1:
                return PagedResult(records=[], page=page, size=size, total=total)

            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM books {where} "
                "ORDER BY last_updated DESC, id ASC LIMIT ? OFFSET ?",
                params + [size, (page - 1) * size],
            ).fetchall()

        records = [self._row_to_record(row) for row in rows]
        return PagedResult(records=records, page=page, size=size, total=total)

    def save(self, record: CatalogRecord) -> CatalogRecord:
        """Insert or replace a record, returning it with its id."""
        row = self._record_to_row(record)

        try:
            with self._get_connection() as conn:
                cursor = conn.execute(f"""
                    INSERT INTO books ({_COLUMNS})
                    VALUES
                    (:id, :title, :author, :category, :description,
                     :price, :favorite_count, :last_updated)
                    ON CONFLICT(id) DO UPDATE SET
                        title=excluded.title,
                        author=excluded.author,
                        category=excluded.category,
                        description=excluded.description,
                        price=excluded.price,
                        favorite_count=excluded.favorite_count,
                        last_updated=excluded.last_updated
                """, row)
                conn.commit()

        except sqlite3.IntegrityError as e:
            raise ValueError(f"Record violates catalog constraints: {e}") from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while saving record: {e}") from e

        if record.id is None:
            record.id = cursor.lastrowid
        return record

    def persist(self, record: CatalogRecord) -> bool:
        """Update an existing record. Returns True if a row was written."""
        if record.id is None:
            return False

        row = self._record_to_row(record)

        try:
            with self._get_connection() as conn:
                cursor = conn.execute("""
                    UPDATE books SET
                        title=:title,
                        author=:author,
                        category=:category,
                        description=:description,
                        price=:price,
                        favorite_count=:favorite_count,
                        last_updated=:last_updated
                    WHERE id = :id
                """, row)
                conn.commit()
                return cursor.rowcount > 0

        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while updating record: {e}") from e

    def delete(self, book_id: int) -> bool:
        """Delete a record from the catalog. Returns True if deleted."""
        with self._get_connection() as conn:
            cursor = conn.execute(
                "DELETE FROM books WHERE id = ?",
                (book_id,)
            )
            conn.commit()
            return cursor.rowcount > 0


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
