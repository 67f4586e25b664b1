"""Cache of suggested missing items keyed by lower-cased search term.

Records are shared across users: only the term, its search URL and an
optional image are stored, never the user-specific rationale. Store failures
are logged and read as "nothing cached".
"""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional

from models.gap_suggestion import MissingItemRecord, build_search_url

logger = logging.getLogger(__name__)


class MissingItemCache:
    """Upsert/query interface for cached missing-item lookups."""

    def cache_missing_item(self, term: str, image_url: Optional[str] = None) -> Optional[MissingItemRecord]:
        raise NotImplementedError

    def get_cached_missing_items(self, terms: Iterable[str]) -> List[MissingItemRecord]:
        raise NotImplementedError


class SQLiteMissingItemCache(MissingItemCache):
    """SQLite-backed missing-item cache."""

    def __init__(self, database_path: str | Path = "data/missing_items.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS missing_items (
                    term TEXT PRIMARY KEY,
                    image_url TEXT,
                    search_url TEXT NOT NULL
                );
                """
            )

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> MissingItemRecord:
        return MissingItemRecord(term=row["term"], search_url=row["search_url"], image_url=row["image_url"])

    def cache_missing_item(self, term: str, image_url: Optional[str] = None) -> Optional[MissingItemRecord]:
        if not term or not term.strip():
            return None
        record = MissingItemRecord(term=term.lower(), search_url=build_search_url(term), image_url=image_url)
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO missing_items (term, image_url, search_url) VALUES (?, ?, ?)
                    ON CONFLICT(term) DO UPDATE SET
                        image_url = excluded.image_url,
                        search_url = excluded.search_url
                    """,
                    (record.term, record.image_url, record.search_url),
                )
        except sqlite3.Error as exc:
            logger.error("Error caching missing item %s: %s", record.term, exc)
            return None
        return record

    def get_cached_missing_items(self, terms: Iterable[str]) -> List[MissingItemRecord]:
        keys = sorted({term.lower() for term in terms or [] if term})
        if not keys:
            return []
        placeholders = ", ".join("?" for _ in keys)
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    f"SELECT * FROM missing_items WHERE term IN ({placeholders}) ORDER BY term",
                    keys,
                ).fetchall()
        except sqlite3.Error as exc:
            logger.error("Error fetching cached missing items: %s", exc)
            return []
        return [self._row_to_record(row) for row in rows]


__all__ = ["MissingItemCache", "SQLiteMissingItemCache"]
