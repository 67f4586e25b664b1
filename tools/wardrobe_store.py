"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List, Optional

from engine_app.errors import StoreUnavailableError
from models.garment import Garment
from tools.observability import instrument_operation


class WardrobeStore:
    """Read/write interface for a user's garments."""

    def add_garment(self, user_id: str, garment: Garment) -> Garment:
        raise NotImplementedError

    def get_garment(self, user_id: str, item_id: str) -> Optional[Garment]:
        raise NotImplementedError

    def list_garments(self, user_id: str) -> List[Garment]:
        raise NotImplementedError

    def delete_garment(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for classified garments."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
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
                CREATE TABLE IF NOT EXISTS garments (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    title TEXT,
                    color TEXT,
                    slot TEXT,
                    style TEXT,
                    source TEXT,
                    image_url TEXT,
                    PRIMARY KEY (user_id, item_id)
                );
                """
            )

    @staticmethod
    def _row_to_garment(row: sqlite3.Row) -> Garment:
        return Garment(
            item_id=row["item_id"],
            title=row["title"] or "",
            color=row["color"] or "",
            slot=row["slot"] or "",
            style=row["style"],
            source=row["source"],
            image_url=row["image_url"],
        )

    @instrument_operation("add_garment")
    def add_garment(self, user_id: str, garment: Garment) -> Garment:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO garments (
                        user_id, item_id, title, color, slot, style, source, image_url
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user_id,
                        garment.item_id,
                        garment.title,
                        garment.color,
                        garment.slot,
                        garment.style,
                        garment.source.value,
                        garment.image_url,
                    ),
                )
        except sqlite3.Error as exc:
            raise StoreUnavailableError(f"Could not store garment {garment.item_id}: {exc}") from exc
        return garment

    def get_garment(self, user_id: str, item_id: str) -> Optional[Garment]:
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT * FROM garments WHERE user_id = ? AND item_id = ?",
                    (user_id, item_id),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreUnavailableError(f"Could not read garment {item_id}: {exc}") from exc
        return self._row_to_garment(row) if row else None

    @instrument_operation("list_garments")
    def list_garments(self, user_id: str) -> List[Garment]:
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT * FROM garments WHERE user_id = ? ORDER BY item_id",
                    (user_id,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreUnavailableError(f"Could not list wardrobe: {exc}") from exc
        return [self._row_to_garment(row) for row in rows]

    def delete_garment(self, user_id: str, item_id: str) -> bool:
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    "DELETE FROM garments WHERE user_id = ? AND item_id = ?",
                    (user_id, item_id),
                )
        except sqlite3.Error as exc:
            raise StoreUnavailableError(f"Could not delete garment {item_id}: {exc}") from exc
        return cursor.rowcount > 0


__all__ = ["WardrobeStore", "SQLiteWardrobeStore"]
