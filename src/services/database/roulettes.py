"""
RouletteBot - Roulettes Database Mixin
======================================

Database operations for roulette option lists.

Author: حَـــــنَّـــــا
"""

import json
import sqlite3
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.logger import log

from .core import storable_id


@dataclass(frozen=True)
class Roulette:
    """A stored list of drawable options."""

    id: int
    items: Tuple[str, ...]

    @property
    def item_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Roulette":
        return cls(id=row["id"], items=tuple(json.loads(row["items"] or "[]")))


class RoulettesMixin:
    """Mixin for roulette database operations."""

    def create_roulette(self, items: List[str]) -> Roulette:
        """
        Insert a roulette and return it with its assigned ID.

        The list is stored as given; emptiness is checked by the service.
        """
        with self._get_conn() as conn:
            cursor = conn.execute(
                "INSERT INTO roulettes (items, created_at) VALUES (?, ?)",
                (json.dumps(list(items), ensure_ascii=False), int(time.time()))
            )
            roulette = Roulette(id=cursor.lastrowid, items=tuple(items))

        log.tree("Roulette Created", [
            ("ID", str(roulette.id)),
            ("Options", str(roulette.item_count)),
        ], emoji="🎰")
        return roulette

    def get_roulette(self, roulette_id: int) -> Optional[Roulette]:
        """Get roulette by ID."""
        if not storable_id(roulette_id):
            return None
        with self._get_conn() as conn:
            row = conn.execute(
                "SELECT id, items FROM roulettes WHERE id = ?",
                (roulette_id,)
            ).fetchone()
            return Roulette.from_row(row) if row else None

    def get_all_roulettes(self) -> List[Roulette]:
        """Get every roulette in creation order."""
        with self._get_conn() as conn:
            rows = conn.execute("SELECT id, items FROM roulettes ORDER BY id ASC").fetchall()
            return [Roulette.from_row(row) for row in rows]

    def delete_roulette(self, roulette_id: int) -> bool:
        """
        Delete a roulette.

        Groups referencing it are left untouched.

        Returns:
            True if a roulette was deleted.
        """
        if not storable_id(roulette_id):
            return False
        with self._get_conn() as conn:
            cursor = conn.execute("DELETE FROM roulettes WHERE id = ?", (roulette_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            log.tree("Roulette Deleted", [
                ("ID", str(roulette_id)),
            ], emoji="🗑️")
        return deleted
