"""
RouletteBot - Roulette Groups Database Mixin
============================================

Database operations for named roulette groups.

Author: حَـــــنَّـــــا
"""

import json
import sqlite3
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.errors import ConflictError
from src.core.logger import log

from .core import storable_id


@dataclass(frozen=True)
class RouletteGroup:
    """A named collection of roulette IDs."""

    id: int
    name: str
    items: Tuple[int, ...]

    @property
    def item_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "RouletteGroup":
        return cls(
            id=row["id"],
            name=row["name"],
            items=tuple(int(i) for i in json.loads(row["items"] or "[]")),
        )


class GroupsMixin:
    """Mixin for roulette group database operations."""

    def create_group(self, name: str, roulette_ids: List[int]) -> RouletteGroup:
        """
        Insert a roulette group and return it with its assigned ID.

        IDs are stored in the given order, repeats included.

        Raises:
            ConflictError: If the unique name index rejects the insert.
        """
        try:
            with self._get_conn() as conn:
                cursor = conn.execute(
                    "INSERT INTO roulette_groups (name, items, created_at) VALUES (?, ?, ?)",
                    (name, json.dumps(list(roulette_ids)), int(time.time()))
                )
                group = RouletteGroup(id=cursor.lastrowid, name=name, items=tuple(roulette_ids))
        except sqlite3.IntegrityError:
            log.tree("Roulette Group Create Rejected", [
                ("Name", name[:50]),
                ("Reason", "Name taken"),
            ], emoji="⚠️")
            raise ConflictError(f"A roulette group named `{name}` already exists.")

        log.tree("Roulette Group Created", [
            ("ID", str(group.id)),
            ("Name", name[:50]),
            ("Roulettes", ", ".join(str(i) for i in roulette_ids)[:100]),
        ], emoji="📦")
        return group

    def get_group_by_id(self, group_id: int) -> Optional[RouletteGroup]:
        """Get roulette group by ID."""
        if not storable_id(group_id):
            return None
        with self._get_conn() as conn:
            row = conn.execute(
                "SELECT id, name, items FROM roulette_groups WHERE id = ?",
                (group_id,)
            ).fetchone()
            return RouletteGroup.from_row(row) if row else None

    def get_group_by_name(self, name: str) -> Optional[RouletteGroup]:
        """Get roulette group by exact name. Oldest match wins if duplicates exist."""
        with self._get_conn() as conn:
            row = conn.execute(
                "SELECT id, name, items FROM roulette_groups WHERE name = ? ORDER BY id ASC LIMIT 1",
                (name,)
            ).fetchone()
            return RouletteGroup.from_row(row) if row else None

    def get_all_groups(self) -> List[RouletteGroup]:
        """Get every roulette group in creation order."""
        with self._get_conn() as conn:
            rows = conn.execute(
                "SELECT id, name, items FROM roulette_groups ORDER BY id ASC"
            ).fetchall()
            return [RouletteGroup.from_row(row) for row in rows]

    def delete_group(self, group_id: int) -> bool:
        """
        Delete a roulette group. The roulettes it references are kept.

        Returns:
            True if a group was deleted.
        """
        if not storable_id(group_id):
            return False
        with self._get_conn() as conn:
            cursor = conn.execute("DELETE FROM roulette_groups WHERE id = ?", (group_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            log.tree("Roulette Group Deleted", [
                ("ID", str(group_id)),
            ], emoji="🗑️")
        return deleted
