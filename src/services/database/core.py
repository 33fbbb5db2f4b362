"""
RouletteBot - Database Core
===========================

Base database class with connection management and table initialization.

Author: حَـــــنَّـــــا
"""

import os
import shutil
import sqlite3
import time
from contextlib import contextmanager
from typing import Generator, Optional

from src.core.config import config
from src.core.constants import SQLITE_MAX_INTEGER
from src.core.logger import logger


# Substrings of sqlite3 error messages that mean the file itself is damaged
CORRUPTION_MARKERS = (
    "disk i/o error",
    "database disk image is malformed",
    "file is not a database",
    "file is encrypted",
    "unable to open database",
)


def storable_id(value: int) -> bool:
    """True if value is a positive id that fits an SQLite INTEGER."""
    return 0 < value <= SQLITE_MAX_INTEGER


class DatabaseUnavailableError(Exception):
    """Raised when the database is unhealthy and operations cannot proceed."""
    pass


class DatabaseCore:
    """Base database class with connection management."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        """Initialize database connection and create tables if needed."""
        self.db_path = db_path or config.DATABASE_PATH
        self._healthy = True
        self._corruption_reason: Optional[str] = None
        self._init_db()

    @property
    def is_healthy(self) -> bool:
        """Check if database is healthy and operational."""
        return self._healthy

    @property
    def corruption_reason(self) -> Optional[str]:
        """Get the reason for database corruption if unhealthy."""
        return self._corruption_reason

    def require_healthy(self) -> None:
        """Raise RuntimeError if database is unhealthy.

        Use this at service startup to fail fast if DB is corrupted.
        """
        if not self._healthy:
            raise RuntimeError(
                f"Database is unhealthy: {self._corruption_reason or 'Unknown error'}. "
                "Manual intervention required - check logs for backup location."
            )

    def _check_integrity(self) -> bool:
        """Check database integrity. Returns True if healthy."""
        try:
            conn = sqlite3.connect(self.db_path, timeout=10.0)
            try:
                result = conn.execute("PRAGMA integrity_check").fetchone()
            finally:
                conn.close()
            return result[0] == "ok"
        except sqlite3.DatabaseError as e:
            logger.error_tree("DB Integrity Check Failed", e)
            return False

    def _backup_corrupted(self) -> None:
        """Backup corrupted database file."""
        backup_path = f"{self.db_path}.corrupted.{int(time.time())}"
        try:
            shutil.copy2(self.db_path, backup_path)
            logger.tree("Corrupted DB Backed Up", [
                ("Backup", backup_path),
            ], emoji="💾")
        except OSError as e:
            logger.error_tree("DB Backup Failed", e)

    @contextmanager
    def _get_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get database connection context manager.

        Commits on success. Errors are logged and re-raised so the
        command layer can report them.

        Raises:
            DatabaseUnavailableError: If the database is unhealthy.
        """
        if not self._healthy:
            logger.tree("Database Unhealthy", [
                ("Status", "Operation rejected"),
                ("Reason", self._corruption_reason or "Unknown"),
            ], emoji="⚠️")
            raise DatabaseUnavailableError(
                f"Database is unavailable: {self._corruption_reason or 'unhealthy'}"
            )

        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=10.0)
            conn.row_factory = sqlite3.Row
            yield conn
            conn.commit()
        except sqlite3.DatabaseError as e:
            error_msg = str(e).lower()
            if any(marker in error_msg for marker in CORRUPTION_MARKERS):
                self._healthy = False
                self._corruption_reason = str(e)
                logger.error_tree("Database Corruption Detected", e)
                self._backup_corrupted()
            elif not isinstance(e, sqlite3.IntegrityError):
                # IntegrityError is expected for UNIQUE violations; callers translate it
                logger.tree("Database Error", [
                    ("Type", type(e).__name__),
                    ("Message", str(e)[:100]),
                ], emoji="⚠️")
            raise
        finally:
            if conn:
                conn.close()

    def _init_db(self) -> None:
        """Initialize database tables."""
        logger.tree("Database Init", [
            ("Path", self.db_path),
            ("Status", "Starting"),
        ], emoji="🗄️")

        # Check integrity on startup
        if os.path.exists(self.db_path) and not self._check_integrity():
            self._corruption_reason = "PRAGMA integrity_check failed on startup"
            logger.tree("DATABASE CORRUPTION DETECTED", [
                ("Path", self.db_path),
                ("Status", "INTEGRITY CHECK FAILED"),
                ("Action", "Creating backup - MANUAL INTERVENTION REQUIRED"),
            ], emoji="🚨")
            self._backup_corrupted()
            self._healthy = False
            logger.tree("MANUAL FIX REQUIRED", [
                ("Backup", f"{self.db_path}.corrupted.*"),
                ("Action", "Restore from backup or delete roulette.db to recreate"),
                ("Warning", "Roulette commands will not work until database is fixed"),
            ], emoji="⚠️")
            return

        with self._get_conn() as conn:
            cur = conn.cursor()

            # =====================================================================
            # Roulette Tables
            # =====================================================================

            # items: JSON list of option strings
            cur.execute("""
                CREATE TABLE IF NOT EXISTS roulettes (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    items TEXT NOT NULL DEFAULT '[]',
                    created_at INTEGER DEFAULT 0
                )
            """)

            # items: JSON list of roulette ids (not foreign keys, may dangle)
            cur.execute("""
                CREATE TABLE IF NOT EXISTS roulette_groups (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    items TEXT NOT NULL DEFAULT '[]',
                    created_at INTEGER DEFAULT 0
                )
            """)

            # =====================================================================
            # Migrations Table
            # =====================================================================

            cur.execute("""
                CREATE TABLE IF NOT EXISTS migrations (
                    name TEXT PRIMARY KEY,
                    applied_at INTEGER NOT NULL
                )
            """)

            # Run one-time migrations
            self._run_migrations(cur)

            logger.tree("Database Initialized", [
                ("Tables", "All created/verified"),
                ("Status", "Ready"),
            ], emoji="✅")

    def _run_migrations(self, cur: sqlite3.Cursor) -> None:
        """Run one-time schema migrations."""
        cur.execute("SELECT name FROM migrations")
        applied = {row[0] for row in cur.fetchall()}

        if "roulette_groups_unique_name" not in applied:
            if self._migrate_unique_group_names(cur):
                cur.execute(
                    "INSERT INTO migrations (name, applied_at) VALUES (?, ?)",
                    ("roulette_groups_unique_name", int(time.time()))
                )

    def _migrate_unique_group_names(self, cur: sqlite3.Cursor) -> bool:
        """
        Add a UNIQUE index on roulette_groups.name.

        Older databases may already hold duplicate names. In that case the
        index cannot be built, the migration stays pending, and name
        uniqueness is only enforced by the pre-insert lookup.

        Returns:
            True if the index exists after this call.
        """
        try:
            cur.execute("""
                CREATE UNIQUE INDEX IF NOT EXISTS idx_roulette_groups_name
                ON roulette_groups(name)
            """)
        except sqlite3.IntegrityError as e:
            logger.tree("Group Name Index Skipped", [
                ("Reason", "Duplicate group names already stored"),
                ("Error", str(e)[:100]),
                ("Action", "Delete duplicate groups, then restart"),
            ], emoji="⚠️")
            return False

        logger.tree("Group Name Index Created", [
            ("Migration", "roulette_groups_unique_name"),
        ], emoji="🔄")
        return True
