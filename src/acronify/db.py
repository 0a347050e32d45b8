"""
Database module for Acronify.

SQLite-backed named slots. Each slot holds one text value, read and written
whole, like a browser's localStorage.
"""

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from acronify.config import get_db_path

# Schema version for migrations
SCHEMA_VERSION = 1

SCHEMA = """
-- Schema version tracking
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

-- Named slots, one JSON document each
CREATE TABLE IF NOT EXISTS slots (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL                -- ISO 8601
);
"""


class Database:
    """SQLite slot storage for Acronify."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Ensure database exists and schema is current."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA)
            # Set schema version
            conn.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (SCHEMA_VERSION,)
            )

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_item(self, key: str) -> str | None:
        """Read a slot. Returns None if the slot was never written."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM slots WHERE key = ?", (key,)
            ).fetchone()
            if row:
                return row["value"]
        return None

    def set_item(self, key: str, value: str) -> None:
        """Overwrite a slot."""
        now = datetime.now(timezone.utc).isoformat()

        with self._connect() as conn:
            conn.execute("""
                INSERT INTO slots (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (key, value, now))

    def get_stats(self) -> dict[str, Any]:
        """Get database statistics."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT key, LENGTH(value) AS size, updated_at FROM slots ORDER BY key"
            ).fetchall()

            return {
                "total_slots": len(rows),
                "slots": {row["key"]: {"size": row["size"], "updated_at": row["updated_at"]} for row in rows},
            }
