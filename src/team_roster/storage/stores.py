"""Concrete key-value stores.

Provides a volatile in-memory store for tests/development and a DuckDB-backed
store that persists to a single database file.
"""

import asyncio
import logging
from pathlib import Path

import duckdb

from team_roster.config import Settings
from team_roster.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed store. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


class DuckDBStore:
    """Store backed by a ``kv_store`` table in a DuckDB database file."""

    def __init__(self, database_path: str | Path):
        """Open (or create) the database and ensure the table exists.

        Args:
            database_path: Path to the .duckdb file. Parent directories are
                created if needed.

        Raises:
            OSError: If the database cannot be created or opened
        """
        self._db_path = Path(database_path) if isinstance(database_path, str) else database_path
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

        self._execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key VARCHAR PRIMARY KEY,
                value VARCHAR NOT NULL
            )
        """)
        logger.info(f"DuckDBStore: Using {self._db_path}")

    def _execute(self, sql: str, params: list | None = None) -> list[tuple]:
        """Run one statement on a fresh connection and fetch all rows."""
        try:
            with duckdb.connect(str(self._db_path)) as conn:
                cursor = conn.execute(sql, params) if params else conn.execute(sql)
                return cursor.fetchall()
        except duckdb.Error as e:
            raise OSError(f"DuckDB operation failed on {self._db_path}: {e}") from e

    async def get(self, key: str) -> str | None:
        rows = await asyncio.to_thread(
            self._execute, "SELECT value FROM kv_store WHERE key = ?", [key]
        )
        return rows[0][0] if rows else None

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(
            self._execute, "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)", [key, value]
        )

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._execute, "DELETE FROM kv_store WHERE key = ?", [key])


def create_store(settings: Settings) -> KeyValueStore:
    """Build the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        logger.info("Using MemoryStore")
        return MemoryStore()

    db_path = Path(settings.database_path)
    if not db_path.is_absolute():
        # Relative path - resolve from repo root
        db_path = Path(__file__).parent.parent.parent.parent / db_path
    return DuckDBStore(db_path)
