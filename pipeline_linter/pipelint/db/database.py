"""SQLite storage for lint runs via aiosqlite."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)


def _get_db_path() -> str:
    """Return the database file path (explicit, dev mode, or production)."""
    explicit = os.environ.get("PIPELINT_DB_PATH")
    if explicit:
        return explicit
    if os.environ.get("PIPELINT_DEV_MODE", "").lower() == "true":
        db_dir = Path(__file__).resolve().parent.parent.parent.parent / "data"
        db_dir.mkdir(exist_ok=True)
        return str(db_dir / "pipelint.db")
    db_dir = Path("/data")
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "pipelint.db")


SCHEMA_VERSION = 2

MIGRATIONS: dict[int, list[str]] = {
    1: [
        """
        CREATE TABLE IF NOT EXISTS lint_runs (
            id              TEXT PRIMARY KEY,
            repository      TEXT DEFAULT '',
            trusted         INTEGER NOT NULL DEFAULT 0,
            valid           INTEGER NOT NULL DEFAULT 1,
            yaml_input      TEXT NOT NULL,
            result_json     TEXT NOT NULL DEFAULT '{}',
            created_at      TEXT NOT NULL DEFAULT (datetime('now'))
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS schema_version (
            version INTEGER NOT NULL
        )
        """,
        "INSERT INTO schema_version (version) VALUES (1)",
    ],
    2: [
        "CREATE INDEX IF NOT EXISTS idx_lint_runs_created ON lint_runs (created_at)",
        "UPDATE schema_version SET version = 2",
    ],
}


class Database:
    """Async SQLite wrapper with migration support."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or _get_db_path()
        self._conn: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Open the database connection and run pending migrations."""
        self._conn = await aiosqlite.connect(self._db_path)
        self._conn.row_factory = aiosqlite.Row
        await self._conn.execute("PRAGMA journal_mode=WAL")
        await self._run_migrations()

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    @property
    def conn(self) -> aiosqlite.Connection:
        """Return the active connection (asserts it exists)."""
        assert self._conn is not None, "Database not connected"
        return self._conn

    async def _current_version(self) -> int:
        async with self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        ) as cursor:
            if await cursor.fetchone() is None:
                return 0
        async with self.conn.execute(
            "SELECT version FROM schema_version LIMIT 1"
        ) as cursor:
            row = await cursor.fetchone()
            return row["version"] if row else 0

    async def _run_migrations(self) -> None:
        """Apply any pending schema migrations."""
        current = await self._current_version()
        for version in sorted(MIGRATIONS.keys()):
            if version > current:
                for sql in MIGRATIONS[version]:
                    await self.conn.execute(sql)
                await self.conn.commit()
                logger.info("Applied database migration v%d", version)
