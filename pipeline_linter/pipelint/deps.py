"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pipelint.db.database import Database

_database: Database | None = None
_options: dict[str, Any] = {}


def get_database() -> Database:
    """FastAPI dependency: return the shared Database."""
    assert _database is not None, "Database not initialised"
    return _database


def get_trusted_patterns() -> list[str]:
    """FastAPI dependency: return the configured trusted repository patterns."""
    return list(_options.get("trusted_repositories", []))
