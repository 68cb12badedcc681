"""History API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from pipelint.db.database import Database
from pipelint.db.models import LintRunRecord
from pipelint.deps import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["history"])


class HistoryListItem(BaseModel):
    id: str
    repository: str = ""
    trusted: bool = False
    valid: bool = True
    created_at: str = ""


class HistoryListResponse(BaseModel):
    items: list[HistoryListItem]
    total: int


@router.get("/history", response_model=HistoryListResponse)
async def list_history(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Database = Depends(get_database),
) -> HistoryListResponse:
    """List lint runs, newest first."""
    async with db.conn.execute(
        "SELECT COUNT(*) as cnt FROM lint_runs"
    ) as cursor:
        row = await cursor.fetchone()
        total = row["cnt"]

    async with db.conn.execute(
        "SELECT id, repository, trusted, valid, created_at "
        "FROM lint_runs ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?",
        (limit, offset),
    ) as cursor:
        rows = await cursor.fetchall()

    items = [
        HistoryListItem(
            id=r["id"],
            repository=r["repository"] or "",
            trusted=bool(r["trusted"]),
            valid=bool(r["valid"]),
            created_at=r["created_at"],
        )
        for r in rows
    ]
    return HistoryListResponse(items=items, total=total)


@router.get("/history/{run_id}", response_model=LintRunRecord)
async def get_history_item(
    run_id: str,
    db: Database = Depends(get_database),
) -> LintRunRecord:
    """Get a single lint run."""
    async with db.conn.execute(
        "SELECT * FROM lint_runs WHERE id = ?", (run_id,)
    ) as cursor:
        row = await cursor.fetchone()

    if not row:
        raise HTTPException(status_code=404, detail="Lint run not found")

    return LintRunRecord(**dict(row))


@router.delete("/history/{run_id}")
async def delete_history_item(
    run_id: str,
    db: Database = Depends(get_database),
) -> dict:
    """Delete a lint run."""
    cursor = await db.conn.execute("DELETE FROM lint_runs WHERE id = ?", (run_id,))
    await db.conn.commit()
    if cursor.rowcount == 0:
        raise HTTPException(status_code=404, detail="Lint run not found")
    return {"deleted": True}
