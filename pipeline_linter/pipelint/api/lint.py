"""POST /api/lint endpoint."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from pipelint.db.database import Database
from pipelint.deps import get_database, get_trusted_patterns
from pipelint.linter import LintResult, lint_document
from pipelint.trust import is_trusted

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lint"])


class LintRequest(BaseModel):
    """Request body for POST /api/lint."""

    yaml: str = Field(..., max_length=1_000_000, description="Pipeline YAML document")
    repository: str = Field("", description="Repository slug, e.g. owner/name")
    trusted: bool | None = Field(
        None, description="Override the trust decision derived from the repository"
    )


class LintResponse(BaseModel):
    """Response body for POST /api/lint."""

    run_id: str
    trusted: bool
    result: LintResult


async def _save_run(
    db: Database, body: LintRequest, trusted: bool, result: LintResult,
) -> str:
    """Persist a lint run and return its id."""
    run_id = uuid.uuid4().hex
    await db.conn.execute(
        """INSERT INTO lint_runs (id, repository, trusted, valid, yaml_input, result_json)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (
            run_id,
            body.repository,
            int(trusted),
            int(result.valid),
            body.yaml,
            result.model_dump_json(),
        ),
    )
    await db.conn.commit()
    return run_id


@router.post("/lint", response_model=LintResponse)
async def lint_endpoint(
    body: LintRequest,
    db: Database = Depends(get_database),
    trusted_patterns: list[str] = Depends(get_trusted_patterns),
) -> LintResponse:
    """Lint a pipeline document and record the run."""
    if body.trusted is not None:
        trusted = body.trusted
    else:
        trusted = is_trusted(body.repository, trusted_patterns)

    result = lint_document(body.yaml, trusted)
    run_id = await _save_run(db, body, trusted, result)

    logger.info(
        "Lint run %s for %s: %s",
        run_id,
        body.repository or "<unknown>",
        "valid" if result.valid else "invalid",
    )
    return LintResponse(run_id=run_id, trusted=trusted, result=result)
