"""FastAPI application -- pipelint entrypoint."""

from __future__ import annotations

import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator

from fastapi import FastAPI

import pipelint.deps as deps
from pipelint.api.history import router as history_router
from pipelint.api.lint import router as lint_router
from pipelint.db.database import Database

logger = logging.getLogger(__name__)


def _split_patterns(raw: str) -> list[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]


def _load_options() -> dict[str, Any]:
    """Load service options from the options JSON file or env fallback."""
    opts_path = os.environ.get("PIPELINT_OPTIONS_PATH", "/data/options.json")
    if Path(opts_path).exists():
        options = json.loads(Path(opts_path).read_text())
    else:
        options = {
            "trusted_repositories": _split_patterns(
                os.environ.get("PIPELINT_TRUSTED_REPOS", "")
            ),
            "db_path": os.environ.get("PIPELINT_DB_PATH", ""),
        }
    if isinstance(options.get("trusted_repositories"), str):
        options["trusted_repositories"] = _split_patterns(options["trusted_repositories"])
    return options


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: init resources on startup, clean up on shutdown."""
    log_level = logging.DEBUG if os.environ.get("PIPELINT_DEV_MODE") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    deps._options = _load_options()
    logger.info(
        "pipelint starting with %d trusted repository patterns",
        len(deps._options.get("trusted_repositories", [])),
    )

    deps._database = Database(deps._options.get("db_path") or None)
    await deps._database.connect()
    logger.info("Database connected")

    yield

    # Shutdown
    if deps._database:
        await deps._database.close()
    deps._database = None
    deps._options = {}


app = FastAPI(
    title="pipelint",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(lint_router)
app.include_router(history_router)


@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}
