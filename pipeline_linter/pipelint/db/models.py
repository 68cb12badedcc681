"""Database record models."""

from __future__ import annotations

from pydantic import BaseModel


class LintRunRecord(BaseModel):
    id: str
    repository: str = ""
    trusted: bool = False
    valid: bool = True
    yaml_input: str
    result_json: str = "{}"
    created_at: str = ""
