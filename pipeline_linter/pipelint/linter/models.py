"""Lint result data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class LintSeverity(str, Enum):
    """Severity level for lint issues."""

    error = "error"
    warning = "warning"
    info = "info"


class LintIssue(BaseModel):
    """A single lint finding."""

    severity: LintSeverity
    check_name: str
    message: str
    resource: str = ""
    line: int | None = None


class LintResult(BaseModel):
    """Aggregated result of linting one YAML document."""

    valid: bool = True
    issues: list[LintIssue] = Field(default_factory=list)
    resources_checked: int = 0
