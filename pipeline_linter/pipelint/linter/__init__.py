"""Pipeline linter: platform, structural and privilege rules."""

from pipelint.linter.models import LintIssue, LintResult, LintSeverity
from pipelint.linter.pipeline import lint, lint_document
from pipelint.linter.rules import LintError, check_platform, check_resource

__all__ = [
    "LintError",
    "LintIssue",
    "LintResult",
    "LintSeverity",
    "check_platform",
    "check_resource",
    "lint",
    "lint_document",
]
