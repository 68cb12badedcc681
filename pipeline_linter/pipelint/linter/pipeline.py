"""Lint entry points: single resource and whole YAML document."""

from __future__ import annotations

import logging

from pipelint.linter.models import LintIssue, LintResult, LintSeverity
from pipelint.linter.rules import LintError, check_platform, check_resource
from pipelint.resource.loader import ParseError, parse_string
from pipelint.resource.models import Pipeline, Resource

logger = logging.getLogger(__name__)


def lint(resource: Resource, trusted: bool) -> None:
    """Lint one resource, raising LintError for the first violated rule.

    Only pipelines are checked; secrets and signatures always pass.
    """
    if not isinstance(resource, Pipeline):
        return
    check_platform(resource)
    check_resource(resource, trusted)


def _syntax_failure(message: str, line: int | None = None) -> LintResult:
    return LintResult(
        valid=False,
        issues=[
            LintIssue(
                severity=LintSeverity.error,
                check_name="yaml_syntax",
                message=message,
                line=line,
            )
        ],
    )


def lint_document(yaml_str: str, trusted: bool) -> LintResult:
    """Parse a YAML document and lint every resource in it.

    If parsing fails, returns immediately with a single syntax issue.
    Each resource reports at most one issue (its first violation).
    """
    if not yaml_str or not yaml_str.strip():
        return _syntax_failure("Empty YAML document")

    try:
        manifest = parse_string(yaml_str)
    except ParseError as e:
        logger.debug("Parse failed: %s", e)
        return _syntax_failure(str(e), line=e.line)

    if not manifest.resources:
        return _syntax_failure("Empty YAML document")

    result = LintResult(resources_checked=len(manifest.resources))
    for index, resource in enumerate(manifest.resources):
        label = getattr(resource, "name", "") or f"{resource.kind}[{index}]"
        try:
            lint(resource, trusted)
        except LintError as e:
            result.valid = False
            result.issues.append(
                LintIssue(
                    severity=LintSeverity.error,
                    check_name="lint",
                    message=str(e),
                    resource=label,
                )
            )

    logger.info(
        "Linted %d resources (trusted=%s): %d issues",
        result.resources_checked,
        trusted,
        len(result.issues),
    )
    return result
