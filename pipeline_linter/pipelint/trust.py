"""Trusted repository policy."""

from __future__ import annotations

from fnmatch import fnmatchcase


def is_trusted(repository: str, patterns: list[str]) -> bool:
    """Return True if an ``owner/name`` slug matches any trusted pattern.

    Patterns are shell-style globs, e.g. ``acme/*``. Matching is case-insensitive.
    """
    if not repository:
        return False
    slug = repository.strip().lower()
    return any(fnmatchcase(slug, p.strip().lower()) for p in patterns if p.strip())
