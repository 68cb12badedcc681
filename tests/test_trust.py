"""Tests for the trusted repository policy."""

from __future__ import annotations

from pipelint.trust import is_trusted


class TestIsTrusted:
    def test_exact_match(self) -> None:
        assert is_trusted("acme/infra", ["acme/infra"]) is True

    def test_glob(self) -> None:
        assert is_trusted("acme/web", ["acme/*"]) is True
        assert is_trusted("other/web", ["acme/*"]) is False

    def test_case_insensitive(self) -> None:
        assert is_trusted("ACME/Infra", ["acme/infra"]) is True

    def test_empty_repository(self) -> None:
        assert is_trusted("", ["*"]) is False

    def test_no_patterns(self) -> None:
        assert is_trusted("acme/infra", []) is False

    def test_blank_patterns_ignored(self) -> None:
        assert is_trusted("acme/infra", ["", "  "]) is False
