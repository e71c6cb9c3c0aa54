"""Tests for IgnoredRuleset and import path helpers."""

from __future__ import annotations

import pytest

from locksat.core.pkgtree import IgnoredRuleset, has_path_prefix, is_standard_import_path


class TestIgnoredRuleset:
    def test_literal_matches_exactly(self) -> None:
        ig = IgnoredRuleset.from_patterns(["github.com/a/b"])
        assert ig.is_ignored("github.com/a/b") is True
        assert ig.is_ignored("github.com/a/b/c") is False

    def test_wildcard_is_raw_prefix(self) -> None:
        ig = IgnoredRuleset.from_patterns(["github.com/a/b*"])
        assert ig.is_ignored("github.com/a/b") is True
        assert ig.is_ignored("github.com/a/b/c") is True
        assert ig.is_ignored("github.com/a/bc") is True
        assert ig.is_ignored("github.com/a/x") is False

    def test_literal_covered_by_wildcard_dropped(self) -> None:
        ig = IgnoredRuleset.from_patterns(["x.org/a/*", "x.org/a/b", "y.org/c"])
        assert ig.patterns() == ["y.org/c", "x.org/a/*"]
        assert len(ig) == 2

    def test_empty_ruleset(self) -> None:
        for ig in (IgnoredRuleset(), IgnoredRuleset.from_patterns(None), IgnoredRuleset.from_patterns(["", " "])):
            assert not ig
            assert ig.is_ignored("anything") is False


class TestPathHelpers:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("fmt", True),
            ("net/http", True),
            ("github.com/pkg/errors", False),
            ("golang.org/x/net", False),
        ],
    )
    def test_is_standard_import_path(self, path: str, expected: bool) -> None:
        assert is_standard_import_path(path) is expected

    def test_has_path_prefix_segment_boundary(self) -> None:
        assert has_path_prefix("foo/bar", "foo") is True
        assert has_path_prefix("foo", "foo") is True
        assert has_path_prefix("foo", "foo/") is True
        assert has_path_prefix("foobar", "foo") is False
