"""Shared fixtures for locksat tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from locksat.core.constraints import Version
from locksat.core.lock import Lock, LockedProject
from locksat.core.pkgtree import IgnoredRuleset


class StaticTree:
    """A reachability provider that returns a fixed import set.

    Records the arguments of every query so tests can assert on them.
    Ignore rules are applied so manifests can still exclude imports.
    """

    def __init__(self, imports: Iterable[str]) -> None:
        self.imports = sorted(set(imports))
        self.calls: list[tuple[bool, bool, IgnoredRuleset | None]] = []

    def flatten_reach(
        self,
        include_main: bool,
        include_tests: bool,
        ignored: IgnoredRuleset | None,
    ) -> list[str]:
        self.calls.append((include_main, include_tests, ignored))
        if ignored is None:
            return list(self.imports)
        return [imp for imp in self.imports if not ignored.is_ignored(imp)]


@pytest.fixture
def static_tree() -> Callable[..., StaticTree]:
    """Factory for ``StaticTree`` providers."""
    return StaticTree


@pytest.fixture
def make_lock() -> Callable[..., Lock]:
    """Factory for locks from ``{root: version}`` pins and input imports.

    Version text is parsed with ``Version.parse``.
    """

    def _make(
        pins: dict[str, str] | None = None,
        input_imports: Iterable[str] = (),
    ) -> Lock:
        projects = [
            LockedProject(root=root, version=Version.parse(ver), packages=(".",))
            for root, ver in (pins or {}).items()
        ]
        return Lock.of(projects, input_imports)

    return _make
