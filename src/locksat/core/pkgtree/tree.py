"""Package tree and reachability analysis.

A ``PackageTree`` holds the packages of the project under analysis and
their imports. ``to_reach_map`` computes, for every package that counts as
a source, the internal packages it transitively imports and the external
import paths it reaches through them. Flattening the reach map yields the
set of external imports the project needs, which is what a lock is judged
against.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from locksat.core.pkgtree.models import (
    IgnoredRuleset,
    Package,
    has_path_prefix,
    is_standard_import_path,
)

logger = logging.getLogger(__name__)


class ReachabilityProvider(Protocol):
    """Anything that can answer the flattened reachability query."""

    def flatten_reach(
        self,
        include_main: bool,
        include_tests: bool,
        ignored: IgnoredRuleset | None,
    ) -> Iterable[str]:
        ...


# ---------------------------------------------------------------------------
# ReachMap: per-package transitive reach
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ReachEntry:
    """What one package reaches.

    Attributes:
        internal: Other packages of the same tree reached transitively.
        external: Import paths outside the tree reached transitively.
    """

    internal: tuple[str, ...] = ()
    external: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReachMap:
    """Mapping of source package import path to its ``ReachEntry``."""

    entries: Mapping[str, ReachEntry] = field(default_factory=dict)

    def flatten(self, exclude: Callable[[str], bool] | None = None) -> list[str]:
        """Return the sorted, deduplicated external imports of all entries.

        Args:
            exclude: Optional predicate; paths for which it returns True
                are dropped (typically ``is_standard_import_path``).
        """
        seen: set[str] = set()
        for entry in self.entries.values():
            seen.update(entry.external)
        if exclude is not None:
            seen = {p for p in seen if not exclude(p)}
        return sorted(seen)

    def __getitem__(self, import_path: str) -> ReachEntry:
        return self.entries[import_path]

    def __contains__(self, import_path: object) -> bool:
        return import_path in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)


# ---------------------------------------------------------------------------
# PackageTree
# ---------------------------------------------------------------------------


class PackageTree:
    """The import graph of a single project.

    Every package path in the tree lives under ``import_root``. Imports
    under the root are internal edges; anything else is external.

    Thread safety: ``to_reach_map`` and ``flatten_reach`` only read the
    tree. Mutating it with ``add_package`` while they run is not safe.
    """

    def __init__(
        self,
        import_root: str,
        packages: Iterable[Package] = (),
        stdlib_filter: Callable[[str], bool] = is_standard_import_path,
    ) -> None:
        self.import_root = import_root.rstrip("/")
        self.stdlib_filter = stdlib_filter
        self._packages: dict[str, Package] = {}
        for pkg in packages:
            self.add_package(pkg)

    def add_package(self, package: Package) -> None:
        """Add a package, replacing any with the same import path.

        Raises:
            ValueError: If the package does not live under ``import_root``.
        """
        if not self.is_internal(package.import_path):
            raise ValueError(
                f"Package {package.import_path!r} is not under import root "
                f"{self.import_root!r}"
            )
        self._packages[package.import_path] = package

    def get_package(self, import_path: str) -> Package | None:
        return self._packages.get(import_path)

    @property
    def package_paths(self) -> list[str]:
        """Return sorted import paths of all packages in the tree."""
        return sorted(self._packages)

    def is_internal(self, import_path: str) -> bool:
        """Return True if *import_path* falls under this tree's root."""
        return has_path_prefix(import_path, self.import_root)

    def to_reach_map(
        self,
        include_main: bool,
        include_tests: bool,
        ignored: IgnoredRuleset | None = None,
    ) -> ReachMap:
        """Compute the transitive reach of every source package.

        Sources are all packages that are not ignored, minus command
        packages unless ``include_main``. Ignored paths are removed both as
        sources and as import targets. Test imports are edges only when
        ``include_tests`` is set.

        Returns:
            A ``ReachMap`` keyed by source package import path.
        """
        ignored = ignored or IgnoredRuleset()

        sources = {
            path
            for path, pkg in self._packages.items()
            if not ignored.is_ignored(path) and (include_main or not pkg.is_main)
        }

        # Direct edges: path -> (internal targets, external targets)
        edges: dict[str, tuple[set[str], set[str]]] = {}
        for path in sources:
            pkg = self._packages[path]
            imports = list(pkg.imports)
            if include_tests:
                imports.extend(pkg.test_imports)

            internal: set[str] = set()
            external: set[str] = set()
            for imp in imports:
                if imp == path or ignored.is_ignored(imp):
                    continue
                if self.is_internal(imp):
                    if imp in sources:
                        internal.add(imp)
                    elif imp not in self._packages:
                        logger.debug("Package %s imports unknown internal %s", path, imp)
                else:
                    external.add(imp)
            edges[path] = (internal, external)

        entries: dict[str, ReachEntry] = {}
        for path in sources:
            visited: set[str] = set()
            reached_external: set[str] = set()
            stack = [path]
            while stack:
                cur = stack.pop()
                if cur in visited:
                    continue
                visited.add(cur)
                internal, external = edges[cur]
                reached_external.update(external)
                stack.extend(internal - visited)

            visited.discard(path)
            entries[path] = ReachEntry(
                internal=tuple(sorted(visited)),
                external=tuple(sorted(reached_external)),
            )

        return ReachMap(entries)

    def flatten_reach(
        self,
        include_main: bool,
        include_tests: bool,
        ignored: IgnoredRuleset | None = None,
    ) -> list[str]:
        """Return all non-standard-library external imports the project reaches."""
        reach = self.to_reach_map(include_main, include_tests, ignored)
        return reach.flatten(self.stdlib_filter)
