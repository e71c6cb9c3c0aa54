"""Package tree data models --- Package, IgnoredRuleset, and path helpers.

Pure data holders and path predicates with no graph logic, safe to import
from anywhere without circular-dependency concerns.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Import path helpers
# ---------------------------------------------------------------------------


def is_standard_import_path(path: str) -> bool:
    """Report whether an import path belongs to the standard library.

    Hosted import paths start with a domain (``github.com/x/y``), so a
    first segment without a dot (``os``, ``net/http``) means standard
    library.
    """
    head = path.split("/", 1)[0]
    return "." not in head


def has_path_prefix(path: str, prefix: str) -> bool:
    """Return True if *prefix* covers *path* on a segment boundary.

    ``foo`` covers ``foo`` and ``foo/bar`` but not ``foobar``.
    """
    prefix = prefix.rstrip("/")
    if path == prefix:
        return True
    return path.startswith(prefix + "/")


# ---------------------------------------------------------------------------
# Package: a node of the import graph
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Package:
    """One package of the project under analysis.

    Attributes:
        import_path: Full import path of the package.
        imports: Import paths used by the package's main code.
        test_imports: Import paths used only by its tests.
        is_main: True for command (executable) packages, which other
            packages cannot import.
    """

    import_path: str
    imports: tuple[str, ...] = ()
    test_imports: tuple[str, ...] = ()
    is_main: bool = False


# ---------------------------------------------------------------------------
# IgnoredRuleset: import paths excluded from reachability
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IgnoredRuleset:
    """A set of ignore rules from the manifest.

    A rule ending in ``*`` ignores every path starting with the text before
    the ``*`` (raw prefix, so ``foo*`` also ignores ``foobar``). Any other
    rule ignores exactly that path.
    """

    literals: frozenset[str] = field(default_factory=frozenset)
    prefixes: tuple[str, ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str] | None) -> IgnoredRuleset:
        literals: set[str] = set()
        prefixes: set[str] = set()
        for pattern in patterns or ():
            pattern = pattern.strip()
            if not pattern:
                continue
            if pattern.endswith("*"):
                prefixes.add(pattern[:-1])
            else:
                literals.add(pattern)
        # A literal already covered by a wildcard is redundant.
        literals = {
            lit for lit in literals
            if not any(lit.startswith(p) for p in prefixes)
        }
        return cls(frozenset(literals), tuple(sorted(prefixes)))

    def is_ignored(self, path: str) -> bool:
        """Return True if *path* is excluded by any rule."""
        if path in self.literals:
            return True
        return any(path.startswith(p) for p in self.prefixes)

    def patterns(self) -> list[str]:
        """Return the rules in sorted pattern form."""
        return sorted(self.literals) + sorted(p + "*" for p in self.prefixes)

    def __len__(self) -> int:
        return len(self.literals) + len(self.prefixes)

    def __bool__(self) -> bool:
        return len(self) > 0
