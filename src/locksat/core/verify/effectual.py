"""Effectual constraints --- which declared constraints anything actually reaches.

A constraint on a project that no required import falls under cannot be
violated by the lock in any way that matters, so only effectual
constraints are checked. A constraint is effectual when some required
import path has the constraint's project root as its *longest* declared
root prefix.

Matching is on ``/``-separated path segments, never raw string prefixes:
the root ``github.com/foo/bar`` covers ``github.com/foo/bar/baz`` but not
``github.com/foo/barn``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from locksat.core.manifest import Manifest


def _segments(path: str) -> list[str]:
    return [seg for seg in path.strip("/").split("/") if seg]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    key: str | None = None


class PrefixIndex:
    """A trie of import path roots keyed by path segment.

    Each inserted key is normalized (leading, trailing, and doubled slashes
    are dropped) for matching, but lookups return the key exactly as it was
    inserted.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._root = _Node()
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: str) -> None:
        """Add a root. Keys with no segments are ignored.

        A key equivalent to one already present (``foo`` after ``foo/``)
        replaces it. ``Manifest`` normalizes its roots, so its constraint
        keys never collide this way.
        """
        segments = _segments(key)
        if not segments:
            return
        node = self._root
        for seg in segments:
            node = node.children.setdefault(seg, _Node())
        if node.key is None:
            self._size += 1
        node.key = key

    def longest_prefix(self, path: str) -> str | None:
        """Return the longest inserted key covering *path*, or None."""
        node = self._root
        found: str | None = None
        for seg in _segments(path):
            node = node.children.get(seg)
            if node is None:
                break
            if node.key is not None:
                found = node.key
        return found

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        segments = _segments(key)
        node = self._root
        for seg in segments:
            node = node.children.get(seg)
            if node is None:
                return False
        return bool(segments) and node.key is not None

    def __len__(self) -> int:
        return self._size


def find_effectual_constraints(
    manifest: Manifest | None, imports: Iterable[str]
) -> frozenset[str]:
    """Return the constrained project roots that some import falls under.

    Args:
        manifest: Declared rules; None means no constraints.
        imports: The full required import set.

    Returns:
        The subset of ``manifest.dependency_constraints`` keys that are the
        longest matching root of at least one import.
    """
    if manifest is None or not manifest.dependency_constraints:
        return frozenset()

    index = PrefixIndex(manifest.dependency_constraints)
    effectual: set[str] = set()
    for imp in imports:
        root = index.longest_prefix(imp)
        if root is not None:
            effectual.add(root)
    return frozenset(effectual)
