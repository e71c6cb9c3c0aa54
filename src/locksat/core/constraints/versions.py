"""Pinned versions as recorded in a lock.

A lock pins each project to one of three kinds of revision identifier:
a semantic version tag, a branch name, or a bare revision (commit id or
any tag that is not a semantic version). Only constraints look inside a
``Version``; everything else treats it as an opaque, hashable value.

References
----------
.. [SemVer] Preston-Werner, T. (2013). "Semantic Versioning 2.0.0."
   https://semver.org/
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Version comparison utilities
# ---------------------------------------------------------------------------

_SEMVER_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z\-.]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z\-.]+))?$"
)


def _parse_version_tuple(version: str) -> tuple[int, int, int]:
    """Parse a semantic version string into a comparable (major, minor, patch) tuple.

    A leading ``v`` is accepted, as tags in version control usually carry
    one. Pre-release and build metadata are stripped for ordering purposes.

    Args:
        version: Semantic version string (e.g., "1.2.3", "v0.1.0-alpha").

    Returns:
        A (major, minor, patch) integer tuple.

    Raises:
        ValueError: If the string does not match semantic version format.
    """
    m = _SEMVER_RE.match(version.strip())
    if not m:
        raise ValueError(f"Invalid semantic version: {version!r}")
    return int(m.group("major")), int(m.group("minor")), int(m.group("patch"))


def is_semver(text: str) -> bool:
    """Return True if *text* is a semantic version string."""
    return _SEMVER_RE.match(text.strip()) is not None


# ---------------------------------------------------------------------------
# Version: an opaque pinned revision
# ---------------------------------------------------------------------------


class VersionKind(Enum):
    """The kind of revision identifier a lock pinned."""

    SEMVER = "semver"
    BRANCH = "branch"
    REVISION = "revision"


@dataclass(frozen=True)
class Version:
    """A pinned revision of a project.

    Two versions are equal only if both kind and value are equal, so the
    branch ``v1.0.0`` and the tag ``v1.0.0`` are different versions.

    Attributes:
        value: The identifier as written in the lock (tag, branch, or rev).
        kind: What sort of identifier ``value`` is.
    """

    value: str
    kind: VersionKind = VersionKind.SEMVER

    def __post_init__(self) -> None:
        if self.kind is VersionKind.SEMVER and not is_semver(self.value):
            raise ValueError(f"Invalid semantic version: {self.value!r}")

    @classmethod
    def semver(cls, value: str) -> Version:
        return cls(value, VersionKind.SEMVER)

    @classmethod
    def branch(cls, value: str) -> Version:
        return cls(value, VersionKind.BRANCH)

    @classmethod
    def revision(cls, value: str) -> Version:
        return cls(value, VersionKind.REVISION)

    @classmethod
    def parse(cls, value: str) -> Version:
        """Build a Version from bare text.

        Semantic version strings become SEMVER versions; anything else is
        taken to be a REVISION. Branches cannot be told apart from
        revisions by text alone and must be built with ``Version.branch``.
        """
        if is_semver(value):
            return cls.semver(value)
        return cls.revision(value)

    @property
    def semver_tuple(self) -> tuple[int, int, int] | None:
        """The (major, minor, patch) tuple, or None for non-semver kinds."""
        if self.kind is not VersionKind.SEMVER:
            return None
        return _parse_version_tuple(self.value)

    @property
    def semver_identity(self) -> tuple[int, int, int, str] | None:
        """Identity of a semantic version for equality purposes.

        The leading ``v`` and build metadata do not take part, so ``v1.2.3``
        and ``1.2.3+build.7`` are the same release. The pre-release tag does.
        None for non-semver kinds.
        """
        if self.kind is not VersionKind.SEMVER:
            return None
        m = _SEMVER_RE.match(self.value.strip())
        return (
            int(m.group("major")),
            int(m.group("minor")),
            int(m.group("patch")),
            m.group("pre") or "",
        )

    def __str__(self) -> str:
        return self.value
