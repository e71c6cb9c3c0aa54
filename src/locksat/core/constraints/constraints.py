"""Version constraints: the rules a manifest places on a project.

A constraint is anything with a ``matches(version) -> bool`` method. The
concrete variants below do not share a base class; callers only depend on
the ``Constraint`` protocol.

Supported variants:

- ``ExactConstraint``: a single pinned version (tag, branch, or revision).
- ``RangeConstraint``: a semantic version range, using ``==``, ``!=``,
  ``>=``, ``<=``, ``>``, ``<``, caret (``^``), tilde (``~``), wildcard
  (``*``), and comma-separated conjunction.
- ``BranchConstraint``: any pin on the named branch.
- ``AnyConstraint``: every version.
- ``NoneConstraint``: no version at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from locksat.core.constraints.versions import (
    Version,
    VersionKind,
    is_semver,
)
from locksat.exceptions import ConstraintError


@runtime_checkable
class Constraint(Protocol):
    """A rule that a pinned version either satisfies or does not."""

    def matches(self, version: Version) -> bool:
        ...


# ---------------------------------------------------------------------------
# Simple variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExactConstraint:
    """Matches exactly one version.

    Semantic versions compare as releases (``0.8.1`` matches the tag
    ``v0.8.1``); branch and revision pins compare by kind and value.
    """

    version: Version

    def matches(self, version: Version) -> bool:
        if version.kind is VersionKind.SEMVER and self.version.kind is VersionKind.SEMVER:
            return version.semver_identity == self.version.semver_identity
        return version == self.version

    def __str__(self) -> str:
        return str(self.version)


@dataclass(frozen=True)
class BranchConstraint:
    """Matches any version pinned on the branch ``name``."""

    name: str

    def matches(self, version: Version) -> bool:
        return version.kind is VersionKind.BRANCH and version.value == self.name

    def __str__(self) -> str:
        return f"branch:{self.name}"


@dataclass(frozen=True)
class AnyConstraint:
    """Matches every version."""

    def matches(self, version: Version) -> bool:
        return True

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class NoneConstraint:
    """Matches no version."""

    def matches(self, version: Version) -> bool:
        return False

    def __str__(self) -> str:
        return "!"


# ---------------------------------------------------------------------------
# RangeConstraint: semantic version ranges
# ---------------------------------------------------------------------------

# Regex to tokenize a single constraint atom like ">=1.2.3", "^1.0" or "~2"
_CONSTRAINT_ATOM_RE = re.compile(
    r"^\s*(?P<op>==|!=|>=|<=|>|<|\^|~)\s*"
    r"v?(?P<major>0|[1-9]\d*)"
    r"(?:\.(?P<minor>0|[1-9]\d*)(?:\.(?P<patch>0|[1-9]\d*))?)?"
    r"(?:-[0-9A-Za-z\-.]+)?(?:\+[0-9A-Za-z\-.]+)?\s*$"
)


def _parse_atom(atom: str) -> tuple[str, tuple[int, int, int], bool]:
    """Split a range atom into operator, padded target, and whether minor was given.

    Missing minor and patch components are padded with 0, so ``>=2.0``
    means ``>=2.0.0``.

    Raises:
        ConstraintError: If the atom is malformed.
    """
    m = _CONSTRAINT_ATOM_RE.match(atom)
    if not m:
        raise ConstraintError(f"Invalid constraint atom: {atom!r}")
    target = (
        int(m.group("major")),
        int(m.group("minor") or 0),
        int(m.group("patch") or 0),
    )
    return m.group("op"), target, m.group("minor") is not None


def _range_atoms(raw: str) -> list[str]:
    return [a.strip() for a in raw.strip().split(",") if a.strip()]


@dataclass(frozen=True)
class RangeConstraint:
    """A semantic version range, analogous to npm/pip constraint syntax.

    Supports:
    - Exact match: ``==1.0.0``
    - Not-equal: ``!=1.0.0``
    - Minimum (inclusive): ``>=1.0.0``
    - Maximum (inclusive): ``<=2.0.0``
    - Minimum (exclusive): ``>1.0.0``
    - Maximum (exclusive): ``<2.0.0``
    - Caret: ``^1.2.0`` (same major; same major.minor when major is 0)
    - Tilde: ``~1.2.0`` (same major.minor; same major for ``~1``)
    - Wildcard (any semantic version): ``*``
    - Compound (comma-separated, all must hold): ``>=1.0.0,<2.0.0``

    Partial versions are padded with zeros: ``^1.0`` is ``^1.0.0``.
    Branch and revision pins never satisfy a range.

    Attributes:
        raw: The raw constraint string as authored (e.g., ">=1.0.0,<2.0.0").

    Raises:
        ConstraintError: On construction, if any atom is malformed.
    """

    raw: str

    def __post_init__(self) -> None:
        if self.raw.strip() == "*":
            return
        atoms = _range_atoms(self.raw)
        if not atoms:
            raise ConstraintError(f"Empty range constraint: {self.raw!r}")
        for atom in atoms:
            _parse_atom(atom)

    def matches(self, version: Version) -> bool:
        """Check whether a pinned version falls inside this range.

        For compound constraints (comma-separated), ALL atoms must be satisfied
        (conjunction semantics).
        """
        ver_tuple = version.semver_tuple
        if ver_tuple is None:
            return False

        if self.raw.strip() == "*":
            return True

        return all(
            self._atom_satisfies(atom, ver_tuple) for atom in _range_atoms(self.raw)
        )

    @staticmethod
    def _atom_satisfies(atom: str, ver_tuple: tuple[int, int, int]) -> bool:
        """Evaluate a single constraint atom against a parsed version tuple."""
        op, target, has_minor = _parse_atom(atom)

        if op == "==":
            return ver_tuple == target
        elif op == "!=":
            return ver_tuple != target
        elif op == ">=":
            return ver_tuple >= target
        elif op == "<=":
            return ver_tuple <= target
        elif op == ">":
            return ver_tuple > target
        elif op == "<":
            return ver_tuple < target
        elif op == "^":
            if target[0] == 0 and has_minor:
                return (
                    ver_tuple[0] == target[0]
                    and ver_tuple[1] == target[1]
                    and ver_tuple >= target
                )
            return ver_tuple[0] == target[0] and ver_tuple >= target
        elif op == "~":
            if not has_minor:
                return ver_tuple[0] == target[0]
            return (
                ver_tuple[0] == target[0]
                and ver_tuple[1] == target[1]
                and ver_tuple >= target
            )
        else:  # pragma: no cover
            raise ValueError(f"Unknown operator: {op!r}")

    def __str__(self) -> str:
        return self.raw


# ---------------------------------------------------------------------------
# Parsing constraint text from manifests
# ---------------------------------------------------------------------------


def parse_constraint(text: str) -> Constraint:
    """Turn manifest constraint text into a Constraint.

    - ``""`` or ``"*"``: AnyConstraint
    - ``"!"``: NoneConstraint
    - ``"branch:<name>"``: BranchConstraint
    - ``"rev:<id>"``: ExactConstraint on a revision
    - a bare semantic version (``"1.2.3"``, ``"v1.2.3"``): ExactConstraint
    - anything else: RangeConstraint (``">=2.0"``, ``"^1.0,<1.4"``)

    Raises:
        ConstraintError: If the text is neither of the above nor a valid range.
    """
    stripped = text.strip()
    if stripped in ("", "*"):
        return AnyConstraint()
    if stripped == "!":
        return NoneConstraint()
    if stripped.startswith("branch:"):
        name = stripped[len("branch:"):].strip()
        if not name:
            raise ConstraintError(f"Empty branch name in constraint {text!r}")
        return BranchConstraint(name)
    if stripped.startswith("rev:"):
        rev = stripped[len("rev:"):].strip()
        if not rev:
            raise ConstraintError(f"Empty revision in constraint {text!r}")
        return ExactConstraint(Version.revision(rev))
    if is_semver(stripped):
        return ExactConstraint(Version.semver(stripped))
    return RangeConstraint(stripped)
