"""Versions and the constraints a manifest places on them.

The satisfaction check only ever calls ``Constraint.matches``; the variants
here are one concrete family of constraints that callers can swap for
their own.
"""

from locksat.core.constraints.versions import (
    Version,
    VersionKind,
    is_semver,
    _parse_version_tuple,
)
from locksat.core.constraints.constraints import (
    AnyConstraint,
    BranchConstraint,
    Constraint,
    ExactConstraint,
    NoneConstraint,
    RangeConstraint,
    parse_constraint,
)

__all__ = [
    "Version",
    "VersionKind",
    "is_semver",
    "Constraint",
    "ExactConstraint",
    "RangeConstraint",
    "BranchConstraint",
    "AnyConstraint",
    "NoneConstraint",
    "parse_constraint",
    "_parse_version_tuple",
]
