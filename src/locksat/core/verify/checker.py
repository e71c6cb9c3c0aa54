"""Checking locked versions against override and constraint rules.

Precedence, per locked project:

1. An override on the root is checked, and nothing else is. The normal
   constraint is skipped whether the override passes or fails.
2. Otherwise a normal constraint is checked, but only if it is effectual.
3. Otherwise the project passes.
"""

from __future__ import annotations

from collections.abc import Collection

from locksat.core.lock import Lock
from locksat.core.manifest import Manifest
from locksat.core.verify.models import ConstraintMismatch


def check_constraints(
    lock: Lock,
    manifest: Manifest | None,
    effectual: Collection[str],
) -> tuple[dict[str, ConstraintMismatch], dict[str, ConstraintMismatch]]:
    """Find locked projects that violate an override or an effectual constraint.

    Args:
        lock: The lock whose projects are checked.
        manifest: Declared rules; None means no rules at all.
        effectual: Constrained roots reached by some required import.

    Returns:
        A ``(bad_overrides, bad_constraints)`` pair, each keyed by project
        root. A root never appears in both.
    """
    bad_overrides: dict[str, ConstraintMismatch] = {}
    bad_constraints: dict[str, ConstraintMismatch] = {}
    if manifest is None:
        return bad_overrides, bad_constraints

    overrides = manifest.overrides
    constraints = manifest.dependency_constraints

    for lp in lock.projects:
        root = lp.root

        if root in overrides:
            override = overrides[root]
            if not override.matches(lp.version):
                bad_overrides[root] = ConstraintMismatch(override, lp.version)
            continue

        constraint = constraints.get(root)
        if (
            constraint is not None
            and root in effectual
            and not constraint.matches(lp.version)
        ):
            bad_constraints[root] = ConstraintMismatch(constraint, lp.version)

    return bad_overrides, bad_constraints
