"""Deciding whether a lock still satisfies the project inputs.

``lock_satisfies_inputs`` is what lets a tool skip a full re-solve: when it
passes, the existing lock is still a valid answer for the current manifest
and import graph. When it fails, the returned ``LockSatisfaction`` says why.

The lock's own list of input imports is essential here. Without it the
imports that were removed since the lock was written could only be found
by exploring the entire dependency graph for in-edges.
"""

from __future__ import annotations

import logging

from locksat.core.lock import Lock
from locksat.core.manifest import Manifest
from locksat.core.pkgtree import ReachabilityProvider
from locksat.core.verify.checker import check_constraints
from locksat.core.verify.differ import ImportDiff, diff_imports
from locksat.core.verify.effectual import find_effectual_constraints
from locksat.core.verify.models import LockSatisfaction

logger = logging.getLogger(__name__)


def required_imports(manifest: Manifest | None, tree: ReachabilityProvider) -> set[str]:
    """Assemble the full set of imports the project requires right now.

    This is everything reachable from the tree, main and test packages
    included, after the manifest's ignore rules, plus the manifest's
    explicitly required packages.
    """
    ignored = manifest.ignored_packages if manifest is not None else None
    required = set(tree.flatten_reach(True, True, ignored))
    if manifest is not None:
        required.update(manifest.required_packages)
    return required


def lock_satisfies_inputs(
    lock: Lock | None,
    manifest: Manifest | None,
    tree: ReachabilityProvider,
) -> LockSatisfaction:
    """Determine whether *lock* satisfies the manifest and package tree.

    Args:
        lock: The existing lock, or None if there is none.
        manifest: The root project's rules, or None for no rules.
        tree: The project's import graph.

    Returns:
        A fresh ``LockSatisfaction``. With no lock only ``no_lock`` is set.
    """
    if lock is None:
        logger.debug("No lock present; nothing to check")
        return LockSatisfaction(no_lock=True)

    required = required_imports(manifest, tree)
    diff = diff_imports(required, lock.input_imports)

    missing = {ip for ip, kind in diff.items() if kind is ImportDiff.MISSING_FROM_LOCK}
    excess = {ip for ip, kind in diff.items() if kind is ImportDiff.IN_ADDITION_TO_LOCK}

    effectual = find_effectual_constraints(manifest, required)
    bad_overrides, bad_constraints = check_constraints(lock, manifest, effectual)

    logger.debug(
        "Checked lock with %d projects: %d required imports, %d missing, "
        "%d excess, %d effectual constraints",
        len(lock.projects), len(required), len(missing), len(excess), len(effectual),
    )

    return LockSatisfaction(
        missing_pkgs=frozenset(missing),
        excess_pkgs=frozenset(excess),
        bad_overrides=bad_overrides,
        bad_constraints=bad_constraints,
    )
