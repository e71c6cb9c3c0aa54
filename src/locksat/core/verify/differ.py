"""Import set differences between the current inputs and a lock."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ImportDiff(Enum):
    """How an import path disagrees with the lock."""

    MISSING_FROM_LOCK = "missing"
    IN_ADDITION_TO_LOCK = "excess"


def diff_imports(
    required: Iterable[str], recorded: Iterable[str]
) -> dict[str, ImportDiff]:
    """Classify every import that is in exactly one of the two sets.

    An import that is required now but was never fed to the solver is
    MISSING_FROM_LOCK; one the solver saw that is no longer required is
    IN_ADDITION_TO_LOCK. Imports in both sets do not appear.

    A missing import may already be satisfied because another locked
    project pulls it in. That case is still reported as missing.
    """
    ininputs = set(required)
    inlock = set(recorded)

    diff: dict[str, ImportDiff] = {}
    for ip in ininputs:
        if ip in inlock:
            # So we don't have to revisit it below
            inlock.discard(ip)
        else:
            diff[ip] = ImportDiff.MISSING_FROM_LOCK

    for ip in inlock:
        diff[ip] = ImportDiff.IN_ADDITION_TO_LOCK

    return diff
