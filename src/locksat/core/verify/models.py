"""Result types of the lock satisfaction check.

``LockSatisfaction`` holds several orthogonal kinds of failure so that a
caller can report each of them, rather than a single yes/no.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from locksat.core.constraints import Constraint, Version


@dataclass(frozen=True)
class ConstraintMismatch:
    """A locked version together with the rule it violates."""

    constraint: Constraint
    version: Version


@dataclass(frozen=True)
class LockSatisfaction:
    """The compound result of ``lock_satisfies_inputs``.

    Attributes:
        no_lock: True when there was no lock to check. Every other field
            is then empty.
        missing_pkgs: Imports required now that the lock never considered.
        excess_pkgs: Imports the lock considered that are no longer required.
        bad_overrides: Project root -> violated override rule.
        bad_constraints: Project root -> violated effectual constraint.
    """

    no_lock: bool = False
    missing_pkgs: frozenset[str] = frozenset()
    excess_pkgs: frozenset[str] = frozenset()
    bad_overrides: Mapping[str, ConstraintMismatch] = field(default_factory=dict)
    bad_constraints: Mapping[str, ConstraintMismatch] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "missing_pkgs", frozenset(self.missing_pkgs))
        object.__setattr__(self, "excess_pkgs", frozenset(self.excess_pkgs))
        object.__setattr__(self, "bad_overrides", MappingProxyType(dict(self.bad_overrides)))
        object.__setattr__(
            self, "bad_constraints", MappingProxyType(dict(self.bad_constraints))
        )

    def passed(self) -> bool:
        """Return True only if a lock exists and no problem of any kind was found."""
        if self.no_lock:
            return False
        return not (
            self.missing_pkgs
            or self.excess_pkgs
            or self.bad_overrides
            or self.bad_constraints
        )

    def missing_imports(self) -> frozenset[str]:
        """Imports present in the inputs but missing from the lock."""
        return self.missing_pkgs

    def excess_imports(self) -> frozenset[str]:
        """Imports present in the lock but absent from the inputs."""
        return self.excess_pkgs

    def unmatched_overrides(self) -> Mapping[str, ConstraintMismatch]:
        """Override rules the corresponding locked project does not satisfy."""
        return self.bad_overrides

    def unmatched_constraints(self) -> Mapping[str, ConstraintMismatch]:
        """Normal, non-override rules the corresponding locked project does not satisfy."""
        return self.bad_constraints

    def to_dict(self) -> dict[str, Any]:
        """Summarize the result as a deterministic, JSON-serializable dict."""

        def _mismatches(m: Mapping[str, ConstraintMismatch]) -> dict[str, dict[str, str]]:
            return {
                root: {
                    "constraint": str(mm.constraint),
                    "version": mm.version.value,
                    "version_type": mm.version.kind.value,
                }
                for root, mm in sorted(m.items())
            }

        return {
            "passed": self.passed(),
            "no_lock": self.no_lock,
            "missing_imports": sorted(self.missing_pkgs),
            "excess_imports": sorted(self.excess_pkgs),
            "unmatched_overrides": _mismatches(self.bad_overrides),
            "unmatched_constraints": _mismatches(self.bad_constraints),
        }
