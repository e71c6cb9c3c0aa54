"""Manifest data model --- the rules a project declares for resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from locksat.core.constraints import Constraint
from locksat.core.pkgtree import IgnoredRuleset
from locksat.exceptions import ManifestError


def _frozen_rules(
    value: Mapping[str, Constraint] | None, section: str
) -> Mapping[str, Constraint]:
    """Copy a rule mapping read-only, with trailing slashes dropped from roots.

    Raises:
        ManifestError: If a root is empty or two roots collide once normalized.
    """
    rules: dict[str, Constraint] = {}
    for root, constraint in (value or {}).items():
        normalized = root.rstrip("/")
        if not normalized:
            raise ManifestError(f"{section} has an empty project root: {root!r}")
        if normalized in rules:
            raise ManifestError(f"{section} declares {normalized!r} more than once")
        rules[normalized] = constraint
    return MappingProxyType(rules)


@dataclass(frozen=True)
class Manifest:
    """Declared resolution rules of the root project.

    Project roots are stored without a trailing slash, so ``foo/`` and
    ``foo`` name the same project.

    Attributes:
        overrides: Project root -> constraint with absolute precedence. An
            override replaces any normal constraint on the same root.
        dependency_constraints: Project root -> normal constraint.
        ignored_packages: Import paths excluded from reachability.
        required_packages: Import paths required even if nothing imports
            them.

    Raises:
        ManifestError: On construction, if a rule section names the same
            root twice (``foo`` and ``foo/``) or has an empty root.
    """

    overrides: Mapping[str, Constraint] = field(default_factory=dict)
    dependency_constraints: Mapping[str, Constraint] = field(default_factory=dict)
    ignored_packages: IgnoredRuleset = field(default_factory=IgnoredRuleset)
    required_packages: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", _frozen_rules(self.overrides, "overrides"))
        object.__setattr__(
            self,
            "dependency_constraints",
            _frozen_rules(self.dependency_constraints, "constraints"),
        )
        object.__setattr__(self, "required_packages", frozenset(self.required_packages))

    @classmethod
    def empty(cls) -> Manifest:
        """A manifest with no rules; what an absent manifest means."""
        return cls()
