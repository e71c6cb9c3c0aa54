"""Tests for override-then-constraint precedence."""

from __future__ import annotations

from locksat.core.constraints import NoneConstraint, RangeConstraint, Version
from locksat.core.manifest import Manifest
from locksat.core.verify import ConstraintMismatch, check_constraints


class TestOverrides:
    def test_failing_override_recorded(self, make_lock) -> None:
        lock = make_lock({"x": "1.0.0"})
        m = Manifest(overrides={"x": RangeConstraint(">=2.0.0")})
        bad_ovr, bad_con = check_constraints(lock, m, frozenset())
        assert bad_ovr == {"x": ConstraintMismatch(RangeConstraint(">=2.0.0"), Version.semver("1.0.0"))}
        assert bad_con == {}

    def test_failing_override_shadows_constraint(self, make_lock) -> None:
        lock = make_lock({"x": "1.0.0"})
        m = Manifest(
            overrides={"x": RangeConstraint(">=2.0.0")},
            dependency_constraints={"x": NoneConstraint()},
        )
        bad_ovr, bad_con = check_constraints(lock, m, frozenset({"x"}))
        assert set(bad_ovr) == {"x"}
        assert bad_con == {}

    def test_passing_override_shadows_failing_constraint(self, make_lock) -> None:
        """The constraint is skipped even when the override itself passes."""
        lock = make_lock({"x": "1.0.0"})
        m = Manifest(
            overrides={"x": RangeConstraint(">=1.0.0")},
            dependency_constraints={"x": RangeConstraint(">=5.0.0")},
        )
        assert check_constraints(lock, m, frozenset({"x"})) == ({}, {})

    def test_override_applies_without_reachability(self, make_lock) -> None:
        lock = make_lock({"x": "1.0.0"})
        m = Manifest(overrides={"x": NoneConstraint()})
        bad_ovr, _ = check_constraints(lock, m, frozenset())
        assert "x" in bad_ovr


class TestConstraints:
    def test_effectual_failing_constraint_recorded(self, make_lock) -> None:
        lock = make_lock({"y": "2.0.0"})
        m = Manifest(dependency_constraints={"y": RangeConstraint("^1.0.0")})
        _, bad_con = check_constraints(lock, m, frozenset({"y"}))
        assert bad_con == {"y": ConstraintMismatch(RangeConstraint("^1.0.0"), Version.semver("2.0.0"))}

    def test_ineffectual_constraint_ignored(self, make_lock) -> None:
        lock = make_lock({"y": "2.0.0"})
        m = Manifest(dependency_constraints={"y": RangeConstraint("^1.0.0")})
        assert check_constraints(lock, m, frozenset()) == ({}, {})

    def test_passing_constraint(self, make_lock) -> None:
        lock = make_lock({"y": "1.4.0"})
        m = Manifest(dependency_constraints={"y": RangeConstraint("^1.0.0")})
        assert check_constraints(lock, m, frozenset({"y"})) == ({}, {})

    def test_unconstrained_project_passes(self, make_lock) -> None:
        lock = make_lock({"z": "0.1.0"})
        m = Manifest(dependency_constraints={"y": NoneConstraint()})
        assert check_constraints(lock, m, frozenset({"y"})) == ({}, {})

    def test_rules_for_unlocked_roots_ignored(self, make_lock) -> None:
        lock = make_lock({})
        m = Manifest(
            overrides={"a": NoneConstraint()},
            dependency_constraints={"b": NoneConstraint()},
        )
        assert check_constraints(lock, m, frozenset({"b"})) == ({}, {})

    def test_no_manifest(self, make_lock) -> None:
        lock = make_lock({"y": "2.0.0"})
        assert check_constraints(lock, None, frozenset({"y"})) == ({}, {})
