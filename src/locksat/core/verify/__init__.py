"""Lock satisfaction --- does an existing lock still fit the project?

The check combines three independent questions:

- Which imports are required now that the lock never saw, and which did it
  see that are no longer required (``differ``)?
- Which declared constraints are actually reached by a required import
  (``effectual``)?
- Does each locked version satisfy its override, or failing that its
  effectual constraint (``checker``)?

``satisfaction.lock_satisfies_inputs`` runs all three and returns a
``LockSatisfaction``.
"""

from locksat.core.verify.checker import check_constraints
from locksat.core.verify.differ import ImportDiff, diff_imports
from locksat.core.verify.effectual import PrefixIndex, find_effectual_constraints
from locksat.core.verify.models import ConstraintMismatch, LockSatisfaction
from locksat.core.verify.satisfaction import lock_satisfies_inputs, required_imports

__all__ = [
    "ConstraintMismatch",
    "LockSatisfaction",
    "ImportDiff",
    "PrefixIndex",
    "check_constraints",
    "diff_imports",
    "find_effectual_constraints",
    "lock_satisfies_inputs",
    "required_imports",
]
