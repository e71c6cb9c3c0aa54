"""locksat exception hierarchy.

All public exceptions inherit from LockSatError, giving callers a single
base class to catch when they want to handle any locksat-specific failure
without swallowing unrelated errors.

The satisfaction check itself never raises these: absent inputs are data.
They come from constructing or loading the inputs.
"""


class LockSatError(Exception):
    """Base exception for all locksat errors."""


class LockfileError(LockSatError):
    """Raised when a lock cannot be constructed or loaded.

    Covers malformed lock documents and locks that pin the same
    project root more than once.
    """


class ManifestError(LockSatError):
    """Raised when a manifest document is malformed.

    Covers unknown rule shapes, non-mapping sections, and
    constraint text that cannot be parsed.
    """


class PackageTreeError(LockSatError):
    """Raised when a package tree document is malformed."""


class ConstraintError(LockSatError, ValueError):
    """Raised when constraint text cannot be parsed into a Constraint."""
