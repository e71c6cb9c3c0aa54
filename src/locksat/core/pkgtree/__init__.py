"""Project import graphs and reachability.

- ``models``: ``Package``, ``IgnoredRuleset`` and import path helpers.
- ``tree``: ``PackageTree``, ``ReachMap`` and the ``ReachabilityProvider``
  protocol the satisfaction check consumes.
- ``operations``: reading a package tree from a JSON document.
"""

from locksat.core.pkgtree.models import (
    IgnoredRuleset,
    Package,
    has_path_prefix,
    is_standard_import_path,
)
from locksat.core.pkgtree.tree import (
    PackageTree,
    ReachabilityProvider,
    ReachEntry,
    ReachMap,
)

from locksat.core.pkgtree import operations as _ops

PackageTree.from_dict = classmethod(_ops._from_dict)
PackageTree.read = classmethod(_ops._read)

__all__ = [
    "Package",
    "IgnoredRuleset",
    "PackageTree",
    "ReachabilityProvider",
    "ReachEntry",
    "ReachMap",
    "has_path_prefix",
    "is_standard_import_path",
]
