"""Locks --- pinned project versions plus the imports that produced them.

- ``models``: ``LockedProject`` and ``Lock``.
- ``operations``: JSON ``from_dict``, ``from_json``, ``read``, ``to_dict``
  and ``to_json``, attached to ``Lock`` here.
"""

from locksat.core.lock.models import Lock, LockedProject, ProjectRoot

from locksat.core.lock import operations as _ops

Lock.from_dict = classmethod(_ops._from_dict)
Lock.from_json = classmethod(_ops._from_json)
Lock.read = classmethod(_ops._read)
Lock.to_dict = _ops._to_dict
Lock.to_json = _ops._to_json

__all__ = [
    "Lock",
    "LockedProject",
    "ProjectRoot",
]
