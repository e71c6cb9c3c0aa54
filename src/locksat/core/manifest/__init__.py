"""Manifests --- overrides, constraints, ignores and required packages.

- ``models``: the frozen ``Manifest`` dataclass.
- ``operations``: YAML ``from_dict``, ``from_yaml`` and ``read``, attached
  to ``Manifest`` here.
"""

from locksat.core.manifest.models import Manifest

from locksat.core.manifest import operations as _ops

Manifest.from_dict = classmethod(_ops._from_dict)
Manifest.from_yaml = classmethod(_ops._from_yaml)
Manifest.read = classmethod(_ops._read)

__all__ = ["Manifest"]
