"""Lock operations --- JSON serialization and deserialization.

Attached to ``Lock`` as methods and classmethods in ``__init__.py``. The
document shape is::

    {
      "input_imports": ["github.com/pkg/errors", ...],
      "projects": [
        {"root": "github.com/pkg/errors", "version": "v0.8.1",
         "version_type": "semver", "packages": ["."]}
      ]
    }

``to_dict`` is deterministic: projects are sorted by root, imports and
package lists are sorted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from locksat.core.constraints import Version, VersionKind
from locksat.core.lock.models import LockedProject
from locksat.exceptions import LockfileError

logger = logging.getLogger(__name__)

_PROJECT_KEYS = {"root", "version", "version_type", "packages"}


def _project_from_dict(entry: Any) -> LockedProject:
    if not isinstance(entry, dict):
        raise LockfileError("Each locked project must be a mapping")

    root = entry.get("root")
    raw_version = entry.get("version")
    if not isinstance(root, str) or not root:
        raise LockfileError("Locked project is missing 'root'")
    if not isinstance(raw_version, str) or not raw_version:
        raise LockfileError(f"Locked project {root!r} is missing 'version'")

    unknown = set(entry) - _PROJECT_KEYS
    if unknown:
        logger.warning("Ignoring unknown keys for locked project %s: %s", root, sorted(unknown))

    version_type = entry.get("version_type")
    try:
        if version_type is None:
            version = Version.parse(raw_version)
        else:
            version = Version(raw_version, VersionKind(version_type))
    except ValueError as exc:
        raise LockfileError(f"Locked project {root!r}: {exc}") from exc

    packages = entry.get("packages", [])
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise LockfileError(f"Locked project {root!r}: 'packages' must be a list of strings")

    return LockedProject(root=root, version=version, packages=tuple(packages))


def _from_dict(cls: type, data: dict[str, Any]) -> Any:
    """Deserialize a lock from a dict (parsed JSON).

    Raises:
        LockfileError: If the document is malformed or pins a root twice.
    """
    if not isinstance(data, dict):
        raise LockfileError("Lock document must be a mapping")

    imports = data.get("input_imports", [])
    if not isinstance(imports, list) or not all(isinstance(i, str) for i in imports):
        raise LockfileError("'input_imports' must be a list of strings")

    raw_projects = data.get("projects", [])
    if not isinstance(raw_projects, list):
        raise LockfileError("'projects' must be a list")

    projects = [_project_from_dict(entry) for entry in raw_projects]
    return cls.of(projects, imports)


def _from_json(cls: type, json_str: str) -> Any:
    """Deserialize from a JSON string.

    Raises:
        LockfileError: If the string is not valid JSON or is malformed.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise LockfileError(f"Invalid lock JSON: {exc}") from exc
    return cls.from_dict(data)


def _read(cls: type, path: Path) -> Any:
    """Read a lock from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        LockfileError: If the file is not a valid lock document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LockfileError(f"{path}: not valid UTF-8: {exc}") from exc
    return cls.from_json(text)


def _to_dict(self: Any) -> dict[str, Any]:
    """Serialize the lock to a deterministic dict."""
    projects = [
        {
            "root": lp.root,
            "version": lp.version.value,
            "version_type": lp.version.kind.value,
            "packages": sorted(lp.packages),
        }
        for lp in sorted(self.projects, key=lambda lp: lp.root)
    ]
    return {
        "input_imports": sorted(self.input_imports),
        "projects": projects,
    }


def _to_json(self: Any, indent: int = 2) -> str:
    """Serialize to a JSON string."""
    return json.dumps(self.to_dict(), indent=indent, sort_keys=True)
