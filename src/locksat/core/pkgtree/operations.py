"""Package tree operations --- deserialization from JSON documents.

Attached to ``PackageTree`` as classmethods in ``__init__.py``. Extracting
imports from source text is someone else's job; this module only reads an
already-extracted graph of the form::

    {
      "import_root": "github.com/acme/app",
      "packages": {
        "github.com/acme/app": {"imports": [...], "test_imports": [...]},
        "github.com/acme/app/cmd/app": {"imports": [...], "main": true}
      }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from locksat.core.pkgtree.models import Package
from locksat.exceptions import PackageTreeError

logger = logging.getLogger(__name__)

_PACKAGE_KEYS = {"imports", "test_imports", "main"}


def _string_list(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PackageTreeError(f"{where} must be a list of strings")
    return tuple(value)


def _from_dict(cls: type, data: dict[str, Any]) -> Any:
    """Build a PackageTree from a parsed document.

    Raises:
        PackageTreeError: If the document does not have the expected shape
            or a package lives outside the import root.
    """
    if not isinstance(data, dict):
        raise PackageTreeError("Package tree document must be a mapping")

    root = data.get("import_root")
    if not isinstance(root, str) or not root:
        raise PackageTreeError("Package tree document needs a non-empty 'import_root'")

    raw_packages = data.get("packages", {})
    if not isinstance(raw_packages, dict):
        raise PackageTreeError("'packages' must be a mapping of import path to package")

    tree = cls(root)
    for path, entry in raw_packages.items():
        if entry is None:
            entry = {}
        if not isinstance(entry, dict):
            raise PackageTreeError(f"Package {path!r} must be a mapping")
        unknown = set(entry) - _PACKAGE_KEYS
        if unknown:
            logger.warning("Ignoring unknown keys for package %s: %s", path, sorted(unknown))
        pkg = Package(
            import_path=path,
            imports=_string_list(entry.get("imports"), f"{path}.imports"),
            test_imports=_string_list(entry.get("test_imports"), f"{path}.test_imports"),
            is_main=bool(entry.get("main", False)),
        )
        try:
            tree.add_package(pkg)
        except ValueError as exc:
            raise PackageTreeError(str(exc)) from exc

    return tree


def _read(cls: type, path: Path) -> Any:
    """Read a package tree document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        PackageTreeError: If the file is not valid JSON or is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PackageTreeError(f"{path}: not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PackageTreeError(f"{path}: invalid JSON: {exc}") from exc
    return cls.from_dict(data)
