"""Manifest operations --- reading manifests from YAML.

Attached to ``Manifest`` as classmethods in ``__init__.py``. The document
shape is::

    constraints:
      github.com/pkg/errors: "^0.8.0"
    overrides:
      github.com/sirupsen/logrus: "branch:master"
    ignored:
      - github.com/acme/app/internal/gen*
    required:
      - github.com/golang/mock/mockgen

Constraint text is parsed with ``parse_constraint``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from locksat.core.constraints import Constraint, parse_constraint
from locksat.core.pkgtree import IgnoredRuleset
from locksat.exceptions import ConstraintError, ManifestError

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"constraints", "overrides", "ignored", "required"}


def _rules(data: dict[str, Any], key: str) -> dict[str, Constraint]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ManifestError(f"'{key}' must be a mapping of project root to constraint")

    rules: dict[str, Constraint] = {}
    for root, text in section.items():
        if not isinstance(root, str) or not root:
            raise ManifestError(f"'{key}' has an invalid project root: {root!r}")
        if text is None:
            text = "*"
        if not isinstance(text, str):
            raise ManifestError(f"{key}.{root}: constraint must be a string")
        try:
            rules[root] = parse_constraint(text)
        except ConstraintError as exc:
            raise ManifestError(f"{key}.{root}: {exc}") from exc
    return rules


def _paths(data: dict[str, Any], key: str) -> list[str]:
    section = data.get(key) or []
    if not isinstance(section, list) or not all(isinstance(p, str) for p in section):
        raise ManifestError(f"'{key}' must be a list of import paths")
    return section


def _from_dict(cls: type, data: dict[str, Any] | None) -> Any:
    """Build a Manifest from a parsed document. An empty document is valid.

    Raises:
        ManifestError: If a section has the wrong shape or a constraint
            cannot be parsed.
    """
    if data is None:
        return cls.empty()
    if not isinstance(data, dict):
        raise ManifestError("Manifest document must be a mapping")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        logger.warning("Ignoring unknown manifest keys: %s", sorted(unknown))

    return cls(
        overrides=_rules(data, "overrides"),
        dependency_constraints=_rules(data, "constraints"),
        ignored_packages=IgnoredRuleset.from_patterns(_paths(data, "ignored")),
        required_packages=frozenset(_paths(data, "required")),
    )


def _from_yaml(cls: type, text: str) -> Any:
    """Parse a manifest from YAML text.

    Raises:
        ManifestError: If the text is not valid YAML or is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid manifest YAML: {exc}") from exc
    return cls.from_dict(data)


def _read(cls: type, path: Path) -> Any:
    """Read a manifest from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        ManifestError: If the file is not a valid manifest document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestError(f"{path}: not valid UTF-8: {exc}") from exc
    return cls.from_yaml(text)
