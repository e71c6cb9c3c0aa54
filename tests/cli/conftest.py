"""Shared fixtures for CLI tests.

Provides a project directory holding a package tree, a manifest, and a
lock that satisfies both, which individual tests then perturb.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

TREE = {
    "import_root": "github.com/acme/app",
    "packages": {
        "github.com/acme/app": {
            "imports": ["fmt", "github.com/pkg/errors"],
            "test_imports": ["github.com/stretchr/testify/assert"],
        },
    },
}

MANIFEST = """\
constraints:
  github.com/pkg/errors: "^0.8.0"
"""

LOCK = {
    "input_imports": ["github.com/pkg/errors", "github.com/stretchr/testify/assert"],
    "projects": [
        {"root": "github.com/pkg/errors", "version": "v0.8.1", "packages": ["."]},
        {"root": "github.com/stretchr/testify", "version": "v1.2.2", "packages": ["assert"]},
    ],
}


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A directory whose lock satisfies its manifest and tree."""
    (tmp_path / "tree.json").write_text(json.dumps(TREE), encoding="utf-8")
    (tmp_path / "locksat.yaml").write_text(MANIFEST, encoding="utf-8")
    (tmp_path / "locksat-lock.json").write_text(json.dumps(LOCK), encoding="utf-8")
    return tmp_path


@pytest.fixture
def cli_args(project_dir: Path) -> list[str]:
    """Arguments for ``locksat check`` pointing at ``project_dir``."""
    return [
        "check",
        "--lock", str(project_dir / "locksat-lock.json"),
        "--manifest", str(project_dir / "locksat.yaml"),
        "--tree", str(project_dir / "tree.json"),
    ]
