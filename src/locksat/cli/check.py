"""``locksat check`` --- Report whether a lock satisfies the project inputs.

Reads the lock (JSON), the manifest (YAML) and the extracted import graph
(JSON), runs the satisfaction check, and reports every way in which the
lock no longer fits.

A lock file that does not exist is not an error: it is reported as "no
lock", which never passes. A manifest file that does not exist means no
rules.

Exit Codes:
    0 --- The lock satisfies the inputs.
    1 --- The lock does not satisfy the inputs, or there is no lock.
    2 --- An input file could not be read.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from locksat.core.lock import Lock
from locksat.core.manifest import Manifest
from locksat.core.pkgtree import PackageTree
from locksat.core.verify import lock_satisfies_inputs
from locksat.exceptions import LockSatError

DEFAULT_LOCK = "locksat-lock.json"
DEFAULT_MANIFEST = "locksat.yaml"


def _fail(message: str, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("check")
@click.option(
    "--lock", "lock_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_LOCK,
    show_default=True,
    help="Lock file to check.",
)
@click.option(
    "--manifest", "manifest_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_MANIFEST,
    show_default=True,
    help="Manifest with constraints, overrides, ignores and required packages.",
)
@click.option(
    "--tree", "tree_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSON document describing the project's packages and imports.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def check_command(
    lock_path: str, manifest_path: str, tree_path: str, output_format: str
) -> None:
    """Check whether the lock still satisfies the manifest and import graph.

    Exit code 0 if it does, 1 if it does not, 2 on unreadable input.
    """
    lock_file = Path(lock_path)
    manifest_file = Path(manifest_path)

    try:
        lock = Lock.read(lock_file) if lock_file.exists() else None
        manifest = Manifest.read(manifest_file) if manifest_file.exists() else None
        tree = PackageTree.read(Path(tree_path))
    except (LockSatError, OSError) as exc:
        _fail(str(exc), output_format)
        return

    result = lock_satisfies_inputs(lock, manifest, tree)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from locksat.cli.output import print_satisfaction
        print_satisfaction(result)

    sys.exit(0 if result.passed() else 1)
