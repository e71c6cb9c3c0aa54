"""locksat CLI --- check whether a dependency lock is still valid.

Entry point for the ``locksat`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check  --- Report whether a lock satisfies the manifest and import graph.

Usage::

    locksat check --tree imports.json
    locksat check --lock locksat-lock.json --manifest locksat.yaml --tree imports.json
    locksat check --tree imports.json --format json
"""

from __future__ import annotations

import logging

import click

from locksat import __version__
from locksat.cli.check import check_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """locksat: Decide whether a dependency lock still satisfies its project.

    Compares a lock against the project's manifest rules and import graph,
    so a full re-resolution can be skipped when nothing material changed.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(check_command)
