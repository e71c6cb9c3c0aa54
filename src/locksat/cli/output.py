"""Rich output formatting helpers for the locksat CLI."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from locksat.core.verify import ConstraintMismatch, LockSatisfaction

console = Console()


def _import_table(title: str, paths: frozenset[str], style: str) -> Table:
    table = Table(title=title, show_header=False, title_style=style)
    table.add_column("Import path")
    for path in sorted(paths):
        table.add_row(path)
    return table


def _mismatch_table(title: str, mismatches: Mapping[str, ConstraintMismatch]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Project", style="bold")
    table.add_column("Rule", style="cyan")
    table.add_column("Locked version", style="red")
    for root, mm in sorted(mismatches.items()):
        table.add_row(root, str(mm.constraint), f"{mm.version} ({mm.version.kind.value})")
    return table


def print_satisfaction(result: LockSatisfaction) -> None:
    """Print every way in which a lock fails to satisfy its inputs.

    Args:
        result: The outcome of ``lock_satisfies_inputs``.
    """
    if result.no_lock:
        console.print(Panel("[bold yellow]No lock found.[/bold yellow]", title="locksat"))
        return

    if result.passed():
        console.print(Panel("[bold green]Lock satisfies all inputs.[/bold green]", title="locksat"))
        return

    console.print(Panel("[bold red]Lock does not satisfy inputs.[/bold red]", title="locksat"))

    if result.missing_imports():
        console.print(_import_table("Imports missing from lock", result.missing_imports(), "yellow"))
    if result.excess_imports():
        console.print(_import_table("Imports no longer required", result.excess_imports(), "dim"))
    if result.unmatched_overrides():
        console.print(_mismatch_table("Unmatched overrides", result.unmatched_overrides()))
    if result.unmatched_constraints():
        console.print(_mismatch_table("Unmatched constraints", result.unmatched_constraints()))
