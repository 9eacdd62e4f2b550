from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from flat_tree.cli.utils import console as err_console
from flat_tree.cli.utils import make_context
from flat_tree.core.exceptions import FlatTreeError
from flat_tree.core.pipeline import Pipeline

console = Console()


def stats_command(
    records: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    id_field: Optional[str] = typer.Option(None, "--id-field"),
    parent_field: Optional[str] = typer.Option(None, "--parent-field"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a record file.
    """
    ctx = make_context(
        records,
        id_field=id_field,
        parent_field=parent_field,
        verbose=verbose,
    )

    try:
        Pipeline(ctx).load()
    except FlatTreeError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    table = Table(title="Record Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Records", str(ctx.stats["records"]))
    table.add_row("Unique ids", str(ctx.stats["unique_ids"]))
    table.add_row("Duplicate ids", str(ctx.stats["duplicate_ids"]))
    table.add_row("Top-level records", str(ctx.stats["top_level"]))

    console.print(table)
