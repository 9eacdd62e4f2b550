from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional

import typer

from flat_tree.cli.utils import console, make_context
from flat_tree.core.exceptions import PipelineError
from flat_tree.core.pipeline import Pipeline
from flat_tree.exporter import serialize_tree_to_json_string


def build_command(
    records: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    root: str = typer.Option(..., "--root", "-r", help="Id of the tree root"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    id_field: Optional[str] = typer.Option(
        None,
        "--id-field",
        help="Record field holding the id (default from config)",
    ),
    parent_field: Optional[str] = typer.Option(
        None,
        "--parent-field",
        help="Record field holding the parent id (default from config)",
    ),
    children_key: Optional[str] = typer.Option(
        None,
        "--children-key",
        help="Output key for child lists (default from config)",
    ),
    skip: Optional[List[str]] = typer.Option(
        None,
        "--skip",
        help="FIELD=VALUE; drop matching records and everything below them",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Build the tree under ROOT and print it as JSON (stdout by default).
    """
    ctx = make_context(
        records,
        root=root,
        out=out,
        id_field=id_field,
        parent_field=parent_field,
        children_key=children_key,
        skip=skip,
        pretty=pretty,
        verbose=verbose,
    )

    t0 = time.perf_counter()
    try:
        tree = Pipeline(ctx).run()
    except PipelineError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Built tree in {elapsed:.3f}s ({ctx.stats.get('records', 0)} records)")

    if tree is None:
        console.print(f"[yellow]No tree for root {ctx.root_id!r}[/yellow]")
        if not out:
            print("null")
        raise typer.Exit(code=1)

    if not out:
        print(serialize_tree_to_json_string(tree, indent=ctx.indent))
    elif verbose:
        console.log(f"Wrote {out}")
