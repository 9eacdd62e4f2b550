from __future__ import annotations

import typer

from flat_tree.cli.commands.build import build_command
from flat_tree.cli.commands.stats import stats_command

app = typer.Typer(
    name="flat-tree",
    help="Rebuild trees from flat parent-referencing records",
    add_completion=False,
)

app.command("build")(build_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
