"""
CLI command modules for flat_tree.

Each command module defines a single Typer-compatible command function.
"""

from flat_tree.cli.commands.build import build_command
from flat_tree.cli.commands.stats import stats_command

__all__ = [
    "build_command",
    "stats_command",
]
