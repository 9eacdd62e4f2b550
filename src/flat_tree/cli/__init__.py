"""
CLI package for flat_tree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from flat_tree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
