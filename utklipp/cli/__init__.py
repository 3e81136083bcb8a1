"""Command-line interface."""

from utklipp.cli.repl import main

__all__ = ["main"]
