"""Command line interface entry points."""

from tasklocation.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
