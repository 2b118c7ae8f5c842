"""Display management for CLI interface."""

from tasklocation.ui.cli.display.result import LocationDisplay

__all__ = ["LocationDisplay"]
