"""CLI result rendering.

Where: ui/cli/display/result.py
What: Render decoded locations, encoded tokens and storage types.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tasklocation.features.location import (
    ExecutorCacheLocation,
    HdfsCacheWithStorageLocation,
    HostWithStorageLocation,
    StorageType,
    TaskLocation,
)


@final
class LocationDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_decoded(self, decoded: Sequence[tuple[str, TaskLocation]]) -> None:
        """Display decoded tokens as a table.

        Args:
            decoded: Pairs of raw token and the location it decoded to.
        """
        table = Table(title="Decoded Locations")
        table.add_column("Token", style="white")
        table.add_column("Kind", style="cyan")
        table.add_column("Host", style="green")
        table.add_column("Executor", style="magenta")
        table.add_column("Storage", style="yellow")

        for token, location in decoded:
            executor_id = ""
            storage = ""
            if isinstance(location, ExecutorCacheLocation):
                executor_id = location.executor_id
            elif isinstance(location, (HostWithStorageLocation, HdfsCacheWithStorageLocation)):
                storage = str(location.storage_type)
            # Any string decodes to a host, so cells are literal text, never markup.
            table.add_row(
                Text(token),
                Text(location.kind.value),
                Text(location.host),
                Text(executor_id),
                Text(storage),
            )

        self.console.print(table)

    def show_encoded(self, token: str) -> None:
        self.console.print(token, markup=False, highlight=False)

    def show_storage_types(self) -> None:
        """List every storage type with its flags."""

        table = Table(title="Storage Types")
        table.add_column("Name", style="white")
        table.add_column("Transient", justify="center")
        table.add_column("Movable", justify="center")
        for storage_type in StorageType:
            name = str(storage_type)
            if storage_type is StorageType.DEFAULT:
                name += " (default)"
            table.add_row(
                name,
                "yes" if storage_type.is_transient else "no",
                "yes" if storage_type.is_movable else "no",
            )
        self.console.print(table)
