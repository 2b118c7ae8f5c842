"""CLI command implementations."""

from tasklocation.ui.cli.commands.location import (
    Command,
    DecodeCommand,
    EncodeCommand,
    StorageTypesCommand,
)

__all__ = ["Command", "DecodeCommand", "EncodeCommand", "StorageTypesCommand"]
