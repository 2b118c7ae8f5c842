"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from tasklocation.features.location import StorageType


@final
@dataclass(slots=True)
class DecodeArgs:
    """Command line arguments for the ``decode`` subcommand."""

    command: Literal["decode"]
    tokens: list[str]
    strict: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EncodeArgs:
    """Command line arguments for the ``encode`` subcommand."""

    command: Literal["encode"]
    host: str
    executor_id: str | None
    storage_type: StorageType | None
    hdfs_cache: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StorageTypesArgs:
    """Command line arguments for the ``storage-types`` subcommand."""

    command: Literal["storage-types"]
    verbose: bool
    quiet: bool


CLIArgs = DecodeArgs | EncodeArgs | StorageTypesArgs

__all__ = ["CLIArgs", "DecodeArgs", "EncodeArgs", "StorageTypesArgs"]
