"""
Summary: Execute the decode, encode and storage-types subcommands.
Why: Keep codec calls and their logging out of argument parsing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import final, override

from tasklocation.features.location import (
    ExecutorCacheLocation,
    HdfsCacheLocation,
    HdfsCacheWithStorageLocation,
    HostLocation,
    HostWithStorageLocation,
    MalformedLocationError,
    TaskLocation,
    UnknownStorageTypeError,
    decode,
    encode,
)
from tasklocation.platform.logging import logger
from tasklocation.ui.cli.args.options import DecodeArgs, EncodeArgs
from tasklocation.ui.cli.display import LocationDisplay


class Command(ABC):
    """Base class for command execution."""

    display: LocationDisplay

    def __init__(self, display: LocationDisplay | None = None) -> None:
        self.display = display or LocationDisplay()

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: ``True`` when every input was handled successfully.
        """
        pass


@final
class DecodeCommand(Command):
    """Decode each token, reporting failures without stopping early."""

    args: DecodeArgs

    def __init__(self, args: DecodeArgs, display: LocationDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    @override
    def execute(self) -> bool:
        decoded: list[tuple[str, TaskLocation]] = []
        failed = 0
        for token in self.args.tokens:
            try:
                location = decode(token, strict=self.args.strict)
            except (MalformedLocationError, UnknownStorageTypeError) as e:
                failed += 1
                logger.error(
                    "Failed to decode %r: %s",
                    token,
                    e,
                    extra={
                        "location_event": "location.decode.error",
                        "token": token,
                        "error_message": str(e),
                    },
                )
                continue

            logger.debug(
                "Decoded %r as %s",
                token,
                location.kind.value,
                extra={
                    "location_event": "location.decode.success",
                    "token": token,
                    "kind": location.kind.value,
                    "host": location.host,
                },
            )
            decoded.append((token, location))

        if decoded:
            self.display.show_decoded(decoded)
        return failed == 0


@final
class EncodeCommand(Command):
    """Build a location from options and print its token."""

    args: EncodeArgs

    def __init__(self, args: EncodeArgs, display: LocationDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    def build_location(self) -> TaskLocation:
        args = self.args
        if args.executor_id is not None:
            return ExecutorCacheLocation(host=args.host, executor_id=args.executor_id)
        if args.storage_type is not None:
            if args.hdfs_cache:
                return HdfsCacheWithStorageLocation(host=args.host, storage_type=args.storage_type)
            return HostWithStorageLocation(host=args.host, storage_type=args.storage_type)
        if args.hdfs_cache:
            return HdfsCacheLocation(host=args.host)
        return HostLocation(host=args.host)

    @override
    def execute(self) -> bool:
        location = self.build_location()
        token = encode(location)
        logger.debug(
            "Encoded %s as %r",
            location.kind.value,
            token,
            extra={
                "location_event": "location.encode.success",
                "token": token,
                "kind": location.kind.value,
            },
        )
        self.display.show_encoded(token)
        return True


@final
class StorageTypesCommand(Command):
    """List known storage types."""

    @override
    def execute(self) -> bool:
        self.display.show_storage_types()
        return True
