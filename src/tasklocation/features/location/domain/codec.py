"""
Summary: Encode task locations to single string tokens and decode them back.
Why: Preferred-location hints cross a string-only API and must round-trip exactly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final, assert_never

from .models import (
    ExecutorCacheLocation,
    HdfsCacheLocation,
    HdfsCacheWithStorageLocation,
    HostLocation,
    HostWithStorageLocation,
    TaskLocation,
)
from .storage_type import StorageType

# Underscores are illegal in hostnames (RFC 952, RFC 1123), so none of these
# prefixes can be mistaken for the start of a real host.
HDFS_CACHE_TAG: Final[str] = "hdfs_cache_"
EXECUTOR_TAG: Final[str] = "executor_"
STORAGE_TYPE_TAG: Final[str] = "storage_type_"

_SEPARATOR: Final[str] = "_"


class TaskLocationError(ValueError):
    """Base class for location tokens that cannot be decoded."""

    def __init__(self, message: str, location: str) -> None:
        super().__init__(message)
        self.location: str = location


class MalformedLocationError(TaskLocationError):
    """Raised when a tagged token lacks its required second segment."""


def encode(location: TaskLocation) -> str:
    """Serialize a location into its string token.

    Args:
        location: Location to serialize.

    Returns:
        str: Token that ``decode`` maps back to an equal location.
    """
    match location:
        case HostLocation(host=host):
            return host
        case ExecutorCacheLocation(host=host, executor_id=executor_id):
            return f"{EXECUTOR_TAG}{host}{_SEPARATOR}{executor_id}"
        case HdfsCacheLocation(host=host):
            return f"{HDFS_CACHE_TAG}{host}"
        case HostWithStorageLocation(host=host, storage_type=storage_type):
            return f"{STORAGE_TYPE_TAG}{host}{_SEPARATOR}{storage_type}"
        case HdfsCacheWithStorageLocation(host=host, storage_type=storage_type):
            return f"{HDFS_CACHE_TAG}{STORAGE_TYPE_TAG}{host}{_SEPARATOR}{storage_type}"
        case _:
            assert_never(location)


def parse_storage_type(token: str) -> StorageType:
    """Resolve a storage type name.

    Raises:
        UnknownStorageTypeError: If ``token`` is not a recognised name.
    """
    return StorageType.value_of(token)


def _split_host_and_storage(remainder: str, location: str) -> tuple[str, StorageType]:
    host, separator, storage_name = remainder.partition(_SEPARATOR)
    if not separator:
        raise MalformedLocationError(f"Missing storage type in location: {location}", location)
    return host, parse_storage_type(storage_name)


def decode(location: str, *, strict: bool = False) -> TaskLocation:
    """Parse a string token into a location.

    The HDFS cache tag is examined first because it may wrap a storage type
    tag. Tagged host/value pairs split on the first underscore, so executor
    ids may contain underscores while hosts may not. Anything without a
    recognised tag is a bare host.

    Args:
        location: Token produced by ``encode`` or a preferred-location source.
        strict: Reject tokens that decode to an empty host.

    Returns:
        TaskLocation: Decoded location.

    Raises:
        MalformedLocationError: If a tagged token is missing its separator, or
            ``strict`` is set and the host is empty.
        UnknownStorageTypeError: If a storage type name is not recognised.
    """
    result: TaskLocation
    if location.startswith(HDFS_CACHE_TAG):
        cached = location.removeprefix(HDFS_CACHE_TAG)
        if cached.startswith(STORAGE_TYPE_TAG):
            host, storage_type = _split_host_and_storage(
                cached.removeprefix(STORAGE_TYPE_TAG), location
            )
            result = HdfsCacheWithStorageLocation(host=host, storage_type=storage_type)
        else:
            result = HdfsCacheLocation(host=cached)
    elif location.startswith(EXECUTOR_TAG):
        host, separator, executor_id = location.removeprefix(EXECUTOR_TAG).partition(_SEPARATOR)
        if not separator:
            raise MalformedLocationError(f"Illegal executor location format: {location}", location)
        result = ExecutorCacheLocation(host=host, executor_id=executor_id)
    elif location.startswith(STORAGE_TYPE_TAG):
        host, storage_type = _split_host_and_storage(
            location.removeprefix(STORAGE_TYPE_TAG), location
        )
        result = HostWithStorageLocation(host=host, storage_type=storage_type)
    else:
        result = HostLocation(host=location)

    if strict and not result.host:
        raise MalformedLocationError(f"Empty host in location: {location}", location)
    return result


def decode_all(locations: Iterable[str], *, strict: bool = False) -> list[TaskLocation]:
    """Decode preferred-location tokens in order, failing on the first bad one."""

    return [decode(location, strict=strict) for location in locations]


__all__ = [
    "EXECUTOR_TAG",
    "HDFS_CACHE_TAG",
    "STORAGE_TYPE_TAG",
    "MalformedLocationError",
    "TaskLocationError",
    "decode",
    "decode_all",
    "encode",
    "parse_storage_type",
]
