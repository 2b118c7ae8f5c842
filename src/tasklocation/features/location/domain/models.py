"""
Summary: Value objects describing where a unit of work prefers to run.
Why: Give schedulers a closed set of immutable, structurally comparable hints.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, final, override

from .storage_type import StorageType


class LocationKind(str, Enum):
    """Discriminant shared by every location variant."""

    HOST = "host"
    EXECUTOR_CACHE = "executor_cache"
    HDFS_CACHE = "hdfs_cache"
    HOST_WITH_STORAGE = "host_with_storage"
    HDFS_CACHE_WITH_STORAGE = "hdfs_cache_with_storage"


class _WireForm:
    """Mixin rendering a location as its serialized token."""

    __slots__ = ()

    @override
    def __str__(self) -> str:
        from .codec import encode

        return encode(self)  # pyright: ignore[reportArgumentType]


@final
@dataclass(frozen=True, slots=True)
class HostLocation(_WireForm):
    """Any executor on ``host`` is acceptable."""

    kind: ClassVar[LocationKind] = LocationKind.HOST

    host: str


@final
@dataclass(frozen=True, slots=True)
class ExecutorCacheLocation(_WireForm):
    """Prefer executor ``executor_id`` on ``host``, then other executors on that host."""

    kind: ClassVar[LocationKind] = LocationKind.EXECUTOR_CACHE

    host: str
    executor_id: str


@final
@dataclass(frozen=True, slots=True)
class HdfsCacheLocation(_WireForm):
    """``host`` holds an HDFS in-memory cached copy of the input block."""

    kind: ClassVar[LocationKind] = LocationKind.HDFS_CACHE

    host: str


@final
@dataclass(frozen=True, slots=True)
class HostWithStorageLocation(_WireForm):
    """A host location that also records the backing storage medium."""

    kind: ClassVar[LocationKind] = LocationKind.HOST_WITH_STORAGE

    host: str
    storage_type: StorageType


@final
@dataclass(frozen=True, slots=True)
class HdfsCacheWithStorageLocation(_WireForm):
    """An HDFS-cached host location that also records the storage medium."""

    kind: ClassVar[LocationKind] = LocationKind.HDFS_CACHE_WITH_STORAGE

    host: str
    storage_type: StorageType


TaskLocation = (
    HostLocation
    | ExecutorCacheLocation
    | HdfsCacheLocation
    | HostWithStorageLocation
    | HdfsCacheWithStorageLocation
)


def executor_location(host: str, executor_id: str) -> ExecutorCacheLocation:
    """Build the location of a specific executor on ``host``."""

    return ExecutorCacheLocation(host=host, executor_id=executor_id)


__all__ = [
    "ExecutorCacheLocation",
    "HdfsCacheLocation",
    "HdfsCacheWithStorageLocation",
    "HostLocation",
    "HostWithStorageLocation",
    "LocationKind",
    "TaskLocation",
    "executor_location",
]
