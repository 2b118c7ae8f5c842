"""Preferred task locations and their single-token string encoding."""

from tasklocation.features.location import (
    ExecutorCacheLocation,
    HdfsCacheLocation,
    HdfsCacheWithStorageLocation,
    HostLocation,
    HostWithStorageLocation,
    MalformedLocationError,
    StorageType,
    TaskLocation,
    TaskLocationError,
    UnknownStorageTypeError,
    decode,
    decode_all,
    encode,
    executor_location,
)

__version__ = "0.1.0"

__all__ = [
    "ExecutorCacheLocation",
    "HdfsCacheLocation",
    "HdfsCacheWithStorageLocation",
    "HostLocation",
    "HostWithStorageLocation",
    "MalformedLocationError",
    "StorageType",
    "TaskLocation",
    "TaskLocationError",
    "UnknownStorageTypeError",
    "decode",
    "decode_all",
    "encode",
    "executor_location",
]
