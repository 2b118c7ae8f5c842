# Path: `src/tasklocation/features/location/__init__.py`
# Summary: Export task location variants, storage types and the string codec.
# Why: Provide a stable import surface for schedulers, the CLI and tests.

from .domain.codec import (
    EXECUTOR_TAG,
    HDFS_CACHE_TAG,
    STORAGE_TYPE_TAG,
    MalformedLocationError,
    TaskLocationError,
    decode,
    decode_all,
    encode,
    parse_storage_type,
)
from .domain.models import (
    ExecutorCacheLocation,
    HdfsCacheLocation,
    HdfsCacheWithStorageLocation,
    HostLocation,
    HostWithStorageLocation,
    LocationKind,
    TaskLocation,
    executor_location,
)
from .domain.storage_type import StorageType, UnknownStorageTypeError

__all__ = [
    "EXECUTOR_TAG",
    "HDFS_CACHE_TAG",
    "STORAGE_TYPE_TAG",
    "ExecutorCacheLocation",
    "HdfsCacheLocation",
    "HdfsCacheWithStorageLocation",
    "HostLocation",
    "HostWithStorageLocation",
    "LocationKind",
    "MalformedLocationError",
    "StorageType",
    "TaskLocation",
    "TaskLocationError",
    "UnknownStorageTypeError",
    "decode",
    "decode_all",
    "encode",
    "executor_location",
    "parse_storage_type",
]
