"""Tests for task location value objects."""

from dataclasses import FrozenInstanceError

import pytest

from tasklocation.features.location import (
    ExecutorCacheLocation,
    HdfsCacheLocation,
    HdfsCacheWithStorageLocation,
    HostLocation,
    HostWithStorageLocation,
    LocationKind,
    StorageType,
    executor_location,
)


def test_variants_compare_structurally() -> None:
    assert HostLocation("h1") == HostLocation("h1")
    assert HostLocation("h1") != HostLocation("h2")
    assert hash(ExecutorCacheLocation("h1", "1")) == hash(ExecutorCacheLocation("h1", "1"))


def test_variants_with_same_host_are_distinct() -> None:
    """Equality never crosses variant boundaries."""

    assert HostLocation("h1") != HdfsCacheLocation("h1")
    assert HostWithStorageLocation("h1", StorageType.DISK) != HdfsCacheWithStorageLocation(
        "h1", StorageType.DISK
    )


def test_variants_are_immutable() -> None:
    location = HostLocation("h1")
    with pytest.raises(FrozenInstanceError):
        location.host = "h2"  # pyright: ignore[reportAttributeAccessIssue]


def test_each_variant_reports_its_kind() -> None:
    assert HostLocation("h").kind is LocationKind.HOST
    assert ExecutorCacheLocation("h", "1").kind is LocationKind.EXECUTOR_CACHE
    assert HdfsCacheLocation("h").kind is LocationKind.HDFS_CACHE
    assert HostWithStorageLocation("h", StorageType.SSD).kind is LocationKind.HOST_WITH_STORAGE
    assert (
        HdfsCacheWithStorageLocation("h", StorageType.SSD).kind
        is LocationKind.HDFS_CACHE_WITH_STORAGE
    )


def test_executor_location_helper() -> None:
    location = executor_location("h1", "exec_2")

    assert location == ExecutorCacheLocation(host="h1", executor_id="exec_2")
    assert str(location) == "executor_h1_exec_2"


def test_repr_is_dataclass_repr() -> None:
    """``str`` is the wire form while ``repr`` keeps the field view."""

    location = HdfsCacheLocation("h1")

    assert repr(location) == "HdfsCacheLocation(host='h1')"
    assert str(location) == "hdfs_cache_h1"
