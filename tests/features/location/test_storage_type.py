"""Tests for the storage type enumeration."""

import pytest

from tasklocation.features.location import StorageType, UnknownStorageTypeError


def test_members_in_declaration_order() -> None:
    assert [str(member) for member in StorageType] == [
        "RAM_DISK",
        "SSD",
        "DISK",
        "ARCHIVE",
        "PROVIDED",
        "NVDIMM",
    ]


def test_default_is_disk() -> None:
    assert StorageType.DEFAULT is StorageType.DISK


def test_value_of_is_case_sensitive() -> None:
    assert StorageType.value_of("SSD") is StorageType.SSD
    with pytest.raises(UnknownStorageTypeError) as info:
        _ = StorageType.value_of("ssd")

    assert info.value.name == "ssd"
    assert "Valid options" in str(info.value)


def test_value_of_rejects_default_alias() -> None:
    """``DEFAULT`` is a class attribute, not a storage name."""

    with pytest.raises(UnknownStorageTypeError):
        _ = StorageType.value_of("DEFAULT")


def test_parse_is_lenient() -> None:
    assert StorageType.parse("  ram_disk ") is StorageType.RAM_DISK
    with pytest.raises(UnknownStorageTypeError):
        _ = StorageType.parse("tape")


@pytest.mark.parametrize(
    ("storage_type", "transient", "movable"),
    [
        (StorageType.RAM_DISK, True, False),
        (StorageType.SSD, False, True),
        (StorageType.DISK, False, True),
        (StorageType.ARCHIVE, False, True),
        (StorageType.PROVIDED, False, False),
        (StorageType.NVDIMM, False, True),
    ],
)
def test_flags(storage_type: StorageType, transient: bool, movable: bool) -> None:
    assert storage_type.is_transient is transient
    assert storage_type.is_movable is movable
