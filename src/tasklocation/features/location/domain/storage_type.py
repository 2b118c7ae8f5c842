"""
Summary: Storage media enumeration consulted when parsing storage-tagged locations.
Why: Keep the set of recognised storage names owned outside the location codec.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, override


class UnknownStorageTypeError(ValueError):
    """Raised when a name does not match any known storage type."""

    def __init__(self, name: str) -> None:
        valid = ", ".join(member.name for member in StorageType)
        super().__init__(f"Unknown storage type '{name}'. Valid options: {valid}")
        self.name: str = name


class StorageType(Enum):
    """Physical medium backing the data held on a host."""

    RAM_DISK = "RAM_DISK"
    SSD = "SSD"
    DISK = "DISK"
    ARCHIVE = "ARCHIVE"
    PROVIDED = "PROVIDED"
    NVDIMM = "NVDIMM"

    DEFAULT: ClassVar["StorageType"]

    @override
    def __str__(self) -> str:
        return self.name

    @property
    def is_transient(self) -> bool:
        """Whether data on this medium is lost on restart."""
        return self is StorageType.RAM_DISK

    @property
    def is_movable(self) -> bool:
        """Whether blocks may be migrated to or from this medium."""
        return not self.is_transient and self is not StorageType.PROVIDED

    @staticmethod
    def value_of(name: str) -> "StorageType":
        """Look up a member by its exact, case-sensitive name.

        Args:
            name: Member name such as ``"DISK"``.

        Returns:
            StorageType: Matching member.

        Raises:
            UnknownStorageTypeError: If ``name`` is not a member name.
        """
        try:
            return StorageType[name]
        except KeyError:
            raise UnknownStorageTypeError(name) from None

    @staticmethod
    def parse(value: str) -> "StorageType":
        """Translate loose user input (any case, padded) into a member."""

        return StorageType.value_of(value.strip().upper())


StorageType.DEFAULT = StorageType.DISK


__all__ = ["StorageType", "UnknownStorageTypeError"]
