"""EEPROM storage that keeps every page twice, each copy guarded by a CRC-32."""

from __future__ import annotations

import struct
import zlib
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from emblib.chrono import Duration

_CRC_BYTES = 4


class MemoryStatus(Enum):
    """Outcome of a memory operation."""

    OK = auto()
    READ_FAILED = auto()
    WRITE_FAILED = auto()
    READ_TIMEOUT = auto()
    WRITE_TIMEOUT = auto()
    INVALID_ADDRESS = auto()
    INVALID_DATA_SIZE = auto()
    DATA_CORRUPTED = auto()
    NO_DEVICE = auto()


class MemoryAccessError(Exception):
    """A memory operation failed with the given status."""

    def __init__(self, status: MemoryStatus) -> None:
        super().__init__(f"memory access failed: {status.name.lower()}")
        self.status = status


class EepromDriver(ABC):
    """Page-oriented access to an EEPROM device.

    Implementations raise :class:`MemoryAccessError` when an access fails.
    """

    @abstractmethod
    def read(self, page: int, offset: int, length: int, timeout: Duration | None) -> bytes:
        """Return ``length`` bytes starting at ``offset`` within ``page``."""

    @abstractmethod
    def write(self, page: int, offset: int, data: bytes, timeout: Duration | None) -> None:
        """Store ``data`` at ``offset`` within ``page``."""

    @abstractmethod
    def page_bytes(self) -> int:
        """Size of one page in bytes."""

    @abstractmethod
    def page_count(self) -> int:
        """Number of pages on the device."""


@dataclass
class StorageErrors:
    """Counters of problems met by an :class:`EepromStorage`."""

    read: int = 0
    write: int = 0
    crc_mismatch: int = 0
    primary_data_corrupted: int = 0
    secondary_data_corrupted: int = 0
    fatal: int = 0


def _crc_bytes(crc: int) -> bytes:
    return (crc & 0xFFFFFFFF).to_bytes(_CRC_BYTES, "little")


class EepromStorage:
    """Stores data in a primary page and a backup page, repairing either from the other.

    Of the device's pages, ``(page_count - 2) // 2`` are usable; page ``n`` is
    backed up in page ``n + available_page_count``. Each page holds the data
    followed by its little-endian CRC-32.
    """

    def __init__(
        self,
        driver: EepromDriver,
        crc32: Callable[[bytes], int] = zlib.crc32,
    ) -> None:
        self._driver = driver
        self._crc32 = crc32
        self.available_page_bytes = driver.page_bytes() - _CRC_BYTES
        self.available_page_count = (driver.page_count() - 2) // 2
        self.errors = StorageErrors()

    def _check(self, page: int, length: int) -> None:
        if not 0 <= page < self.available_page_count:
            raise MemoryAccessError(MemoryStatus.INVALID_ADDRESS)
        if not 0 <= length < self.available_page_bytes:
            raise MemoryAccessError(MemoryStatus.INVALID_DATA_SIZE)

    def _crc(self, data: bytes) -> int:
        return self._crc32(data) & 0xFFFFFFFF

    def write(self, page: int, data: bytes, timeout: Duration | None = None) -> None:
        """Write ``data`` and its CRC to the primary page, then to the backup."""
        data = bytes(data)
        self._check(page, len(data))
        crc = _crc_bytes(self._crc(data))
        backup = page + self.available_page_count
        for target, offset, chunk in (
            (page, 0, data),
            (page, len(data), crc),
            (backup, 0, data),
            (backup, len(data), crc),
        ):
            try:
                self._driver.write(target, offset, chunk, timeout)
            except MemoryAccessError:
                self.errors.write += 1
                raise

    def _read_copy(
        self, page: int, length: int, timeout: Duration | None
    ) -> tuple[bytes | None, int, MemoryStatus]:
        """Read one copy; return (data or None if unusable, its CRC, last status)."""
        try:
            data = bytes(self._driver.read(page, 0, length, timeout))
            stored = bytes(self._driver.read(page, length, _CRC_BYTES, timeout))
        except MemoryAccessError as exc:
            self.errors.read += 1
            return None, 0, exc.status
        crc = self._crc(data)
        if crc != int.from_bytes(stored, "little"):
            self.errors.crc_mismatch += 1
            return None, crc, MemoryStatus.OK
        return data, crc, MemoryStatus.OK

    def _rewrite(self, page: int, data: bytes, crc: int, timeout: Duration | None) -> None:
        try:
            self._driver.write(page, 0, data, timeout)
            self._driver.write(page, len(data), _crc_bytes(crc), timeout)
        except MemoryAccessError:
            pass

    def read(self, page: int, length: int, timeout: Duration | None = None) -> bytes:
        """Read ``length`` bytes, repairing a damaged or outdated copy from the other.

        Raises :class:`MemoryAccessError` with ``DATA_CORRUPTED`` when neither
        copy is valid, or with the driver's status when the backup cannot be read.
        """
        self._check(page, length)
        backup = page + self.available_page_count
        primary, primary_crc, _ = self._read_copy(page, length, timeout)
        secondary, secondary_crc, status = self._read_copy(backup, length, timeout)

        if primary is not None:
            if secondary is None or primary_crc != secondary_crc:
                self.errors.secondary_data_corrupted += 1
                self._rewrite(backup, primary, primary_crc, timeout)
            return primary
        if secondary is not None:
            self.errors.primary_data_corrupted += 1
            self._rewrite(page, secondary, secondary_crc, timeout)
            return secondary
        if status is MemoryStatus.OK:
            self.errors.fatal += 1
            raise MemoryAccessError(MemoryStatus.DATA_CORRUPTED)
        raise MemoryAccessError(status)

    @staticmethod
    def _layout(layout: str | struct.Struct) -> struct.Struct:
        return layout if isinstance(layout, struct.Struct) else struct.Struct(layout)

    def read_struct(
        self, page: int, layout: str | struct.Struct, timeout: Duration | None = None
    ) -> tuple[Any, ...]:
        """Read a record packed with the :mod:`struct` ``layout``."""
        packer = self._layout(layout)
        return packer.unpack(self.read(page, packer.size, timeout))

    def write_struct(
        self,
        page: int,
        layout: str | struct.Struct,
        values: Iterable[Any],
        timeout: Duration | None = None,
    ) -> None:
        """Pack ``values`` with the :mod:`struct` ``layout`` and write them."""
        packer = self._layout(layout)
        self.write(page, packer.pack(*values), timeout)