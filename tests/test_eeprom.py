import math
import zlib

import pytest

from emblib.chrono import Milliseconds
from emblib.eeprom import (
    EepromDriver,
    EepromStorage,
    MemoryAccessError,
    MemoryStatus,
    StorageErrors,
)

PAGE_BYTES = 64
PAGE_COUNT = 8
TIMEOUT = Milliseconds(-1)


class RamDriver(EepromDriver):
    def __init__(self):
        self.pages = [bytearray(PAGE_BYTES) for _ in range(PAGE_COUNT)]
        self.failing_reads = set()
        self.failing_writes = set()

    def read(self, page, offset, length, timeout):
        if page in self.failing_reads:
            raise MemoryAccessError(MemoryStatus.READ_FAILED)
        return bytes(self.pages[page][offset : offset + length])

    def write(self, page, offset, data, timeout):
        if page in self.failing_writes:
            raise MemoryAccessError(MemoryStatus.WRITE_TIMEOUT)
        self.pages[page][offset : offset + len(data)] = data

    def page_bytes(self):
        return PAGE_BYTES

    def page_count(self):
        return PAGE_COUNT


@pytest.fixture
def driver():
    return RamDriver()


@pytest.fixture
def storage(driver):
    return EepromStorage(driver, zlib.crc32)


def test_struct_round_trip(storage):
    s1 = (42, math.pi, 12, -100, True)
    s2 = (1.0, -2.0, 3.0, -4.0, 5.0)
    storage.write_struct(0, "<IfHi?", s1, TIMEOUT)
    storage.write_struct(2, "<5f", s2, TIMEOUT)

    d1 = storage.read_struct(0, "<IfHi?", TIMEOUT)
    d2 = storage.read_struct(2, "<5f", TIMEOUT)

    assert d1[0] == 42
    assert d1[1] == pytest.approx(math.pi, rel=1e-6)
    assert d1[2:] == (12, -100, True)
    assert d2 == s2
    assert storage.errors == StorageErrors()


def test_geometry(storage):
    assert storage.available_page_bytes == PAGE_BYTES - 4
    assert storage.available_page_count == (PAGE_COUNT - 2) // 2


def test_layout_of_pages(storage, driver):
    data = b"hello"
    storage.write(1, data)
    crc = zlib.crc32(data).to_bytes(4, "little")
    backup = 1 + storage.available_page_count
    assert bytes(driver.pages[1][:9]) == data + crc
    assert bytes(driver.pages[backup][:9]) == data + crc


def test_invalid_address(storage):
    with pytest.raises(MemoryAccessError) as exc:
        storage.write(storage.available_page_count, b"x")
    assert exc.value.status is MemoryStatus.INVALID_ADDRESS
    with pytest.raises(MemoryAccessError) as exc:
        storage.read(storage.available_page_count, 1)
    assert exc.value.status is MemoryStatus.INVALID_ADDRESS


def test_invalid_data_size(storage):
    with pytest.raises(MemoryAccessError) as exc:
        storage.write(0, bytes(storage.available_page_bytes))
    assert exc.value.status is MemoryStatus.INVALID_DATA_SIZE
    with pytest.raises(MemoryAccessError) as exc:
        storage.read(0, storage.available_page_bytes)
    assert exc.value.status is MemoryStatus.INVALID_DATA_SIZE


def test_primary_restored_from_backup(storage, driver):
    storage.write(0, b"abcdef")
    driver.pages[0][2] ^= 0xFF
    assert storage.read(0, 6) == b"abcdef"
    assert storage.errors.crc_mismatch == 1
    assert storage.errors.primary_data_corrupted == 1
    assert bytes(driver.pages[0][:6]) == b"abcdef"
    assert storage.read(0, 6) == b"abcdef"
    assert storage.errors.primary_data_corrupted == 1


def test_backup_restored_from_primary(storage, driver):
    storage.write(1, b"data")
    backup = 1 + storage.available_page_count
    driver.pages[backup][0] ^= 0x01
    assert storage.read(1, 4) == b"data"
    assert storage.errors.secondary_data_corrupted == 1
    assert driver.pages[backup][:8] == driver.pages[1][:8]


def test_outdated_backup_is_replaced(storage, driver):
    storage.write(2, b"old!")
    backup = 2 + storage.available_page_count
    driver.failing_writes.add(backup)
    with pytest.raises(MemoryAccessError):
        storage.write(2, b"new!")
    assert storage.errors.write == 1
    driver.failing_writes.clear()
    assert storage.read(2, 4) == b"new!"
    assert storage.errors.secondary_data_corrupted == 1
    assert bytes(driver.pages[backup][:4]) == b"new!"


def test_both_copies_corrupted(storage, driver):
    storage.write(0, b"xyz")
    driver.pages[0][0] ^= 0xFF
    driver.pages[storage.available_page_count][0] ^= 0xFF
    with pytest.raises(MemoryAccessError) as exc:
        storage.read(0, 3)
    assert exc.value.status is MemoryStatus.DATA_CORRUPTED
    assert storage.errors.fatal == 1
    assert storage.errors.crc_mismatch == 2


def test_read_failure_of_both_copies(storage, driver):
    storage.write(0, b"xyz")
    driver.failing_reads.update({0, storage.available_page_count})
    with pytest.raises(MemoryAccessError) as exc:
        storage.read(0, 3)
    assert exc.value.status is MemoryStatus.READ_FAILED
    assert storage.errors.read == 2
    assert storage.errors.fatal == 0


def test_primary_read_failure_falls_back(storage, driver):
    storage.write(0, b"safe")
    driver.failing_reads.add(0)
    assert storage.read(0, 4) == b"safe"
    assert storage.errors.read == 1
    assert storage.errors.primary_data_corrupted == 1


def test_write_failure_raises_driver_status(storage, driver):
    driver.failing_writes.add(0)
    with pytest.raises(MemoryAccessError) as exc:
        storage.write(0, b"abc")
    assert exc.value.status is MemoryStatus.WRITE_TIMEOUT
    assert storage.errors.write == 1


def test_custom_crc_function(driver):
    storage = EepromStorage(driver, lambda data: sum(data))
    storage.write(0, b"\x01\x02\x03")
    assert bytes(driver.pages[0][3:7]) == (6).to_bytes(4, "little")
    assert storage.read(0, 3) == b"\x01\x02\x03"