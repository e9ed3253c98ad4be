import pytest

from emblib.circular_buffer import CircularBuffer


def test_source_sequence():
    buf = CircularBuffer(4)
    assert buf.empty()

    buf.push_back(1)
    assert buf.front() == 1
    assert buf.back() == 1
    assert len(buf) == 1
    buf.pop()
    assert buf.empty()
    assert len(buf) == 0

    buf.push_back(2)
    assert buf.front() == 2
    assert buf.back() == 2
    assert len(buf) == 1
    buf.push_back(3)
    assert len(buf) == 2
    assert buf.back() == 3
    buf.push_back(4)
    assert len(buf) == 3
    assert not buf.full()
    assert buf.back() == 4
    buf.push_back(5)
    assert len(buf) == 4
    assert buf.full()
    assert buf.back() == 5
    buf.push_back(6)
    assert len(buf) == 4
    assert buf.front() == 3
    assert buf.back() == 6
    buf.push_back(7)
    buf.push_back(8)
    assert buf.front() == 5
    assert buf.back() == 8
    buf.push_back(9)
    assert buf.front() == 6
    assert buf.back() == 9

    buf.pop()
    assert buf.front() == 7
    assert buf.back() == 9
    buf.pop()
    assert buf.back() == 9
    assert len(buf) == 2
    assert buf.front() == 8

    buf.push_back(10)
    assert len(buf) == 3
    assert buf.front() == 8
    assert buf.back() == 10

    buf.push_back(11)
    assert buf.full()
    assert buf.front() == 8
    assert buf.back() == 11


def test_empty_access_raises():
    buf = CircularBuffer(2)
    with pytest.raises(IndexError):
        buf.front()
    with pytest.raises(IndexError):
        buf.back()
    with pytest.raises(IndexError):
        buf.pop()


def test_clear_and_capacity():
    buf = CircularBuffer(3)
    for value in range(5):
        buf.push_back(value)
    assert buf.capacity() == 3
    buf.clear()
    assert buf.empty()
    assert len(buf) == 0


def test_fill_and_data():
    buf = CircularBuffer(3)
    buf.fill(7)
    assert buf.data() == (7, 7, 7)
    assert buf.empty()
    buf.push_back(1)
    assert buf.data() == (1, 7, 7)


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(0)