"""Vector with a fixed maximum capacity.

Positions are integer indexes; insert positions may equal the length.
"""

import operator
from collections.abc import Iterable, Iterator
from typing import Any


class StaticVector:
    """List-like container that never grows beyond its capacity."""

    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        values = list(items)
        if len(values) > capacity:
            raise ValueError("too many items for capacity")
        self._capacity = capacity
        self._items = values

    @classmethod
    def filled(cls, capacity: int, size: int, value: Any = 0) -> "StaticVector":
        """Create a vector of ``size`` copies of ``value``."""
        if not 0 <= size <= capacity:
            raise ValueError("size exceeds capacity")
        return cls(capacity, [value] * size)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"StaticVector({self._capacity}, {self._items!r})"

    def _index(self, pos: int) -> int:
        pos = operator.index(pos)
        size = len(self._items)
        if pos < 0:
            pos += size
        if not 0 <= pos < size:
            raise IndexError("vector index out of range")
        return pos

    def _position(self, pos: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos <= len(self._items):
            raise IndexError("insert position out of range")
        return pos

    def __getitem__(self, pos: int) -> Any:
        return self._items[self._index(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._items[self._index(pos)] = value

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self._capacity

    def front(self) -> Any:
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[-1]

    def resize(self, size: int, value: Any = 0) -> None:
        """Truncate to ``size`` or extend with copies of ``value``."""
        if not 0 <= size <= self._capacity:
            raise ValueError("size exceeds capacity")
        if size > len(self._items):
            self._items.extend([value] * (size - len(self._items)))
        else:
            del self._items[size:]

    def clear(self) -> None:
        self._items.clear()

    def push_back(self, value: Any) -> None:
        if self.full():
            raise IndexError("vector is full")
        self._items.append(value)

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("vector is empty")
        self._items.pop()

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` before ``pos``."""
        if self.full():
            raise IndexError("vector is full")
        self._items.insert(self._position(pos), value)

    def insert_repeated(self, pos: int, count: int, value: Any) -> None:
        """Insert ``count`` copies of ``value`` before ``pos``."""
        if count < 0:
            raise ValueError("count must not be negative")
        if len(self._items) + count > self._capacity:
            raise IndexError("insertion exceeds capacity")
        pos = self._position(pos)
        self._items[pos:pos] = [value] * count

    def insert_from(self, pos: int, items: Iterable[Any]) -> None:
        """Insert the elements of ``items`` before ``pos``."""
        values = list(items)
        if len(self._items) + len(values) > self._capacity:
            raise IndexError("insertion exceeds capacity")
        pos = self._position(pos)
        self._items[pos:pos] = values

    def erase(self, pos: int) -> int:
        """Remove the element at ``pos``; return the index of the one that follows."""
        pos = self._index(pos)
        del self._items[pos]
        return pos

    def erase_range(self, first: int, last: int) -> int:
        """Remove elements ``first`` up to but not including ``last``; return ``first``."""
        first = operator.index(first)
        last = operator.index(last)
        if not 0 <= first <= last <= len(self._items):
            raise IndexError("erase range out of bounds")
        del self._items[first:last]
        return first