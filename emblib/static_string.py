"""Character string with a fixed capacity that includes a terminating slot."""

from collections.abc import Iterator
from typing import Any


def _check_char(ch: Any) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError("a single character is required")
    return ch


class StaticString:
    """Mutable string holding at most ``capacity - 1`` characters."""

    def __init__(self, capacity: int, text: str = "") -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        text = text.split("\0", 1)[0]
        self._chars: list[str] = list(text[: capacity - 1])

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StaticString({self._capacity}, {str(self)!r})"

    def _c_str(self) -> str:
        return str(self).split("\0", 1)[0]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StaticString):
            return self._c_str() == other._c_str()
        if isinstance(other, str):
            return self._c_str() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _index(self, pos: int) -> int:
        size = len(self._chars)
        if not -size <= pos < size:
            raise IndexError("string index out of range")
        return pos

    def __getitem__(self, pos: int) -> str:
        return self._chars[self._index(pos)]

    def __setitem__(self, pos: int, ch: str) -> None:
        self._chars[self._index(pos)] = _check_char(ch)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._chars

    def full(self) -> bool:
        return len(self._chars) == self._capacity - 1

    def front(self) -> str:
        if not self._chars:
            raise IndexError("string is empty")
        return self._chars[0]

    def back(self) -> str:
        if not self._chars:
            raise IndexError("string is empty")
        return self._chars[-1]

    def resize(self, length: int, ch: str = "\0") -> None:
        """Truncate to ``length`` or extend with copies of ``ch``."""
        if not 0 <= length < self._capacity:
            raise ValueError("length exceeds capacity")
        _check_char(ch)
        if length > len(self._chars):
            self._chars.extend(ch * (length - len(self._chars)))
        else:
            del self._chars[length:]

    def clear(self) -> None:
        self._chars.clear()

    def push_back(self, ch: str) -> None:
        if self.full():
            raise IndexError("string is full")
        self._chars.append(_check_char(ch))

    def pop_back(self) -> None:
        if not self._chars:
            raise IndexError("string is empty")
        self._chars.pop()

    def insert(self, index: int, ch: str) -> None:
        """Insert ``ch`` before position ``index`` (``index`` may equal the length)."""
        if self.full():
            raise IndexError("string is full")
        if not 0 <= index <= len(self._chars):
            raise IndexError("insert position out of range")
        self._chars.insert(index, _check_char(ch))