"""Fixed-capacity ring buffer that overwrites its oldest element when full."""

from typing import Any


class CircularBuffer:
    """Ring buffer of fixed capacity; pushing onto a full buffer drops the front."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._data: list[Any] = [None] * capacity
        self._front = 0
        self._back = 0
        self._full = False

    def __len__(self) -> int:
        if self._full:
            return self._capacity
        return (self._back - self._front) % self._capacity

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self._capacity}, size={len(self)})"

    def clear(self) -> None:
        """Remove every element."""
        self._front = 0
        self._back = 0
        self._full = False

    def empty(self) -> bool:
        return not self._full and self._front == self._back

    def full(self) -> bool:
        return self._full

    def capacity(self) -> int:
        return self._capacity

    def push_back(self, value: Any) -> None:
        """Append ``value``, overwriting the oldest element if the buffer is full."""
        self._data[self._back] = value
        if self._full:
            self._front = (self._front + 1) % self._capacity
        self._back = (self._back + 1) % self._capacity
        self._full = self._front == self._back

    def _require_items(self) -> None:
        if self.empty():
            raise IndexError("circular buffer is empty")

    def front(self) -> Any:
        """Return the oldest element."""
        self._require_items()
        return self._data[self._front]

    def back(self) -> Any:
        """Return the newest element."""
        self._require_items()
        return self._data[(self._back - 1) % self._capacity]

    def pop(self) -> None:
        """Drop the oldest element."""
        self._require_items()
        self._full = False
        self._front = (self._front + 1) % self._capacity

    def data(self) -> tuple[Any, ...]:
        """Return the whole underlying storage, in storage order."""
        return tuple(self._data)

    def fill(self, value: Any) -> None:
        """Overwrite every storage slot with ``value`` without changing the size."""
        self._data = [value] * self._capacity