"""FIFO queue with a fixed capacity."""

from collections import deque
from typing import Any


class BoundedQueue:
    """First-in first-out queue that refuses pushes once it is full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, items={list(self._items)!r})"

    def clear(self) -> None:
        self._items.clear()

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self._capacity

    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Append ``value`` at the back; raises IndexError when full."""
        if self.full():
            raise IndexError("queue is full")
        self._items.append(value)

    def front(self) -> Any:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def pop(self) -> None:
        """Drop the front element."""
        if not self._items:
            raise IndexError("queue is empty")
        self._items.popleft()