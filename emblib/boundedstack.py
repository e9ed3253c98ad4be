"""LIFO stack with a fixed capacity."""

from typing import Any


class BoundedStack:
    """Last-in first-out stack that refuses pushes once it is full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={self._items!r})"

    def clear(self) -> None:
        self._items.clear()

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self._capacity

    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises IndexError when full."""
        if self.full():
            raise IndexError("stack is full")
        self._items.append(value)

    def top(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def pop(self) -> None:
        """Drop the top element."""
        if not self._items:
            raise IndexError("stack is empty")
        self._items.pop()