"""Small generic algorithms working on sequences by index.

Functions that look for an element return its index; when nothing is found
they return ``len(seq)``, the position one past the last element.
"""

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def clamp(value: T, lo: T, hi: T) -> T:
    """Return ``value`` limited to the closed interval ``[lo, hi]``."""
    if value < lo:  # type: ignore[operator]
        return lo
    if hi < value:  # type: ignore[operator]
        return hi
    return value


def median_of_three(a: T, b: T, c: T) -> T:
    """Return the middle one of three values."""
    if a > c:  # type: ignore[operator]
        a, c = c, a
    if a > b:  # type: ignore[operator]
        a, b = b, a
    if b > c:  # type: ignore[operator]
        b, c = c, b
    return b


def find(seq: Sequence[Any], value: Any) -> int:
    """Return the index of the first element equal to ``value``, or ``len(seq)``."""
    for index, item in enumerate(seq):
        if item == value:
            return index
    return len(seq)


def binary_find(seq: Sequence[Any], value: Any) -> int:
    """Search a sorted sequence; return the index of a match or ``len(seq)``."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        item = seq[mid]
        if value == item:
            return mid
        if value < item:
            hi = mid
        else:
            lo = mid + 1
    return len(seq)


def fill(seq: MutableSequence[Any], value: Any) -> None:
    """Overwrite every element of ``seq`` with ``value``."""
    seq[:] = [value] * len(seq)


def count(seq: Iterable[Any], value: Any) -> int:
    """Return how many elements compare equal to ``value``."""
    return sum(1 for item in seq if item == value)


def equal(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Compare ``first`` element-wise with the leading elements of ``second``.

    Raises ValueError if ``second`` runs out before ``first`` does.
    """
    others = iter(second)
    for item in first:
        try:
            other = next(others)
        except StopIteration:
            raise ValueError("second sequence is shorter than the first") from None
        if not item == other:
            return False
    return True


def max_element(seq: Iterable[Any]) -> int:
    """Return the index of the first largest element (0 for an empty sequence)."""
    items = enumerate(seq)
    try:
        largest_index, largest = next(items)
    except StopIteration:
        return 0
    for index, item in items:
        if largest < item:
            largest_index, largest = index, item
    return largest_index


def min_element(seq: Iterable[Any]) -> int:
    """Return the index of the first smallest element (0 for an empty sequence)."""
    items = enumerate(seq)
    try:
        smallest_index, smallest = next(items)
    except StopIteration:
        return 0
    for index, item in items:
        if item < smallest:
            smallest_index, smallest = index, item
    return smallest_index


def minmax_element(seq: Iterable[Any]) -> tuple[int, int]:
    """Return ``(first smallest index, last largest index)``; ``(0, 0)`` if empty."""
    items = enumerate(seq)
    try:
        min_index, smallest = next(items)
    except StopIteration:
        return 0, 0
    max_index, largest = min_index, smallest
    for index, item in items:
        if item < smallest:
            min_index, smallest = index, item
        if not item < largest:
            max_index, largest = index, item
    return min_index, max_index