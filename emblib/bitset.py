"""Fixed-size set of bits addressed by position."""

import operator
from collections.abc import Iterable
from itertools import count as _count

WORD_BITS = 16
_WORD_MASK = (1 << WORD_BITS) - 1


class Bitset:
    """A fixed number of bits; bits outside the size are always clear."""

    __slots__ = ("_size", "_bits")

    def __init__(self, size: int, value: int = 0) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._bits = operator.index(value) & self._mask

    @classmethod
    def from_words(cls, size: int, words: Iterable[int]) -> "Bitset":
        """Build from 16-bit words, least significant word first."""
        values = list(words)
        if size <= 0:
            raise ValueError("size must be positive")
        expected = -(-size // WORD_BITS)
        if len(values) != expected:
            raise ValueError(f"expected {expected} words, got {len(values)}")
        value = 0
        for shift, word in zip(_count(0, WORD_BITS), values):
            if not 0 <= word <= _WORD_MASK:
                raise ValueError("word out of range")
            value |= word << shift
        return cls(size, value)

    @property
    def _mask(self) -> int:
        return (1 << self._size) - 1

    def _check(self, pos: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos < self._size:
            raise IndexError("bit position out of range")
        return pos

    def __len__(self) -> int:
        return self._size

    def __int__(self) -> int:
        return self._bits

    def __repr__(self) -> str:
        return f"Bitset({self._size}, {self._bits:#x})"

    def __getitem__(self, pos: int) -> bool:
        return self.test(pos)

    def __setitem__(self, pos: int, value: bool) -> None:
        self.set(pos, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def test(self, pos: int) -> bool:
        return bool(self._bits >> self._check(pos) & 1)

    def all(self) -> bool:
        return self._bits == self._mask

    def any(self) -> bool:
        return self._bits != 0

    def none(self) -> bool:
        return self._bits == 0

    def count(self) -> int:
        return self._bits.bit_count()

    def set(self, pos: "int | None" = None, value: bool = True) -> None:
        """Set the bit at ``pos`` to ``value``, or every bit when ``pos`` is None."""
        if pos is None:
            self._bits = self._mask if value else 0
            return
        bit = 1 << self._check(pos)
        if value:
            self._bits |= bit
        else:
            self._bits &= ~bit

    def reset(self, pos: "int | None" = None) -> None:
        """Clear the bit at ``pos``, or every bit when ``pos`` is None."""
        if pos is None:
            self._bits = 0
        else:
            self._bits &= ~(1 << self._check(pos))

    def flip(self, pos: "int | None" = None) -> None:
        """Toggle the bit at ``pos``, or every bit when ``pos`` is None."""
        if pos is None:
            self._bits ^= self._mask
        else:
            self._bits ^= 1 << self._check(pos)