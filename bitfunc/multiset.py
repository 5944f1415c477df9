"""A multiset of small non-negative integers with a fixed number of bits per count."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from itertools import repeat
from os import PathLike
from pathlib import Path
from typing import Union

_HEADER = struct.Struct("<IB")
MAX_BITS = 8

_PathType = Union[str, "PathLike[str]"]


class MultiSetFullError(ValueError):
    """Raised when a number already has the maximum count."""


def _payload_size(n: int, k: int) -> int:
    return -(-((n + 1) * k) // 8)


class MultiSet:
    """A multiset of the numbers 0..n, each held at most 2**k - 1 times.

    Counts are packed as k-bit big-endian fields, most significant bit first.
    """

    __slots__ = ("_n", "_k", "_counts")

    def __init__(self, n: int, k: int) -> None:
        if not 0 <= n <= 0xFFFFFFFF:
            raise ValueError(f"largest number must be in 0..{0xFFFFFFFF}, got {n}")
        if not 1 <= k <= MAX_BITS:
            raise ValueError(f"bits per count must be in 1..{MAX_BITS}, got {k}")
        self._n = n
        self._k = k
        self._counts = [0] * (n + 1)

    @property
    def _limit(self) -> int:
        return (1 << self._k) - 1

    def add(self, num: int) -> None:
        """Add one occurrence of ``num``."""
        if not 0 <= num <= self._n:
            raise ValueError(f"{num} is outside 0..{self._n}")
        if self._counts[num] >= self._limit:
            raise MultiSetFullError(f"{num} already occurs the maximum {self._limit} times")
        self._counts[num] += 1

    def count(self, num: int) -> int:
        """Number of occurrences of ``num``; zero for numbers the set cannot hold."""
        if 0 <= num <= self._n:
            return self._counts[num]
        return 0

    def __iter__(self) -> Iterator[int]:
        for number, occurrences in enumerate(self._counts):
            yield from repeat(number, occurrences)

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def __repr__(self) -> str:
        return f"MultiSet(n={self._n}, k={self._k}, items=[{', '.join(map(str, self))}])"

    def _bits(self) -> str:
        return "".join(format(c, f"0{self._k}b") for c in self._counts)

    def memory_view(self) -> str:
        """The packed counts as space-separated bits."""
        return " ".join(self._bits())

    def to_bytes(self) -> bytes:
        """Header of n (uint32, little-endian) and k (uint8), then the packed counts."""
        bits = self._bits()
        size = _payload_size(self._n, self._k)
        payload = int(bits.ljust(size * 8, "0"), 2).to_bytes(size, "big")
        return _HEADER.pack(self._n, self._k) + payload

    @classmethod
    def from_bytes(cls, data: bytes) -> MultiSet:
        if len(data) < _HEADER.size:
            raise ValueError("data too short for a multiset header")
        n, k = _HEADER.unpack_from(data)
        result = cls(n, k)
        size = _payload_size(n, k)
        payload = data[_HEADER.size:]
        if len(payload) != size:
            raise ValueError(f"expected {size} bytes of counts, got {len(payload)}")
        bits = format(int.from_bytes(payload, "big"), f"0{size * 8}b")
        result._counts = [int(bits[start:start + k], 2) for start in range(0, (n + 1) * k, k)]
        return result

    def save(self, path: _PathType) -> None:
        Path(path).write_bytes(self.to_bytes())

    @classmethod
    def load(cls, path: _PathType) -> MultiSet:
        return cls.from_bytes(Path(path).read_bytes())

    def intersection(self, other: MultiSet) -> MultiSet:
        """Smallest count of each number, within the smaller range and bit width."""
        result = MultiSet(min(self._n, other._n), min(self._k, other._k))
        result._counts = [min(a, b) for a, b in zip(self._counts, other._counts)]
        return result

    def difference(self, other: MultiSet) -> MultiSet:
        """Counts of this set minus those of ``other``, never below zero."""
        result = MultiSet(self._n, self._k)
        result._counts = [max(0, c - other.count(i)) for i, c in enumerate(self._counts)]
        return result

    def complement(self) -> MultiSet:
        """Each number held the maximum count minus its current count."""
        result = MultiSet(self._n, self._k)
        limit = self._limit
        result._counts = [limit - c for c in self._counts]
        return result