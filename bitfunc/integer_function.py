"""Functions on 16-bit signed integers whose values and excluded points can be changed."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import Union

INT16_MIN = -32768
INT16_MAX = 32767
SIZE = INT16_MAX - INT16_MIN + 1
OFFSET = INT16_MAX + 1

_PathType = Union[str, "PathLike[str]"]


class ExcludedPointError(ValueError):
    """Raised when a function is evaluated at an excluded point."""


def _wrap(value: int) -> int:
    """Reduce an integer to the 16-bit signed range, as two's complement does."""
    return ((value + OFFSET) & 0xFFFF) - OFFSET


def _index(x: int) -> int:
    if not INT16_MIN <= x <= INT16_MAX:
        raise ValueError(f"{x} is outside the 16-bit signed range")
    return x + OFFSET


class ModifiableIntegerFunction:
    """A total function from int16 to int16 that may leave some points undefined.

    ``f * g`` is the composition ``f(g(x))``, ``f ** -1`` the inverse and
    ``f ** k`` the k-fold composition of ``f`` with itself.  ``f == g`` holds
    when the two functions are parallel: they exclude the same points and
    differ by one constant everywhere.
    """

    __slots__ = ("_values", "_excluded")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, func: Callable[[int], int] | None = None) -> None:
        if func is None:
            self._values = [0] * SIZE
        else:
            self._values = [_wrap(func(x)) for x in range(INT16_MIN, INT16_MAX + 1)]
        self._excluded = [False] * SIZE

    @classmethod
    def _from_tables(cls, values: list[int], excluded: list[bool]) -> ModifiableIntegerFunction:
        obj = cls.__new__(cls)
        obj._values = values
        obj._excluded = excluded
        return obj

    def set_value(self, x: int, y: int) -> None:
        """Make the function return ``y`` at ``x``."""
        if not INT16_MIN <= y <= INT16_MAX:
            raise ValueError(f"{y} is outside the 16-bit signed range")
        self._values[_index(x)] = y

    def exclude(self, x: int) -> None:
        """Leave the function undefined at ``x``."""
        self._excluded[_index(x)] = True

    def __call__(self, x: int) -> int:
        index = _index(x)
        if self._excluded[index]:
            raise ExcludedPointError(f"point {x} is excluded")
        return self._values[index]

    def __add__(self, other: object) -> ModifiableIntegerFunction:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return self._from_tables(
            [_wrap(a + b) for a, b in zip(self._values, other._values)],
            [a or b for a, b in zip(self._excluded, other._excluded)],
        )

    def __sub__(self, other: object) -> ModifiableIntegerFunction:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return self._from_tables(
            [_wrap(a - b) for a, b in zip(self._values, other._values)],
            [a or b for a, b in zip(self._excluded, other._excluded)],
        )

    def __mul__(self, other: object) -> ModifiableIntegerFunction:
        """Composition: ``(self * other)(x) == self(other(x))``."""
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        outer_values, outer_excluded = self._values, self._excluded
        return self._from_tables(
            [outer_values[v + OFFSET] for v in other._values],
            [
                inner_ex or outer_excluded[v + OFFSET]
                for v, inner_ex in zip(other._values, other._excluded)
            ],
        )

    def __pow__(self, k: object) -> ModifiableIntegerFunction:
        if not isinstance(k, int):
            return NotImplemented
        if k == -1:
            values = [0] * SIZE
            excluded = [True] * SIZE
            points = range(INT16_MIN, INT16_MAX + 1)
            for x, y, ex in zip(points, self._values, self._excluded):
                if not ex:
                    values[y + OFFSET] = x
                    excluded[y + OFFSET] = False
            return self._from_tables(values, excluded)
        if k < -1 or k == 0:
            raise ValueError(f"unsupported power {k}")
        result = self._from_tables(list(self._values), list(self._excluded))
        for _ in range(k - 1):
            result = result * self
        return result

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return all(
            not ex and a > b
            for a, ex, b in zip(self._values, self._excluded, other._values)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return all(
            not ex and a < b
            for a, b, ex in zip(self._values, other._values, other._excluded)
        )

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return not self < other

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        return not self > other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModifiableIntegerFunction):
            return NotImplemented
        if self._excluded != other._excluded:
            return False
        constant = self._values[0] - other._values[0]
        return all(a - b == constant for a, b in zip(self._values, other._values))

    def _defined_values(self) -> list[int]:
        return [v for v, ex in zip(self._values, self._excluded) if not ex]

    def is_surjection(self) -> bool:
        """True when every int16 value is taken at some defined point."""
        return len(set(self._defined_values())) == SIZE

    def is_injection(self) -> bool:
        """True when no two defined points share a value."""
        values = self._defined_values()
        return len(set(values)) == len(values)

    def is_bijection(self) -> bool:
        return self.is_injection() and self.is_surjection()

    def to_bytes(self) -> bytes:
        """All values as little-endian int16, then one byte per exclusion flag."""
        values = array("h", self._values)
        if sys.byteorder == "big":
            values.byteswap()
        return values.tobytes() + bytes(self._excluded)

    @classmethod
    def from_bytes(cls, data: bytes) -> ModifiableIntegerFunction:
        if len(data) != 3 * SIZE:
            raise ValueError(f"expected {3 * SIZE} bytes, got {len(data)}")
        values = array("h")
        values.frombytes(data[: 2 * SIZE])
        if sys.byteorder == "big":
            values.byteswap()
        excluded = [flag != 0 for flag in data[2 * SIZE:]]
        return cls._from_tables(values.tolist(), excluded)

    def save(self, path: _PathType) -> None:
        Path(path).write_bytes(self.to_bytes())

    @classmethod
    def load(cls, path: _PathType) -> ModifiableIntegerFunction:
        return cls.from_bytes(Path(path).read_bytes())