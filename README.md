# bitfunc

Two small data structures that can be stored in a compact binary form.

## ModifiableIntegerFunction

`bitfunc.integer_function.ModifiableIntegerFunction` is a function that is
defined on every signed 16-bit integer (-32768 to 32767) and returns one. You
can build it from any Python callable, change single values and exclude points
from its domain. Results of the callable wrap around to the 16-bit range. With
no callable, every value is 0.

```python
from bitfunc.integer_function import ModifiableIntegerFunction, ExcludedPointError

inc = ModifiableIntegerFunction(lambda x: x + 1)
inc(50)                     # 51

inc.set_value(0, 100)
inc.exclude(7)
try:
    inc(7)
except ExcludedPointError:
    ...

double = ModifiableIntegerFunction(lambda x: 2 * x)
total = inc + double        # pointwise sum, wrapped to 16 bits; exclusions are combined
diff = inc - double         # pointwise difference
composed = inc * double     # inc(double(x))
cube = inc ** 3             # inc composed with itself three times
inverse = double ** -1      # points not in the image become excluded
```

Powers of 0 or below -1 raise `ValueError`. Points or values outside the
16-bit range also raise `ValueError`. Calling the function at an excluded
point raises `ExcludedPointError`, which is a subclass of `ValueError`.

Comparisons work like this:

- `f > g` holds when `f` has no excluded points and `f(x) > g(x)` at every point.
- `f < g` holds when `g` has no excluded points and `f(x) < g(x)` at every point.
- `f >= g` is `not f < g`, and `f <= g` is `not f > g`.
- `f == g` means the two functions are parallel. They exclude the same points,
  and their values differ by the same constant everywhere.

`is_injection()`, `is_surjection()` and `is_bijection()` check those
properties over the points that are not excluded.

To store a function, use `save(path)` and `ModifiableIntegerFunction.load(path)`.
To work with raw bytes, use `to_bytes()` and `ModifiableIntegerFunction.from_bytes(data)`.
The byte layout is the 65536 values as little-endian int16, followed by one
byte per point that is nonzero when the point is excluded.

## MultiSet

`bitfunc.multiset.MultiSet(n, k)` holds numbers from 0 to `n`. Each number may
appear up to `2**k - 1` times, and `k` must be from 1 to 8.

```python
from bitfunc.multiset import MultiSet, MultiSetFullError

ms = MultiSet(4, 3)
ms.add(2)
ms.add(2)
ms.count(2)                 # 2
list(ms)                    # [2, 2]
str(ms)                     # "2 2"
ms.memory_view()            # the packed k-bit counts as space-separated bits

other = MultiSet(3, 2)
other.add(2)
ms.intersection(other)      # smaller count of each number, smaller n and k
ms.difference(other)        # counts of ms minus those of other, never below zero
ms.complement()             # every count c becomes 2**k - 1 - c
```

The methods behave as follows:

- `add` raises `MultiSetFullError` (a `ValueError`) when a number is already
  at its limit.
- `add` raises `ValueError` for a number outside `0..n`.
- `count` returns 0 for a number outside `0..n`.

To store a multiset, use `save(path)` and `MultiSet.load(path)`. To work with
raw bytes, use `to_bytes()` and `MultiSet.from_bytes(data)`. The layout is a
header of `n` (little-endian uint32) and `k` (uint8). After it come the counts,
packed as `k`-bit fields with the most significant bit first, padded with zero
bits to a whole byte.

## Scope

The package is a library only. It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```