"""Total functions over 16-bit integers and bit-packed bounded multisets."""

__version__ = "0.1.0"
__all__ = ["integer_function", "multiset"]