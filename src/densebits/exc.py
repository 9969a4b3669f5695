from __future__ import annotations

from typing import Any

__all__ = (
    "BitArrayError",
    "InvalidSizeError",
    "InvalidArgumentKindError",
    "BitIndexError",
    "InvalidBitValueError",
)


class BitArrayError(Exception):
    """
    Base class exception for all bit array errors.
    """

    __slots__ = ()


class InvalidSizeError(BitArrayError, ValueError):
    """
    Thrown when a zeroed store is requested with a negative size.
    """

    __slots__ = ("size",)

    def __init__(self, size: int):
        #: The rejected size.
        self.size: int = size

        super().__init__(f"bit array size must not be negative (got {size})")


class InvalidArgumentKindError(BitArrayError, TypeError):
    """
    Thrown when an argument is of a kind that the operation doesn't understand, such as
    constructing an array from a float.
    """

    __slots__ = ("argument", "expected")

    def __init__(self, argument: Any, expected: str):
        #: The offending argument.
        self.argument: Any = argument
        #: A description of what was expected instead.
        self.expected: str = expected

        super().__init__(f"expected {expected}, got {type(argument).__name__}")


class BitIndexError(BitArrayError, IndexError):
    """
    Thrown when a single-bit operation is given an index outside of the array, after negative
    indices have been wrapped around.
    """

    __slots__ = ("index", "bit_count")

    def __init__(self, index: int, bit_count: int):
        #: The index as it was passed in, before any wraparound.
        self.index: int = index
        #: The length of the array that was indexed.
        self.bit_count: int = bit_count

        super().__init__(f"index {index} out of bit array (size: {bit_count})")


class InvalidBitValueError(BitArrayError, ValueError):
    """
    Thrown when a bit is assigned a value that is neither 0 nor 1.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        #: The rejected value.
        self.value: Any = value

        super().__init__(f"bit value {value!r} out of range (must be 0 or 1)")
