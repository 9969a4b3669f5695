from enum import IntEnum, StrEnum

__all__ = (
    "WordWidth",
    "SizePolicy",
)


class WordWidth(IntEnum):
    """
    Enumeration of supported storage word widths, in bits.
    """

    W32 = 32
    W64 = 64


class SizePolicy(StrEnum):
    """
    Enumeration of the ways a negative size is handled when creating a zeroed store.
    """

    #: A negative size raises :class:`.InvalidSizeError`.
    REJECT = "reject"

    #: A negative size silently produces an empty store.
    CLAMP = "clamp"
