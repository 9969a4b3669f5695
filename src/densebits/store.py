from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from numbers import Number
from typing import Any, overload

from typing_extensions import override

from densebits.bitrange import BitRange
from densebits.enums import SizePolicy, WordWidth
from densebits.exc import (
    BitIndexError,
    InvalidArgumentKindError,
    InvalidBitValueError,
    InvalidSizeError,
)
from densebits.utils import LoggerWithTrace
from densebits.utils.words import (
    copy_bits,
    extract,
    locate,
    popcount,
    tail_mask,
    word_count,
    word_mask,
)

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


def _bit_of(element: Any) -> int:
    # None, False and any numeric zero are clear bits, everything else is set.
    if element is None or element is False:
        return 0

    if isinstance(element, Number) and element == 0:
        return 0

    return 1


class BitStore:
    """
    A fixed-length sequence of bits, packed into a list of unsigned words.

    The length of a store never changes after it is created. Concatenation and slicing produce
    new stores with their own storage; no two stores ever share a word buffer.
    """

    __slots__ = ("_bit_count", "_width", "_words")

    def __init__(self, bit_count: int, *, word_width: WordWidth = WordWidth.W64) -> None:
        """
        Creates a new store with every bit cleared. Prefer :meth:`.zeroed`, which applies a
        :class:`.SizePolicy` to negative sizes.

        :param bit_count: The number of bits in the store.
        :param word_width: The width of the storage words.
        """

        if isinstance(bit_count, bool) or not isinstance(bit_count, int):
            raise InvalidArgumentKindError(bit_count, "an integer size")

        if bit_count < 0:
            raise InvalidSizeError(bit_count)

        self._bit_count: int = bit_count
        self._width: WordWidth = WordWidth(word_width)
        self._words: list[int] = [0] * word_count(bit_count, self._width)

    ## == CONSTRUCTION == ##
    @classmethod
    def zeroed(
        cls,
        size: int,
        *,
        word_width: WordWidth = WordWidth.W64,
        size_policy: SizePolicy = SizePolicy.REJECT,
    ) -> BitStore:
        """
        Creates a new store of ``size`` bits, all cleared.

        :param size: The number of bits.
        :param word_width: The width of the storage words.
        :param size_policy: What to do with a negative size.
        """

        if size_policy == SizePolicy.CLAMP and isinstance(size, int) and size < 0:
            logger.debug(f"Clamping negative bit array size {size} to zero")
            size = 0

        return cls(size, word_width=word_width)

    @classmethod
    def from_bits(cls, bits: Iterable[Any], *, word_width: WordWidth = WordWidth.W64) -> BitStore:
        """
        Creates a new store from a sequence of truthy and falsy elements. ``None``, ``False`` and
        numeric zeroes become clear bits; anything else (non-zero numbers, strings, nested
        containers) becomes a set bit.
        """

        elements = list(bits)
        store = cls(len(elements), word_width=word_width)
        width = store._width

        for index, element in enumerate(elements):
            if _bit_of(element):
                word_idx, offset = locate(index, width)
                store._words[word_idx] |= 1 << offset

        return store

    @classmethod
    def from_text(cls, text: str, *, word_width: WordWidth = WordWidth.W64) -> BitStore:
        """
        Creates a new store from a string of ``'0'`` and ``'1'`` characters. The first character
        that is neither, and everything after it, is ignored.
        """

        if not isinstance(text, str):
            raise InvalidArgumentKindError(text, "a string of bits")

        valid = 0
        for char in text:
            if char != "0" and char != "1":
                break

            valid += 1

        if valid < len(text):
            logger.debug(
                f"Discarding {len(text) - valid} characters from bit string "
                f"at invalid character {text[valid]!r}"
            )

        store = cls(valid, word_width=word_width)
        width = store._width

        for index in range(valid):
            if text[index] == "1":
                word_idx, offset = locate(index, width)
                store._words[word_idx] |= 1 << offset

        return store

    def copy(self) -> BitStore:
        """
        Creates a new store with the same bits and its own storage.
        """

        new = BitStore(0, word_width=self._width)
        new._bit_count = self._bit_count
        new._words = self._words.copy()
        return new

    ## == PROPERTIES == ##
    @property
    def bit_count(self) -> int:
        """
        The number of bits in this store.
        """

        return self._bit_count

    @property
    def word_width(self) -> WordWidth:
        """
        The width of the storage words.
        """

        return self._width

    @property
    def words(self) -> tuple[int, ...]:
        """
        A snapshot of the raw storage words, with the tail padding masked off.
        """

        return tuple(self._masked_words())

    def _masked_words(self) -> list[int]:
        if not self._words:
            return []

        words = self._words.copy()
        words[-1] &= tail_mask(self._bit_count, self._width)
        return words

    def _clear_padding(self) -> None:
        if self._words:
            self._words[-1] &= tail_mask(self._bit_count, self._width)

    ## == SINGLE BITS == ##
    def resolve_index(self, index: int) -> int:
        """
        Resolves a possibly-negative index into a position in this store.

        :raise BitIndexError: If the index is outside of the store after wraparound.
        """

        try:
            resolved = operator.index(index)
        except TypeError:
            raise InvalidArgumentKindError(index, "an integer index") from None

        if resolved < 0:
            resolved += self._bit_count

        if not 0 <= resolved < self._bit_count:
            raise BitIndexError(index, self._bit_count)

        return resolved

    def _read(self, resolved: int) -> int:
        word_idx, offset = locate(resolved, self._width)
        return (self._words[word_idx] >> offset) & 1

    def get(self, index: int) -> int:
        """
        Gets the bit at ``index``, as 0 or 1.
        """

        return self._read(self.resolve_index(index))

    def set(self, index: int) -> None:
        """
        Sets the bit at ``index`` to 1.
        """

        word_idx, offset = locate(self.resolve_index(index), self._width)
        self._words[word_idx] |= 1 << offset

    def clear(self, index: int) -> None:
        """
        Clears the bit at ``index`` to 0.
        """

        word_idx, offset = locate(self.resolve_index(index), self._width)
        self._words[word_idx] &= ~(1 << offset)

    def toggle(self, index: int) -> None:
        """
        Flips the bit at ``index``.
        """

        word_idx, offset = locate(self.resolve_index(index), self._width)
        self._words[word_idx] ^= 1 << offset

    def assign(self, index: int, value: int) -> None:
        """
        Sets the bit at ``index`` to ``value``.

        :raise InvalidBitValueError: If ``value`` is not 0 or 1. This is checked before the index.
        """

        if not isinstance(value, int) or value not in (0, 1):
            raise InvalidBitValueError(value)

        if value:
            self.set(index)
        else:
            self.clear(index)

    ## == BULK == ##
    def set_all(self) -> None:
        """
        Sets every bit to 1.
        """

        self._words[:] = [word_mask(self._width)] * len(self._words)
        self._clear_padding()

    def clear_all(self) -> None:
        """
        Clears every bit to 0.
        """

        self._words[:] = [0] * len(self._words)

    def toggle_all(self) -> None:
        """
        Flips every bit. Padding bits flip too, but are masked out wherever raw words are read.
        """

        mask = word_mask(self._width)
        self._words[:] = [word ^ mask for word in self._words]

    def population_count(self) -> int:
        """
        Counts the set bits in this store.
        """

        return sum(popcount(word) for word in self._masked_words())

    ## == STRUCTURAL == ##
    def concat(self, other: BitStore) -> BitStore:
        """
        Creates a new store holding the bits of this store followed by the bits of ``other``. The
        result uses this store's word width.
        """

        if not isinstance(other, BitStore):
            raise InvalidArgumentKindError(other, "a BitStore")

        width = self._width
        result = BitStore(self._bit_count + other._bit_count, word_width=width)
        result._words[: len(self._words)] = self._masked_words()

        if self._bit_count % width == 0 and other._width == width:
            logger.trace(
                f"Concatenating {self._bit_count} + {other._bit_count} bits on a word boundary"
            )
            result._words[len(self._words) :] = other._words
        else:
            logger.trace(
                f"Concatenating {self._bit_count} + {other._bit_count} bits "
                f"at bit offset {self._bit_count % width}"
            )
            copy_bits(
                other._words,
                other._width,
                0,
                result._words,
                width,
                self._bit_count,
                other._bit_count,
            )

        result._clear_padding()
        return result

    def slice(self, begin: int, length: int) -> BitStore | None:
        """
        Creates a new store from ``length`` bits of this store, starting at ``begin``. A negative
        ``begin`` counts backwards from the end. A length running past the end is shortened.

        :return: The new store, or None if ``begin`` is outside of the store or ``length`` is
                 negative.
        """

        try:
            begin = operator.index(begin)
            length = operator.index(length)
        except TypeError:
            raise InvalidArgumentKindError((begin, length), "integer slice bounds") from None

        if begin < 0:
            begin += self._bit_count

        if begin < 0 or length < 0 or begin > self._bit_count:
            logger.trace(f"Slice ({begin}, {length}) is outside of {self._bit_count} bits")
            return None

        length = min(length, self._bit_count - begin)
        logger.trace(f"Slicing {length} bits from offset {begin}")

        result = BitStore(length, word_width=self._width)
        copy_bits(self._words, self._width, begin, result._words, self._width, 0, length)
        return result

    @overload
    def index_or_slice(self, arg: int) -> int: ...

    @overload
    def index_or_slice(self, arg: tuple[int, int] | BitRange) -> BitStore | None: ...

    def index_or_slice(self, arg: int | tuple[int, int] | BitRange) -> int | BitStore | None:
        """
        Reads a single bit, or a sub-range of bits.

        :param arg: Either an index, a ``(begin, length)`` pair, or a :class:`.BitRange`.
        :return: The bit for an index, otherwise the same as :meth:`.slice`.
        """

        if isinstance(arg, BitRange):
            bounds = arg.offset_length(self._bit_count)
            if bounds is None:
                return None

            return self.slice(*bounds)

        if isinstance(arg, tuple):
            if len(arg) != 2:
                raise InvalidArgumentKindError(arg, "a (begin, length) pair")

            return self.slice(*arg)

        return self.get(arg)

    ## == SEQUENCE ACCESS == ##
    def iter_bits(self) -> Iterator[int]:
        """
        Lazily yields every bit as 0 or 1, in index order.
        """

        for index in range(self._bit_count):
            yield self._read(index)

    def to_list(self) -> list[int]:
        """
        Returns every bit as a list of 0s and 1s.
        """

        return list(self.iter_bits())

    def to_text(self) -> str:
        """
        Returns every bit as a string of ``'0'`` and ``'1'`` characters, first index first.
        """

        return "".join("1" if bit else "0" for bit in self.iter_bits())

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitStore):
            return NotImplemented

        if self._bit_count != other._bit_count:
            return False

        if self._width == other._width:
            return self._masked_words() == other._masked_words()

        return extract(self._words, self._width, 0, self._bit_count) == extract(
            other._words, other._width, 0, other._bit_count
        )

    __hash__ = None  # type: ignore

    @override
    def __repr__(self) -> str:
        return f"<BitStore bit_count={self._bit_count} word_width={int(self._width)}>"
