from __future__ import annotations

import builtins
from collections.abc import Iterator, Sequence
from numbers import Integral
from typing import Any, Self, overload

from typing_extensions import override

from densebits.bitrange import BitRange
from densebits.enums import SizePolicy, WordWidth
from densebits.exc import InvalidArgumentKindError
from densebits.store import BitStore


class BitArray:
    """
    An array of bits. Usage is similar to a :class:`list`, but the only allowed elements are 0 and
    1, and the length is fixed when the array is created.

    .. code-block:: python

        >>> BitArray(10)
        <BitArray 0000000000>
        >>> BitArray("1010abcd")
        <BitArray 1010>
        >>> BitArray([0, 0, 0, 1, 1, 0])
        <BitArray 000110>
        >>> BitArray([None, "a", 0, [1, 2]])
        <BitArray 0101>
    """

    __slots__ = ("_store",)

    def __init__(
        self,
        source: int | str | Sequence[Any],
        *,
        word_width: WordWidth = WordWidth.W64,
        size_policy: SizePolicy = SizePolicy.REJECT,
    ) -> None:
        """
        :param source: Either the number of (cleared) bits, a string of ``'0'`` and ``'1'``
                       characters, or a sequence of truthy and falsy elements.
        :param word_width: The width of the storage words.
        :param size_policy: What to do when ``source`` is a negative size.
        """

        if isinstance(source, bool):
            raise InvalidArgumentKindError(source, "a size, string, or sequence")

        if isinstance(source, Integral):
            self._store = BitStore.zeroed(
                int(source), word_width=word_width, size_policy=size_policy
            )

        elif isinstance(source, str):
            self._store = BitStore.from_text(source, word_width=word_width)

        elif isinstance(source, Sequence) and not isinstance(source, (bytes, bytearray)):
            self._store = BitStore.from_bits(source, word_width=word_width)

        else:
            raise InvalidArgumentKindError(source, "a size, string, or sequence")

    @classmethod
    def of(cls, store: BitStore) -> BitArray:
        """
        Wraps an existing :class:`.BitStore`. The store is not copied.
        """

        array = cls.__new__(cls)
        array._store = store
        return array

    @property
    def store(self) -> BitStore:
        """
        The underlying bit storage.
        """

        return self._store

    @property
    def size(self) -> int:
        """
        The number of bits in this array.
        """

        return self._store.bit_count

    def __len__(self) -> int:
        return self._store.bit_count

    def __iter__(self) -> Iterator[int]:
        return self._store.iter_bits()

    @overload
    def __getitem__(self, item: int) -> int: ...

    @overload
    def __getitem__(
        self, item: tuple[int, int] | BitRange | builtins.slice
    ) -> BitArray | None: ...

    def __getitem__(
        self, item: int | tuple[int, int] | BitRange | builtins.slice
    ) -> int | BitArray | None:
        if isinstance(item, slice):
            item = BitRange.from_slice(item, self._store.bit_count)

        result = self._store.index_or_slice(item)
        if isinstance(result, BitStore):
            return BitArray.of(result)

        return result

    def __setitem__(self, key: int, value: int) -> None:
        self._store.assign(key, value)

    def __add__(self, other: object) -> BitArray:
        if not isinstance(other, BitArray):
            return NotImplemented

        return BitArray.of(self._store.concat(other._store))

    def __copy__(self) -> BitArray:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> BitArray:
        return self.copy()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented

        return self._store == other._store

    __hash__ = None  # type: ignore

    @override
    def __str__(self) -> str:
        return self._store.to_text()

    @override
    def __repr__(self) -> str:
        return f"<BitArray {self._store.to_text()}>"

    def copy(self) -> BitArray:
        """
        Produces a copy of this array, with its own storage.
        """

        return BitArray.of(self._store.copy())

    def slice(self, begin: int, length: int) -> BitArray | None:
        """
        Returns ``length`` bits starting at ``begin``, or None if ``begin`` is out of range or
        ``length`` is negative.
        """

        result = self._store.slice(begin, length)
        return None if result is None else BitArray.of(result)

    def to_list(self) -> list[int]:
        """
        Returns the bits of this array as a list of 0s and 1s.
        """

        return self._store.to_list()

    def total_set(self) -> int:
        """
        Returns the number of set bits in this array.
        """

        return self._store.population_count()

    def set_bit(self, index: int) -> Self:
        """
        Sets the bit at ``index`` to 1. Negative indices count backwards from the end.
        """

        self._store.set(index)
        return self

    def clear_bit(self, index: int) -> Self:
        """
        Clears the bit at ``index`` to 0. Negative indices count backwards from the end.
        """

        self._store.clear(index)
        return self

    def toggle_bit(self, index: int) -> Self:
        """
        Flips the bit at ``index``. Negative indices count backwards from the end.
        """

        self._store.toggle(index)
        return self

    def set_all_bits(self) -> Self:
        self._store.set_all()
        return self

    def clear_all_bits(self) -> Self:
        self._store.clear_all()
        return self

    def toggle_all_bits(self) -> Self:
        self._store.toggle_all()
        return self
