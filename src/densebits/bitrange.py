from __future__ import annotations

import operator

import attr


def _as_index(what: int) -> int:
    return operator.index(what)


@attr.s(frozen=True, slots=True)
class BitRange:
    """
    A range of bit positions, given by its two ends. Negative ends count backwards from the end of
    the array being indexed.
    """

    #: The first position in the range.
    begin: int = attr.ib(converter=_as_index)

    #: The last position in the range, or the position just past it if ``exclusive`` is set.
    end: int = attr.ib(converter=_as_index)

    #: If True, ``end`` itself is not part of the range.
    exclusive: bool = attr.ib(default=False, converter=bool)

    @classmethod
    def from_slice(cls, item: slice, bit_count: int) -> BitRange:
        """
        Creates a new exclusive range from a Python :class:`slice`. Missing ends default to the
        start and end of the array.
        """

        if item.step not in (None, 1):
            raise ValueError(f"bit array slices cannot have a step (got {item.step})")

        begin = 0 if item.start is None else item.start
        end = bit_count if item.stop is None else item.stop
        return BitRange(begin, end, exclusive=True)

    def offset_length(self, bit_count: int) -> tuple[int, int] | None:
        """
        Converts this range into a ``(begin, length)`` pair for an array of ``bit_count`` bits.

        :return: The pair, or None if the range starts outside of the array.
        """

        begin, end = self.begin, self.end

        if begin < 0:
            begin += bit_count
            if begin < 0:
                return None

        if end < 0:
            end += bit_count

        if not self.exclusive:
            end += 1

        if begin > bit_count:
            return None

        end = min(end, bit_count)
        return begin, max(end - begin, 0)
