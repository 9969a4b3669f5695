"""
Word-level primitives for bit storage.

A store's bits live in a list of unsigned integers, each ``width`` bits wide. Bit ``i`` of the
store is bit ``i % width`` (counting from the least significant end) of word ``i // width``. All
the functions here take *resolved* indices; negative indices must be handled by the caller.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def word_count(bit_count: int, width: int) -> int:
    """
    Returns the number of ``width``-bit words needed to hold ``bit_count`` bits.
    """

    if bit_count <= 0:
        return 0

    return (bit_count - 1) // width + 1


def word_mask(width: int) -> int:
    """
    Returns a word with every bit set.
    """

    return (1 << width) - 1


def tail_mask(bit_count: int, width: int) -> int:
    """
    Returns the mask of the live bits in the final word of a ``bit_count``-bit store. Everything
    above it is padding.
    """

    used = bit_count % width
    if used == 0:
        return word_mask(width)

    return (1 << used) - 1


def locate(index: int, width: int) -> tuple[int, int]:
    """
    Maps a bit index onto its ``(word, offset)`` position.
    """

    return divmod(index, width)


def popcount(word: int) -> int:
    """
    Counts the set bits in a single word. Each pass clears the lowest set bit, so this runs in
    time proportional to the number of set bits.
    """

    count = 0
    while word:
        word &= word - 1
        count += 1

    return count


def extract(words: Sequence[int], width: int, start: int, length: int) -> int:
    """
    Reads a run of bits as an integer.

    :param words: The packed words to read from.
    :param width: The width of each word.
    :param start: The index of the first bit to read.
    :param length: The number of bits to read.
    :return: An integer whose bit ``k`` is bit ``start + k`` of the store.
    """

    result = 0
    produced = 0

    while produced < length:
        word_idx, offset = locate(start + produced, width)
        take = min(width - offset, length - produced)
        chunk = (words[word_idx] >> offset) & ((1 << take) - 1)
        result |= chunk << produced
        produced += take

    return result


def deposit(words: MutableSequence[int], width: int, start: int, value: int, length: int) -> None:
    """
    Writes the low ``length`` bits of ``value`` into ``words``, beginning at bit ``start``. Bits
    outside of the written run are left untouched.
    """

    written = 0

    while written < length:
        word_idx, offset = locate(start + written, width)
        take = min(width - offset, length - written)
        chunk_mask = ((1 << take) - 1) << offset
        chunk = ((value >> written) << offset) & chunk_mask
        words[word_idx] = (words[word_idx] & ~chunk_mask) | chunk
        written += take


def copy_bits(
    source: Sequence[int],
    source_width: int,
    source_start: int,
    target: MutableSequence[int],
    target_width: int,
    target_start: int,
    length: int,
) -> None:
    """
    Copies ``length`` bits between two word buffers, one target word's worth at a time. Neither
    offset needs to be word-aligned, and the two buffers may use different word widths.
    """

    done = 0
    while done < length:
        take = min(target_width, length - done)
        chunk = extract(source, source_width, source_start + done, take)
        deposit(target, target_width, target_start + done, chunk, take)
        done += take
