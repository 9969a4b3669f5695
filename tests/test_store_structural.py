import logging

import pytest

from densebits.bitrange import BitRange
from densebits.enums import WordWidth
from densebits.exc import InvalidArgumentKindError
from densebits.store import BitStore
from densebits.utils import TRACE
from tests import each_width, store_of


def _pattern(size: int, width: WordWidth, period: int) -> BitStore:
    return BitStore.from_bits([i % period == 0 for i in range(size)], word_width=width)


def test_concat():
    """
    Tests concatenating two short stores in both orders.
    """

    zeroes = BitStore.zeroed(5)
    ones = BitStore.zeroed(5)
    ones.set_all()

    assert zeroes.concat(ones).to_text() == "0000011111"
    assert ones.concat(zeroes).to_text() == "1111100000"


@each_width
def test_concat_word_sized(width: WordWidth):
    """
    Tests concatenating onto a store that fills exactly one word, and the reverse.
    """

    full = BitStore.zeroed(width, word_width=width)
    short = BitStore.zeroed(7, word_width=width)
    short.set_all()

    assert full.concat(short).to_text() == "0" * width + "1111111"
    assert short.concat(full).to_text() == "1111111" + "0" * width


@each_width
@pytest.mark.parametrize("x_size", [0, 1, 31, 32, 33, 64, 65, 100])
@pytest.mark.parametrize("y_size", [0, 1, 7, 32, 64, 70])
def test_concat_preserves_bits(width: WordWidth, x_size: int, y_size: int):
    """
    Tests that every bit of both halves lands in the right place, aligned or not.
    """

    x = _pattern(x_size, width, 3)
    y = _pattern(y_size, width, 5)
    z = x.concat(y)

    assert z.bit_count == x_size + y_size
    assert all(z.get(i) == x.get(i) for i in range(x_size))
    assert all(z.get(x_size + j) == y.get(j) for j in range(y_size))
    assert z.population_count() == x.population_count() + y.population_count()


def test_concat_after_toggle_all_unaligned():
    """
    Tests that padding flipped by toggle_all doesn't leak into a concatenation.
    """

    x = BitStore.zeroed(5, word_width=WordWidth.W32)
    x.toggle_all()
    y = BitStore.zeroed(3, word_width=WordWidth.W32)

    z = x.concat(y)
    assert z.to_text() == "11111000"
    assert z.population_count() == 5


def test_concat_after_toggle_all_aligned():
    x = BitStore.zeroed(32, word_width=WordWidth.W32)
    x.toggle_all()
    y = BitStore.zeroed(40, word_width=WordWidth.W32)
    y.toggle_all()

    z = x.concat(y)
    assert z.bit_count == 72
    assert z.population_count() == 72
    assert z.words[-1] == 0xFF


def test_concat_mixed_widths():
    x = store_of("101", WordWidth.W32)
    y = store_of("11", WordWidth.W64)

    z = x.concat(y)
    assert z.word_width == WordWidth.W32
    assert z.to_text() == "10111"


def test_concat_allocates_new_storage():
    """
    Tests that the result of a concatenation shares nothing with its inputs.
    """

    x = BitStore.zeroed(64)
    y = BitStore.zeroed(64)
    z = x.concat(y)

    z.set(100)
    z.set(0)
    assert y.get(36) == 0
    assert x.get(0) == 0


def test_concat_bad_kind():
    with pytest.raises(InvalidArgumentKindError):
        BitStore.zeroed(4).concat("0101")  # type: ignore


def test_slice_boundaries():
    """
    Tests slicing at and beyond both ends of a store.
    """

    store = store_of("10110")

    whole = store.slice(0, 5)
    assert whole == store
    assert whole is not store

    empty = store.slice(5, 0)
    assert empty is not None
    assert empty.bit_count == 0

    assert store.slice(6, 1) is None

    truncated = store.slice(2, 1000)
    assert truncated is not None
    assert truncated.to_text() == "110"


def test_slice_no_result():
    store = store_of("10110")

    assert store.slice(0, -1) is None
    assert store.slice(-6, 1) is None
    assert store.slice(100, 0) is None


def test_slice_negative_begin():
    store = BitStore.zeroed(10)
    store.set(1)
    store.set(5)

    assert store.slice(1, 5).to_text() == "10001"  # type: ignore
    assert store.slice(-5, 5).to_text() == "10000"  # type: ignore
    assert store.slice(-2, 2).to_text() == "00"  # type: ignore


@each_width
def test_slice_across_words(width: WordWidth):
    store = _pattern(200, width, 3)
    expected = [int(i % 3 == 0) for i in range(30, 150)]

    result = store.slice(30, 120)
    assert result is not None
    assert result.to_list() == expected
    assert result.word_width == width


def test_slice_after_toggle_all():
    store = BitStore.zeroed(10, word_width=WordWidth.W32)
    store.toggle_all()

    result = store.slice(5, 100)
    assert result is not None
    assert result.to_text() == "11111"
    assert result.population_count() == 5


def test_slice_bad_kind():
    with pytest.raises(InvalidArgumentKindError):
        BitStore.zeroed(4).slice("0", 1)  # type: ignore


def test_index_or_slice():
    """
    Tests every shape accepted by index_or_slice.
    """

    store = BitStore.zeroed(10)
    store.set(1)
    store.set(5)

    assert store.index_or_slice(1) == 1
    assert store.index_or_slice(-5) == 1
    assert store.index_or_slice((1, 5)).to_text() == "10001"  # type: ignore
    assert store.index_or_slice(BitRange(1, 5)).to_text() == "10001"  # type: ignore
    assert store.index_or_slice(BitRange(-5, -1)).to_text() == "10000"  # type: ignore
    assert store.index_or_slice(BitRange(1, 5, exclusive=True)).to_text() == "1000"  # type: ignore


def test_index_or_slice_out_of_range():
    store = BitStore.zeroed(10)

    assert store.index_or_slice(BitRange(11, 12)) is None
    assert store.index_or_slice(BitRange(-11, 2)) is None
    assert store.index_or_slice((11, 1)) is None

    empty = store.index_or_slice(BitRange(10, 12))
    assert empty is not None and empty.bit_count == 0

    backwards = store.index_or_slice(BitRange(3, 1))
    assert backwards is not None and backwards.bit_count == 0


def test_index_or_slice_bad_tuple():
    with pytest.raises(InvalidArgumentKindError):
        BitStore.zeroed(10).index_or_slice((1, 2, 3))  # type: ignore


def test_equality():
    """
    Tests that equality ignores word width and padding.
    """

    assert store_of("101", WordWidth.W32) == store_of("101", WordWidth.W64)
    assert store_of("101") != store_of("1010")
    assert store_of("101") != store_of("100")

    toggled = BitStore.zeroed(3)
    toggled.toggle_all()
    assert toggled == store_of("111")

    assert store_of("101") != "101"


def test_text_round_trip():
    store = _pattern(77, WordWidth.W32, 4)
    assert BitStore.from_text(store.to_text()) == store


def test_iter_bits_is_lazy():
    """
    Tests that bits can be drawn one at a time and iteration can be restarted.
    """

    store = store_of("0110")
    it = store.iter_bits()
    assert next(it) == 0
    assert next(it) == 1

    assert list(store.iter_bits()) == [0, 1, 1, 0]
    assert list(it) == [1, 0]


def test_to_list():
    store = BitStore.zeroed(16)
    store.set(1)
    store.set(5)
    assert store.to_list() == [0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0]


def test_trace_logging(caplog: pytest.LogCaptureFixture):
    """
    Tests that structural operations emit trace records.
    """

    caplog.set_level(TRACE, logger="densebits.store")

    BitStore.zeroed(64).concat(BitStore.zeroed(3))
    BitStore.zeroed(5).concat(BitStore.zeroed(3))

    messages = [r.getMessage() for r in caplog.records]
    assert any("on a word boundary" in m for m in messages)
    assert any("at bit offset 5" in m for m in messages)


def test_truncation_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="densebits.store")

    BitStore.from_text("10x1")
    assert any("Discarding 2 characters" in r.getMessage() for r in caplog.records)
