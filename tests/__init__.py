import pytest

from densebits.enums import WordWidth
from densebits.store import BitStore

#: Runs a test once for each supported word width.
each_width = pytest.mark.parametrize("width", list(WordWidth), ids=lambda w: f"w{int(w)}")


def store_of(text: str, width: WordWidth = WordWidth.W64) -> BitStore:
    """
    Shorthand for building a store from a bit string.
    """

    return BitStore.from_text(text, word_width=width)
