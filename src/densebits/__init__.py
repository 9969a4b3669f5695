import logging

# our public exports, relatively minimal
from densebits.bitarray import BitArray as BitArray
from densebits.bitrange import BitRange as BitRange
from densebits.enums import SizePolicy as SizePolicy, WordWidth as WordWidth
from densebits.exc import (
    BitArrayError as BitArrayError,
    BitIndexError as BitIndexError,
    InvalidArgumentKindError as InvalidArgumentKindError,
    InvalidBitValueError as InvalidBitValueError,
    InvalidSizeError as InvalidSizeError,
)
from densebits.store import BitStore as BitStore
from densebits.utils import TRACE

logging.addLevelName(TRACE, "TRACE")
