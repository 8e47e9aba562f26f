"""
Hilbert Geo - order-preserving geohashes on a Hilbert space-filling curve.
"""

__version__ = "1.0.0"

from .core import (
    HilbertGeoError,
    InvalidBitsPerCharError,
    InvalidGeohashError,
    PrecisionOverflowError,
    decode_int,
    encode_int,
)
from .core.types import DecodedPoint, Direction, ExactPoint
from .shared import (
    decode,
    decode_exactly,
    encode,
    hilbert_curve,
    neighbors,
    rectangle,
)

__all__ = [
    "__version__",
    "encode",
    "decode",
    "decode_exactly",
    "neighbors",
    "rectangle",
    "hilbert_curve",
    "encode_int",
    "decode_int",
    "DecodedPoint",
    "ExactPoint",
    "Direction",
    "HilbertGeoError",
    "InvalidBitsPerCharError",
    "InvalidGeohashError",
    "PrecisionOverflowError",
]
