"""
Core Hilbert curve and integer codec primitives.
"""

from .codec import ALPHABETS, decode_int, encode_int, get_alphabet
from .exceptions import (
    HilbertGeoError,
    InvalidBitsPerCharError,
    InvalidGeohashError,
    PrecisionOverflowError,
)
from .hilbert import hash2xy, rotate, xy2hash
from .quantize import LAT_INTERVAL, LNG_INTERVAL, coord2int, int2coord, lvl_error

__all__ = [
    # Codec
    "ALPHABETS",
    "encode_int",
    "decode_int",
    "get_alphabet",
    # Hilbert transform
    "xy2hash",
    "hash2xy",
    "rotate",
    # Quantizer
    "LNG_INTERVAL",
    "LAT_INTERVAL",
    "coord2int",
    "int2coord",
    "lvl_error",
    # Errors
    "HilbertGeoError",
    "InvalidBitsPerCharError",
    "InvalidGeohashError",
    "PrecisionOverflowError",
]
