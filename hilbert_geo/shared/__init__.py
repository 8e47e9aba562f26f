"""
Geohash operations built on the core Hilbert curve codec.

The facade (encode/decode) lives in geohash.py, the derived geometries
(neighbors, rectangles, the curve itself) in geometry.py.
"""

from .geohash import (
    decode,
    decode_exactly,
    encode,
    get_cell_size_km,
    validate_bits_per_char,
    validate_precision,
)
from .geometry import hilbert_curve, hilbert_curve_points, neighbors, rectangle

__all__ = [
    # Facade
    "encode",
    "decode",
    "decode_exactly",
    "get_cell_size_km",
    "validate_bits_per_char",
    "validate_precision",
    # Derived geometries
    "neighbors",
    "rectangle",
    "hilbert_curve",
    "hilbert_curve_points",
]
