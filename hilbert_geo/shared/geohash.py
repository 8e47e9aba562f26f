"""Hilbert geohash utilities.

A Hilbert geohash encodes a geographic location into a short string by
walking a Hilbert space-filling curve over an equirectangular grid. Cells
that are close on the curve are close on the map, and strings of equal
length sort in curve order.

Each character carries bits_per_char bits (2, 4 or 6); half of the bits
refine longitude and half refine latitude. Approximate longitude error at
the equator with the default base16 alphabet (bits_per_char=4):
- 1: ~5000km
- 2: ~1250km
- 3: ~313km
- 4: ~78km
- 5: ~20km
- 6: ~4.9km
- 7: ~1.2km
- 8: ~305m
- 9: ~76m
- 10: ~19m
"""

import logging
from typing import Tuple

from ..core.codec import decode_int, encode_int, get_alphabet
from ..core.exceptions import (
    InvalidBitsPerCharError,
    InvalidGeohashError,
    PrecisionOverflowError,
)
from ..core.hilbert import hash2xy, xy2hash
from ..core.quantize import coord2int, int2coord, lvl_error
from ..core.types import DecodedPoint, ExactPoint

logger = logging.getLogger(__name__)

VALID_BITS_PER_CHAR = (2, 4, 6)

# The curve distance must fit in a signed 64-bit integer
MAX_BITS = 64

# Mean length of one degree of arc on the equator
KM_PER_DEGREE = 111.195


def validate_bits_per_char(bits_per_char: int) -> None:
    """Raise InvalidBitsPerCharError unless bits_per_char is 2, 4 or 6."""
    if bits_per_char not in VALID_BITS_PER_CHAR:
        raise InvalidBitsPerCharError(bits_per_char)


def validate_precision(precision: int, bits_per_char: int) -> None:
    """Raise unless precision characters of bits_per_char bits fit the 64-bit budget."""
    if precision < 1:
        raise ValueError(f"Precision must be at least 1, got {precision}")
    if precision * bits_per_char >= MAX_BITS:
        raise PrecisionOverflowError(precision, bits_per_char)


def _grid(precision: int, bits_per_char: int) -> Tuple[int, int]:
    """Return (level, dim) of the grid addressed by a code of this size."""
    level = (precision * bits_per_char) >> 1
    return level, 1 << level


def encode(
    longitude: float,
    latitude: float,
    precision: int = 10,
    bits_per_char: int = 4,
) -> str:
    """
    Encode longitude/latitude to a Hilbert geohash string.

    Args:
        longitude: Longitude in degrees (-180 to 180)
        latitude: Latitude in degrees (-90 to 90)
        precision: Number of characters in the resulting geohash
        bits_per_char: Bits encoded by each character (2, 4 or 6)

    Returns:
        Geohash string of exactly `precision` characters

    Example:
        >>> encode(-87.65, 41.85, 3)
        '756'
    """
    validate_bits_per_char(bits_per_char)
    validate_precision(precision, bits_per_char)
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")

    _, dim = _grid(precision, bits_per_char)
    x, y = coord2int(longitude, latitude, dim)
    code = xy2hash(x, y, dim)

    zero = get_alphabet(bits_per_char)[0]
    return encode_int(code, bits_per_char).rjust(precision, zero)


def decode_exactly(code: str, bits_per_char: int = 4) -> ExactPoint:
    """
    Decode a Hilbert geohash to the center of its cell plus error margins.

    The length of `code` is taken as the precision and every character is
    assumed to carry `bits_per_char` bits. Do not mix geohashes with
    different `bits_per_char`!

    Args:
        code: Geohash string to decode
        bits_per_char: Bits encoded by each character (2, 4 or 6)

    Returns:
        ExactPoint with lng, lat, lng_err and lat_err in degrees
    """
    validate_bits_per_char(bits_per_char)
    if not code:
        raise InvalidGeohashError("Geohash cannot be empty")
    validate_precision(len(code), bits_per_char)

    level, dim = _grid(len(code), bits_per_char)
    x, y = hash2xy(decode_int(code, bits_per_char), dim)
    lng, lat = int2coord(x, y, dim)
    lng_err, lat_err = lvl_error(level)

    # int2coord gives the lower-left corner, shift to the center
    return ExactPoint(
        lng=lng + lng_err,
        lat=lat + lat_err,
        lng_err=lng_err,
        lat_err=lat_err,
    )


def decode(code: str, bits_per_char: int = 4) -> DecodedPoint:
    """
    Decode a Hilbert geohash to the center of its cell.

    Example:
        >>> decode('756').as_tuple()
        (-87.1875, 40.78125)
    """
    return decode_exactly(code, bits_per_char).to_point()


def get_cell_size_km(precision: int, bits_per_char: int = 4) -> Tuple[float, float]:
    """
    Get the approximate cell size in kilometers at the equator.

    Args:
        precision: Geohash length
        bits_per_char: Bits encoded by each character (2, 4 or 6)

    Returns:
        (width_km, height_km) of one cell
    """
    validate_bits_per_char(bits_per_char)
    validate_precision(precision, bits_per_char)
    level, _ = _grid(precision, bits_per_char)
    lng_err, lat_err = lvl_error(level)
    return 2 * lng_err * KM_PER_DEGREE, 2 * lat_err * KM_PER_DEGREE
