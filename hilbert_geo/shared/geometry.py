"""
Derived geometries built on top of decoded geohash cells.

Neighbors, GeoJSON cell rectangles and the GeoJSON polyline of the curve
itself, mostly for drawing on a map.
"""

import logging
from typing import Any, Dict, List, Tuple

from ..config import settings
from ..core.codec import encode_int, get_alphabet
from ..core.types import Direction, Feature, LineString, Polygon
from .geohash import decode_exactly, encode, validate_bits_per_char, validate_precision

logger = logging.getLogger(__name__)


def _wrap_lng(lng: float) -> float:
    """Wrap a longitude that stepped over the antimeridian."""
    if lng > 180:
        return lng - 360
    if lng < -180:
        return lng + 360
    return lng


def neighbors(code: str, bits_per_char: int = 4) -> Dict[str, str]:
    """
    Get the neighboring geohashes of `code`.

    Looks for the north, north-east, east, south-east, south, south-west,
    west and north-west cells. Longitude wraps around the globe, so east and
    west always exist. Latitude does not: at the poles the northern or
    southern three neighbors are left out.

    Args:
        code: Geohash whose neighbors are wanted
        bits_per_char: Bits encoded by each character (2, 4 or 6)

    Returns:
        Dict mapping direction name (e.g. "north-east") to geohash
    """
    validate_bits_per_char(bits_per_char)
    center = decode_exactly(code, bits_per_char)
    precision = len(code)

    # Two error margins are one full cell step
    north = center.lat + 2 * center.lat_err
    south = center.lat - 2 * center.lat_err
    east = _wrap_lng(center.lng + 2 * center.lng_err)
    west = _wrap_lng(center.lng - 2 * center.lng_err)

    result = {
        Direction.EAST.value: encode(east, center.lat, precision, bits_per_char),
        Direction.WEST.value: encode(west, center.lat, precision, bits_per_char),
    }

    if north <= 90:
        result[Direction.NORTH.value] = encode(center.lng, north, precision, bits_per_char)
        result[Direction.NORTH_EAST.value] = encode(east, north, precision, bits_per_char)
        result[Direction.NORTH_WEST.value] = encode(west, north, precision, bits_per_char)

    if south >= -90:
        result[Direction.SOUTH.value] = encode(center.lng, south, precision, bits_per_char)
        result[Direction.SOUTH_EAST.value] = encode(east, south, precision, bits_per_char)
        result[Direction.SOUTH_WEST.value] = encode(west, south, precision, bits_per_char)

    logger.debug(f"Found {len(result)} neighbors for {code}")
    return result


def rectangle(code: str, bits_per_char: int = 4) -> Dict[str, Any]:
    """
    Build a GeoJSON rectangle for `code`.

    The center of the rectangle is the decoded lng/lat of `code`, and the
    rectangle spans the error margins: every point inside it encodes to
    `code` at precision len(code).

    Returns:
        GeoJSON Feature with a Polygon geometry and a bbox
    """
    validate_bits_per_char(bits_per_char)
    cell = decode_exactly(code, bits_per_char)
    west = cell.lng - cell.lng_err
    south = cell.lat - cell.lat_err
    east = cell.lng + cell.lng_err
    north = cell.lat + cell.lat_err

    feature = Feature(
        properties={
            "code": code,
            "lng": cell.lng,
            "lat": cell.lat,
            "lng_err": cell.lng_err,
            "lat_err": cell.lat_err,
            "bits_per_char": bits_per_char,
        },
        bbox=[west, south, east, north],
        geometry=Polygon(
            coordinates=[
                [
                    [west, south],
                    [east, south],
                    [east, north],
                    [west, north],
                    [west, south],
                ]
            ]
        ),
    )
    return feature.to_geojson()


def hilbert_curve_points(
    precision: int, bits_per_char: int = 4
) -> List[Tuple[float, float]]:
    """
    Get the centers of all cells at `precision`, in curve order.

    The number of points is 2**(precision * bits_per_char), so precision is
    capped at settings.max_curve_precision.
    """
    validate_bits_per_char(bits_per_char)
    validate_precision(precision, bits_per_char)
    if precision > settings.max_curve_precision:
        raise ValueError(
            f"Only precision up to {settings.max_curve_precision} supported, "
            f"got {precision}"
        )

    total = 1 << (precision * bits_per_char)
    logger.debug(f"Enumerating {total} cells for precision {precision}")

    zero = get_alphabet(bits_per_char)[0]
    points = []
    for i in range(total):
        code = encode_int(i, bits_per_char).rjust(precision, zero)
        cell = decode_exactly(code, bits_per_char)
        points.append((cell.lng, cell.lat))
    return points


def hilbert_curve(precision: int, bits_per_char: int = 4) -> Dict[str, Any]:
    """
    Build the GeoJSON LineString of the Hilbert curve used at `precision`.

    Returns:
        GeoJSON Feature with a LineString through every cell center
    """
    points = hilbert_curve_points(precision, bits_per_char)
    feature = Feature(
        geometry=LineString(coordinates=[[lng, lat] for lng, lat in points]),
    )
    return feature.to_geojson()
