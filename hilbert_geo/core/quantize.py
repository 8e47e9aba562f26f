"""
Mapping between lng/lat degrees and cells of a dim x dim grid.

The grid is a plain equirectangular projection: longitude is the X axis,
latitude the Y axis, and cell (0, 0) has its lower-left corner at (-180, -90).
"""

import math
from typing import Tuple

LNG_INTERVAL: Tuple[float, float] = (-180.0, 180.0)
LAT_INTERVAL: Tuple[float, float] = (-90.0, 90.0)


def lvl_error(level: int) -> Tuple[float, float]:
    """
    Get the lng/lat error margin of a Hilbert curve of the given level.

    The error halves on every level: level 0 has a single coding point
    (0, 0) with a lng error of +-180, level 1 has four coding points
    (+-90, +-45) with a lng error of +-90, and so on.

    Returns:
        (lng_err, lat_err) in degrees
    """
    err = 1.0 / (1 << level)
    return LNG_INTERVAL[1] * err, LAT_INTERVAL[1] * err


def coord2int(lng: float, lat: float, dim: int) -> Tuple[int, int]:
    """
    Convert lng/lat into the grid cell containing it.

    Args:
        lng: Longitude in [-180, 180]; X axis
        lat: Latitude in [-90, 90]; Y axis
        dim: Number of cells per axis

    Returns:
        (x, y) of the cell; the upper boundary (lng=180, lat=90) is clamped
        into the last cell
    """
    lng_x = (lng - LNG_INTERVAL[0]) / 360.0 * dim
    lat_y = (lat - LAT_INTERVAL[0]) / 180.0 * dim
    x = min(dim - 1, max(0, math.floor(lng_x)))
    y = min(dim - 1, max(0, math.floor(lat_y)))
    return x, y


def int2coord(x: int, y: int, dim: int) -> Tuple[float, float]:
    """Convert a grid cell into the lng/lat of its lower-left corner."""
    lng = x / dim * 360.0 + LNG_INTERVAL[0]
    lat = y / dim * 180.0 + LAT_INTERVAL[0]
    return lng, lat
