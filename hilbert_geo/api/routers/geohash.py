"""Geohash endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query

from ...config import settings
from ...shared import decode_exactly, encode, hilbert_curve, neighbors, rectangle

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(error: ValueError) -> HTTPException:
    logger.warning(f"Rejected geohash request: {error}")
    return HTTPException(status_code=400, detail=str(error))


@router.get("/encode")
def encode_point(
    lng: float = Query(..., ge=-180, le=180, description="Longitude"),
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    precision: int = Query(
        settings.default_precision, ge=1, description="Number of characters"
    ),
    bits_per_char: int = Query(
        settings.default_bits_per_char, description="Bits per character (2, 4 or 6)"
    ),
) -> Dict[str, Any]:
    """Encode a longitude/latitude pair."""
    try:
        code = encode(lng, lat, precision, bits_per_char)
    except ValueError as e:
        raise _bad_request(e)

    return {"code": code, "precision": precision, "bits_per_char": bits_per_char}


@router.get("/decode/{code}")
def decode_code(
    code: str,
    bits_per_char: int = Query(settings.default_bits_per_char),
    exact: bool = Query(False, description="Include the error margins"),
) -> Dict[str, Any]:
    """Decode a geohash to the center of its cell."""
    try:
        cell = decode_exactly(code, bits_per_char)
    except ValueError as e:
        raise _bad_request(e)

    if exact:
        return cell.model_dump()
    return cell.to_point().model_dump()


@router.get("/neighbors/{code}")
def get_neighbors(
    code: str,
    bits_per_char: int = Query(settings.default_bits_per_char),
) -> Dict[str, str]:
    """Get the neighboring geohashes of a cell."""
    try:
        return neighbors(code, bits_per_char)
    except ValueError as e:
        raise _bad_request(e)


@router.get("/rectangle/{code}")
def get_rectangle(
    code: str,
    bits_per_char: int = Query(settings.default_bits_per_char),
) -> Dict[str, Any]:
    """Get the cell of a geohash as a GeoJSON Feature."""
    try:
        return rectangle(code, bits_per_char)
    except ValueError as e:
        raise _bad_request(e)


@router.get("/curve")
def get_curve(
    precision: int = Query(..., ge=1, description="Geohash length"),
    bits_per_char: int = Query(settings.default_bits_per_char),
) -> Dict[str, Any]:
    """Get the Hilbert curve at a precision as a GeoJSON LineString."""
    try:
        return hilbert_curve(precision, bits_per_char)
    except ValueError as e:
        raise _bad_request(e)
