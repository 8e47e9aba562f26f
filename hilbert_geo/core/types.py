"""
Type definitions for decoded geohashes and their GeoJSON renderings.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Direction(Enum):
    """Compass direction of a neighboring cell."""

    NORTH = "north"
    NORTH_EAST = "north-east"
    EAST = "east"
    SOUTH_EAST = "south-east"
    SOUTH = "south"
    SOUTH_WEST = "south-west"
    WEST = "west"
    NORTH_WEST = "north-west"


class DecodedPoint(BaseModel):
    """Center of a geohash cell."""

    model_config = ConfigDict(frozen=True)

    lng: float = Field(..., ge=-180.0, le=180.0)
    lat: float = Field(..., ge=-90.0, le=90.0)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lng, self.lat)


class ExactPoint(DecodedPoint):
    """Center of a geohash cell together with its half-width and half-height."""

    lng_err: float = Field(..., gt=0.0)
    lat_err: float = Field(..., gt=0.0)

    def as_tuple(self) -> Tuple[float, float, float, float]:  # type: ignore[override]
        return (self.lng, self.lat, self.lng_err, self.lat_err)

    def to_point(self) -> DecodedPoint:
        """Drop the error margins."""
        return DecodedPoint(lng=self.lng, lat=self.lat)


class Polygon(BaseModel):
    """GeoJSON Polygon geometry."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[List[float]]]


class LineString(BaseModel):
    """GeoJSON LineString geometry."""

    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]


class Feature(BaseModel):
    """GeoJSON Feature wrapping a single geometry."""

    type: Literal["Feature"] = "Feature"
    properties: Dict[str, Any] = Field(default_factory=dict)
    bbox: Optional[List[float]] = None
    geometry: Union[Polygon, LineString]

    def to_geojson(self) -> Dict[str, Any]:
        """Serialize to a plain GeoJSON dict, leaving out an unset bbox."""
        return self.model_dump(exclude_none=True)
