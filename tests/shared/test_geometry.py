"""
Tests for derived geometries: neighbors, rectangles and the curve polyline.
"""

import pytest

from hilbert_geo.config import settings
from hilbert_geo.core.exceptions import InvalidBitsPerCharError
from hilbert_geo.core.types import Direction
from hilbert_geo.shared.geohash import decode, decode_exactly, encode
from hilbert_geo.shared.geometry import (
    hilbert_curve,
    hilbert_curve_points,
    neighbors,
    rectangle,
)

ALL_DIRECTIONS = {d.value for d in Direction}
NORTH_TRIPLE = {"north", "north-east", "north-west"}
SOUTH_TRIPLE = {"south", "south-east", "south-west"}


class TestNeighbors:
    """Tests for neighbors()."""

    def test_all_directions(self, chicago) -> None:
        """Test that mid-latitude cells have eight neighbors."""
        code = encode(*chicago, precision=6)
        found = neighbors(code)
        assert set(found) == ALL_DIRECTIONS
        assert code not in found.values()
        assert all(len(n) == len(code) for n in found.values())

    def test_east_west_symmetry(self, chicago) -> None:
        """Test that east is one cell step away and its west is the starting cell."""
        code = encode(*chicago, precision=6)
        cell = decode_exactly(code)
        east = neighbors(code)["east"]

        assert decode(east).lng == pytest.approx(cell.lng + 2 * cell.lng_err)
        assert decode(east).lat == pytest.approx(cell.lat)
        assert neighbors(east)["west"] == code

    def test_north_south_symmetry(self, chicago) -> None:
        """Test that north and south are inverse steps."""
        code = encode(*chicago, precision=6)
        north = neighbors(code)["north"]
        assert neighbors(north)["south"] == code

    def test_antimeridian_wraps(self) -> None:
        """Test that east of the last column is the first column."""
        code = encode(179.99, 0, 4)
        cell = decode_exactly(code)
        east = decode(neighbors(code)["east"])

        assert east.lng == pytest.approx(-180 + cell.lng_err)
        assert neighbors(neighbors(code)["east"])["west"] == code

    def test_north_pole_omitted(self) -> None:
        """Test that the top row has no northern neighbors."""
        found = neighbors(encode(10, 89.999, 5))
        assert not NORTH_TRIPLE & set(found)
        assert SOUTH_TRIPLE <= set(found)

    def test_south_pole_omitted(self) -> None:
        """Test that the bottom row has no southern neighbors."""
        found = neighbors(encode(10, -89.999, 5))
        assert not SOUTH_TRIPLE & set(found)
        assert NORTH_TRIPLE <= set(found)

    def test_coarsest_grid(self) -> None:
        """Test neighbors on the 2x2 grid of a single base4 character."""
        assert neighbors("2", 2) == {
            "east": "1",
            "west": "1",
            "south": "3",
            "south-east": "0",
            "south-west": "0",
        }

    def test_invalid_bits_per_char(self) -> None:
        """Test that bits_per_char must be 2, 4 or 6."""
        with pytest.raises(InvalidBitsPerCharError):
            neighbors("2", 5)


class TestRectangle:
    """Tests for rectangle()."""

    def test_geojson_feature(self) -> None:
        """Test the Feature layout of a cell."""
        feature = rectangle("2", 2)

        assert feature["type"] == "Feature"
        assert feature["bbox"] == [0.0, 0.0, 180.0, 90.0]
        assert feature["geometry"] == {
            "type": "Polygon",
            "coordinates": [
                [[0.0, 0.0], [180.0, 0.0], [180.0, 90.0], [0.0, 90.0], [0.0, 0.0]]
            ],
        }
        assert feature["properties"] == {
            "code": "2",
            "lng": 90.0,
            "lat": 45.0,
            "lng_err": 90.0,
            "lat_err": 45.0,
            "bits_per_char": 2,
        }

    def test_rectangle_contains_encoded_points(self, chicago) -> None:
        """Test that the input point lies inside its cell's bbox."""
        lng, lat = chicago
        west, south, east, north = rectangle(encode(lng, lat, 7))["bbox"]
        assert west <= lng < east
        assert south <= lat < north

    def test_ring_is_closed(self) -> None:
        """Test that the polygon ring ends where it starts."""
        ring = rectangle("756")["geometry"]["coordinates"][0]
        assert len(ring) == 5
        assert ring[0] == ring[-1]


class TestHilbertCurve:
    """Tests for hilbert_curve() and hilbert_curve_points()."""

    def test_level_one_curve(self) -> None:
        """Test the curve through the four cells of one base4 character."""
        feature = hilbert_curve(1, 2)

        assert feature == {
            "type": "Feature",
            "properties": {},
            "geometry": {
                "type": "LineString",
                "coordinates": [[-90.0, -45.0], [-90.0, 45.0], [90.0, 45.0], [90.0, -45.0]],
            },
        }

    def test_point_count(self) -> None:
        """Test that every cell is visited once."""
        points = hilbert_curve_points(2, 4)
        assert len(points) == 256
        assert len(set(points)) == 256

    def test_steps_are_one_cell(self) -> None:
        """Test that consecutive centers are one cell apart."""
        points = hilbert_curve_points(2, 4)
        lng_step = 360 / 16
        lat_step = 180 / 16
        for (lng1, lat1), (lng2, lat2) in zip(points, points[1:]):
            steps = abs(lng2 - lng1) / lng_step + abs(lat2 - lat1) / lat_step
            assert steps == pytest.approx(1.0)

    def test_matches_encoding_order(self) -> None:
        """Test that the n-th point encodes to the n-th code."""
        points = hilbert_curve_points(3, 2)
        codes = [encode(lng, lat, 3, 2) for lng, lat in points]
        assert codes == sorted(codes)
        assert len(set(codes)) == 64

    def test_precision_capped(self) -> None:
        """Test that large enumerations are refused."""
        with pytest.raises(ValueError, match="precision"):
            hilbert_curve(settings.max_curve_precision + 1, 2)

    def test_precision_cap_configurable(self, monkeypatch) -> None:
        """Test that the cap comes from settings."""
        monkeypatch.setattr(settings, "max_curve_precision", 1)
        with pytest.raises(ValueError):
            hilbert_curve_points(2, 2)
        assert len(hilbert_curve_points(1, 2)) == 4

    def test_invalid_precision(self) -> None:
        """Test that precision must be positive."""
        with pytest.raises(ValueError):
            hilbert_curve(0)
