"""Tests for the geoturf GeoJSON data model.

Tests: Point, BoundingBox, LineString, Polygon, multi-geometries, Feature, FeatureCollection
Focus: Immutability, structural equality, factory validation

Note: Fixtures are defined in conftest.py.
"""

import dataclasses
import math

import pytest

from geoturf.exceptions import GeoTurfError, InvalidArgumentError
from geoturf.model import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)


def _pts(*lon_lats: tuple[float, float]) -> list[Point]:
    return [Point(longitude=lon, latitude=lat) for lon, lat in lon_lats]


# =============================================================================
# TESTS FOR MODEL CLASSES
# =============================================================================


class TestPoint:
    """Point - the fundamental geometry atom."""

    def test_coordinates_without_altitude(self) -> None:
        """coordinates is (lon, lat) when no altitude is set."""
        pt = Point(longitude=10.27, latitude=46.97)
        assert pt.coordinates == (10.27, 46.97)
        assert pt.type == "Point"

    def test_coordinates_with_altitude(self) -> None:
        """coordinates is (lon, lat, alt) when altitude is set."""
        pt = Point(longitude=10.27, latitude=46.97, altitude=2500)
        assert pt.coordinates == (10.27, 46.97, 2500.0)

    def test_lat_lon_and_lon_lat_order(self) -> None:
        """lat_lon is geographic order, lon_lat is GeoJSON order."""
        pt = Point(longitude=10.27, latitude=46.97)
        assert pt.lat_lon == (46.97, 10.27)
        assert pt.lon_lat == (10.27, 46.97)

    def test_integer_input_coerced_to_float(self) -> None:
        """Integer coordinates are stored as floats."""
        pt = Point(longitude=1, latitude=2)
        assert isinstance(pt.longitude, float) and isinstance(pt.latitude, float)

    def test_nan_rejected(self) -> None:
        """NaN coordinates raise InvalidArgumentError (a ValueError)."""
        with pytest.raises(InvalidArgumentError):
            Point(longitude=math.nan, latitude=0.0)
        with pytest.raises(ValueError):
            Point(longitude=0.0, latitude=0.0, altitude=math.nan)

    def test_from_coordinates(self) -> None:
        """from_coordinates accepts GeoJSON positions of length 2 or 3."""
        assert Point.from_coordinates(coordinates=[1.0, 2.0]) == Point(longitude=1.0, latitude=2.0)
        assert Point.from_coordinates(coordinates=(1.0, 2.0, 3.0)).altitude == 3.0
        with pytest.raises(InvalidArgumentError):
            Point.from_coordinates(coordinates=[1.0])

    def test_frozen(self) -> None:
        """Points cannot be mutated."""
        pt = Point(longitude=1.0, latitude=2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pt.longitude = 5.0  # type: ignore[misc]

    def test_equality_includes_bbox(self) -> None:
        """Two points with the same position but different bbox are not equal."""
        bbox = BoundingBox.from_lng_lats(west=0.0, south=0.0, east=1.0, north=1.0)
        assert Point(longitude=0.5, latitude=0.5) == Point(longitude=0.5, latitude=0.5)
        assert Point(longitude=0.5, latitude=0.5) != Point(longitude=0.5, latitude=0.5, bbox=bbox)


class TestBoundingBox:
    """BoundingBox - southwest / northeast extent."""

    def test_from_lng_lats_accessors(self) -> None:
        """Edge accessors read the corner points."""
        bbox = BoundingBox.from_lng_lats(west=-1.0, south=-2.0, east=3.0, north=4.0)
        assert (bbox.west, bbox.south, bbox.east, bbox.north) == (-1.0, -2.0, 3.0, 4.0)
        assert bbox.southwest == Point(longitude=-1.0, latitude=-2.0)
        assert bbox.to_tuple() == (-1.0, -2.0, 3.0, 4.0)

    def test_corner_altitudes(self) -> None:
        """Optional altitudes end up on the corner points."""
        bbox = BoundingBox.from_lng_lats(
            west=0.0, south=0.0, east=1.0, north=1.0, southwest_altitude=10.0, northeast_altitude=20.0
        )
        assert bbox.southwest.altitude == 10.0
        assert bbox.northeast.altitude == 20.0


class TestLineAndPolygon:
    """LineString, Polygon and their multi variants."""

    def test_line_string_stores_tuple(self) -> None:
        """List input is converted to a tuple, so the geometry is hashable."""
        coords = _pts((0.0, 0.0), (1.0, 1.0))
        line = LineString(coordinates=coords)
        coords.append(Point(longitude=2.0, latitude=2.0))
        assert isinstance(line.coordinates, tuple)
        assert len(line.coordinates) == 2
        assert hash(line) == hash(LineString(coordinates=_pts((0.0, 0.0), (1.0, 1.0))))

    def test_polygon_outer_and_inner_lines(self, square_with_hole: Polygon) -> None:
        """outer_line is ring 0, inner_lines are the remaining rings."""
        assert square_with_hole.outer_line.coordinates[1] == Point(longitude=10.0, latitude=0.0)
        assert len(square_with_hole.inner_lines) == 1
        assert square_with_hole.inner_lines[0].coordinates[0] == Point(longitude=4.0, latitude=4.0)

    def test_from_outer_inner_builds_polygon(self, square_with_hole: Polygon) -> None:
        """from_outer_inner produces the same polygon as the ring constructor."""
        rebuilt = Polygon.from_outer_inner(outer=square_with_hole.outer_line, inner=square_with_hole.inner_lines)
        assert rebuilt == square_with_hole

    def test_from_outer_inner_rejects_open_ring(self) -> None:
        """A ring whose first and last points differ is rejected."""
        open_ring = LineString(coordinates=_pts((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)))
        with pytest.raises(InvalidArgumentError, match="identical"):
            Polygon.from_outer_inner(outer=open_ring)

    def test_from_outer_inner_rejects_short_ring(self) -> None:
        """A ring with fewer than 4 points is rejected."""
        short_ring = LineString(coordinates=_pts((0.0, 0.0), (1.0, 0.0), (0.0, 0.0)))
        with pytest.raises(GeoTurfError):
            Polygon.from_outer_inner(outer=short_ring)

    def test_multi_line_string_round_trip_through_line_strings(self) -> None:
        """line_strings and from_line_strings are inverse operations."""
        multi = MultiLineString(coordinates=[_pts((0.0, 0.0), (1.0, 1.0)), _pts((2.0, 2.0), (3.0, 3.0))])
        assert MultiLineString.from_line_strings(line_strings=multi.line_strings) == multi
        assert multi.line_strings[1].coordinates[0] == Point(longitude=2.0, latitude=2.0)

    def test_multi_polygon_polygons(self, two_squares: MultiPolygon) -> None:
        """polygons exposes each member as a Polygon."""
        polygons = two_squares.polygons
        assert len(polygons) == 2
        assert MultiPolygon.from_polygons(polygons=polygons) == two_squares

    def test_geometry_collection_nesting(self) -> None:
        """GeometryCollections may contain other GeometryCollections."""
        inner = GeometryCollection(geometries=[Point(longitude=1.0, latitude=1.0)])
        outer = GeometryCollection(geometries=[inner, LineString(coordinates=_pts((0.0, 0.0), (1.0, 0.0)))])
        assert outer.geometries[0] == inner
        assert outer.type == "GeometryCollection"


class TestFeature:
    """Feature and FeatureCollection."""

    def test_properties_are_copied(self) -> None:
        """Mutating the caller's dict after construction does not affect the Feature."""
        props = {"name": "summit"}
        feature = Feature(geometry=Point(longitude=0.0, latitude=0.0), properties=props)
        props["name"] = "changed"
        assert feature.properties == {"name": "summit"}

    def test_feature_is_hashable(self) -> None:
        """Features hash despite carrying a dict of properties."""
        feature = Feature(geometry=Point(longitude=0.0, latitude=0.0), properties={"a": 1}, id="f1")
        assert hash(feature) == hash(Feature(geometry=Point(longitude=0.0, latitude=0.0), properties={"a": 1}, id="f1"))

    def test_geometry_less_feature(self) -> None:
        """A Feature may have no geometry."""
        feature = Feature()
        assert feature.geometry is None and feature.properties is None
        assert feature.type == "Feature"

    def test_feature_collection_from_geometries(self, unit_square: Polygon) -> None:
        """from_geometries wraps each geometry in a property-less Feature."""
        collection = FeatureCollection.from_geometries(geometries=[unit_square, Point(longitude=0.0, latitude=0.0)])
        assert len(collection.features) == 2
        assert collection.features[0].geometry == unit_square
        assert collection.features[1].properties is None
