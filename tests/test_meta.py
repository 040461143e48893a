"""Tests for coordinate extraction (Meta)."""

import pytest

from geoturf.core.meta import Meta
from geoturf.exceptions import UnsupportedGeometryError
from geoturf.model import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def _pts(*lon_lats: tuple[float, float]) -> list[Point]:
    return [Point(longitude=lon, latitude=lat) for lon, lat in lon_lats]


class TestCoordAll:
    """Meta.coord_all - flatten any GeoJSON object to Points."""

    def test_point(self) -> None:
        pt = Point(longitude=1.0, latitude=2.0)
        assert Meta.coord_all(geojson=pt) == [pt]

    def test_line_string_and_multi_point(self) -> None:
        coords = _pts((0.0, 0.0), (1.0, 1.0), (2.0, 2.0))
        assert Meta.coord_all(geojson=LineString(coordinates=coords)) == coords
        assert Meta.coord_all(geojson=MultiPoint(coordinates=coords)) == coords

    def test_multi_line_string_concatenates(self) -> None:
        multi = MultiLineString(coordinates=[_pts((0.0, 0.0), (1.0, 1.0)), _pts((5.0, 5.0), (6.0, 6.0))])
        assert Meta.coord_all(geojson=multi) == _pts((0.0, 0.0), (1.0, 1.0), (5.0, 5.0), (6.0, 6.0))

    def test_polygon_keeps_closing_point_by_default(self, unit_square: Polygon) -> None:
        coords = Meta.coord_all(geojson=unit_square)
        assert len(coords) == 5
        assert coords[0] == coords[-1]

    def test_polygon_exclude_wrap_coord(self, square_with_hole: Polygon) -> None:
        """Each ring drops its closing duplicate: 2 rings x 4 points."""
        coords = Meta.coord_all(geojson=square_with_hole, exclude_wrap_coord=True)
        assert len(coords) == 8
        assert coords[4] == Point(longitude=4.0, latitude=4.0)

    def test_multi_polygon(self, two_squares: MultiPolygon) -> None:
        assert len(Meta.coord_all(geojson=two_squares)) == 10
        assert len(Meta.coord_all(geojson=two_squares, exclude_wrap_coord=True)) == 8

    def test_nested_geometry_collection_in_document_order(self) -> None:
        """Nested collections flatten depth-first, preserving member order."""
        a, b, c, d = _pts((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0))
        nested = GeometryCollection(
            geometries=[
                a,
                GeometryCollection(geometries=[LineString(coordinates=[b, c])]),
                d,
            ]
        )
        assert Meta.coord_all(geojson=nested) == [a, b, c, d]

    def test_deeply_nested_geometry_collection(self) -> None:
        """Nesting depth is not limited by the interpreter recursion limit."""
        collection = GeometryCollection(geometries=[Point(longitude=1.0, latitude=1.0)])
        for _ in range(5000):
            collection = GeometryCollection(geometries=[collection])
        assert Meta.coord_all(geojson=collection) == [Point(longitude=1.0, latitude=1.0)]

    def test_feature_collection_skips_empty_features(self, unit_square: Polygon) -> None:
        collection = FeatureCollection(
            features=[
                Feature(geometry=Point(longitude=9.0, latitude=9.0)),
                Feature(),
                Feature(geometry=unit_square),
            ]
        )
        coords = Meta.coord_all(geojson=collection, exclude_wrap_coord=True)
        assert len(coords) == 5
        assert coords[0] == Point(longitude=9.0, latitude=9.0)

    def test_result_is_a_new_list(self) -> None:
        line = LineString(coordinates=_pts((0.0, 0.0), (1.0, 1.0)))
        coords = Meta.coord_all(geojson=line)
        coords.clear()
        assert len(line.coordinates) == 2


class TestGetCoord:
    """Meta.get_coord - Point of a Point Feature."""

    def test_point_feature(self) -> None:
        pt = Point(longitude=3.0, latitude=4.0)
        assert Meta.get_coord(feature=Feature(geometry=pt)) == pt

    def test_non_point_feature_rejected(self) -> None:
        line = LineString(coordinates=_pts((0.0, 0.0), (1.0, 1.0)))
        with pytest.raises(UnsupportedGeometryError):
            Meta.get_coord(feature=Feature(geometry=line))
