"""Conversion between geoturf geometries and shapely geometries.

Lets callers hand geoturf data to shapely for operations geoturf does not
provide (buffering, unions, validity checks) and bring the results back.
Coordinates map one to one as (lon, lat[, alt]); shapely sees plain planar
degrees, so its metric results are in degrees too.
"""

from typing import Sequence, Union

from shapely import geometry as sg
from shapely.geometry.base import BaseGeometry

from geoturf.exceptions import UnsupportedGeometryError
from geoturf.model import (
    Feature,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def _positions(points: Sequence[Point]) -> list[tuple[float, ...]]:
    return [point.coordinates for point in points]


def _points(coords: Sequence[Sequence[float]]) -> list[Point]:
    return [Point.from_coordinates(coordinates=tuple(c)) for c in coords]


def _shapely_polygon(rings: Sequence[Sequence[Point]]) -> sg.Polygon:
    if not rings:
        return sg.Polygon()
    return sg.Polygon(shell=_positions(rings[0]), holes=[_positions(ring) for ring in rings[1:]])


def _rings(polygon: sg.Polygon) -> list[list[Point]]:
    return [_points(polygon.exterior.coords), *(_points(ring.coords) for ring in polygon.interiors)]


def to_shapely(geojson: Union[Geometry, Feature]) -> BaseGeometry:
    """Convert a geoturf geometry (or a Feature's geometry) to shapely.

    Raises:
        UnsupportedGeometryError: If the Feature has no geometry or the type is unknown.
    """
    if isinstance(geojson, Feature):
        if geojson.geometry is None:
            raise UnsupportedGeometryError("Cannot convert a Feature without geometry to shapely")
        return to_shapely(geojson=geojson.geometry)
    if isinstance(geojson, Point):
        return sg.Point(geojson.coordinates)
    if isinstance(geojson, LineString):
        return sg.LineString(_positions(geojson.coordinates))
    if isinstance(geojson, MultiPoint):
        return sg.MultiPoint(_positions(geojson.coordinates))
    if isinstance(geojson, MultiLineString):
        return sg.MultiLineString([_positions(line) for line in geojson.coordinates])
    if isinstance(geojson, Polygon):
        return _shapely_polygon(rings=geojson.coordinates)
    if isinstance(geojson, MultiPolygon):
        return sg.MultiPolygon([_shapely_polygon(rings=rings) for rings in geojson.coordinates])
    if isinstance(geojson, GeometryCollection):
        return sg.GeometryCollection([to_shapely(geojson=member) for member in geojson.geometries])
    raise UnsupportedGeometryError(f"Cannot convert {type(geojson).__name__} to shapely")


def from_shapely(shape: BaseGeometry) -> Geometry:
    """Convert a shapely geometry to the matching geoturf geometry.

    Raises:
        UnsupportedGeometryError: If ``shape`` is empty or of an unsupported type
            (e.g. a standalone LinearRing).
    """
    if shape.is_empty:
        raise UnsupportedGeometryError(f"Cannot convert an empty shapely {shape.geom_type}")
    if isinstance(shape, sg.Point):
        return _points(shape.coords)[0]
    if isinstance(shape, sg.LinearRing):
        raise UnsupportedGeometryError("A standalone LinearRing has no geoturf counterpart; wrap it in a Polygon")
    if isinstance(shape, sg.LineString):
        return LineString(coordinates=_points(shape.coords))
    if isinstance(shape, sg.Polygon):
        return Polygon(coordinates=_rings(polygon=shape))
    if isinstance(shape, sg.MultiPoint):
        return MultiPoint(coordinates=[_points(member.coords)[0] for member in shape.geoms])
    if isinstance(shape, sg.MultiLineString):
        return MultiLineString(coordinates=[_points(member.coords) for member in shape.geoms])
    if isinstance(shape, sg.MultiPolygon):
        return MultiPolygon(coordinates=[_rings(polygon=member) for member in shape.geoms])
    if isinstance(shape, sg.GeometryCollection):
        return GeometryCollection(geometries=[from_shapely(shape=member) for member in shape.geoms])
    raise UnsupportedGeometryError(f"Cannot convert shapely {shape.geom_type}")
