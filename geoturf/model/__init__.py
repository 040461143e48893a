"""Immutable GeoJSON data model.

- GeoJson / Geometry: abstract roots of the hierarchy
- Point: Geometry atom (lon, lat, optional altitude)
- LineString, MultiPoint, MultiLineString, Polygon, MultiPolygon: coordinate geometries
- GeometryCollection: heterogeneous geometries
- Feature / FeatureCollection: geometries with properties
- BoundingBox: southwest / northeast extent

JSON text encoding is not part of this package.
"""

from geoturf.model.bounding_box import BoundingBox
from geoturf.model.feature import Feature, FeatureCollection
from geoturf.model.geojson import GeoJson, Geometry
from geoturf.model.geometries import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
)
from geoturf.model.point import Point

__all__ = [
    "GeoJson",
    "Geometry",
    "Point",
    "BoundingBox",
    "LineString",
    "MultiPoint",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
]
