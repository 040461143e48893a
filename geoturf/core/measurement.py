"""Aggregate measurements over GeoJSON geometries.

Provides path and extent measurements built on GeoCalculator:
- Path length and interpolation along a path
- Bounding boxes, bbox polygons, envelopes and squared bboxes
- Spherical polygon area (Chamberlain & Duquette approximation)
- Bounding-box center

Area uses a fixed sphere radius (MeasurementConfig.AREA_EARTH_RADIUS_M) and
returns square meters.
"""

from typing import Any, Mapping, Optional, Sequence, Union

import numpy as np

from geoturf.constants import MeasurementConfig
from geoturf.core.geo_calculator import GeoCalculator
from geoturf.core.meta import Meta
from geoturf.core.units import DEFAULT_UNIT, Unit
from geoturf.exceptions import GeometryTooSmallError, UnsupportedGeometryError
from geoturf.model import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeoJson,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)

BBox = tuple[float, float, float, float]


class Measurement:
    """Static methods for lengths, extents and areas.

    Example:
        km = Measurement.length(line, unit=Unit.KILOMETERS)
        west, south, east, north = Measurement.bbox(feature_collection)
    """

    # -------------------------------------------------------------------------
    # Length and interpolation
    # -------------------------------------------------------------------------

    @staticmethod
    def length(
        value: Union[Sequence[Point], LineString, MultiLineString, Polygon, MultiPolygon, Feature],
        unit: Unit = DEFAULT_UNIT,
    ) -> float:
        """Sum of great-circle distances between consecutive points.

        Polygon length includes every ring (outer and holes); multi-geometries
        sum their members.

        Args:
            value: A list of Points, a line or polygon geometry, or a Feature wrapping one
            unit: Output unit

        Returns:
            Total length in ``unit``; 0.0 for fewer than two points.

        Raises:
            UnsupportedGeometryError: For Point, MultiPoint or GeometryCollection input.
        """
        if isinstance(value, Feature):
            if value.geometry is None:
                raise UnsupportedGeometryError("Cannot measure the length of a Feature without geometry")
            return Measurement.length(value=value.geometry, unit=unit)
        if isinstance(value, LineString):
            return Measurement._path_length(coords=value.coordinates, unit=unit)
        if isinstance(value, (MultiLineString, Polygon)):
            return sum(Measurement._path_length(coords=line, unit=unit) for line in value.coordinates)
        if isinstance(value, MultiPolygon):
            return sum(
                Measurement._path_length(coords=ring, unit=unit) for polygon in value.coordinates for ring in polygon
            )
        if isinstance(value, GeoJson):
            raise UnsupportedGeometryError(f"length is not defined for {type(value).__name__}")
        return Measurement._path_length(coords=value, unit=unit)

    @staticmethod
    def _path_length(coords: Sequence[Point], unit: Unit) -> float:
        return sum(
            GeoCalculator.distance(point1=coords[i], point2=coords[i + 1], unit=unit) for i in range(len(coords) - 1)
        )

    @staticmethod
    def along(
        line: Union[LineString, Sequence[Point]],
        distance: float,
        unit: Unit = DEFAULT_UNIT,
    ) -> Point:
        """Point at a specified distance along a line.

        Walks the cumulative distance over the vertices. At the first vertex
        where the walked distance reaches ``distance``, returns that vertex, or
        projects back towards the previous vertex by the overshoot.

        Args:
            line: LineString or list of Points
            distance: Distance from the start of the line
            unit: Unit of ``distance``

        Returns:
            The interpolated Point; the last vertex if the line is shorter than ``distance``.

        Raises:
            GeometryTooSmallError: If the line has no coordinates.
        """
        coords = line.coordinates if isinstance(line, LineString) else line
        if len(coords) == 0:
            raise GeometryTooSmallError("along requires at least one coordinate")

        travelled = 0.0
        for index, point in enumerate(coords):
            if travelled >= distance:
                overshot = distance - travelled
                if overshot == 0 or index == 0:
                    return point
                direction = GeoCalculator.bearing(point1=point, point2=coords[index - 1]) - 180
                return GeoCalculator.destination(point=point, distance=overshot, bearing=direction, unit=unit)
            if index < len(coords) - 1:
                travelled += GeoCalculator.distance(point1=point, point2=coords[index + 1], unit=unit)
        return coords[-1]

    # -------------------------------------------------------------------------
    # Extents
    # -------------------------------------------------------------------------

    @staticmethod
    def bbox(geojson: GeoJson) -> BBox:
        """Bounding box of any GeoJSON object.

        An explicit ``bbox`` on the object is returned verbatim. Otherwise all
        coordinates are reduced to their extremes. A GeometryCollection is
        reduced from the corners of its members' boxes.

        Returns:
            Tuple (west, south, east, north).

        Raises:
            GeometryTooSmallError: If the object contains no coordinates.
        """
        if geojson.bbox is not None:
            return geojson.bbox.to_tuple()
        if isinstance(geojson, GeometryCollection):
            return Measurement._collection_bbox(collection=geojson)
        return Measurement._bbox_of(coords=Meta.coord_all(geojson=geojson, exclude_wrap_coord=False))

    @staticmethod
    def _collection_bbox(collection: GeometryCollection) -> BBox:
        """Reduce the corners of every member box, walking nested collections with a stack.

        A nested member with an explicit ``bbox`` contributes that box as is.
        """
        corners: list[Point] = []
        stack: list[Geometry] = list(collection.geometries)
        if not stack:
            raise GeometryTooSmallError("Cannot compute a bounding box of an empty GeometryCollection")
        while stack:
            member = stack.pop()
            if member.bbox is None and isinstance(member, GeometryCollection):
                if not member.geometries:
                    raise GeometryTooSmallError("Cannot compute a bounding box of an empty GeometryCollection")
                stack.extend(member.geometries)
                continue
            if member.bbox is not None:
                west, south, east, north = member.bbox.to_tuple()
            else:
                west, south, east, north = Measurement._bbox_of(
                    coords=Meta.coord_all(geojson=member, exclude_wrap_coord=False)
                )
            corners.extend(
                [
                    Point(longitude=west, latitude=south),
                    Point(longitude=east, latitude=south),
                    Point(longitude=east, latitude=north),
                    Point(longitude=west, latitude=north),
                ]
            )
        return Measurement._bbox_of(coords=corners)

    @staticmethod
    def _bbox_of(coords: Sequence[Point]) -> BBox:
        if not coords:
            raise GeometryTooSmallError("Cannot compute a bounding box without coordinates")
        lon_lat = np.array([point.lon_lat for point in coords], dtype=np.float64)
        west, south = lon_lat.min(axis=0)
        east, north = lon_lat.max(axis=0)
        return (float(west), float(south), float(east), float(north))

    @staticmethod
    def bbox_polygon(
        bbox: Union[BoundingBox, Sequence[float]],
        properties: Optional[Mapping[str, Any]] = None,
        id: Optional[str] = None,
    ) -> Feature:
        """Closed rectangular Polygon Feature covering a bounding box.

        Args:
            bbox: BoundingBox or (west, south, east, north)
            properties: Optional Feature properties
            id: Optional Feature id

        Returns:
            Feature whose geometry is a single 5-point ring, counter-clockwise from the southwest corner.
        """
        if isinstance(bbox, BoundingBox):
            west, south, east, north = bbox.to_tuple()
        else:
            west, south, east, north = bbox
        ring = [
            Point(longitude=west, latitude=south),
            Point(longitude=east, latitude=south),
            Point(longitude=east, latitude=north),
            Point(longitude=west, latitude=north),
            Point(longitude=west, latitude=south),
        ]
        return Feature(geometry=Polygon(coordinates=[ring]), properties=properties, id=id)

    @staticmethod
    def envelope(geojson: GeoJson) -> Polygon:
        """Rectangular Polygon enclosing every coordinate of ``geojson``."""
        return Measurement.bbox_polygon(bbox=Measurement.bbox(geojson=geojson)).geometry

    @staticmethod
    def square(bbox: BoundingBox) -> BoundingBox:
        """Smallest square-ish bbox that contains ``bbox``.

        The shorter side (compared by great-circle distance) is widened about
        its midpoint to the degree span of the longer side.
        """
        horizontal = GeoCalculator.distance(
            point1=Point(longitude=bbox.west, latitude=bbox.south),
            point2=Point(longitude=bbox.east, latitude=bbox.south),
        )
        vertical = GeoCalculator.distance(
            point1=Point(longitude=bbox.west, latitude=bbox.south),
            point2=Point(longitude=bbox.west, latitude=bbox.north),
        )
        if horizontal >= vertical:
            mid_lat = (bbox.south + bbox.north) / 2
            half_span = (bbox.east - bbox.west) / 2
            return BoundingBox.from_lng_lats(
                west=bbox.west, south=mid_lat - half_span, east=bbox.east, north=mid_lat + half_span
            )
        mid_lon = (bbox.west + bbox.east) / 2
        half_span = (bbox.north - bbox.south) / 2
        return BoundingBox.from_lng_lats(
            west=mid_lon - half_span, south=bbox.south, east=mid_lon + half_span, north=bbox.north
        )

    # -------------------------------------------------------------------------
    # Area
    # -------------------------------------------------------------------------

    @staticmethod
    def area(geojson: Union[Geometry, Feature, FeatureCollection]) -> float:
        """Geodesic area in square meters.

        Only Polygon and MultiPolygon have area: holes are subtracted from the
        outer ring, multi-polygons sum their members. Every other geometry and
        geometry-less Features contribute 0.
        """
        if isinstance(geojson, FeatureCollection):
            return sum(Measurement.area(geojson=feature) for feature in geojson.features)
        if isinstance(geojson, Feature):
            return Measurement.area(geojson=geojson.geometry) if geojson.geometry is not None else 0.0
        if isinstance(geojson, Polygon):
            return Measurement._polygon_area(rings=geojson.coordinates)
        if isinstance(geojson, MultiPolygon):
            return sum(Measurement._polygon_area(rings=polygon) for polygon in geojson.coordinates)
        return 0.0

    @staticmethod
    def _polygon_area(rings: Sequence[Sequence[Point]]) -> float:
        if not rings:
            return 0.0
        holes = sum(abs(Measurement.ring_area(ring=ring)) for ring in rings[1:])
        return abs(Measurement.ring_area(ring=rings[0])) - holes

    @staticmethod
    def ring_area(ring: Sequence[Point]) -> float:
        """Signed area of a ring in square meters.

        Reference:
            Chamberlain & Duquette, "Some Algorithms for Polygons on a Sphere",
            JPL Publication 07-03 (2007).

        For each vertex triple (i, i+1, i+2) with wraparound, accumulates
        (lon[i+2] - lon[i]) * sin(lat[i+1]) and scales by R²/2. The sign flips
        when the vertex order is reversed.

        Returns:
            Signed area; 0.0 for rings with fewer than three points.
        """
        if len(ring) <= 2:
            return 0.0
        lon_lat = np.radians(np.array([point.lon_lat for point in ring], dtype=np.float64))
        lons, lats = lon_lat[:, 0], lon_lat[:, 1]
        total = np.sum((np.roll(lons, -2) - lons) * np.sin(np.roll(lats, -1)))
        radius = MeasurementConfig.AREA_EARTH_RADIUS_M
        return float(total * radius * radius / 2)

    # -------------------------------------------------------------------------
    # Center
    # -------------------------------------------------------------------------

    @staticmethod
    def center(
        geojson: Union[Feature, FeatureCollection],
        properties: Optional[Mapping[str, Any]] = None,
        id: Optional[str] = None,
    ) -> Feature:
        """Center of the bounding box as a Point Feature.

        This is the midpoint of the bbox corners, not an area-weighted centroid.
        """
        west, south, east, north = Measurement.bbox(geojson=geojson)
        point = Point(longitude=(west + east) / 2, latitude=(south + north) / 2)
        return Feature(geometry=point, properties=properties, id=id)


