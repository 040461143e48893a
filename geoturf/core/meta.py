"""Coordinate extraction across every GeoJSON variant.

coord_all() flattens any geometry, Feature or FeatureCollection into one
ordered list of Points. Nested GeometryCollections are walked with an
explicit work stack, so nesting depth is not limited by the call stack.
"""

from geoturf.exceptions import UnsupportedGeometryError
from geoturf.model import (
    Feature,
    FeatureCollection,
    GeoJson,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class Meta:
    """Static methods for walking GeoJSON coordinates."""

    @staticmethod
    def coord_all(geojson: GeoJson, exclude_wrap_coord: bool = False) -> list[Point]:
        """Collect every coordinate of a GeoJSON object in document order.

        Args:
            geojson: Any geometry, Feature or FeatureCollection
            exclude_wrap_coord: Drop the closing duplicate Point of each
                Polygon / MultiPolygon ring

        Returns:
            New list of Points. Features without geometry contribute nothing.

        Raises:
            UnsupportedGeometryError: If an unknown GeoJson type is encountered.
        """
        coords: list[Point] = []
        stack: list[GeoJson] = [geojson]
        while stack:
            item = stack.pop()
            if isinstance(item, FeatureCollection):
                stack.extend(reversed(item.features))
            elif isinstance(item, Feature):
                if item.geometry is not None:
                    stack.append(item.geometry)
            elif isinstance(item, GeometryCollection):
                stack.extend(reversed(item.geometries))
            else:
                coords.extend(Meta._single_geometry_coords(geometry=item, exclude_wrap_coord=exclude_wrap_coord))
        return coords

    @staticmethod
    def _single_geometry_coords(geometry: Geometry, exclude_wrap_coord: bool) -> list[Point]:
        drop = 1 if exclude_wrap_coord else 0
        if isinstance(geometry, Point):
            return [geometry]
        if isinstance(geometry, (MultiPoint, LineString)):
            return list(geometry.coordinates)
        if isinstance(geometry, MultiLineString):
            return [point for line in geometry.coordinates for point in line]
        if isinstance(geometry, Polygon):
            return [point for ring in geometry.coordinates for point in ring[: len(ring) - drop]]
        if isinstance(geometry, MultiPolygon):
            return [
                point for polygon in geometry.coordinates for ring in polygon for point in ring[: len(ring) - drop]
            ]
        raise UnsupportedGeometryError(f"Unsupported geometry type: {type(geometry).__name__}")

    @staticmethod
    def get_coord(feature: Feature) -> Point:
        """Return the Point geometry of a Point Feature.

        Raises:
            UnsupportedGeometryError: If the feature's geometry is not a Point.
        """
        if isinstance(feature.geometry, Point):
            return feature.geometry
        raise UnsupportedGeometryError("A Feature with a Point geometry is required.")
