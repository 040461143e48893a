"""Geometry combination and polygon / line conversion.

- combine: merge homogeneous geometries into MultiPoint / MultiLineString / MultiPolygon
- polygon_to_line / multi_polygon_to_line: polygon rings as line features
- explode: every vertex as its own Point feature
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from geoturf.core.meta import Meta
from geoturf.exceptions import GeometryTooSmallError, UnsupportedGeometryError
from geoturf.model import (
    Feature,
    FeatureCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)

Properties = Optional[Mapping[str, Any]]


class Conversion:
    """Static methods converting between geometry shapes."""

    @staticmethod
    def combine(feature_collection: FeatureCollection) -> FeatureCollection:
        """Combine a FeatureCollection into at most three multi-geometry features.

        Points and MultiPoints merge into one MultiPoint, lines into one
        MultiLineString, polygons into one MultiPolygon (in that order). Member
        properties are dropped. Other geometries are ignored.

        Returns:
            New FeatureCollection; the input collection itself when nothing
            could be combined.

        Raises:
            GeometryTooSmallError: If the collection has no features.
        """
        if not feature_collection.features:
            raise GeometryTooSmallError("The FeatureCollection doesn't have any Feature objects in it")

        points: list[Point] = []
        lines: list[LineString] = []
        polygons: list[Polygon] = []
        for feature in feature_collection.features:
            geometry = feature.geometry
            if isinstance(geometry, Point):
                points.append(geometry)
            elif isinstance(geometry, MultiPoint):
                points.extend(geometry.coordinates)
            elif isinstance(geometry, LineString):
                lines.append(geometry)
            elif isinstance(geometry, MultiLineString):
                lines.extend(geometry.line_strings)
            elif isinstance(geometry, Polygon):
                polygons.append(geometry)
            elif isinstance(geometry, MultiPolygon):
                polygons.extend(geometry.polygons)

        combined: list[Feature] = []
        if points:
            combined.append(Feature(geometry=MultiPoint(coordinates=points)))
        if lines:
            combined.append(Feature(geometry=MultiLineString.from_line_strings(line_strings=lines)))
        if polygons:
            combined.append(Feature(geometry=MultiPolygon.from_polygons(polygons=polygons)))

        if not combined:
            logger.warning(
                f"combine: none of {len(feature_collection.features)} features is combinable, returning input"
            )
            return feature_collection
        logger.debug(f"combine: {len(points)} points, {len(lines)} lines, {len(polygons)} polygons")
        return FeatureCollection(features=combined)

    @staticmethod
    def polygon_to_line(polygon: Union[Polygon, Feature], properties: Properties = None) -> Optional[Feature]:
        """Convert a Polygon's rings to a line Feature.

        A single ring becomes a LineString, several rings a MultiLineString.

        Args:
            polygon: Polygon, or Feature wrapping one
            properties: Output properties; defaults to the Feature's own properties

        Returns:
            The line Feature, or None for a Polygon without rings.

        Raises:
            UnsupportedGeometryError: If a Feature does not wrap a Polygon.
        """
        if isinstance(polygon, Feature):
            if not isinstance(polygon.geometry, Polygon):
                raise UnsupportedGeometryError("Feature's geometry must be Polygon")
            return Conversion._coords_to_line(
                coordinates=polygon.geometry.coordinates,
                properties=properties if properties is not None else polygon.properties,
            )
        return Conversion._coords_to_line(coordinates=polygon.coordinates, properties=properties)

    @staticmethod
    def multi_polygon_to_line(
        multi_polygon: Union[MultiPolygon, Feature],
        properties: Properties = None,
    ) -> FeatureCollection:
        """Convert each member polygon of a MultiPolygon to a line Feature.

        Raises:
            UnsupportedGeometryError: If a Feature does not wrap a MultiPolygon.
        """
        if isinstance(multi_polygon, Feature):
            if not isinstance(multi_polygon.geometry, MultiPolygon):
                raise UnsupportedGeometryError("Feature's geometry must be MultiPolygon")
            if properties is None:
                properties = multi_polygon.properties
            multi_polygon = multi_polygon.geometry

        lines = (Conversion._coords_to_line(coordinates=rings, properties=properties) for rings in multi_polygon.coordinates)
        return FeatureCollection(features=[line for line in lines if line is not None])

    @staticmethod
    def _coords_to_line(coordinates: Sequence[Sequence[Point]], properties: Properties) -> Optional[Feature]:
        if not coordinates:
            return None
        if len(coordinates) == 1:
            return Feature(geometry=LineString(coordinates=coordinates[0]), properties=properties)
        return Feature(geometry=MultiLineString(coordinates=coordinates), properties=properties)

    @staticmethod
    def explode(geojson: Union[Feature, FeatureCollection]) -> FeatureCollection:
        """Every vertex as a Point Feature, ring closing points excluded."""
        points = Meta.coord_all(geojson=geojson, exclude_wrap_coord=True)
        return FeatureCollection.from_geometries(geometries=points)
