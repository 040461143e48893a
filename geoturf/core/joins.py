"""Point-in-polygon containment.

Uses the even-odd ray casting rule: a horizontal ray is cast from the point
and every ring edge it crosses toggles membership. Winding order is ignored.
Holes are honored: a point inside a hole ring is outside the polygon.

Points exactly on a boundary get whatever the strict comparisons below yield;
no boundary tolerance is applied.
"""

import logging
from functools import reduce
from typing import Sequence, Union

from geoturf.exceptions import UnsupportedGeometryError
from geoturf.model import Feature, FeatureCollection, MultiPolygon, Point, Polygon

logger = logging.getLogger(__name__)

Ring = Sequence[Point]


class Joins:
    """Static methods for containment tests between points and polygons."""

    @staticmethod
    def inside_ring(point: Point, ring: Ring) -> bool:
        """Check whether ``point`` lies inside a single ring (even-odd rule).

        Edge (i, j) with j = i - 1 (wrapping) toggles membership when the
        point's latitude is strictly between the edge's endpoint latitudes on
        one side and the point lies west of the edge at that latitude.
        """
        x, y = point.longitude, point.latitude

        def crosses(inside: bool, i: int) -> bool:
            xi, yi = ring[i].longitude, ring[i].latitude
            xj, yj = ring[i - 1].longitude, ring[i - 1].latitude
            if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
                return not inside
            return inside

        return reduce(crosses, range(len(ring)), False)

    @staticmethod
    def inside_polygon(point: Point, polygon: Polygon) -> bool:
        """Inside the outer ring and inside none of the holes."""
        return Joins._inside_rings(point=point, rings=polygon.coordinates)

    @staticmethod
    def inside_multi_polygon(point: Point, multi_polygon: MultiPolygon) -> bool:
        """Inside any member polygon."""
        return any(Joins._inside_rings(point=point, rings=rings) for rings in multi_polygon.coordinates)

    @staticmethod
    def inside(point: Point, polygon: Union[Polygon, MultiPolygon]) -> bool:
        """Dispatch to inside_polygon or inside_multi_polygon.

        Raises:
            UnsupportedGeometryError: If ``polygon`` is neither a Polygon nor a MultiPolygon.
        """
        if isinstance(polygon, Polygon):
            return Joins.inside_polygon(point=point, polygon=polygon)
        if isinstance(polygon, MultiPolygon):
            return Joins.inside_multi_polygon(point=point, multi_polygon=polygon)
        raise UnsupportedGeometryError(f"Containment requires a Polygon or MultiPolygon, got {type(polygon).__name__}")

    @staticmethod
    def _inside_rings(point: Point, rings: Sequence[Ring]) -> bool:
        if not rings or not Joins.inside_ring(point=point, ring=rings[0]):
            return False
        return not any(Joins.inside_ring(point=point, ring=hole) for hole in rings[1:])

    @staticmethod
    def points_within_polygon(points: FeatureCollection, polygons: FeatureCollection) -> FeatureCollection:
        """Point features that fall inside at least one polygon feature.

        A point inside several polygons appears once per matching polygon.
        Output features keep the point feature's properties and id.

        Args:
            points: FeatureCollection of Point features
            polygons: FeatureCollection of Polygon / MultiPolygon features

        Returns:
            New FeatureCollection, ordered by polygon then by point.

        Raises:
            UnsupportedGeometryError: If a feature has the wrong geometry type.
        """
        point_features = [(Joins._point_of(feature=feature), feature) for feature in points.features]
        matches: list[Feature] = []
        for polygon_feature in polygons.features:
            polygon = polygon_feature.geometry
            if not isinstance(polygon, (Polygon, MultiPolygon)):
                raise UnsupportedGeometryError("Polygon features must have Polygon or MultiPolygon geometry")
            matches.extend(
                Feature(geometry=point, properties=feature.properties, id=feature.id)
                for point, feature in point_features
                if Joins.inside(point=point, polygon=polygon)
            )
        logger.debug(
            f"points_within_polygon: {len(matches)} matches from {len(point_features)} points "
            f"and {len(polygons.features)} polygons"
        )
        return FeatureCollection(features=matches)

    @staticmethod
    def _point_of(feature: Feature) -> Point:
        if not isinstance(feature.geometry, Point):
            raise UnsupportedGeometryError("Point features must have Point geometry")
        return feature.geometry
