"""Snapping to lines and extracting sub-lines.

- nearest_point_on_line: closest point on a polyline to an arbitrary point
- line_slice: sub-line between the projections of two points
- line_slice_along: sub-line between two distances measured along the line

Snapping works per edge: the candidate for an edge is the nearer endpoint or,
when it lies strictly inside the edge, the intersection of the edge with a
short perpendicular through the query point. The perpendicular is a planar
construction in degree space, so results are approximate on long edges.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from geoturf.constants import LineOpsConfig
from geoturf.core.geo_calculator import GeoCalculator
from geoturf.core.units import DEFAULT_UNIT, Unit
from geoturf.exceptions import (
    GeometryTooSmallError,
    InvalidArgumentError,
    StartBeyondLineError,
    UnsupportedGeometryError,
)
from geoturf.model import Feature, LineString, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearestPoint:
    """Result of snapping a point onto a line.

    Attributes:
        point: The snapped location on the line
        distance: Distance from the query point to ``point``
        index: Index of the edge start vertex the point lies on
    """

    point: Point
    distance: float
    index: int

    def to_feature(self) -> Feature:
        """Point Feature with ``index`` and ``dist`` properties."""
        return Feature(
            geometry=self.point,
            properties={LineOpsConfig.INDEX_KEY: self.index, LineOpsConfig.DISTANCE_KEY: self.distance},
        )


LineLike = Union[LineString, Feature, Sequence[Point]]


def _coords_of(line: LineLike) -> Sequence[Point]:
    if isinstance(line, Feature):
        if not isinstance(line.geometry, LineString):
            raise UnsupportedGeometryError("line must be a LineString Feature")
        return line.geometry.coordinates
    return line.coordinates if isinstance(line, LineString) else line


class LineOps:
    """Static methods for line snapping and slicing."""

    @staticmethod
    def nearest_point_on_line(
        line: LineLike,
        point: Point,
        unit: Unit = DEFAULT_UNIT,
    ) -> NearestPoint:
        """Find the closest point on a line to ``point``.

        Args:
            line: LineString, LineString Feature or list of Points
            point: Query point
            unit: Unit for the reported distance

        Returns:
            NearestPoint with the snapped location, its distance and the edge index.
            Ties keep the earliest candidate.

        Raises:
            GeometryTooSmallError: If the line has fewer than 2 coordinates.
        """
        coords = _coords_of(line)
        if len(coords) < 2:
            raise GeometryTooSmallError("nearest_point_on_line requires a line with at least 2 coordinates")

        best = NearestPoint(point=coords[0], distance=float("inf"), index=0)
        for i in range(len(coords) - 1):
            start, stop = coords[i], coords[i + 1]
            start_dist = GeoCalculator.distance(point1=point, point2=start, unit=unit)
            stop_dist = GeoCalculator.distance(point1=point, point2=stop, unit=unit)

            reach = max(start_dist, stop_dist)
            direction = GeoCalculator.bearing(point1=start, point2=stop)
            perpendicular1 = GeoCalculator.destination(point=point, distance=reach, bearing=direction + 90, unit=unit)
            perpendicular2 = GeoCalculator.destination(point=point, distance=reach, bearing=direction - 90, unit=unit)
            intersect = LineOps._line_intersects(
                line1_start=perpendicular1, line1_end=perpendicular2, line2_start=start, line2_end=stop
            )

            if start_dist < best.distance:
                best = NearestPoint(point=start, distance=start_dist, index=i)
            if stop_dist < best.distance:
                best = NearestPoint(point=stop, distance=stop_dist, index=i)
            if intersect is not None:
                intersect_dist = GeoCalculator.distance(point1=point, point2=intersect, unit=unit)
                if intersect_dist < best.distance:
                    best = NearestPoint(point=intersect, distance=intersect_dist, index=i)

        return best

    @staticmethod
    def _line_intersects(
        line1_start: Point,
        line1_end: Point,
        line2_start: Point,
        line2_end: Point,
    ) -> Optional[Point]:
        """Planar intersection of two segments, strictly inside both.

        Returns:
            The intersection Point, or None when the segments are parallel or
            meet only at or beyond an endpoint.
        """
        x1, y1 = line1_start.lon_lat
        x2, y2 = line1_end.lon_lat
        x3, y3 = line2_start.lon_lat
        x4, y4 = line2_end.lon_lat

        denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
        if denominator == 0:
            return None

        var_a = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
        var_b = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator
        if 0 < var_a < 1 and 0 < var_b < 1:
            return Point(longitude=x1 + var_a * (x2 - x1), latitude=y1 + var_a * (y2 - y1))
        return None

    @staticmethod
    def line_slice(start: Point, stop: Point, line: LineLike) -> LineString:
        """Sub-line between the snapped positions of ``start`` and ``stop``.

        The points may be given in either order; the result always follows
        the direction of ``line``.

        Raises:
            GeometryTooSmallError: If the line has fewer than 2 coordinates.
            InvalidArgumentError: If ``start`` equals ``stop``.
        """
        coords = _coords_of(line)
        if len(coords) < 2:
            raise GeometryTooSmallError("line_slice requires a line with at least 2 coordinates")
        if start == stop:
            raise InvalidArgumentError("Start and stop points of line_slice cannot be equal")

        start_vertex = LineOps.nearest_point_on_line(line=coords, point=start)
        stop_vertex = LineOps.nearest_point_on_line(line=coords, point=stop)
        first, last = sorted((start_vertex, stop_vertex), key=lambda snapped: snapped.index)

        sliced = [first.point, *coords[first.index + 1 : last.index + 1], last.point]
        logger.debug(f"line_slice: edges {first.index}..{last.index}, {len(sliced)} points")
        return LineString(coordinates=sliced)

    @staticmethod
    def line_slice_along(
        line: LineLike,
        start_dist: float,
        stop_dist: float,
        unit: Unit = DEFAULT_UNIT,
    ) -> LineString:
        """Sub-line between two distances measured from the start of ``line``.

        A ``stop_dist`` beyond the end of the line yields a slice running to
        the last vertex.

        Args:
            line: LineString, LineString Feature or list of Points
            start_dist: Distance along the line where the slice begins (>= 0)
            stop_dist: Distance along the line where the slice ends (> 0)
            unit: Unit of both distances

        Returns:
            LineString from the interpolated start to the interpolated stop,
            holding those two points plus every vertex strictly between them.
            A start that lands exactly on a vertex uses that vertex once, so
            the slice never repeats it; the one exception is a start on the
            last vertex, which yields that vertex twice. The result always has
            at least 2 points.

        Raises:
            InvalidArgumentError: If a distance is out of range or both are equal.
            GeometryTooSmallError: If the line has fewer than 2 coordinates.
            StartBeyondLineError: If ``start_dist`` exceeds the line length.
        """
        if start_dist < 0:
            raise InvalidArgumentError(f"start_dist must be >= 0, got {start_dist}")
        if stop_dist <= 0:
            raise InvalidArgumentError(f"stop_dist must be > 0, got {stop_dist}")
        if start_dist == stop_dist:
            raise InvalidArgumentError("start_dist and stop_dist of line_slice_along cannot be equal")
        coords = _coords_of(line)
        if len(coords) < 2:
            raise GeometryTooSmallError("line_slice_along requires a line with at least 2 coordinates")

        sliced: list[Point] = []
        travelled = 0.0
        for i, point in enumerate(coords):
            if travelled >= start_dist:
                opening = not sliced
                if opening:
                    sliced.append(
                        LineOps._interpolate_back(coords=coords, i=i, overshot=start_dist - travelled, unit=unit)
                    )
                if travelled >= stop_dist:
                    sliced.append(
                        LineOps._interpolate_back(coords=coords, i=i, overshot=stop_dist - travelled, unit=unit)
                    )
                    return LineString(coordinates=sliced)
                # an exact start hit already placed this vertex
                if not (opening and travelled == start_dist):
                    sliced.append(point)
            if i == len(coords) - 1:
                break
            travelled += GeoCalculator.distance(point1=point, point2=coords[i + 1], unit=unit)

        if travelled < start_dist:
            raise StartBeyondLineError(
                f"Start position {start_dist} is beyond the line length {travelled} ({unit.name.lower()})"
            )
        if len(sliced) == 1:
            # start landed exactly on the last vertex
            sliced.append(sliced[0])
        logger.debug(f"line_slice_along: stop {stop_dist} past line end {travelled}, ending at last vertex")
        return LineString(coordinates=sliced)

    @staticmethod
    def _interpolate_back(coords: Sequence[Point], i: int, overshot: float, unit: Unit) -> Point:
        """Vertex ``i`` moved back towards vertex ``i - 1`` by ``-overshot``."""
        if overshot == 0 or i == 0:
            return coords[i]
        direction = GeoCalculator.bearing(point1=coords[i], point2=coords[i - 1]) - 180
        return GeoCalculator.destination(point=coords[i], distance=overshot, bearing=direction, unit=unit)
