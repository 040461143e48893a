"""Geodesic calculations on a spherical Earth.

Provides the great-circle primitives every other module builds on:
- Distance calculation (Haversine formula)
- Bearing calculation (initial heading between points)
- Destination calculation (endpoint from start, bearing, distance)
- Midpoint calculation

The sphere radius depends on the requested Unit (see units.py). No ellipsoidal
correction is applied.
"""

from math import asin, atan2, cos, sin, sqrt

from geoturf.constants import MeasurementConfig
from geoturf.core.units import DEFAULT_UNIT, Unit, UnitConverter
from geoturf.model.point import Point

_to_rad = UnitConverter.degrees_to_radians
_to_deg = UnitConverter.radians_to_degrees


class GeoCalculator:
    """Static methods for geodesic calculations on a sphere.

    Coordinates are in decimal degrees.
    Bearings are in degrees clockwise from North, in (-180, 180].
    Distances are in the requested Unit (kilometers by default).
    """

    @staticmethod
    def bearing(point1: Point, point2: Point) -> float:
        """Calculate the initial great-circle bearing from point1 to point2.

        Args:
            point1: Start point
            point2: End point

        Returns:
            Bearing in degrees, (-180, 180]. Identical points yield 0.
        """
        lon1 = _to_rad(point1.longitude)
        lon2 = _to_rad(point2.longitude)
        lat1 = _to_rad(point1.latitude)
        lat2 = _to_rad(point2.latitude)
        y = sin(lon2 - lon1) * cos(lat2)
        x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(lon2 - lon1)
        return _to_deg(atan2(y, x))

    @staticmethod
    def destination(
        point: Point,
        distance: float,
        bearing: float,
        unit: Unit = DEFAULT_UNIT,
    ) -> Point:
        """Calculate destination point given start, distance and bearing.

        Latitude is not clamped at the poles and the resulting longitude is
        not normalized beyond the natural range of atan2/asin.

        Args:
            point: Start point
            distance: Distance to travel (negative travels backwards)
            bearing: Bearing in degrees clockwise from North
            unit: Unit of ``distance``

        Returns:
            Destination Point (without altitude).
        """
        lon1 = _to_rad(point.longitude)
        lat1 = _to_rad(point.latitude)
        bearing_rad = _to_rad(bearing)
        d_r = UnitConverter.length_to_radians(distance=distance, unit=unit)

        lat2 = asin(sin(lat1) * cos(d_r) + cos(lat1) * sin(d_r) * cos(bearing_rad))
        lon2 = lon1 + atan2(
            sin(bearing_rad) * sin(d_r) * cos(lat1),
            cos(d_r) - sin(lat1) * sin(lat2),
        )
        return Point(longitude=_to_deg(lon2), latitude=_to_deg(lat2))

    @staticmethod
    def distance(point1: Point, point2: Point, unit: Unit = DEFAULT_UNIT) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            point1: First point
            point2: Second point
            unit: Output unit

        Returns:
            Distance in ``unit``.
        """
        dlat = _to_rad(point2.latitude - point1.latitude)
        dlon = _to_rad(point2.longitude - point1.longitude)
        lat1 = _to_rad(point1.latitude)
        lat2 = _to_rad(point2.latitude)
        a = sin(dlat / 2) ** 2 + sin(dlon / 2) ** 2 * cos(lat1) * cos(lat2)
        return UnitConverter.radians_to_length(radians=2 * atan2(sqrt(a), sqrt(max(1 - a, 0.0))), unit=unit)

    @staticmethod
    def midpoint(point1: Point, point2: Point) -> Point:
        """Point halfway along the great circle from point1 to point2."""
        unit = Unit[MeasurementConfig.MIDPOINT_UNIT]
        dist = GeoCalculator.distance(point1=point1, point2=point2, unit=unit)
        heading = GeoCalculator.bearing(point1=point1, point2=point2)
        return GeoCalculator.destination(point=point1, distance=dist / 2, bearing=heading, unit=unit)
