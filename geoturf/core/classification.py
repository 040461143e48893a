"""Nearest-neighbour lookup between points."""

import logging
from typing import Sequence

from geoturf.core.geo_calculator import GeoCalculator
from geoturf.model import Point

logger = logging.getLogger(__name__)


class Classification:
    """Static methods for classifying points against a reference set."""

    @staticmethod
    def nearest_point(target: Point, points: Sequence[Point]) -> Point:
        """Return the member of ``points`` closest to ``target`` (haversine).

        Ties keep the earliest point. An empty list yields ``target`` itself.
        """
        if not points:
            logger.warning(f"nearest_point: no candidates given, returning target {target}")
            return target
        return min(points, key=lambda point: GeoCalculator.distance(point1=target, point2=point))
