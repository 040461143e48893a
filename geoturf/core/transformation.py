"""Shape generation around a center point."""

from typing import Union

from geoturf.constants import TransformationConfig
from geoturf.core.geo_calculator import GeoCalculator
from geoturf.core.meta import Meta
from geoturf.core.units import DEFAULT_UNIT, Unit
from geoturf.exceptions import InvalidArgumentError
from geoturf.model import Feature, Point, Polygon


class Transformation:
    """Static methods that build new geometries from a center and a size."""

    @staticmethod
    def circle(
        center: Union[Point, Feature],
        radius: float,
        steps: int = TransformationConfig.DEFAULT_CIRCLE_STEPS,
        unit: Unit = DEFAULT_UNIT,
    ) -> Polygon:
        """Approximate a circle as a regular polygon.

        Vertex k sits at ``destination(center, radius, k * 360 / steps)``, so
        the first vertex is due north and the ring runs clockwise. The ring is
        closed by repeating the first vertex.

        Args:
            center: Center Point, or a Feature with a Point geometry
            radius: Circle radius in ``unit``
            steps: Number of distinct vertices (>= 1)
            unit: Unit of ``radius``

        Returns:
            Polygon with a single ring of ``steps + 1`` points.

        Raises:
            InvalidArgumentError: If ``steps`` is below 1.

        Example:
            ring = Transformation.circle(center=Point(longitude=0, latitude=0), radius=1.0, steps=4)
        """
        if steps < TransformationConfig.MIN_CIRCLE_STEPS:
            raise InvalidArgumentError(f"Number of steps must be at least {TransformationConfig.MIN_CIRCLE_STEPS}, got {steps}")
        origin = Meta.get_coord(feature=center) if isinstance(center, Feature) else center

        ring = [
            GeoCalculator.destination(point=origin, distance=radius, bearing=k * 360 / steps, unit=unit)
            for k in range(steps)
        ]
        ring.append(ring[0])
        return Polygon(coordinates=[ring])
