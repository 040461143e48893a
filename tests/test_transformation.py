"""Tests for circle generation."""

import pytest

from geoturf.core.geo_calculator import GeoCalculator
from geoturf.core.transformation import Transformation
from geoturf.core.units import Unit
from geoturf.exceptions import InvalidArgumentError, UnsupportedGeometryError
from geoturf.model import Feature, LineString, Point, Polygon


class TestCircle:
    """Transformation.circle - regular polygon around a center."""

    def test_four_steps_give_closed_five_point_ring(self) -> None:
        circle = Transformation.circle(center=Point(longitude=0.0, latitude=0.0), radius=1.0, steps=4)
        assert isinstance(circle, Polygon)
        ring = circle.coordinates[0]
        assert len(circle.coordinates) == 1
        assert len(ring) == 5
        assert ring[0] == ring[-1]

    def test_vertices_start_north_and_run_clockwise(self) -> None:
        ring = Transformation.circle(center=Point(longitude=0.0, latitude=0.0), radius=1.0, steps=4).coordinates[0]
        north, east, south, west = ring[:4]
        assert north.longitude == pytest.approx(0.0, abs=1e-12) and north.latitude > 0
        assert east.longitude > 0 and east.latitude == pytest.approx(0.0, abs=1e-12)
        assert south.latitude < 0
        assert west.longitude < 0

    def test_vertices_on_radius(self) -> None:
        center = Point(longitude=10.0, latitude=46.0)
        ring = Transformation.circle(center=center, radius=2.5, steps=16, unit=Unit.MILES).coordinates[0]
        for vertex in ring:
            assert GeoCalculator.distance(point1=center, point2=vertex, unit=Unit.MILES) == pytest.approx(2.5)

    def test_default_steps(self) -> None:
        ring = Transformation.circle(center=Point(longitude=0.0, latitude=0.0), radius=1.0).coordinates[0]
        assert len(ring) == 65

    def test_single_step(self) -> None:
        ring = Transformation.circle(center=Point(longitude=0.0, latitude=0.0), radius=1.0, steps=1).coordinates[0]
        assert len(ring) == 2

    def test_point_feature_center(self) -> None:
        center = Point(longitude=5.0, latitude=5.0)
        from_feature = Transformation.circle(center=Feature(geometry=center), radius=1.0, steps=8)
        assert from_feature == Transformation.circle(center=center, radius=1.0, steps=8)

    def test_non_point_feature_rejected(self) -> None:
        line = LineString(coordinates=[Point(longitude=0.0, latitude=0.0), Point(longitude=1.0, latitude=0.0)])
        with pytest.raises(UnsupportedGeometryError):
            Transformation.circle(center=Feature(geometry=line), radius=1.0)

    @pytest.mark.parametrize("steps", [0, -3])
    def test_too_few_steps_rejected(self, steps: int) -> None:
        with pytest.raises(InvalidArgumentError):
            Transformation.circle(center=Point(longitude=0.0, latitude=0.0), radius=1.0, steps=steps)
