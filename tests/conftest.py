"""Shared pytest fixtures for geoturf tests.

COORDINATE SYSTEM:
    Most fixtures sit on the equator (lat=0) near the prime meridian, where a
    straight east-west line follows a great circle. Interpolated points on
    such lines stay at lat=0 and land on exact longitude fractions, so
    expected values can be written down without calling the code under test.
"""

import pytest

from geoturf.model import Feature, FeatureCollection, LineString, MultiPolygon, Point, Polygon


def ring(*lon_lats: tuple[float, float]) -> list[Point]:
    """Build a list of Points from (lon, lat) pairs."""
    return [Point(longitude=lon, latitude=lat) for lon, lat in lon_lats]


# =============================================================================
# POINTS
# =============================================================================


@pytest.fixture
def point_philadelphia_north() -> Point:
    """Point near Philadelphia used by the reference distance of ~97.16 km."""
    return Point(longitude=-75.343, latitude=39.984)


@pytest.fixture
def point_philadelphia_south() -> Point:
    """Second reference point, ~97.16 km south-southwest of the first."""
    return Point(longitude=-75.534, latitude=39.123)


# =============================================================================
# LINES
# =============================================================================


@pytest.fixture
def equator_line() -> LineString:
    """Three points along the equator: (0,0) -> (1,0) -> (2,0).

    Both edges are 1° of arc (~111.23 km with the kilometer radius 6373).
    """
    return LineString(coordinates=ring((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)))


# =============================================================================
# POLYGONS
# =============================================================================


@pytest.fixture
def unit_square() -> Polygon:
    """1° x 1° square at the origin, counter-clockwise, closed."""
    return Polygon(coordinates=[ring((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))])


@pytest.fixture
def square_with_hole() -> Polygon:
    """10° x 10° square at the origin with a 2° x 2° hole in its middle (4..6)."""
    outer = ring((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0))
    hole = ring((4.0, 4.0), (6.0, 4.0), (6.0, 6.0), (4.0, 6.0), (4.0, 4.0))
    return Polygon(coordinates=[outer, hole])


@pytest.fixture
def two_squares() -> MultiPolygon:
    """Two disjoint 1° squares: one at the origin, one at (20, 20)."""
    return MultiPolygon(
        coordinates=[
            [ring((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))],
            [ring((20.0, 20.0), (21.0, 20.0), (21.0, 21.0), (20.0, 21.0), (20.0, 20.0))],
        ]
    )


# =============================================================================
# FEATURE COLLECTIONS
# =============================================================================


@pytest.fixture
def mixed_feature_collection() -> FeatureCollection:
    """3 Point features and 2 LineString features."""
    return FeatureCollection(
        features=[
            Feature(geometry=Point(longitude=0.0, latitude=0.0), properties={"name": "a"}),
            Feature(geometry=Point(longitude=1.0, latitude=1.0)),
            Feature(geometry=Point(longitude=2.0, latitude=2.0)),
            Feature(geometry=LineString(coordinates=ring((0.0, 0.0), (1.0, 1.0)))),
            Feature(geometry=LineString(coordinates=ring((2.0, 2.0), (3.0, 3.0), (4.0, 4.0)))),
        ]
    )
