"""BoundingBox - Axis-aligned extent defined by two corner Points."""

from dataclasses import dataclass
from typing import Optional

from geoturf.model.point import Point


@dataclass(frozen=True)
class BoundingBox:
    """Southwest / northeast corners of an axis-aligned extent.

    Attributes:
        southwest: Corner with the minimum longitude and latitude
        northeast: Corner with the maximum longitude and latitude

    Example:
        bbox = BoundingBox.from_lng_lats(west=0.0, south=0.0, east=5.0, north=10.0)
        print(bbox.east)  # 5.0
    """

    southwest: Point
    northeast: Point

    @property
    def west(self) -> float:
        return self.southwest.longitude

    @property
    def south(self) -> float:
        return self.southwest.latitude

    @property
    def east(self) -> float:
        return self.northeast.longitude

    @property
    def north(self) -> float:
        return self.northeast.latitude

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (west, south, east, north)."""
        return (self.west, self.south, self.east, self.north)

    @classmethod
    def from_lng_lats(
        cls,
        west: float,
        south: float,
        east: float,
        north: float,
        southwest_altitude: Optional[float] = None,
        northeast_altitude: Optional[float] = None,
    ) -> "BoundingBox":
        """Create a BoundingBox from its four edge values."""
        return cls(
            southwest=Point(longitude=west, latitude=south, altitude=southwest_altitude),
            northeast=Point(longitude=east, latitude=north, altitude=northeast_altitude),
        )

    def __repr__(self) -> str:
        return f"BoundingBox(w={self.west:.6f}, s={self.south:.6f}, e={self.east:.6f}, n={self.north:.6f})"
