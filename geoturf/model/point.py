"""Point - The fundamental geometry atom.

A Point is a single position: longitude, latitude and an optional altitude,
all in decimal degrees / meters. It is the building block of every other
geometry in the model.

No longitude/latitude range normalization is performed.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from geoturf.exceptions import InvalidArgumentError
from geoturf.model.geojson import Geometry

if TYPE_CHECKING:
    from geoturf.model.bounding_box import BoundingBox


@dataclass(frozen=True)
class Point(Geometry):
    """A position with GPS coordinates and optional altitude.

    Attributes:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        altitude: Optional altitude in meters
        bbox: Optional explicit bounding box

    Example:
        point = Point(longitude=-75.343, latitude=39.984)
    """

    longitude: float
    latitude: float
    altitude: Optional[float] = None
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        """Coerce coordinates to float and reject NaN values."""
        object.__setattr__(self, "longitude", float(self.longitude))
        object.__setattr__(self, "latitude", float(self.latitude))
        if self.altitude is not None:
            object.__setattr__(self, "altitude", float(self.altitude))
        if np.isnan(self.coordinates).any():
            raise InvalidArgumentError(f"Point cannot have NaN coordinates: {self.coordinates}")

    @property
    def type(self) -> str:
        return "Point"

    @property
    def coordinates(self) -> tuple[float, ...]:
        """Return (lon, lat) or (lon, lat, alt) - GeoJSON order."""
        if self.altitude is None:
            return (self.longitude, self.latitude)
        return (self.longitude, self.latitude, self.altitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order without altitude."""
        return (self.longitude, self.latitude)

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[float], bbox: Optional["BoundingBox"] = None) -> "Point":
        """Create a Point from a 2- or 3-element GeoJSON position."""
        if len(coordinates) not in (2, 3):
            raise InvalidArgumentError(f"A position needs 2 or 3 values, got {len(coordinates)}")
        altitude = coordinates[2] if len(coordinates) == 3 else None
        return cls(longitude=coordinates[0], latitude=coordinates[1], altitude=altitude, bbox=bbox)

    def __repr__(self) -> str:
        if self.altitude is None:
            return f"Point(lon={self.longitude:.6f}, lat={self.latitude:.6f})"
        return f"Point(lon={self.longitude:.6f}, lat={self.latitude:.6f}, alt={self.altitude:.1f})"
