"""Feature and FeatureCollection - geometries with attached properties.

A Feature wraps an optional geometry together with a property mapping and an
optional id. A FeatureCollection is an ordered sequence of Features.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from geoturf.model.bounding_box import BoundingBox
from geoturf.model.geojson import GeoJson, Geometry


@dataclass(frozen=True)
class Feature(GeoJson):
    """A geometry with properties.

    Attributes:
        geometry: The wrapped geometry, or None for a geometry-less feature
        properties: JSON-like property mapping (copied on construction)
        id: Optional string identifier
        bbox: Optional explicit bounding box

    Example:
        feature = Feature(geometry=Point(longitude=1.0, latitude=2.0), properties={"name": "A"})
    """

    geometry: Optional[Geometry] = None
    properties: Optional[Mapping[str, Any]] = None
    id: Optional[str] = None
    bbox: Optional[BoundingBox] = None

    def __post_init__(self) -> None:
        if self.properties is not None:
            object.__setattr__(self, "properties", dict(self.properties))

    @property
    def type(self) -> str:
        return "Feature"

    def __hash__(self) -> int:
        # properties is a dict, so hash on the remaining identity fields
        return hash((self.geometry, self.id, self.bbox))


@dataclass(frozen=True)
class FeatureCollection(GeoJson):
    """An ordered collection of Features."""

    features: tuple[Feature, ...]
    bbox: Optional[BoundingBox] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))

    @property
    def type(self) -> str:
        return "FeatureCollection"

    @classmethod
    def from_geometries(cls, geometries: Sequence[Geometry]) -> "FeatureCollection":
        """Wrap each geometry in a property-less Feature."""
        return cls(features=[Feature(geometry=geometry) for geometry in geometries])
