"""GeoJson - Abstract roots of the GeoJSON object hierarchy.

Every model object (geometries, Feature, FeatureCollection) derives from
GeoJson and carries an optional explicit bounding box. Geometry narrows the
hierarchy to the seven coordinate-bearing variants.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GeoJson(ABC):
    """Abstract base class for every GeoJSON object.

    Subclasses are frozen dataclasses and declare their own ``bbox`` field.
    Use isinstance() to check the concrete variant.
    """

    @property
    @abstractmethod
    def type(self) -> str:
        """GeoJSON type name (e.g. "Point", "Feature")."""


@dataclass(frozen=True)
class Geometry(GeoJson):
    """Abstract base class for the seven GeoJSON geometry variants."""
