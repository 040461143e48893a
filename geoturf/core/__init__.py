"""Geodesic and computational-geometry algorithms.

- Unit / UnitConverter: Earth-radius based unit conversion
- GeoCalculator: Spherical primitives (distance, bearing, destination, midpoint)
- Meta: Coordinate flattening
- Measurement: Length, along, bbox, envelope, square, area, center
- Joins: Point-in-polygon containment
- LineOps: Nearest point on line, line slicing
- Transformation: Circle generation
- Conversion: Combine, polygon to line, explode
- Classification: Nearest point lookup

All entry points are static methods; no state is kept between calls.
"""

from geoturf.core.classification import Classification
from geoturf.core.conversion import Conversion
from geoturf.core.geo_calculator import GeoCalculator
from geoturf.core.joins import Joins
from geoturf.core.line_ops import LineOps, NearestPoint
from geoturf.core.measurement import Measurement
from geoturf.core.meta import Meta
from geoturf.core.transformation import Transformation
from geoturf.core.units import DEFAULT_UNIT, Unit, UnitConverter

__all__ = [
    # Units
    "Unit",
    "UnitConverter",
    "DEFAULT_UNIT",
    # Spherical primitives
    "GeoCalculator",
    # Coordinate extraction
    "Meta",
    # Measurement
    "Measurement",
    # Containment
    "Joins",
    # Line operations
    "LineOps",
    "NearestPoint",
    # Shapes and conversion
    "Transformation",
    "Conversion",
    "Classification",
]
