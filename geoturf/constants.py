"""Configuration constants for geoturf.

All tunable defaults are centralized here.

Classes:
    MeasurementConfig: Sphere radius used for area calculations
    TransformationConfig: Shape generation defaults
    LineOpsConfig: Property keys for nearest-point features
    PolylineConfig: Polyline codec and simplification parameters
"""


class MeasurementConfig:
    """Spherical measurement parameters."""

    # Area uses the equatorial radius in meters, so results are in m²
    AREA_EARTH_RADIUS_M = 6378137.0

    # midpoint() measures and projects in this unit (name of a Unit member)
    MIDPOINT_UNIT = "MILES"


class TransformationConfig:
    """Shape generation defaults."""

    # Number of vertices generated around a circle (before ring closure)
    DEFAULT_CIRCLE_STEPS = 64
    MIN_CIRCLE_STEPS = 1


class LineOpsConfig:
    """Line operation parameters."""

    # Property keys on the Feature returned by NearestPoint.to_feature()
    INDEX_KEY = "index"
    DISTANCE_KEY = "dist"


class PolylineConfig:
    """Polyline codec and simplification parameters."""

    # Google polyline format divides by 1e5, OSRM uses 1e6
    PRECISION_5 = 5
    PRECISION_6 = 6

    # Every encoded character is offset into the printable ASCII range
    ASCII_OFFSET = 63
    CHUNK_BITS = 5
    CHUNK_MASK = 0x1F
    CONTINUATION_BIT = 0x20

    # Same metric as the point coordinates (degrees)
    SIMPLIFY_DEFAULT_TOLERANCE = 1.0
    # Skipping the radial-distance pass is slower but gives the best result
    SIMPLIFY_DEFAULT_HIGHEST_QUALITY = False
