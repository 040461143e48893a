"""geoturf - Spherical geodesy and geometry algorithms over an immutable GeoJSON model.

Modules:
    model: Immutable GeoJSON value types (Point, LineString, Polygon, Feature, ...)
    core: Geodesic algorithms (measurement, containment, line ops, conversion)
    codec: Encoded polyline codec and line simplification
    interop: Conversion to and from shapely geometries
    constants: Tunable defaults
    exceptions: Error hierarchy rooted at GeoTurfError

Example:
    from geoturf.core import GeoCalculator, Unit
    from geoturf.model import Point

    km = GeoCalculator.distance(point1=Point(longitude=-75.343, latitude=39.984),
                                point2=Point(longitude=-75.534, latitude=39.123),
                                unit=Unit.KILOMETERS)
"""
