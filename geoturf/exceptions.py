"""Errors raised by geoturf operations.

Every failure is raised synchronously at the call site:
- InvalidArgumentError for out-of-range parameters
- GeometryTooSmallError when an input has too few coordinates or features
- UnsupportedGeometryError when an operation receives a variant it cannot handle
- StartBeyondLineError when a slice starts past the end of a line

The concrete classes also derive from the matching builtin so callers can
catch ValueError / TypeError without importing geoturf.
"""


class GeoTurfError(Exception):
    """Base class for all geoturf errors."""


class InvalidArgumentError(GeoTurfError, ValueError):
    """A parameter is outside the range an operation accepts."""


class GeometryTooSmallError(GeoTurfError, ValueError):
    """An input has fewer coordinates (or features) than required."""


class UnsupportedGeometryError(GeoTurfError, TypeError):
    """An operation was invoked on a geometry variant it does not support."""


class StartBeyondLineError(GeoTurfError, ValueError):
    """The requested start offset lies beyond the total length of the line."""
