"""Encoded polyline codec (Google polyline algorithm) and path simplification."""

from geoturf.codec.polyline import PolylineCodec

__all__ = ["PolylineCodec"]
