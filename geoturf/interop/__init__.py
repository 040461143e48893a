"""Bridges to third-party geometry libraries."""

from geoturf.interop.shapely_adapter import from_shapely, to_shapely

__all__ = ["to_shapely", "from_shapely"]
