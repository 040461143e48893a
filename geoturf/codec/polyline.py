"""Encoded polyline codec and line simplification.

Encoding (Google polyline algorithm, configurable precision):
1. Scale latitude and longitude by 10^precision and round half-up
2. Delta against the previous point (the first point against 0)
3. Zig-zag the signed delta: v < 0 -> ~(v << 1), else v << 1
4. Emit 5-bit chunks, least significant first; every chunk except the last
   carries the 0x20 continuation bit; each chunk is offset by 63
Latitude is always written before longitude.

Simplification is the two-pass approach of simplify.js: an optional radial
distance pass followed by Douglas-Peucker. Both work in planar coordinate
space with squared distances, so the tolerance is in degrees.
"""

import logging
from typing import Sequence

import numpy as np

from geoturf.constants import PolylineConfig
from geoturf.exceptions import InvalidArgumentError
from geoturf.model.point import Point

logger = logging.getLogger(__name__)


class PolylineCodec:
    """Static methods for polyline encoding, decoding and simplification.

    Example:
        encoded = PolylineCodec.encode(points=line.coordinates, precision=PolylineConfig.PRECISION_5)
        points = PolylineCodec.decode(encoded_path=encoded, precision=PolylineConfig.PRECISION_5)
    """

    # -------------------------------------------------------------------------
    # Codec
    # -------------------------------------------------------------------------

    @staticmethod
    def encode(points: Sequence[Point], precision: int) -> str:
        """Encode a sequence of Points into a polyline string.

        Altitudes are not encoded.

        Args:
            points: Points in path order
            precision: Number of decimal places kept (5 for Google, 6 for OSRM)

        Returns:
            The encoded string; empty for an empty sequence.
        """
        if len(points) == 0:
            return ""
        factor = 10.0**precision
        lat_lon = np.array([point.lat_lon for point in points], dtype=np.float64)
        scaled = np.floor(lat_lon * factor + 0.5).astype(np.int64)
        deltas = np.diff(scaled, axis=0, prepend=np.zeros((1, 2), dtype=np.int64))
        return "".join(PolylineCodec._encode_value(value=int(value)) for value in deltas.ravel())

    @staticmethod
    def _encode_value(value: int) -> str:
        value = ~(value << 1) if value < 0 else value << 1
        chunks = []
        while value >= PolylineConfig.CONTINUATION_BIT:
            chunk = PolylineConfig.CONTINUATION_BIT | (value & PolylineConfig.CHUNK_MASK)
            chunks.append(chr(chunk + PolylineConfig.ASCII_OFFSET))
            value >>= PolylineConfig.CHUNK_BITS
        chunks.append(chr(value + PolylineConfig.ASCII_OFFSET))
        return "".join(chunks)

    @staticmethod
    def decode(encoded_path: str, precision: int) -> list[Point]:
        """Decode a polyline string into Points.

        Args:
            encoded_path: The encoded polyline
            precision: Precision the string was encoded with

        Returns:
            List of Points; empty for an empty string.

        Raises:
            InvalidArgumentError: If the string ends in the middle of a value,
                holds a latitude without a longitude, or contains a character
                outside the polyline alphabet.
        """
        factor = 10.0**precision
        points: list[Point] = []
        index = 0
        lat = 0
        lng = 0
        while index < len(encoded_path):
            delta_lat, index = PolylineCodec._decode_value(encoded_path=encoded_path, index=index)
            delta_lng, index = PolylineCodec._decode_value(encoded_path=encoded_path, index=index)
            lat += delta_lat
            lng += delta_lng
            points.append(Point(longitude=lng / factor, latitude=lat / factor))
        return points

    @staticmethod
    def _decode_value(encoded_path: str, index: int) -> tuple[int, int]:
        """Read one zig-zag value starting at ``index``; return it with the next index."""
        result = 0
        shift = 0
        while True:
            if index >= len(encoded_path):
                raise InvalidArgumentError(f"Truncated polyline: value at position {index} is incomplete")
            chunk = ord(encoded_path[index]) - PolylineConfig.ASCII_OFFSET
            if not 0 <= chunk < 2 * PolylineConfig.CONTINUATION_BIT:
                raise InvalidArgumentError(f"Invalid polyline character {encoded_path[index]!r} at position {index}")
            index += 1
            result |= (chunk & PolylineConfig.CHUNK_MASK) << shift
            shift += PolylineConfig.CHUNK_BITS
            if chunk < PolylineConfig.CONTINUATION_BIT:
                break
        value = ~(result >> 1) if result & 1 else result >> 1
        return value, index

    # -------------------------------------------------------------------------
    # Simplification
    # -------------------------------------------------------------------------

    @staticmethod
    def simplify(
        points: Sequence[Point],
        tolerance: float = PolylineConfig.SIMPLIFY_DEFAULT_TOLERANCE,
        highest_quality: bool = PolylineConfig.SIMPLIFY_DEFAULT_HIGHEST_QUALITY,
    ) -> Sequence[Point]:
        """Reduce the number of points in a path while keeping its shape.

        Args:
            points: Path to simplify
            tolerance: Maximum allowed deviation, in coordinate degrees
            highest_quality: Skip the radial pass (slower, more faithful)

        Returns:
            The input object itself for paths of two points or fewer, otherwise a
            new list that starts and ends with the path's endpoints.
        """
        if len(points) <= 2:
            return points

        sq_tolerance = tolerance * tolerance
        candidates = points if highest_quality else PolylineCodec._simplify_radial_distance(points, sq_tolerance)
        simplified = PolylineCodec._simplify_douglas_peucker(candidates, sq_tolerance)
        logger.debug(
            f"simplify: {len(points)} -> {len(candidates)} (radial) -> {len(simplified)} points "
            f"at tolerance {tolerance}"
        )
        return simplified

    @staticmethod
    def _sq_distance(p1: Point, p2: Point) -> float:
        dx = p1.longitude - p2.longitude
        dy = p1.latitude - p2.latitude
        return dx * dx + dy * dy

    @staticmethod
    def _sq_segment_distance(point: Point, p1: Point, p2: Point) -> float:
        """Squared distance from ``point`` to the segment p1-p2."""
        x, y = p1.longitude, p1.latitude
        dx = p2.longitude - x
        dy = p2.latitude - y
        # subnormal deltas can square to 0.0, treat those segments as a point
        sq_len = dx * dx + dy * dy
        if sq_len > 0:
            t = ((point.longitude - x) * dx + (point.latitude - y) * dy) / sq_len
            if t > 1:
                x, y = p2.longitude, p2.latitude
            elif t > 0:
                x += dx * t
                y += dy * t
        dx = point.longitude - x
        dy = point.latitude - y
        return dx * dx + dy * dy

    @staticmethod
    def _simplify_radial_distance(points: Sequence[Point], sq_tolerance: float) -> list[Point]:
        prev = points[0]
        kept = [prev]
        for point in points[1:]:
            if PolylineCodec._sq_distance(point, prev) > sq_tolerance:
                kept.append(point)
                prev = point
        if prev != points[-1]:
            kept.append(points[-1])
        return kept

    @staticmethod
    def _simplify_douglas_peucker(points: Sequence[Point], sq_tolerance: float) -> list[Point]:
        last = len(points) - 1
        keep = [False] * len(points)
        ranges = [(0, last)]
        while ranges:
            first, stop = ranges.pop()
            max_sq_dist = sq_tolerance
            index = 0
            for i in range(first + 1, stop):
                sq_dist = PolylineCodec._sq_segment_distance(points[i], points[first], points[stop])
                if sq_dist > max_sq_dist:
                    index = i
                    max_sq_dist = sq_dist
            if max_sq_dist > sq_tolerance:
                keep[index] = True
                if index - first > 1:
                    ranges.append((first, index))
                if stop - index > 1:
                    ranges.append((index, stop))

        interior = [points[i] for i in range(1, last) if keep[i]]
        return [points[0], *interior, points[last]]
