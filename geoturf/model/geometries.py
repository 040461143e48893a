"""Composite geometries built from Points.

- LineString: ordered sequence of Points
- MultiPoint: unordered set of Points
- MultiLineString: sequence of LineString coordinate lists
- Polygon: outer ring followed by optional hole rings
- MultiPolygon: sequence of Polygon coordinate lists
- GeometryCollection: heterogeneous (possibly nested) geometries

Constructors accept any sequences and store tuples, so every geometry is
immutable and hashable. Ring closure is only checked by
Polygon.from_outer_inner(); the plain constructors trust their input.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from geoturf.exceptions import InvalidArgumentError
from geoturf.model.geojson import Geometry
from geoturf.model.point import Point

if TYPE_CHECKING:
    from geoturf.model.bounding_box import BoundingBox


def _points(points: Sequence[Point]) -> tuple[Point, ...]:
    return tuple(points)


def _point_lists(lists: Sequence[Sequence[Point]]) -> tuple[tuple[Point, ...], ...]:
    return tuple(tuple(points) for points in lists)


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered sequence of Points.

    Attributes:
        coordinates: The vertices in path order
        bbox: Optional explicit bounding box
    """

    coordinates: tuple[Point, ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _points(self.coordinates))

    @property
    def type(self) -> str:
        return "LineString"

    @classmethod
    def from_polyline(cls, encoded: str, precision: int) -> "LineString":
        """Decode a polyline string into a LineString."""
        from geoturf.codec.polyline import PolylineCodec

        return cls(coordinates=PolylineCodec.decode(encoded_path=encoded, precision=precision))

    def to_polyline(self, precision: int) -> str:
        """Encode the vertices as a polyline string."""
        from geoturf.codec.polyline import PolylineCodec

        return PolylineCodec.encode(points=self.coordinates, precision=precision)

    def __repr__(self) -> str:
        return f"LineString({len(self.coordinates)} points)"


@dataclass(frozen=True)
class MultiPoint(Geometry):
    """A collection of Points."""

    coordinates: tuple[Point, ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _points(self.coordinates))

    @property
    def type(self) -> str:
        return "MultiPoint"


@dataclass(frozen=True)
class MultiLineString(Geometry):
    """A collection of line coordinate lists."""

    coordinates: tuple[tuple[Point, ...], ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _point_lists(self.coordinates))

    @property
    def type(self) -> str:
        return "MultiLineString"

    @property
    def line_strings(self) -> list[LineString]:
        """Member lines as LineString objects."""
        return [LineString(coordinates=points) for points in self.coordinates]

    @classmethod
    def from_line_strings(
        cls,
        line_strings: Sequence[LineString],
        bbox: Optional["BoundingBox"] = None,
    ) -> "MultiLineString":
        return cls(coordinates=[line.coordinates for line in line_strings], bbox=bbox)


@dataclass(frozen=True)
class Polygon(Geometry):
    """An outer ring followed by zero or more hole rings.

    Each ring is expected to be a linear ring (>= 4 points, first == last).

    Attributes:
        coordinates: Rings; index 0 is the outer boundary, 1..n are holes
        bbox: Optional explicit bounding box
    """

    coordinates: tuple[tuple[Point, ...], ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _point_lists(self.coordinates))

    @property
    def type(self) -> str:
        return "Polygon"

    @property
    def outer_line(self) -> LineString:
        """Outer boundary ring as a LineString."""
        return LineString(coordinates=self.coordinates[0])

    @property
    def inner_lines(self) -> list[LineString]:
        """Hole rings as LineStrings."""
        return [LineString(coordinates=ring) for ring in self.coordinates[1:]]

    @classmethod
    def from_outer_inner(
        cls,
        outer: LineString,
        inner: Sequence[LineString] = (),
        bbox: Optional["BoundingBox"] = None,
    ) -> "Polygon":
        """Build a Polygon from ring LineStrings, checking each is a linear ring.

        Raises:
            InvalidArgumentError: If a ring has fewer than 4 points or is not closed.
        """
        rings = [outer, *inner]
        for ring in rings:
            _ensure_linear_ring(ring)
        return cls(coordinates=[ring.coordinates for ring in rings], bbox=bbox)

    def __repr__(self) -> str:
        return f"Polygon({len(self.coordinates)} rings)"


def _ensure_linear_ring(line: LineString) -> None:
    if len(line.coordinates) < 4:
        raise InvalidArgumentError("LinearRings need to be made up of 4 or more coordinates.")
    if line.coordinates[0] != line.coordinates[-1]:
        raise InvalidArgumentError("LinearRings require first and last coordinate to be identical.")


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    """A collection of polygon coordinate lists."""

    coordinates: tuple[tuple[tuple[Point, ...], ...], ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(_point_lists(rings) for rings in self.coordinates))

    @property
    def type(self) -> str:
        return "MultiPolygon"

    @property
    def polygons(self) -> list[Polygon]:
        """Member polygons as Polygon objects."""
        return [Polygon(coordinates=rings) for rings in self.coordinates]

    @classmethod
    def from_polygons(
        cls,
        polygons: Sequence[Polygon],
        bbox: Optional["BoundingBox"] = None,
    ) -> "MultiPolygon":
        return cls(coordinates=[polygon.coordinates for polygon in polygons], bbox=bbox)


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A heterogeneous collection of geometries (members may be collections)."""

    geometries: tuple[Geometry, ...]
    bbox: Optional["BoundingBox"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(self.geometries))

    @property
    def type(self) -> str:
        return "GeometryCollection"
