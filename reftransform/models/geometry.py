"""
Geometry types and the geometry factory.

Provides the immutable geometry tree consumed by the reference
transformation driver: points, lines, line strings, linear rings,
polygons, triangles and collections. Every geometry is created through a
GeometryFactory, which binds it to a reference system.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    TYPE_CHECKING, Any, ClassVar, Iterable, Iterator, Mapping, Optional, Tuple, Union,
)

from ..errors import InvalidArgumentError
from .coordinates import Coordinate

if TYPE_CHECKING:
    from ..reference import ReferenceSystem


Metadata = Optional[Mapping[str, Any]]

_EMPTY_METADATA: Mapping[str, Any] = MappingProxyType({})


class GeometryType(Enum):
    """Closed set of geometry variants."""
    POINT = "Point"
    LINE = "Line"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    TRIANGLE = "Triangle"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


@dataclass(frozen=True, eq=False)
class Geometry:
    """
    Base class of geometries.

    Geometries compare by identity. Metadata is a read-only mapping of
    string keys to arbitrary values.
    """
    geometry_type: ClassVar[GeometryType]

    factory: 'GeometryFactory' = field(kw_only=True, repr=False)
    metadata: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_METADATA, kw_only=True, repr=False)

    @property
    def reference_system(self) -> Optional['ReferenceSystem']:
        """Reference system of the creating factory."""
        return self.factory.reference_system


@dataclass(frozen=True, eq=False)
class Point(Geometry):
    """Single position."""
    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    coordinate: Coordinate

    @property
    def x(self) -> float:
        return self.coordinate.x

    @property
    def y(self) -> float:
        return self.coordinate.y

    @property
    def z(self) -> float:
        return self.coordinate.z

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        return (self.coordinate,)


@dataclass(frozen=True, eq=False)
class Line(Geometry):
    """Straight segment between two coordinates."""
    geometry_type: ClassVar[GeometryType] = GeometryType.LINE

    start_coordinate: Coordinate
    end_coordinate: Coordinate

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        return (self.start_coordinate, self.end_coordinate)


@dataclass(frozen=True, eq=False)
class LineString(Geometry):
    """Sequence of connected coordinates."""
    geometry_type: ClassVar[GeometryType] = GeometryType.LINE_STRING

    coordinates: Tuple[Coordinate, ...]

    @property
    def coordinate_count(self) -> int:
        return len(self.coordinates)

    @property
    def is_closed(self) -> bool:
        """Check if first and last coordinates coincide."""
        return len(self.coordinates) > 1 and self.coordinates[0] == self.coordinates[-1]


@dataclass(frozen=True, eq=False)
class LinearRing(LineString):
    """Closed line string; the factory closes rings automatically."""
    geometry_type: ClassVar[GeometryType] = GeometryType.LINEAR_RING


@dataclass(frozen=True, eq=False)
class Polygon(Geometry):
    """
    Polygon with optional holes.

    Attributes:
        shell: Outer boundary
        holes: Inner boundaries
    """
    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    shell: LinearRing
    holes: Tuple[LinearRing, ...] = ()

    @property
    def hole_count(self) -> int:
        """Number of holes."""
        return len(self.holes)

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        result = list(self.shell.coordinates)
        for hole in self.holes:
            result.extend(hole.coordinates)
        return tuple(result)


@dataclass(frozen=True, eq=False)
class Triangle(Polygon):
    """Polygon with a three-vertex shell and no holes."""
    geometry_type: ClassVar[GeometryType] = GeometryType.TRIANGLE


@dataclass(frozen=True, eq=False)
class GeometryCollection(Geometry):
    """Ordered collection of geometries."""
    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRY_COLLECTION

    geometries: Tuple[Geometry, ...] = ()

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __len__(self) -> int:
        return len(self.geometries)

    def __getitem__(self, index: int) -> Geometry:
        return self.geometries[index]

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        result = []
        for geometry in self.geometries:
            result.extend(geometry.coordinates)
        return tuple(result)


@dataclass(frozen=True, eq=False)
class MultiPoint(GeometryCollection):
    """Collection of points."""
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_POINT


@dataclass(frozen=True, eq=False)
class MultiLineString(GeometryCollection):
    """Collection of line strings."""
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_LINE_STRING


@dataclass(frozen=True, eq=False)
class MultiPolygon(GeometryCollection):
    """Collection of polygons."""
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_POLYGON


RingSource = Union[LinearRing, Iterable[Coordinate]]


class GeometryFactory:
    """
    Creates geometries bound to a reference system.

    Every create method accepts an optional metadata mapping; None means
    empty metadata. The mapping is copied, so later changes to the
    argument do not leak into the geometry.
    """

    def __init__(self, reference_system: Optional['ReferenceSystem'] = None):
        self._reference_system = reference_system

    @property
    def reference_system(self) -> Optional['ReferenceSystem']:
        return self._reference_system

    def with_reference_system(self, reference_system: Optional['ReferenceSystem']) -> 'GeometryFactory':
        """Return a factory of the same family bound to another reference system."""
        return type(self)(reference_system)

    # -------------------------------------------------------------------------
    # points and lines
    # -------------------------------------------------------------------------

    def create_point(self, coordinate: Coordinate, metadata: Metadata = None) -> Point:
        """Create a point."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")
        return Point(coordinate, factory=self, metadata=_freeze(metadata))

    def create_line(self, start: Coordinate, end: Coordinate, metadata: Metadata = None) -> Line:
        """Create a line segment."""
        if start is None or end is None:
            raise InvalidArgumentError("The line end points must not be None")
        return Line(start, end, factory=self, metadata=_freeze(metadata))

    def create_line_string(self, coordinates: Iterable[Coordinate], metadata: Metadata = None) -> LineString:
        """Create a line string."""
        return LineString(_coordinates(coordinates), factory=self, metadata=_freeze(metadata))

    def create_linear_ring(self, coordinates: Iterable[Coordinate], metadata: Metadata = None) -> LinearRing:
        """Create a linear ring, closing it if the last coordinate differs from the first."""
        ring = list(_coordinates(coordinates))
        if ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        return LinearRing(tuple(ring), factory=self, metadata=_freeze(metadata))

    # -------------------------------------------------------------------------
    # surfaces
    # -------------------------------------------------------------------------

    def create_polygon(
        self,
        shell: RingSource,
        holes: Optional[Iterable[RingSource]] = None,
        metadata: Metadata = None
    ) -> Polygon:
        """
        Create a polygon.

        Args:
            shell: Outer ring, either a LinearRing or its coordinates
            holes: Optional inner rings
            metadata: Optional metadata mapping

        Returns:
            New Polygon
        """
        if shell is None:
            raise InvalidArgumentError("The shell is None")

        shell_ring = self._ring(shell)
        hole_rings = tuple(self._ring(hole) for hole in holes) if holes is not None else ()
        return Polygon(shell_ring, hole_rings, factory=self, metadata=_freeze(metadata))

    def create_triangle(
        self,
        first: Coordinate,
        second: Coordinate,
        third: Coordinate,
        metadata: Metadata = None
    ) -> Triangle:
        """Create a triangle."""
        shell = self.create_linear_ring([first, second, third])
        return Triangle(shell, (), factory=self, metadata=_freeze(metadata))

    # -------------------------------------------------------------------------
    # collections
    # -------------------------------------------------------------------------

    def create_multi_point(self, points: Iterable[Point], metadata: Metadata = None) -> MultiPoint:
        """Create a multi point."""
        return MultiPoint(_members(points, Point), factory=self, metadata=_freeze(metadata))

    def create_multi_line_string(
        self,
        line_strings: Iterable[LineString],
        metadata: Metadata = None
    ) -> MultiLineString:
        """Create a multi line string."""
        return MultiLineString(_members(line_strings, LineString), factory=self, metadata=_freeze(metadata))

    def create_multi_polygon(self, polygons: Iterable[Polygon], metadata: Metadata = None) -> MultiPolygon:
        """Create a multi polygon."""
        return MultiPolygon(_members(polygons, Polygon), factory=self, metadata=_freeze(metadata))

    def create_geometry_collection(
        self,
        geometries: Iterable[Geometry],
        metadata: Metadata = None
    ) -> GeometryCollection:
        """Create a heterogeneous geometry collection."""
        return GeometryCollection(_members(geometries, Geometry), factory=self, metadata=_freeze(metadata))

    def _ring(self, source: RingSource) -> LinearRing:
        if isinstance(source, LinearRing):
            return source
        return self.create_linear_ring(source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._reference_system!r})"


def _freeze(metadata: Metadata) -> Mapping[str, Any]:
    if not metadata:
        return _EMPTY_METADATA
    return MappingProxyType(dict(metadata))


def _coordinates(coordinates: Iterable[Coordinate]) -> Tuple[Coordinate, ...]:
    if coordinates is None:
        raise InvalidArgumentError("The coordinates are None")
    result = tuple(coordinates)
    for coordinate in result:
        if not isinstance(coordinate, Coordinate):
            raise InvalidArgumentError(f"Expected Coordinate, got {type(coordinate).__name__}")
    return result


def _members(geometries: Iterable[Geometry], member_type: type) -> Tuple[Geometry, ...]:
    if geometries is None:
        raise InvalidArgumentError("The geometries are None")
    result = tuple(geometries)
    for geometry in result:
        if not isinstance(geometry, member_type):
            raise InvalidArgumentError(
                f"Expected {member_type.__name__}, got {type(geometry).__name__}"
            )
    return result
