"""
Reference systems.

A reference system describes how raw coordinates map to positions on or
near the Earth. Geographic systems carry angular coordinates on a
geodetic datum; projected systems carry planar coordinates obtained by a
map projection from a geographic base system.

Geographic coordinates stored in geometries use longitude/latitude axis
order: x = longitude, y = latitude, z = ellipsoidal height.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

from ..errors import InvalidArgumentError
from ..models.coordinates import Coordinate, GeoCoordinate
from ..models.measures import Angle, Length
from .objects import AreaOfUse, CoordinateSystem, GeodeticDatum, IdentifiedObject

if TYPE_CHECKING:
    from ..operations.methods import CoordinateOperationMethod
    from ..operations.operation import CoordinateProjection


class ReferenceSystemType(Enum):
    """Kind of reference system."""
    GEOGRAPHIC_2D = "geographic 2D"
    GEOGRAPHIC_3D = "geographic 3D"
    GEOCENTRIC = "geocentric"
    PROJECTED = "projected"
    VERTICAL = "vertical"
    ENGINEERING = "engineering"
    UNKNOWN = "unknown"


@dataclass(frozen=True, eq=False)
class ReferenceSystem(IdentifiedObject, ABC):
    """
    Abstract reference system.

    Dimension and type are derived from the concrete system and never
    stored independently.
    """
    scope: str = field(default="", kw_only=True, repr=False)

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Number of coordinate components."""

    @property
    @abstractmethod
    def type(self) -> ReferenceSystemType:
        """Kind of the reference system."""


@dataclass(frozen=True, eq=False)
class CoordinateReferenceSystem(ReferenceSystem):
    """
    Reference system defined by a coordinate system and a datum.

    Subclasses provide the coordinate_system, datum and area_of_use
    attributes.
    """

    @property
    def dimension(self) -> int:
        return self.coordinate_system.dimension


@dataclass(frozen=True, eq=False)
class GeographicCoordinateReferenceSystem(CoordinateReferenceSystem):
    """
    Geographic coordinate reference system.

    Attributes:
        coordinate_system: Ellipsoidal coordinate system (2 or 3 axes)
        datum: Geodetic datum
        area_of_use: Extent of validity
    """
    coordinate_system: CoordinateSystem
    datum: GeodeticDatum
    area_of_use: AreaOfUse

    def __post_init__(self):
        super().__post_init__()
        if self.coordinate_system is None:
            raise InvalidArgumentError("The coordinate system is None")
        if self.datum is None:
            raise InvalidArgumentError("The datum is None")
        if self.area_of_use is None:
            raise InvalidArgumentError("The area of use is None")

    @property
    def type(self) -> ReferenceSystemType:
        if self.coordinate_system.dimension == 3:
            return ReferenceSystemType.GEOGRAPHIC_3D
        return ReferenceSystemType.GEOGRAPHIC_2D

    def to_geo_coordinate(self, coordinate: Coordinate) -> GeoCoordinate:
        """Interpret a native coordinate (longitude, latitude, height) of this system."""
        unit = self.coordinate_system.angular_unit
        height = Length(coordinate.z, self.coordinate_system.linear_unit) if self.dimension == 3 else Length.ZERO
        return GeoCoordinate(Angle(coordinate.y, unit), Angle(coordinate.x, unit), height)

    def from_geo_coordinate(self, coordinate: GeoCoordinate) -> Coordinate:
        """Express a geographic position in the native units of this system."""
        unit = self.coordinate_system.angular_unit
        z = coordinate.height.get_value(self.coordinate_system.linear_unit) if self.dimension == 3 else 0.0
        return Coordinate(coordinate.longitude.get_value(unit), coordinate.latitude.get_value(unit), z)


@dataclass(frozen=True, eq=False)
class ProjectedCoordinateReferenceSystem(CoordinateReferenceSystem):
    """
    Projected coordinate reference system.

    Attributes:
        base_reference_system: Geographic system the projection starts from
        coordinate_system: Cartesian coordinate system of the projected values
        projection: Map projection from the base system
        area_of_use: Extent of validity
    """
    base_reference_system: GeographicCoordinateReferenceSystem
    coordinate_system: CoordinateSystem
    projection: 'CoordinateProjection'
    area_of_use: AreaOfUse

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.base_reference_system, GeographicCoordinateReferenceSystem):
            raise InvalidArgumentError("The base reference system must be geographic")
        if self.coordinate_system is None:
            raise InvalidArgumentError("The coordinate system is None")
        if self.projection is None:
            raise InvalidArgumentError("The projection is None")
        if self.area_of_use is None:
            raise InvalidArgumentError("The area of use is None")

    @property
    def datum(self) -> GeodeticDatum:
        return self.base_reference_system.datum

    @property
    def type(self) -> ReferenceSystemType:
        return ReferenceSystemType.PROJECTED

    def to_projected_coordinate(self, coordinate: Coordinate) -> Coordinate:
        """Convert a native coordinate of this system to metres."""
        unit = self.coordinate_system.linear_unit
        return Coordinate(
            Length(coordinate.x, unit).base_value,
            Length(coordinate.y, unit).base_value,
            Length(coordinate.z, unit).base_value,
        )

    def from_projected_coordinate(self, coordinate: Coordinate) -> Coordinate:
        """Convert a coordinate in metres to the native units of this system."""
        unit = self.coordinate_system.linear_unit
        return Coordinate(
            Length.from_metre(coordinate.x).get_value(unit),
            Length.from_metre(coordinate.y).get_value(unit),
            Length.from_metre(coordinate.z).get_value(unit),
        )

    @classmethod
    def from_method(
        cls,
        identifier: str,
        name: str,
        base_reference_system: GeographicCoordinateReferenceSystem,
        coordinate_system: CoordinateSystem,
        method: 'CoordinateOperationMethod',
        parameters: Mapping[Any, Any],
        area_of_use: AreaOfUse,
    ) -> 'ProjectedCoordinateReferenceSystem':
        """
        Create a projected system whose projection is resolved from the
        registered implementations of an operation method.

        Raises:
            InvalidArgumentError: If no implementation is registered for the
                method, or the base system is not geographic
        """
        from ..operations.factory import CoordinateProjectionFactory

        if not isinstance(base_reference_system, GeographicCoordinateReferenceSystem):
            raise InvalidArgumentError("The base reference system must be geographic")

        projection = CoordinateProjectionFactory.from_method(
            method,
            parameters,
            ellipsoid=base_reference_system.datum.ellipsoid,
            area_of_use=area_of_use,
        )
        if projection is None:
            raise InvalidArgumentError(f"No projection is registered for method {method}")

        return cls(identifier, name, base_reference_system, coordinate_system, projection, area_of_use)
