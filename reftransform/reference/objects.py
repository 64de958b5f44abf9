"""
Identified reference objects.

Provides the building blocks of reference systems: areas of use, prime
meridians, ellipsoids, geodetic datums and coordinate systems. All of
them are immutable once constructed and shared by reference.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import math

from ..errors import InvalidArgumentError
from ..models.measures import Angle, Length
from ..models.units import UnitOfMeasurement, UnitQuantityType, UnitsOfMeasurement


@dataclass(frozen=True, eq=False)
class IdentifiedObject:
    """
    Object with an authority identifier.

    Two identified objects are equal if they are of the same type and
    share the same identifier.

    Attributes:
        identifier: Authority identifier (e.g. "EPSG::4326")
        name: Human readable name
        remarks: Free text remarks
        aliases: Alternative names
    """
    identifier: str
    name: str
    remarks: str = field(default="", kw_only=True, repr=False)
    aliases: Tuple[str, ...] = field(default=(), kw_only=True, repr=False)

    def __post_init__(self):
        if not self.identifier:
            raise InvalidArgumentError(f"The identifier of the {type(self).__name__} is empty")
        if self.name is None:
            raise InvalidArgumentError(f"The name of the {type(self).__name__} is None")
        object.__setattr__(self, 'aliases', tuple(self.aliases or ()))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identifier))

    def __str__(self) -> str:
        return f"[{self.identifier}] {self.name}"


@dataclass(frozen=True, eq=False)
class AreaOfUse(IdentifiedObject):
    """Geographic extent in which an object is valid."""
    south_bound: Angle
    west_bound: Angle
    north_bound: Angle
    east_bound: Angle


@dataclass(frozen=True, eq=False)
class PrimeMeridian(IdentifiedObject):
    """Origin of longitudes."""
    longitude: Angle = field(default=Angle.ZERO)


@dataclass(frozen=True, eq=False)
class Ellipsoid(IdentifiedObject):
    """
    Reference ellipsoid.

    Attributes:
        semi_major_axis: Equatorial radius
        semi_minor_axis: Polar radius
        inverse_flattening: a / (a - b), infinite for a sphere
    """
    semi_major_axis: Length
    semi_minor_axis: Length
    inverse_flattening: float

    def __post_init__(self):
        super().__post_init__()
        if self.semi_major_axis is None or self.semi_minor_axis is None:
            raise InvalidArgumentError("The ellipsoid axes must not be None")
        if not self.semi_major_axis.base_value > 0:
            raise InvalidArgumentError("The semi-major axis must be positive")
        if self.semi_minor_axis > self.semi_major_axis:
            raise InvalidArgumentError("The semi-minor axis exceeds the semi-major axis")

    @classmethod
    def from_inverse_flattening(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: Length,
        inverse_flattening: float
    ) -> 'Ellipsoid':
        """Create an ellipsoid from its semi-major axis and inverse flattening."""
        if semi_major_axis is None:
            raise InvalidArgumentError("The semi-major axis is None")
        if math.isinf(inverse_flattening):
            semi_minor = semi_major_axis.value
        else:
            semi_minor = semi_major_axis.value * (1.0 - 1.0 / inverse_flattening)
        return cls(
            identifier, name,
            semi_major_axis,
            Length(semi_minor, semi_major_axis.unit),
            inverse_flattening
        )

    @classmethod
    def from_semi_minor_axis(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: Length,
        semi_minor_axis: Length
    ) -> 'Ellipsoid':
        """Create an ellipsoid from its two semi-axes."""
        if semi_major_axis is None or semi_minor_axis is None:
            raise InvalidArgumentError("The ellipsoid axes must not be None")
        a = semi_major_axis.base_value
        b = semi_minor_axis.base_value
        inverse_flattening = math.inf if a == b else a / (a - b)
        return cls(identifier, name, semi_major_axis, semi_minor_axis, inverse_flattening)

    @classmethod
    def sphere(cls, identifier: str, name: str, radius: Length) -> 'Ellipsoid':
        """Create a sphere."""
        if radius is None:
            raise InvalidArgumentError("The radius is None")
        return cls(identifier, name, radius, radius, math.inf)

    @property
    def is_sphere(self) -> bool:
        return self.semi_major_axis == self.semi_minor_axis

    @property
    def flattening(self) -> float:
        if math.isinf(self.inverse_flattening):
            return 0.0
        return 1.0 / self.inverse_flattening

    @property
    def eccentricity_squared(self) -> float:
        a = self.semi_major_axis.base_value
        b = self.semi_minor_axis.base_value
        return (a * a - b * b) / (a * a)

    @property
    def eccentricity(self) -> float:
        return math.sqrt(self.eccentricity_squared)

    @property
    def second_eccentricity_squared(self) -> float:
        a = self.semi_major_axis.base_value
        b = self.semi_minor_axis.base_value
        return (a * a - b * b) / (b * b)

    def radius_of_prime_vertical_curvature(self, latitude: float) -> float:
        """
        Radius of curvature in the prime vertical.

        Args:
            latitude: Geodetic latitude in radians

        Returns:
            Radius in metres
        """
        sin_lat = math.sin(latitude)
        return self.semi_major_axis.base_value / math.sqrt(1.0 - self.eccentricity_squared * sin_lat * sin_lat)


@dataclass(frozen=True, eq=False)
class GeodeticDatum(IdentifiedObject):
    """
    Geodetic datum.

    Attributes:
        ellipsoid: Reference ellipsoid
        prime_meridian: Origin of longitudes
        to_wgs84: Optional geocentric translation (dx, dy, dz) in metres
                  from this datum to WGS 84
    """
    ellipsoid: Ellipsoid
    prime_meridian: PrimeMeridian
    to_wgs84: Optional[Tuple[float, float, float]] = field(default=None, kw_only=True)

    def __post_init__(self):
        super().__post_init__()
        if self.ellipsoid is None:
            raise InvalidArgumentError("The ellipsoid is None")
        if self.prime_meridian is None:
            raise InvalidArgumentError("The prime meridian is None")
        if self.to_wgs84 is not None:
            if len(self.to_wgs84) != 3:
                raise InvalidArgumentError("to_wgs84 requires exactly three translation values")
            object.__setattr__(self, 'to_wgs84', tuple(float(value) for value in self.to_wgs84))


class AxisDirection(Enum):
    """Direction of a coordinate system axis."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    GEOCENTRIC_X = "geocentricX"
    GEOCENTRIC_Y = "geocentricY"
    GEOCENTRIC_Z = "geocentricZ"


@dataclass(frozen=True, slots=True)
class CoordinateSystemAxis:
    """Axis of a coordinate system."""
    name: str
    direction: AxisDirection
    unit: UnitOfMeasurement


@dataclass(frozen=True, eq=False)
class CoordinateSystem(IdentifiedObject):
    """Ordered set of axes; the axis count defines the dimension."""
    axes: Tuple[CoordinateSystemAxis, ...]

    def __post_init__(self):
        super().__post_init__()
        axes = tuple(self.axes or ())
        if len(axes) not in (2, 3):
            raise InvalidArgumentError(f"A coordinate system has 2 or 3 axes, got {len(axes)}")
        object.__setattr__(self, 'axes', axes)

    @property
    def dimension(self) -> int:
        return len(self.axes)

    @property
    def angular_unit(self) -> UnitOfMeasurement:
        """Unit of the first angular axis (radian if none)."""
        return self._first_unit(UnitQuantityType.ANGLE)

    @property
    def linear_unit(self) -> UnitOfMeasurement:
        """Unit of the first linear axis (metre if none)."""
        return self._first_unit(UnitQuantityType.LENGTH)

    def _first_unit(self, quantity_type: UnitQuantityType) -> UnitOfMeasurement:
        for axis in self.axes:
            if axis.unit.type is quantity_type:
                return axis.unit
        return UnitsOfMeasurement.base_unit(quantity_type)
