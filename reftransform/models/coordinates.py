"""
Coordinate value types.

Coordinate holds planar or geocentric values in the native units of a
reference system. GeoCoordinate holds an angular position on an
ellipsoid together with its ellipsoidal height.
"""

from dataclasses import dataclass, field
import math

from .measures import Angle, Length


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Coordinate in the native units of a reference system."""
    x: float
    y: float
    z: float = 0.0

    def is_finite(self) -> bool:
        """Check that no component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def __sub__(self, other: 'Coordinate') -> 'Coordinate':
        """Vector subtraction."""
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: 'Coordinate') -> 'Coordinate':
        """Vector addition."""
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    """
    Geographic position.

    Attributes:
        latitude: Geodetic latitude
        longitude: Geodetic longitude
        height: Ellipsoidal height
    """
    latitude: Angle
    longitude: Angle
    height: Length = field(default=Length.ZERO)

    @classmethod
    def from_radians(cls, latitude: float, longitude: float, height: float = 0.0) -> 'GeoCoordinate':
        """Create from latitude/longitude in radians and height in metres."""
        return cls(Angle.from_radian(latitude), Angle.from_radian(longitude), Length.from_metre(height))

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, height: float = 0.0) -> 'GeoCoordinate':
        """Create from latitude/longitude in degrees and height in metres."""
        return cls(Angle.from_degree(latitude), Angle.from_degree(longitude), Length.from_metre(height))

    def is_finite(self) -> bool:
        """Check that no component is NaN or infinite."""
        return (
            math.isfinite(self.latitude.base_value) and
            math.isfinite(self.longitude.base_value) and
            math.isfinite(self.height.base_value)
        )
