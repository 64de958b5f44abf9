"""
Geographic/geocentric conversion.

Converts geodetic latitude, longitude and ellipsoidal height to Earth
centred Cartesian coordinates (X, Y, Z in metres) and back. The reverse
conversion refines the latitude by fixed-point iteration starting from
Bowring's parametric estimate.
"""

import math

from ..config import GEOCENTRIC_MAX_ITERATIONS, GEOCENTRIC_TOLERANCE
from ..errors import InvalidArgumentError
from ..models.coordinates import Coordinate, GeoCoordinate
from ..reference.objects import AreaOfUse, Ellipsoid
from .methods import CoordinateOperationMethods
from .operation import CoordinateOperation


class GeographicToGeocentricConversion(CoordinateOperation):
    """
    Conversion between geographic and geocentric coordinates.

    Args:
        ellipsoid: Reference ellipsoid
        area_of_use: Area where the conversion is applicable
        max_iterations: Upper bound of latitude refinement steps
        tolerance: Latitude convergence threshold in radians
    """

    METHOD = CoordinateOperationMethods.GEOGRAPHIC_GEOCENTRIC_CONVERSION

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        area_of_use: AreaOfUse,
        max_iterations: int = GEOCENTRIC_MAX_ITERATIONS,
        tolerance: float = GEOCENTRIC_TOLERANCE
    ):
        if ellipsoid is None:
            raise InvalidArgumentError("The ellipsoid is None")
        if max_iterations < 1:
            raise InvalidArgumentError("At least one iteration is required")
        super().__init__(
            self.METHOD.identifier,
            f"Geographic/geocentric conversion ({ellipsoid.name})",
            self.METHOD,
            {},
            area_of_use
        )
        self._ellipsoid = ellipsoid
        self._a = ellipsoid.semi_major_axis.base_value
        self._b = ellipsoid.semi_minor_axis.base_value
        self._e2 = ellipsoid.eccentricity_squared
        self._ep2 = ellipsoid.second_eccentricity_squared
        self._max_iterations = max_iterations
        self._tolerance = tolerance

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def forward(self, coordinate: GeoCoordinate) -> Coordinate:
        """Convert a geographic position to geocentric coordinates."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")

        lat = coordinate.latitude.base_value
        lon = coordinate.longitude.base_value
        h = coordinate.height.base_value

        N = self._ellipsoid.radius_of_prime_vertical_curvature(lat)
        cos_lat = math.cos(lat)

        return Coordinate(
            (N + h) * cos_lat * math.cos(lon),
            (N + h) * cos_lat * math.sin(lon),
            (N * (1 - self._e2) + h) * math.sin(lat)
        )

    def reverse(self, coordinate: Coordinate) -> GeoCoordinate:
        """Convert geocentric coordinates to a geographic position."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")

        x, y, z = coordinate.x, coordinate.y, coordinate.z
        p = math.hypot(x, y)
        lon = math.atan2(y, x)

        if p == 0.0:
            # on the polar axis
            lat = math.copysign(math.pi / 2, z) if z != 0.0 else 0.0
            h = abs(z) - self._b if z != 0.0 else -self._b
            return GeoCoordinate.from_radians(lat, lon, h)

        # Bowring's initial estimate
        beta = math.atan2(self._a * z, self._b * p)
        lat = math.atan2(
            z + self._ep2 * self._b * math.sin(beta) ** 3,
            p - self._e2 * self._a * math.cos(beta) ** 3
        )

        for _ in range(self._max_iterations):
            N = self._ellipsoid.radius_of_prime_vertical_curvature(lat)
            refined = math.atan2(z + self._e2 * N * math.sin(lat), p)
            converged = abs(refined - lat) < self._tolerance
            lat = refined
            if converged:
                break

        N = self._ellipsoid.radius_of_prime_vertical_curvature(lat)
        h = p * math.cos(lat) + z * math.sin(lat) - self._a * self._a / N

        return GeoCoordinate.from_radians(lat, lon, h)
