"""
Transverse Mercator projection.

Ellipsoidal Transverse Mercator using the series expansions of Snyder
(Map Projections, A Working Manual, pp. 60-64). Accurate to the
centimetre level within a few degrees of the central meridian, which
covers the UTM zones.
"""

from typing import Optional
import math

from ...models.coordinates import Coordinate, GeoCoordinate
from ...reference.objects import AreaOfUse, Ellipsoid
from ...utils.math_utils import meridional_arc, wrap_longitude_delta
from ..methods import CoordinateOperationMethods
from ..operation import CoordinateProjection
from ..parameters import CoordinateOperationParameters, ParameterMap


class TransverseMercatorProjection(CoordinateProjection):
    """
    Transverse Mercator projection.

    Args:
        identifier: Identifier of the projection
        name: Name of the projection
        parameters: Latitude and longitude of natural origin, scale factor,
                    false easting and false northing
        ellipsoid: Reference ellipsoid
        area_of_use: Area where the projection is applicable
    """

    METHOD = CoordinateOperationMethods.TRANSVERSE_MERCATOR_PROJECTION

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[ParameterMap],
        ellipsoid: Ellipsoid,
        area_of_use: AreaOfUse
    ):
        super().__init__(identifier, name, self.METHOD, parameters, ellipsoid, area_of_use)

        P = CoordinateOperationParameters
        self._latitude_of_origin = self._base_value(P.LATITUDE_OF_NATURAL_ORIGIN)
        self._longitude_of_origin = self._base_value(P.LONGITUDE_OF_NATURAL_ORIGIN)
        self._scale_factor = self._base_value(P.SCALE_FACTOR_AT_NATURAL_ORIGIN)
        self._false_easting = self._base_value(P.FALSE_EASTING)
        self._false_northing = self._base_value(P.FALSE_NORTHING)

        self._a = ellipsoid.semi_major_axis.base_value
        self._e2 = ellipsoid.eccentricity_squared
        self._ep2 = ellipsoid.second_eccentricity_squared
        self._m0 = meridional_arc(self._a, self._e2, self._latitude_of_origin)

        # footpoint latitude series constants
        e2 = self._e2
        root = math.sqrt(1 - e2)
        self._e1 = (1 - root) / (1 + root)
        self._mu_divisor = self._a * (1 - e2 / 4 - 3 * e2 ** 2 / 64 - 5 * e2 ** 3 / 256)

    def compute_forward(self, coordinate: GeoCoordinate) -> Coordinate:
        lat = coordinate.latitude.base_value
        delta = wrap_longitude_delta(coordinate.longitude.base_value - self._longitude_of_origin)

        e2 = self._e2
        ep2 = self._ep2
        k0 = self._scale_factor

        sin_lat = math.sin(lat)
        cos_lat = math.cos(lat)
        tan_lat = math.tan(lat)

        # Radius of curvature in prime vertical
        N = self._a / math.sqrt(1 - e2 * sin_lat ** 2)

        T = tan_lat ** 2
        C = ep2 * cos_lat ** 2
        A = cos_lat * delta
        M = meridional_arc(self._a, e2, lat)

        x = k0 * N * (
            A
            + (1 - T + C) * A ** 3 / 6
            + (5 - 18 * T + T ** 2 + 72 * C - 58 * ep2) * A ** 5 / 120
        )

        y = k0 * (
            M - self._m0 + N * tan_lat * (
                A ** 2 / 2
                + (5 - T + 9 * C + 4 * C ** 2) * A ** 4 / 24
                + (61 - 58 * T + T ** 2 + 600 * C - 330 * ep2) * A ** 6 / 720
            )
        )

        return Coordinate(
            x + self._false_easting,
            y + self._false_northing,
            coordinate.height.base_value
        )

    def compute_reverse(self, coordinate: Coordinate) -> GeoCoordinate:
        x = coordinate.x - self._false_easting
        y = coordinate.y - self._false_northing

        e2 = self._e2
        ep2 = self._ep2
        e1 = self._e1
        k0 = self._scale_factor

        # Footpoint latitude
        M = self._m0 + y / k0
        mu = M / self._mu_divisor
        phi1 = (
            mu
            + (3 * e1 / 2 - 27 * e1 ** 3 / 32) * math.sin(2 * mu)
            + (21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32) * math.sin(4 * mu)
            + (151 * e1 ** 3 / 96) * math.sin(6 * mu)
            + (1097 * e1 ** 4 / 512) * math.sin(8 * mu)
        )

        sin_phi1 = math.sin(phi1)
        cos_phi1 = math.cos(phi1)
        tan_phi1 = math.tan(phi1)

        N1 = self._a / math.sqrt(1 - e2 * sin_phi1 ** 2)
        T1 = tan_phi1 ** 2
        C1 = ep2 * cos_phi1 ** 2
        R1 = self._a * (1 - e2) / (1 - e2 * sin_phi1 ** 2) ** 1.5
        D = x / (N1 * k0)

        lat = phi1 - (N1 * tan_phi1 / R1) * (
            D ** 2 / 2
            - (5 + 3 * T1 + 10 * C1 - 4 * C1 ** 2 - 9 * ep2) * D ** 4 / 24
            + (61 + 90 * T1 + 298 * C1 + 45 * T1 ** 2 - 252 * ep2 - 3 * C1 ** 2) * D ** 6 / 720
        )

        lon = self._longitude_of_origin + (
            D
            - (1 + 2 * T1 + C1) * D ** 3 / 6
            + (5 - 2 * C1 + 28 * T1 - 3 * C1 ** 2 + 8 * ep2 + 24 * T1 ** 2) * D ** 5 / 120
        ) / cos_phi1

        return GeoCoordinate.from_radians(lat, lon, coordinate.z)
