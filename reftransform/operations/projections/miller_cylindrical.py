"""
Miller Cylindrical projection.

Spherical cylindrical projection proposed by O. M. Miller (1942): the
Mercator formula with latitudes scaled by 4/5, so that the poles can be
shown. The sphere radius is the semi-major axis of the ellipsoid.

Forward:
    x = FE + R * (lon - lon0)
    y = FN + R * asinh(tan(0.8 * lat)) / 0.8

Reverse:
    lat = atan(sinh(0.8 * (y - FN) / R)) / 0.8
    lon = lon0 + (x - FE) / R
"""

from typing import Optional
import math

from ...config import MILLER_LATITUDE_FACTOR
from ...models.coordinates import Coordinate, GeoCoordinate
from ...reference.objects import AreaOfUse, Ellipsoid
from ...utils.math_utils import wrap_longitude_delta
from ..methods import CoordinateOperationMethods
from ..operation import CoordinateProjection
from ..parameters import CoordinateOperationParameters, ParameterMap


class WorldMillerCylindricalProjection(CoordinateProjection):
    """
    Miller Cylindrical projection on a sphere.

    Args:
        identifier: Identifier of the projection
        name: Name of the projection
        parameters: False easting, false northing and longitude of natural origin
        ellipsoid: Ellipsoid whose semi-major axis is the sphere radius
        area_of_use: Area where the projection is applicable
    """

    METHOD = CoordinateOperationMethods.MILLER_CYLINDRICAL_PROJECTION

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[ParameterMap],
        ellipsoid: Ellipsoid,
        area_of_use: AreaOfUse
    ):
        super().__init__(identifier, name, self.METHOD, parameters, ellipsoid, area_of_use)

        self._radius = ellipsoid.semi_major_axis.base_value
        self._false_easting = self._base_value(CoordinateOperationParameters.FALSE_EASTING)
        self._false_northing = self._base_value(CoordinateOperationParameters.FALSE_NORTHING)
        self._longitude_of_origin = self._base_value(CoordinateOperationParameters.LONGITUDE_OF_NATURAL_ORIGIN)

    def compute_forward(self, coordinate: GeoCoordinate) -> Coordinate:
        latitude = coordinate.latitude.base_value
        delta = wrap_longitude_delta(coordinate.longitude.base_value - self._longitude_of_origin)

        x = self._radius * delta
        y = self._radius * math.asinh(math.tan(MILLER_LATITUDE_FACTOR * latitude)) / MILLER_LATITUDE_FACTOR

        return Coordinate(x + self._false_easting, y + self._false_northing, coordinate.height.base_value)

    def compute_reverse(self, coordinate: Coordinate) -> GeoCoordinate:
        x = coordinate.x - self._false_easting
        y = coordinate.y - self._false_northing

        latitude = math.atan(math.sinh(MILLER_LATITUDE_FACTOR * y / self._radius)) / MILLER_LATITUDE_FACTOR
        longitude = self._longitude_of_origin + x / self._radius

        return GeoCoordinate.from_radians(latitude, longitude, coordinate.z)
