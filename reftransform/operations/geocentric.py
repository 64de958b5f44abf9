"""
Geocentric transformations.

Transformations between the geocentric Cartesian spaces of two geodetic
datums.
"""

from typing import Optional

from ..models.coordinates import Coordinate
from ..reference.objects import AreaOfUse
from .methods import CoordinateOperationMethods
from .operation import CoordinateTransformation
from .parameters import CoordinateOperationParameters, ParameterMap


class GeocentricTransformation(CoordinateTransformation):
    """Base class of transformations between geocentric coordinate spaces."""


class GeocentricTranslation(GeocentricTransformation):
    """
    Three-parameter geocentric translation.

    Adds the X, Y and Z axis translations to a geocentric coordinate.
    """

    METHOD = CoordinateOperationMethods.GEOCENTRIC_TRANSLATION

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[ParameterMap],
        area_of_use: AreaOfUse
    ):
        super().__init__(identifier, name, self.METHOD, parameters, area_of_use)

        P = CoordinateOperationParameters
        self._translation = Coordinate(
            self._base_value(P.X_AXIS_TRANSLATION),
            self._base_value(P.Y_AXIS_TRANSLATION),
            self._base_value(P.Z_AXIS_TRANSLATION)
        )

    @property
    def translation(self) -> Coordinate:
        """Translation vector in metres."""
        return self._translation

    def compute_forward(self, coordinate: Coordinate) -> Coordinate:
        return coordinate + self._translation

    def compute_reverse(self, coordinate: Coordinate) -> Coordinate:
        return coordinate - self._translation
