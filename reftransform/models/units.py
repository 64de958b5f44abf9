"""
Units of measurement.

Every unit belongs to a quantity type and carries its multiple of the
base unit of that type (metre, radian, unity).
"""

from dataclasses import dataclass
from enum import Enum
import math


class UnitQuantityType(Enum):
    """Quantity measured by a unit."""
    LENGTH = "length"
    ANGLE = "angle"
    SCALE = "scale"


@dataclass(frozen=True, slots=True)
class UnitOfMeasurement:
    """
    A unit of measurement.

    Attributes:
        identifier: Authority identifier (e.g. "EPSG::9001")
        name: Human readable name
        symbol: Symbol appended when formatting values
        type: Quantity type of the unit
        base_multiple: Value of one unit expressed in the base unit
    """
    identifier: str
    name: str
    symbol: str
    type: UnitQuantityType
    base_multiple: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitOfMeasurement):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __str__(self) -> str:
        return self.name


class UnitsOfMeasurement:
    """Catalog of the units used by the transformation core."""

    # Length
    METRE = UnitOfMeasurement("EPSG::9001", "metre", "m", UnitQuantityType.LENGTH, 1.0)
    KILOMETRE = UnitOfMeasurement("EPSG::9036", "kilometre", "km", UnitQuantityType.LENGTH, 1000.0)
    FOOT = UnitOfMeasurement("EPSG::9002", "foot", "ft", UnitQuantityType.LENGTH, 0.3048)
    US_SURVEY_FOOT = UnitOfMeasurement(
        "EPSG::9003", "US survey foot", "ftUS", UnitQuantityType.LENGTH, 1200.0 / 3937.0
    )

    # Angle
    RADIAN = UnitOfMeasurement("EPSG::9101", "radian", "rad", UnitQuantityType.ANGLE, 1.0)
    DEGREE = UnitOfMeasurement("EPSG::9102", "degree", "°", UnitQuantityType.ANGLE, math.pi / 180.0)
    GRAD = UnitOfMeasurement("EPSG::9105", "grad", "grad", UnitQuantityType.ANGLE, math.pi / 200.0)
    ARC_MINUTE = UnitOfMeasurement(
        "EPSG::9103", "arc-minute", "'", UnitQuantityType.ANGLE, math.pi / 10800.0
    )
    ARC_SECOND = UnitOfMeasurement(
        "EPSG::9104", "arc-second", "\"", UnitQuantityType.ANGLE, math.pi / 648000.0
    )

    # Scale
    UNITY = UnitOfMeasurement("EPSG::9201", "unity", "", UnitQuantityType.SCALE, 1.0)
    PARTS_PER_MILLION = UnitOfMeasurement(
        "EPSG::9202", "parts per million", "ppm", UnitQuantityType.SCALE, 1e-6
    )

    @classmethod
    def base_unit(cls, quantity_type: UnitQuantityType) -> UnitOfMeasurement:
        """Return the base unit of a quantity type."""
        if quantity_type is UnitQuantityType.LENGTH:
            return cls.METRE
        if quantity_type is UnitQuantityType.ANGLE:
            return cls.RADIAN
        return cls.UNITY
