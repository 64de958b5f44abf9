"""
Measured quantities: Length, Angle and Scale.

A measure pairs a magnitude with a unit of measurement. Comparison,
hashing and arithmetic are defined over the base value (the magnitude
expressed in metre, radian or unity), so 1 km and 1000 m are equal.
Arithmetic results are always expressed in the base unit.
"""

from typing import Optional, TypeVar
import math

from ..errors import InvalidArgumentError, InvalidUnitError
from .units import UnitOfMeasurement, UnitQuantityType, UnitsOfMeasurement

M = TypeVar('M', bound='Measure')


class Measure:
    """
    Base class of measured quantities.

    Subclasses set QUANTITY_TYPE; the unit passed to the constructor must
    be of that quantity type.
    """

    QUANTITY_TYPE: UnitQuantityType

    __slots__ = ('_value', '_unit')

    def __init__(self, value: float, unit: Optional[UnitOfMeasurement] = None):
        if unit is None:
            unit = UnitsOfMeasurement.base_unit(self.QUANTITY_TYPE)
        elif unit.type is not self.QUANTITY_TYPE:
            raise InvalidUnitError(
                f"The unit '{unit.name}' is not a {self.QUANTITY_TYPE.value} measure"
            )

        object.__setattr__(self, '_value', float(value))
        object.__setattr__(self, '_unit', unit)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> float:
        """Magnitude in the unit of the measure."""
        return self._value

    @property
    def unit(self) -> UnitOfMeasurement:
        """Unit of the measure."""
        return self._unit

    @property
    def base_value(self) -> float:
        """Magnitude converted to the base unit."""
        return self._value * self._unit.base_multiple

    @property
    def is_valid(self) -> bool:
        """False for the undefined (NaN) value."""
        return not math.isnan(self._value)

    def get_value(self, unit: UnitOfMeasurement) -> float:
        """
        Get the magnitude in the given unit.

        Args:
            unit: Target unit, must be of the same quantity type

        Returns:
            Magnitude expressed in the target unit

        Raises:
            InvalidArgumentError: If unit is None
            InvalidUnitError: If the unit measures another quantity
        """
        if unit is None:
            raise InvalidArgumentError("The unit of measurement is None")
        if unit.type is not self.QUANTITY_TYPE:
            raise InvalidUnitError(
                f"The unit '{unit.name}' is not a {self.QUANTITY_TYPE.value} measure"
            )

        if unit == self._unit:
            return self._value

        return self.base_value / unit.base_multiple

    @classmethod
    def _from_base(cls: type, base_value: float) -> M:
        return cls(base_value, UnitsOfMeasurement.base_unit(cls.QUANTITY_TYPE))

    # -------------------------------------------------------------------------
    # comparison
    # -------------------------------------------------------------------------

    def _same_kind(self, other: object) -> bool:
        return isinstance(other, Measure) and other.QUANTITY_TYPE is self.QUANTITY_TYPE

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value == other.base_value

    def __ne__(self, other: object) -> bool:
        if self is other:
            return False
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value != other.base_value

    def __lt__(self, other: 'Measure') -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value < other.base_value

    def __le__(self, other: 'Measure') -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value <= other.base_value

    def __gt__(self, other: 'Measure') -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value > other.base_value

    def __ge__(self, other: 'Measure') -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.base_value >= other.base_value

    def __hash__(self) -> int:
        return hash((self.QUANTITY_TYPE, self.base_value))

    # -------------------------------------------------------------------------
    # arithmetic (results in base unit)
    # -------------------------------------------------------------------------

    def __add__(self, other: 'Measure') -> 'Measure':
        if not self._same_kind(other):
            return NotImplemented
        return self._from_base(self.base_value + other.base_value)

    def __sub__(self, other: 'Measure') -> 'Measure':
        if not self._same_kind(other):
            return NotImplemented
        return self._from_base(self.base_value - other.base_value)

    def __neg__(self) -> 'Measure':
        return self._from_base(-self.base_value)

    def __mul__(self, scalar: float) -> 'Measure':
        if isinstance(scalar, Measure):
            return NotImplemented
        return self._from_base(self.base_value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Measure':
        if isinstance(scalar, Measure):
            return NotImplemented
        return self._from_base(self.base_value / scalar)

    def __float__(self) -> float:
        return self.base_value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {self._unit.name!r})"

    def __str__(self) -> str:
        return f"{self._value}{self._unit.symbol}"


class Length(Measure):
    """Length measure; base unit metre."""

    QUANTITY_TYPE = UnitQuantityType.LENGTH

    __slots__ = ()

    @classmethod
    def from_metre(cls, value: float) -> 'Length':
        return cls(value, UnitsOfMeasurement.METRE)

    @classmethod
    def from_kilometre(cls, value: float) -> 'Length':
        return cls(value, UnitsOfMeasurement.KILOMETRE)

    @classmethod
    def from_foot(cls, value: float) -> 'Length':
        return cls(value, UnitsOfMeasurement.FOOT)

    @classmethod
    def from_us_survey_foot(cls, value: float) -> 'Length':
        return cls(value, UnitsOfMeasurement.US_SURVEY_FOOT)


class Angle(Measure):
    """Angular measure; base unit radian."""

    QUANTITY_TYPE = UnitQuantityType.ANGLE

    __slots__ = ()

    @classmethod
    def from_radian(cls, value: float) -> 'Angle':
        return cls(value, UnitsOfMeasurement.RADIAN)

    @classmethod
    def from_degree(cls, value: float) -> 'Angle':
        return cls(value, UnitsOfMeasurement.DEGREE)

    @classmethod
    def from_grad(cls, value: float) -> 'Angle':
        return cls(value, UnitsOfMeasurement.GRAD)

    @classmethod
    def from_arc_second(cls, value: float) -> 'Angle':
        return cls(value, UnitsOfMeasurement.ARC_SECOND)

    @property
    def degrees(self) -> float:
        """Magnitude in degrees."""
        return self.get_value(UnitsOfMeasurement.DEGREE)


class Scale(Measure):
    """Dimensionless scale measure; base unit unity."""

    QUANTITY_TYPE = UnitQuantityType.SCALE

    __slots__ = ()

    @classmethod
    def from_unity(cls, value: float) -> 'Scale':
        return cls(value, UnitsOfMeasurement.UNITY)

    @classmethod
    def from_parts_per_million(cls, value: float) -> 'Scale':
        return cls(value, UnitsOfMeasurement.PARTS_PER_MILLION)


def _add_sentinels(cls: type) -> None:
    """Attach the special values shared by every measure type."""
    base = UnitsOfMeasurement.base_unit(cls.QUANTITY_TYPE)
    setattr(cls, 'ZERO', cls(0.0, base))
    setattr(cls, 'UNDEFINED', cls(math.nan, base))
    setattr(cls, 'POSITIVE_INFINITY', cls(math.inf, base))
    setattr(cls, 'NEGATIVE_INFINITY', cls(-math.inf, base))
    setattr(cls, 'EPSILON', cls(math.ulp(0.0), base))


for _measure_type in (Length, Angle, Scale):
    _add_sentinels(_measure_type)
