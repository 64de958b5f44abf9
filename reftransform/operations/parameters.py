"""
Coordinate operation parameters.

A parameter is identified by a descriptor object, never by its name.
Parameter mappings map descriptors to values whose type must match the
descriptor's kind: Length, Angle, Scale or a plain real number.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Mapping, Optional

from ..errors import InvalidArgumentError, MissingParameterError, UnitMismatchError
from ..models.measures import Angle, Length, Measure, Scale


class ParameterKind(Enum):
    """Kind of value a parameter accepts."""
    LENGTH = "length"
    ANGLE = "angle"
    SCALE = "scale"
    NUMBER = "number"


@dataclass(frozen=True, eq=False)
class CoordinateOperationParameter:
    """
    Descriptor of a coordinate operation parameter.

    Descriptors compare by identity so that mappings are keyed by the
    descriptor object itself.

    Attributes:
        identifier: Authority identifier (e.g. "EPSG::8806")
        name: Parameter name
        kind: Kind of value the parameter accepts
        default_value: Conventional value, informational only
    """
    identifier: str
    name: str
    kind: ParameterKind
    default_value: Any = None

    def __str__(self) -> str:
        return self.name


ParameterMap = Mapping[CoordinateOperationParameter, Any]


def is_value_of_kind(value: Any, kind: ParameterKind) -> bool:
    """Check whether a value may be bound to a parameter of the given kind."""
    if kind is ParameterKind.LENGTH:
        return isinstance(value, Length)
    if kind is ParameterKind.ANGLE:
        return isinstance(value, Angle)
    if kind is ParameterKind.SCALE:
        return isinstance(value, Scale) or _is_number(value)
    return _is_number(value)


def get_parameter_value(parameters: Optional[ParameterMap], parameter: CoordinateOperationParameter) -> Any:
    """
    Extract a parameter value with kind checking.

    Args:
        parameters: Parameter mapping
        parameter: Descriptor of the requested parameter

    Returns:
        The value bound to the parameter

    Raises:
        InvalidArgumentError: If parameters is None
        MissingParameterError: If the parameter is absent
        UnitMismatchError: If the value is not of the parameter's kind
    """
    if parameters is None:
        raise InvalidArgumentError("The parameters are None")
    if parameter not in parameters:
        raise MissingParameterError(parameter.name)

    value = parameters[parameter]
    if not is_value_of_kind(value, parameter.kind):
        raise UnitMismatchError(parameter.name, parameter.kind.value, _describe(value))
    return value


def get_base_value(parameters: Optional[ParameterMap], parameter: CoordinateOperationParameter) -> float:
    """Extract a parameter value expressed in its base unit (metre, radian, unity)."""
    value = get_parameter_value(parameters, parameter)
    if isinstance(value, Measure):
        return value.base_value
    return float(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _describe(value: Any) -> str:
    if isinstance(value, Measure):
        return value.QUANTITY_TYPE.value
    return type(value).__name__


class CoordinateOperationParameters:
    """Catalog of coordinate operation parameters."""

    LATITUDE_OF_NATURAL_ORIGIN = CoordinateOperationParameter(
        "EPSG::8801", "Latitude of natural origin", ParameterKind.ANGLE, Angle.ZERO
    )
    LONGITUDE_OF_NATURAL_ORIGIN = CoordinateOperationParameter(
        "EPSG::8802", "Longitude of natural origin", ParameterKind.ANGLE, Angle.ZERO
    )
    SCALE_FACTOR_AT_NATURAL_ORIGIN = CoordinateOperationParameter(
        "EPSG::8805", "Scale factor at natural origin", ParameterKind.SCALE, 1.0
    )
    FALSE_EASTING = CoordinateOperationParameter(
        "EPSG::8806", "False easting", ParameterKind.LENGTH, Length.ZERO
    )
    FALSE_NORTHING = CoordinateOperationParameter(
        "EPSG::8807", "False northing", ParameterKind.LENGTH, Length.ZERO
    )
    X_AXIS_TRANSLATION = CoordinateOperationParameter(
        "EPSG::8605", "X-axis translation", ParameterKind.LENGTH, Length.ZERO
    )
    Y_AXIS_TRANSLATION = CoordinateOperationParameter(
        "EPSG::8606", "Y-axis translation", ParameterKind.LENGTH, Length.ZERO
    )
    Z_AXIS_TRANSLATION = CoordinateOperationParameter(
        "EPSG::8607", "Z-axis translation", ParameterKind.LENGTH, Length.ZERO
    )
