"""
Operation parameters of spatial operations.

A spatial operation parameter is identified by its descriptor object. Its
value is resolved in order: the explicit value of the parameter mapping,
a default derived from the source geometry, the plain default value.
A required parameter that resolves to nothing raises MissingParameterError.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from ..errors import InvalidArgumentError, MissingParameterError, UnitMismatchError
from ..models.geometry import Geometry, GeometryFactory
from ..reference.systems import ReferenceSystem

DerivedDefault = Callable[[Geometry, Mapping['OperationParameter', Any]], Any]


@dataclass(frozen=True, eq=False)
class OperationParameter:
    """
    Descriptor of a spatial operation parameter.

    Attributes:
        identifier: Identifier of the parameter
        name: Parameter name
        value_type: Accepted value type(s)
        default_value: Plain default, used when nothing else applies
        derive_default: Computes a default from the source geometry and the
                        supplied parameters; may return None
        is_required: Whether resolution may end without a value
    """
    identifier: str
    name: str
    value_type: Union[type, Tuple[type, ...]]
    default_value: Any = None
    derive_default: Optional[DerivedDefault] = field(default=None, repr=False)
    is_required: bool = False

    def __str__(self) -> str:
        return self.name

    def resolve(
        self,
        parameters: Optional[Mapping['OperationParameter', Any]],
        source: Optional[Geometry] = None,
        default: Any = None
    ) -> Any:
        """
        Resolve the value of the parameter.

        Args:
            parameters: Supplied parameter values
            source: Source geometry used for derived defaults
            default: Overrides the plain default value when not None

        Returns:
            The resolved value, None if an optional parameter has no value

        Raises:
            MissingParameterError: If a required parameter has no value
            UnitMismatchError: If the supplied value has the wrong type
        """
        parameters = parameters or {}

        value = parameters.get(self)
        if value is not None:
            if not isinstance(value, self.value_type):
                raise UnitMismatchError(self.name, _type_name(self.value_type), type(value).__name__)
            return value

        if self.derive_default is not None and source is not None:
            value = self.derive_default(source, parameters)
            if value is not None:
                return value

        value = default if default is not None else self.default_value
        if value is None and self.is_required:
            raise MissingParameterError(self.name)
        return value


def _type_name(value_type: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(value_type, tuple):
        return " or ".join(t.__name__ for t in value_type)
    return value_type.__name__


def _target_factory(source: Geometry, parameters: Mapping[OperationParameter, Any]) -> Optional[GeometryFactory]:
    target = parameters.get(OperationParameters.TARGET_REFERENCE_SYSTEM)
    if target is None or source.factory is None:
        return None
    return source.factory.with_reference_system(target)


class OperationParameters:
    """Catalog of spatial operation parameters."""

    TARGET_REFERENCE_SYSTEM = OperationParameter(
        "reftransform::target-reference-system", "Target reference system",
        ReferenceSystem, is_required=True,
    )

    METADATA_PRESERVATION = OperationParameter(
        "reftransform::metadata-preservation", "Metadata preservation",
        bool, default_value=False,
    )

    GEOMETRY_FACTORY = OperationParameter(
        "reftransform::geometry-factory", "Geometry factory",
        GeometryFactory, derive_default=_target_factory,
    )


def check_parameters(parameters: Optional[Mapping[Any, Any]]) -> Mapping[OperationParameter, Any]:
    """Validate that every key of a parameter mapping is an operation parameter."""
    if parameters is None:
        raise InvalidArgumentError("The parameters are None")
    for key in parameters:
        if not isinstance(key, OperationParameter):
            raise InvalidArgumentError(f"Unknown operation parameter: {key!r}")
    return parameters
