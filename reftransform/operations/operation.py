"""
Coordinate operation base classes.

A coordinate operation binds an operation method to resolved parameter
values. Construction validates the parameter mapping against the
method's declared parameters, so a missing or mismatched parameter fails
immediately. After construction operations are immutable; forward and
reverse computations depend only on their argument and the cached
constants, so a single instance may be shared between threads.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..errors import InvalidArgumentError
from ..models.coordinates import Coordinate, GeoCoordinate
from ..reference.objects import AreaOfUse, Ellipsoid
from .methods import CoordinateOperationMethod
from .parameters import CoordinateOperationParameter, ParameterMap, get_base_value, get_parameter_value


class CoordinateOperation(ABC):
    """
    Base class of coordinate operations.

    Args:
        identifier: Identifier of the operation
        name: Name of the operation
        method: Operation method implemented
        parameters: Parameter values keyed by descriptor
        area_of_use: Area where the operation is applicable

    Raises:
        InvalidArgumentError: If identifier is empty, method or area of use
            is None, or the method requires parameters and none are given
        MissingParameterError: If a parameter declared by the method is absent
        UnitMismatchError: If a parameter value has the wrong kind
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: CoordinateOperationMethod,
        parameters: Optional[ParameterMap],
        area_of_use: AreaOfUse
    ):
        if not identifier:
            raise InvalidArgumentError("The identifier of the operation is empty")
        if method is None:
            raise InvalidArgumentError("The method is None")
        if area_of_use is None:
            raise InvalidArgumentError("The area of use is None")
        if parameters is None and method.parameters:
            raise InvalidArgumentError(f"The method {method.name} requires parameters")

        self._identifier = identifier
        self._name = name or ""
        self._method = method
        self._area_of_use = area_of_use
        self._parameters: Mapping[CoordinateOperationParameter, Any] = MappingProxyType(dict(parameters or {}))

        for parameter in method.parameters:
            get_parameter_value(self._parameters, parameter)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def name(self) -> str:
        return self._name

    @property
    def method(self) -> CoordinateOperationMethod:
        return self._method

    @property
    def parameters(self) -> Mapping[CoordinateOperationParameter, Any]:
        """Read-only view of the parameter values."""
        return self._parameters

    @property
    def area_of_use(self) -> AreaOfUse:
        return self._area_of_use

    @property
    def is_reversible(self) -> bool:
        return self._method.is_reversible

    def _base_value(self, parameter: CoordinateOperationParameter) -> float:
        return get_base_value(self._parameters, parameter)

    def _check_reversible(self) -> None:
        if not self.is_reversible:
            raise NotImplementedError(f"The operation {self._name} is not reversible")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identifier!r}, {self._name!r})"


class CoordinateTransformation(CoordinateOperation):
    """Operation between two Cartesian coordinate spaces."""

    def forward(self, coordinate: Coordinate) -> Coordinate:
        """Apply the operation."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")
        return self.compute_forward(coordinate)

    def reverse(self, coordinate: Coordinate) -> Coordinate:
        """Apply the inverse operation."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")
        self._check_reversible()
        return self.compute_reverse(coordinate)

    @abstractmethod
    def compute_forward(self, coordinate: Coordinate) -> Coordinate:
        pass

    @abstractmethod
    def compute_reverse(self, coordinate: Coordinate) -> Coordinate:
        pass


class CoordinateProjection(CoordinateOperation):
    """
    Map projection between geographic and planar coordinates.

    Implementations resolve and cache their working constants in the
    constructor and implement compute_forward (geographic to planar) and
    compute_reverse (planar to geographic). Planar results are in metres.

    Raises:
        InvalidArgumentError: If the ellipsoid is None (in addition to the
            conditions of CoordinateOperation)
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: CoordinateOperationMethod,
        parameters: Optional[ParameterMap],
        ellipsoid: Ellipsoid,
        area_of_use: AreaOfUse
    ):
        if ellipsoid is None:
            raise InvalidArgumentError("The ellipsoid is None")
        super().__init__(identifier, name, method, parameters, area_of_use)
        self._ellipsoid = ellipsoid

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def forward(self, coordinate: GeoCoordinate) -> Coordinate:
        """Project a geographic position."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")
        return self.compute_forward(coordinate)

    def reverse(self, coordinate: Coordinate) -> GeoCoordinate:
        """Unproject a planar coordinate."""
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")
        self._check_reversible()
        return self.compute_reverse(coordinate)

    @abstractmethod
    def compute_forward(self, coordinate: GeoCoordinate) -> Coordinate:
        pass

    @abstractmethod
    def compute_reverse(self, coordinate: Coordinate) -> GeoCoordinate:
        pass
