"""
Spatial operation base class.

An operation is created for one source and one parameter mapping, and
runs through prepare, compute and finalize exactly once. The result is
cached, so executing again returns the same object.
"""

from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar
import logging

from ..errors import InvalidArgumentError
from .parameters import OperationParameter, check_parameters

logger = logging.getLogger(__name__)

S = TypeVar('S')
R = TypeVar('R')


class OperationState(Enum):
    """Lifecycle state of an operation."""
    INITIALIZED = "initialized"
    PREPARED = "prepared"
    FINISHED = "finished"


class Operation(ABC, Generic[S, R]):
    """
    Base class of spatial operations.

    Args:
        source: Source of the operation
        parameters: Operation parameter values

    Raises:
        InvalidArgumentError: If source or parameters is None
    """

    def __init__(self, source: S, parameters: Mapping[OperationParameter, Any]):
        if source is None:
            raise InvalidArgumentError("The source is None")
        self._source = source
        self._parameters = MappingProxyType(dict(check_parameters(parameters)))
        self._result: Optional[R] = None
        self._state = OperationState.INITIALIZED

    @property
    def source(self) -> S:
        return self._source

    @property
    def parameters(self) -> Mapping[OperationParameter, Any]:
        return self._parameters

    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def result(self) -> R:
        """Result of the operation, executing it on first access."""
        return self.execute()

    def get_parameter(self, parameter: OperationParameter, default: Any = None) -> Any:
        """Resolve a parameter against the supplied values and the source."""
        return parameter.resolve(self._parameters, self._source, default)

    def execute(self) -> R:
        """Run the operation once and return its result."""
        if self._state is OperationState.FINISHED:
            return self._result

        if self._state is OperationState.INITIALIZED:
            self.prepare_result()
            self._state = OperationState.PREPARED

        self.compute_result()
        self.finalize_result()
        self._state = OperationState.FINISHED
        logger.debug(f"{type(self).__name__} finished")
        return self._result

    def prepare_result(self) -> None:
        """Resolve everything the computation needs."""
        pass

    @abstractmethod
    def compute_result(self) -> None:
        """Compute the result and store it in _result."""

    def finalize_result(self) -> None:
        """Post-process the computed result."""
        pass
