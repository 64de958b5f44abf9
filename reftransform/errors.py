"""
Exception types for the reference transformation core.

Errors are raised at the point of detection and propagate to the caller.
The only place where errors are absorbed is the multi-candidate lookup of
the operation factories, which drops candidates that fail to construct.
"""


class ReferenceTransformError(Exception):
    """Base class of all errors raised by reftransform."""
    pass


class InvalidArgumentError(ReferenceTransformError, ValueError):
    """Raised when a required input is None, empty or otherwise invalid."""
    pass


class InvalidUnitError(InvalidArgumentError):
    """Raised when a unit of measurement has the wrong quantity type."""
    pass


class MissingParameterError(InvalidArgumentError):
    """Raised when a parameter required by an operation is absent."""

    def __init__(self, parameter_name: str, message: str = ""):
        self.parameter_name = parameter_name
        super().__init__(message or f"The parameters do not contain a value for '{parameter_name}'")


class UnitMismatchError(InvalidArgumentError):
    """Raised when a parameter value is not of the kind its descriptor declares."""

    def __init__(self, parameter_name: str, expected: str, actual: str):
        self.parameter_name = parameter_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parameter '{parameter_name}' requires a {expected} value, got {actual}"
        )


class UnsupportedTransformationError(ReferenceTransformError):
    """Raised when no transformation path connects two reference systems."""
    pass


class UnsupportedGeometryTypeError(ReferenceTransformError, TypeError):
    """Raised when the transformation driver meets an unknown geometry variant."""
    pass


class ComputationError(ReferenceTransformError, ArithmeticError):
    """Raised when a numeric transform yields a non-finite result."""
    pass
