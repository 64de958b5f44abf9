"""
Coordinate operations: parameters, methods, projections, geocentric
operations and the operation factories.
"""

from .parameters import (
    ParameterKind, CoordinateOperationParameter, CoordinateOperationParameters,
    get_parameter_value, get_base_value,
)
from .methods import CoordinateOperationMethod, CoordinateOperationMethods
from .operation import CoordinateOperation, CoordinateTransformation, CoordinateProjection
from .projections import WorldMillerCylindricalProjection, TransverseMercatorProjection
from .conversions import GeographicToGeocentricConversion
from .geocentric import GeocentricTransformation, GeocentricTranslation
from .factory import (
    OperationDefinition, OperationFactory, CoordinateProjectionFactory, GeocentricTransformationFactory,
)

__all__ = [
    'ParameterKind', 'CoordinateOperationParameter', 'CoordinateOperationParameters',
    'get_parameter_value', 'get_base_value',
    'CoordinateOperationMethod', 'CoordinateOperationMethods',
    'CoordinateOperation', 'CoordinateTransformation', 'CoordinateProjection',
    'WorldMillerCylindricalProjection', 'TransverseMercatorProjection',
    'GeographicToGeocentricConversion',
    'GeocentricTransformation', 'GeocentricTranslation',
    'OperationDefinition', 'OperationFactory',
    'CoordinateProjectionFactory', 'GeocentricTransformationFactory',
]
