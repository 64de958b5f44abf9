"""
Spatial operations: transformation strategies and the geometry
reference transformation.
"""

from .parameters import OperationParameter, OperationParameters
from .operation import Operation, OperationState
from .strategy import (
    TransformationStrategy, GeographicConversionStrategy, DatumShiftStrategy,
    ForwardProjectionStrategy, ReverseProjectionStrategy, CompoundStrategy, create_strategy,
)
from .reference_transformation import ReferenceTransformation, transform_geometry

__all__ = [
    'OperationParameter', 'OperationParameters',
    'Operation', 'OperationState',
    'TransformationStrategy', 'GeographicConversionStrategy', 'DatumShiftStrategy',
    'ForwardProjectionStrategy', 'ReverseProjectionStrategy', 'CompoundStrategy', 'create_strategy',
    'ReferenceTransformation', 'transform_geometry',
]
