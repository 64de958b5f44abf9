"""
reftransform: coordinate reference system transformation core.

Provides measurement units and quantities, a reference system model,
a registry of coordinate operation methods and their implementations
(Miller Cylindrical, Transverse Mercator, geocentric translations), the
selection of transformation strategies between reference systems, and
ReferenceTransformation, which rebuilds whole geometries in a target
reference system.

Typical use:

    from reftransform import transform_geometry
    from reftransform.reference.catalog import ProjectedCoordinateReferenceSystems

    projected = transform_geometry(polygon, ProjectedCoordinateReferenceSystems.WORLD_MILLER)
"""

__version__ = "0.1.0"

from .config import TransformationConfig, DEFAULT_CONFIG
from .errors import (
    ReferenceTransformError, InvalidArgumentError, InvalidUnitError, MissingParameterError,
    UnitMismatchError, UnsupportedTransformationError, UnsupportedGeometryTypeError, ComputationError,
)
from .models import (
    UnitsOfMeasurement, Length, Angle, Scale, Coordinate, GeoCoordinate,
    GeometryType, GeometryFactory,
)
from .spatial import (
    OperationParameters, ReferenceTransformation, create_strategy, transform_geometry,
)

__all__ = [
    '__version__',
    'TransformationConfig', 'DEFAULT_CONFIG',
    'ReferenceTransformError', 'InvalidArgumentError', 'InvalidUnitError', 'MissingParameterError',
    'UnitMismatchError', 'UnsupportedTransformationError', 'UnsupportedGeometryTypeError',
    'ComputationError',
    'UnitsOfMeasurement', 'Length', 'Angle', 'Scale', 'Coordinate', 'GeoCoordinate',
    'GeometryType', 'GeometryFactory',
    'OperationParameters', 'ReferenceTransformation', 'create_strategy', 'transform_geometry',
]
