"""
Reference system model: identified objects, datums, coordinate systems
and reference systems.

The catalog of predefined objects lives in reftransform.reference.catalog.
"""

from .objects import (
    IdentifiedObject, AreaOfUse, PrimeMeridian, Ellipsoid, GeodeticDatum,
    AxisDirection, CoordinateSystemAxis, CoordinateSystem,
)
from .systems import (
    ReferenceSystemType, ReferenceSystem, CoordinateReferenceSystem,
    GeographicCoordinateReferenceSystem, ProjectedCoordinateReferenceSystem,
)

__all__ = [
    'IdentifiedObject', 'AreaOfUse', 'PrimeMeridian', 'Ellipsoid', 'GeodeticDatum',
    'AxisDirection', 'CoordinateSystemAxis', 'CoordinateSystem',
    'ReferenceSystemType', 'ReferenceSystem', 'CoordinateReferenceSystem',
    'GeographicCoordinateReferenceSystem', 'ProjectedCoordinateReferenceSystem',
]
