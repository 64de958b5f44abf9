"""
Data models for reftransform.
"""

from .units import UnitQuantityType, UnitOfMeasurement, UnitsOfMeasurement
from .measures import Measure, Length, Angle, Scale
from .coordinates import Coordinate, GeoCoordinate
from .geometry import (
    GeometryType, Geometry, Point, Line, LineString, LinearRing, Polygon, Triangle,
    GeometryCollection, MultiPoint, MultiLineString, MultiPolygon, GeometryFactory,
)

__all__ = [
    'UnitQuantityType', 'UnitOfMeasurement', 'UnitsOfMeasurement',
    'Measure', 'Length', 'Angle', 'Scale',
    'Coordinate', 'GeoCoordinate',
    'GeometryType', 'Geometry', 'Point', 'Line', 'LineString', 'LinearRing',
    'Polygon', 'Triangle', 'GeometryCollection', 'MultiPoint', 'MultiLineString',
    'MultiPolygon', 'GeometryFactory',
]
