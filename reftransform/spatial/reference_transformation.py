"""
Reference system transformation of geometries.

Rebuilds a geometry in a target reference system: every coordinate is
passed through the transformation strategy between the source and the
target system, and every composite is recreated by the target factory
from its transformed parts. Geometries already in the target system, or
without a reference system, are returned as they are.
"""

from typing import Any, Callable, Dict, Mapping, Optional
import logging

from ..config import DEFAULT_CONFIG, TransformationConfig
from ..errors import UnsupportedGeometryTypeError
from ..models.coordinates import Coordinate
from ..models.geometry import (
    Geometry, GeometryCollection, GeometryFactory, GeometryType, Line, LinearRing, LineString,
    MultiLineString, MultiPoint, MultiPolygon, Point, Polygon, Triangle,
)
from ..reference.systems import ReferenceSystem
from .operation import Operation
from .parameters import OperationParameter, OperationParameters
from .strategy import TransformationStrategy, create_strategy

logger = logging.getLogger(__name__)


class ReferenceTransformation(Operation[Geometry, Geometry]):
    """
    Transforms a geometry to another reference system.

    Args:
        source: Geometry to transform
        parameters: Operation parameters; TargetReferenceSystem is required,
                    MetadataPreservation and GeometryFactory are optional
        config: Runtime configuration (DEFAULT_CONFIG if None)

    Raises:
        InvalidArgumentError: If source or parameters is None
        MissingParameterError: If no target reference system is given
        UnsupportedTransformationError: On execution, if no path connects
            the source and target systems
        UnsupportedGeometryTypeError: On execution, for unknown geometry types
    """

    def __init__(
        self,
        source: Geometry,
        parameters: Mapping[OperationParameter, Any],
        config: Optional[TransformationConfig] = None
    ):
        super().__init__(source, parameters)
        self._config = config or DEFAULT_CONFIG

        self._target_reference_system: ReferenceSystem = self.get_parameter(
            OperationParameters.TARGET_REFERENCE_SYSTEM
        )
        self._metadata_preservation: bool = self.get_parameter(
            OperationParameters.METADATA_PRESERVATION, self._config.metadata_preservation
        )
        self._factory: Optional[GeometryFactory] = None
        self._strategy: Optional[TransformationStrategy] = None

        self._handlers: Dict[GeometryType, Callable[[Any], Geometry]] = {
            GeometryType.POINT: self._compute_point,
            GeometryType.LINE: self._compute_line,
            GeometryType.LINEAR_RING: self._compute_linear_ring,
            GeometryType.LINE_STRING: self._compute_line_string,
            GeometryType.POLYGON: self._compute_polygon,
            GeometryType.TRIANGLE: self._compute_triangle,
            GeometryType.MULTI_POINT: self._compute_multi_point,
            GeometryType.MULTI_LINE_STRING: self._compute_multi_line_string,
            GeometryType.MULTI_POLYGON: self._compute_multi_polygon,
            GeometryType.GEOMETRY_COLLECTION: self._compute_geometry_collection,
        }

    @property
    def target_reference_system(self) -> ReferenceSystem:
        return self._target_reference_system

    @property
    def metadata_preservation(self) -> bool:
        return self._metadata_preservation

    @property
    def strategy(self) -> Optional[TransformationStrategy]:
        """Selected strategy, None before preparation or when no transformation is needed."""
        return self._strategy

    # -------------------------------------------------------------------------
    # operation lifecycle
    # -------------------------------------------------------------------------

    def prepare_result(self) -> None:
        source_reference_system = self._source.reference_system
        if source_reference_system is not None and source_reference_system != self._target_reference_system:
            self._strategy = create_strategy(source_reference_system, self._target_reference_system, self._config)

        self._factory = self.get_parameter(OperationParameters.GEOMETRY_FACTORY)
        if self._factory is None:
            self._factory = GeometryFactory(self._target_reference_system)

    def compute_result(self) -> None:
        self._result = self._compute(self._source)

    # -------------------------------------------------------------------------
    # dispatch
    # -------------------------------------------------------------------------

    def _compute(self, source: Optional[Geometry]) -> Optional[Geometry]:
        if source is None:
            return None

        geometry_type = getattr(source, 'geometry_type', None)
        handler = self._handlers.get(geometry_type) if isinstance(source, Geometry) else None
        if handler is None:
            raise UnsupportedGeometryTypeError(
                f"Transformation of {type(source).__name__} geometries is not supported"
            )

        if source.reference_system is None or source.reference_system == self._target_reference_system:
            return source

        logger.debug(f"Transforming {geometry_type.value}")
        return handler(source)

    def _metadata(self, source: Geometry) -> Optional[Mapping[str, Any]]:
        return source.metadata if self._metadata_preservation else None

    def _coordinate(self, coordinate: Coordinate) -> Coordinate:
        return self._strategy.transform(coordinate)

    def _compute_point(self, source: Point) -> Point:
        return self._factory.create_point(self._coordinate(source.coordinate), self._metadata(source))

    def _compute_line(self, source: Line) -> Line:
        return self._factory.create_line(
            self._coordinate(source.start_coordinate),
            self._coordinate(source.end_coordinate),
            self._metadata(source)
        )

    def _compute_linear_ring(self, source: LinearRing) -> LinearRing:
        return self._factory.create_linear_ring(
            [self._coordinate(coordinate) for coordinate in source.coordinates],
            self._metadata(source)
        )

    def _compute_line_string(self, source: LineString) -> LineString:
        return self._factory.create_line_string(
            [self._coordinate(coordinate) for coordinate in source.coordinates],
            self._metadata(source)
        )

    def _compute_polygon(self, source: Polygon) -> Polygon:
        holes = None
        if source.hole_count > 0:
            holes = [self._compute_linear_ring(hole) for hole in source.holes]

        return self._factory.create_polygon(
            self._compute_linear_ring(source.shell),
            holes,
            self._metadata(source)
        )

    def _compute_triangle(self, source: Triangle) -> Triangle:
        first, second, third = source.shell.coordinates[:3]
        return self._factory.create_triangle(
            self._coordinate(first),
            self._coordinate(second),
            self._coordinate(third),
            self._metadata(source)
        )

    def _compute_multi_point(self, source: MultiPoint) -> MultiPoint:
        return self._factory.create_multi_point(
            [self._compute(item) for item in source],
            self._metadata(source)
        )

    def _compute_multi_line_string(self, source: MultiLineString) -> MultiLineString:
        return self._factory.create_multi_line_string(
            [self._compute(item) for item in source],
            self._metadata(source)
        )

    def _compute_multi_polygon(self, source: MultiPolygon) -> MultiPolygon:
        return self._factory.create_multi_polygon(
            [self._compute(item) for item in source],
            self._metadata(source)
        )

    def _compute_geometry_collection(self, source: GeometryCollection) -> GeometryCollection:
        return self._factory.create_geometry_collection(
            [self._compute(item) for item in source],
            self._metadata(source)
        )


def transform_geometry(
    geometry: Geometry,
    target: ReferenceSystem,
    metadata_preservation: Optional[bool] = None,
    factory: Optional[GeometryFactory] = None,
    config: Optional[TransformationConfig] = None
) -> Optional[Geometry]:
    """
    Transform a geometry to a target reference system.

    Args:
        geometry: Geometry to transform
        target: Target reference system
        metadata_preservation: Copy metadata onto the result (configuration
                               default if None)
        factory: Factory creating the result (derived from the source if None)
        config: Runtime configuration

    Returns:
        The transformed geometry
    """
    parameters: Dict[OperationParameter, Any] = {OperationParameters.TARGET_REFERENCE_SYSTEM: target}
    if metadata_preservation is not None:
        parameters[OperationParameters.METADATA_PRESERVATION] = metadata_preservation
    if factory is not None:
        parameters[OperationParameters.GEOMETRY_FACTORY] = factory

    return ReferenceTransformation(geometry, parameters, config).execute()
