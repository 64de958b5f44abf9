"""
Transformation strategies.

A strategy converts coordinates given in the native units of a source
reference system to the native units of a target reference system.
create_strategy selects the path between two systems:

    projected source  -> reverse projection to its geographic base
    geographic pair   -> unit conversion (same datum) or datum shift
                         through WGS 84 geocentric translations
    projected target  -> forward projection from its geographic base

and chains the steps in a CompoundStrategy when more than one is needed.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
import logging

from ..config import DEFAULT_CONFIG, TransformationConfig
from ..errors import ComputationError, InvalidArgumentError, UnsupportedTransformationError
from ..models.coordinates import Coordinate
from ..models.measures import Length
from ..operations.conversions import GeographicToGeocentricConversion
from ..operations.factory import GeocentricTransformationFactory
from ..operations.geocentric import GeocentricTransformation
from ..operations.methods import CoordinateOperationMethods
from ..operations.parameters import CoordinateOperationParameters
from ..reference.systems import (
    GeographicCoordinateReferenceSystem, ProjectedCoordinateReferenceSystem, ReferenceSystem,
)

logger = logging.getLogger(__name__)


class TransformationStrategy(ABC):
    """
    Coordinate transformation between two reference systems.

    Args:
        source: Source reference system
        target: Target reference system
        config: Runtime configuration (finiteness checking)
    """

    def __init__(
        self,
        source: ReferenceSystem,
        target: ReferenceSystem,
        config: TransformationConfig = DEFAULT_CONFIG
    ):
        self._source = source
        self._target = target
        self._config = config

    @property
    def source(self) -> ReferenceSystem:
        return self._source

    @property
    def target(self) -> ReferenceSystem:
        return self._target

    def transform(self, coordinate: Coordinate) -> Coordinate:
        """
        Transform a coordinate.

        Raises:
            InvalidArgumentError: If coordinate is None
            ComputationError: If finiteness checking is on and the result
                is NaN or infinite
        """
        if coordinate is None:
            raise InvalidArgumentError("The coordinate is None")

        result = self.compute(coordinate)

        if self._config.check_finite and not result.is_finite():
            raise ComputationError(
                f"Transforming {coordinate} from {self._source.name} to {self._target.name} "
                f"gave a non-finite result {result}"
            )
        return result

    @abstractmethod
    def compute(self, coordinate: Coordinate) -> Coordinate:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source.identifier} -> {self._target.identifier})"


class GeographicConversionStrategy(TransformationStrategy):
    """Conversion between geographic systems sharing a datum (units, dimension)."""

    def compute(self, coordinate: Coordinate) -> Coordinate:
        return self._target.from_geo_coordinate(self._source.to_geo_coordinate(coordinate))


class DatumShiftStrategy(TransformationStrategy):
    """
    Datum shift between geographic systems through WGS 84.

    Positions are converted to geocentric coordinates on the source
    ellipsoid, translated to WGS 84, translated from WGS 84 to the target
    datum and converted back to geographic coordinates on the target
    ellipsoid.

    Raises:
        UnsupportedTransformationError: If a datum has no WGS 84 translation
            or no geocentric translation implementation is registered
    """

    def __init__(
        self,
        source: GeographicCoordinateReferenceSystem,
        target: GeographicCoordinateReferenceSystem,
        config: TransformationConfig = DEFAULT_CONFIG
    ):
        super().__init__(source, target, config)

        self._source_conversion = _geocentric_conversion(source, config)
        self._target_conversion = _geocentric_conversion(target, config)
        self._to_wgs84 = _wgs84_translation(source)
        self._from_wgs84 = _wgs84_translation(target)

    def compute(self, coordinate: Coordinate) -> Coordinate:
        geocentric = self._source_conversion.forward(self._source.to_geo_coordinate(coordinate))
        geocentric = self._from_wgs84.reverse(self._to_wgs84.forward(geocentric))
        return self._target.from_geo_coordinate(self._target_conversion.reverse(geocentric))


class ForwardProjectionStrategy(TransformationStrategy):
    """Projection from the geographic base of a projected system."""

    def __init__(self, target: ProjectedCoordinateReferenceSystem, config: TransformationConfig = DEFAULT_CONFIG):
        super().__init__(target.base_reference_system, target, config)

    def compute(self, coordinate: Coordinate) -> Coordinate:
        position = self._source.to_geo_coordinate(coordinate)
        return self._target.from_projected_coordinate(self._target.projection.forward(position))


class ReverseProjectionStrategy(TransformationStrategy):
    """Inverse projection to the geographic base of a projected system."""

    def __init__(self, source: ProjectedCoordinateReferenceSystem, config: TransformationConfig = DEFAULT_CONFIG):
        super().__init__(source, source.base_reference_system, config)

    def compute(self, coordinate: Coordinate) -> Coordinate:
        planar = self._source.to_projected_coordinate(coordinate)
        return self._target.from_geo_coordinate(self._source.projection.reverse(planar))


class CompoundStrategy(TransformationStrategy):
    """Chain of strategies applied in order; an empty chain is the identity."""

    def __init__(
        self,
        source: ReferenceSystem,
        target: ReferenceSystem,
        strategies: Sequence[TransformationStrategy],
        config: TransformationConfig = DEFAULT_CONFIG
    ):
        super().__init__(source, target, config)
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> Sequence[TransformationStrategy]:
        return self._strategies

    def compute(self, coordinate: Coordinate) -> Coordinate:
        for strategy in self._strategies:
            coordinate = strategy.transform(coordinate)
        return coordinate


def create_strategy(
    source: ReferenceSystem,
    target: ReferenceSystem,
    config: TransformationConfig = DEFAULT_CONFIG
) -> TransformationStrategy:
    """
    Select the transformation strategy between two reference systems.

    Args:
        source: Source reference system
        target: Target reference system
        config: Runtime configuration passed to the strategies

    Returns:
        Strategy converting native source coordinates to native target coordinates

    Raises:
        InvalidArgumentError: If source or target is None
        UnsupportedTransformationError: If no path connects the two systems
    """
    if source is None:
        raise InvalidArgumentError("The source reference system is None")
    if target is None:
        raise InvalidArgumentError("The target reference system is None")

    if source == target:
        return CompoundStrategy(source, target, (), config)

    steps: List[TransformationStrategy] = []

    source_geographic = _geographic_base(source)
    if isinstance(source, ProjectedCoordinateReferenceSystem):
        steps.append(ReverseProjectionStrategy(source, config))

    target_geographic = _geographic_base(target)

    if source_geographic != target_geographic:
        if source_geographic.datum == target_geographic.datum:
            steps.append(GeographicConversionStrategy(source_geographic, target_geographic, config))
        else:
            steps.append(DatumShiftStrategy(source_geographic, target_geographic, config))

    if isinstance(target, ProjectedCoordinateReferenceSystem):
        steps.append(ForwardProjectionStrategy(target, config))

    if len(steps) == 1:
        strategy = steps[0]
    else:
        strategy = CompoundStrategy(source, target, steps, config)

    logger.info(f"Selected {strategy} for {source.name} -> {target.name}")
    return strategy


def _geographic_base(reference_system: ReferenceSystem) -> GeographicCoordinateReferenceSystem:
    if isinstance(reference_system, GeographicCoordinateReferenceSystem):
        return reference_system
    if isinstance(reference_system, ProjectedCoordinateReferenceSystem):
        return reference_system.base_reference_system
    raise UnsupportedTransformationError(
        f"Transformation of {reference_system.type.value} reference system {reference_system} is not supported"
    )


def _geocentric_conversion(
    reference_system: GeographicCoordinateReferenceSystem,
    config: TransformationConfig
) -> GeographicToGeocentricConversion:
    return GeographicToGeocentricConversion(
        reference_system.datum.ellipsoid,
        reference_system.area_of_use,
        config.geocentric_max_iterations,
        config.geocentric_tolerance,
    )


def _wgs84_translation(reference_system: GeographicCoordinateReferenceSystem) -> GeocentricTransformation:
    datum = reference_system.datum
    if datum.to_wgs84 is None:
        raise UnsupportedTransformationError(f"The datum {datum} has no transformation to WGS 84")

    dx, dy, dz = datum.to_wgs84
    P = CoordinateOperationParameters
    parameters = {
        P.X_AXIS_TRANSLATION: Length.from_metre(dx),
        P.Y_AXIS_TRANSLATION: Length.from_metre(dy),
        P.Z_AXIS_TRANSLATION: Length.from_metre(dz),
    }
    translation = GeocentricTransformationFactory.from_method(
        CoordinateOperationMethods.GEOCENTRIC_TRANSLATION,
        parameters,
        area_of_use=reference_system.area_of_use,
    )
    if translation is None:
        raise UnsupportedTransformationError("No geocentric translation implementation is registered")
    return translation
