import math
from dataclasses import dataclass

import pytest

from reftransform.config import TransformationConfig
from reftransform.errors import ComputationError, InvalidArgumentError, UnsupportedTransformationError
from reftransform.models.coordinates import Coordinate
from reftransform.reference.catalog import GeographicCoordinateReferenceSystems, ProjectedCoordinateReferenceSystems
from reftransform.reference.systems import ReferenceSystem, ReferenceSystemType
from reftransform.spatial.strategy import (
    CompoundStrategy, DatumShiftStrategy, ForwardProjectionStrategy, GeographicConversionStrategy,
    ReverseProjectionStrategy, create_strategy,
)

WGS84 = GeographicCoordinateReferenceSystems.WGS84
WORLD_MILLER = ProjectedCoordinateReferenceSystems.WORLD_MILLER


@dataclass(frozen=True, eq=False)
class VerticalReferenceSystem(ReferenceSystem):

    @property
    def dimension(self) -> int:
        return 1

    @property
    def type(self) -> ReferenceSystemType:
        return ReferenceSystemType.VERTICAL


def test_none_systems_rejected():
    with pytest.raises(InvalidArgumentError):
        create_strategy(None, WGS84)
    with pytest.raises(InvalidArgumentError):
        create_strategy(WGS84, None)


def test_equal_systems_give_identity():
    strategy = create_strategy(WGS84, WGS84)
    assert isinstance(strategy, CompoundStrategy)
    assert strategy.strategies == ()
    assert strategy.transform(Coordinate(16.4, 48.2)) == Coordinate(16.4, 48.2)


def test_geographic_to_projected():
    strategy = create_strategy(WGS84, WORLD_MILLER)
    assert isinstance(strategy, ForwardProjectionStrategy)

    result = strategy.transform(Coordinate(90.0, 45.0))
    assert result.x == pytest.approx(6378137.0 * math.pi / 2)
    assert result.y > 0


def test_projected_to_geographic():
    strategy = create_strategy(WORLD_MILLER, WGS84)
    assert isinstance(strategy, ReverseProjectionStrategy)

    projected = create_strategy(WGS84, WORLD_MILLER).transform(Coordinate(-73.98, 40.75))
    result = strategy.transform(projected)
    assert result.x == pytest.approx(-73.98)
    assert result.y == pytest.approx(40.75)


def test_projected_to_projected():
    utm = ProjectedCoordinateReferenceSystems.utm_zone(33)
    strategy = create_strategy(WORLD_MILLER, utm)

    assert isinstance(strategy, CompoundStrategy)
    assert [type(step) for step in strategy.strategies] == [ReverseProjectionStrategy, ForwardProjectionStrategy]

    planar = create_strategy(WGS84, WORLD_MILLER).transform(Coordinate(15.0, 0.0))
    result = strategy.transform(planar)
    assert result.x == pytest.approx(500000.0, abs=1e-6)
    assert result.y == pytest.approx(0.0, abs=1e-6)


def test_geographic_to_utm():
    result = create_strategy(WGS84, ProjectedCoordinateReferenceSystems.utm_zone(33)).transform(Coordinate(15.0, 0.0))
    assert result.x == pytest.approx(500000.0, abs=1e-6)
    assert result.y == pytest.approx(0.0, abs=1e-6)


def test_same_datum_conversion():
    strategy = create_strategy(WGS84, GeographicCoordinateReferenceSystems.WGS84_3D)
    assert isinstance(strategy, GeographicConversionStrategy)
    assert strategy.transform(Coordinate(16.4, 48.2)) == Coordinate(16.4, 48.2, 0.0)


def test_datum_shift_round_trip():
    ed50 = GeographicCoordinateReferenceSystems.ED50
    to_ed50 = create_strategy(WGS84, ed50)
    to_wgs84 = create_strategy(ed50, WGS84)
    assert isinstance(to_ed50, DatumShiftStrategy)

    source = Coordinate(16.4, 48.2)
    shifted = to_ed50.transform(source)
    result = to_wgs84.transform(shifted)

    shift = max(abs(shifted.x - source.x), abs(shifted.y - source.y))
    assert 1e-5 < shift < 1e-2
    assert result.x == pytest.approx(source.x, abs=1e-7)
    assert result.y == pytest.approx(source.y, abs=1e-7)


def test_datum_without_wgs84_translation():
    with pytest.raises(UnsupportedTransformationError):
        create_strategy(WGS84, GeographicCoordinateReferenceSystems.SPHERE)


def test_unsupported_reference_system_type():
    vertical = VerticalReferenceSystem("TEST::5773", "Height")
    with pytest.raises(UnsupportedTransformationError):
        create_strategy(vertical, WGS84)
    with pytest.raises(UnsupportedTransformationError):
        create_strategy(WGS84, vertical)


def test_non_finite_results_rejected():
    strategy = create_strategy(WGS84, WORLD_MILLER)
    with pytest.raises(ComputationError):
        strategy.transform(Coordinate(math.nan, 45.0))
    with pytest.raises(InvalidArgumentError):
        strategy.transform(None)


def test_non_finite_check_can_be_disabled():
    strategy = create_strategy(WGS84, WORLD_MILLER, TransformationConfig(check_finite=False))
    result = strategy.transform(Coordinate(math.nan, 45.0))
    assert math.isnan(result.x)
