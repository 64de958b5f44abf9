import math

import pytest

from reftransform.errors import InvalidArgumentError, MissingParameterError
from reftransform.models.coordinates import Coordinate, GeoCoordinate
from reftransform.models.measures import Angle, Length
from reftransform.operations.methods import CoordinateOperationMethods
from reftransform.operations.parameters import CoordinateOperationParameters as P
from reftransform.operations.projections import WorldMillerCylindricalProjection
from reftransform.reference.catalog import AreasOfUse

SPHERE_RADIUS = 6371000.0


def test_origin_maps_to_zero(miller):
    result = miller.forward(GeoCoordinate.from_degrees(0, 0))
    assert result.x == pytest.approx(0.0, abs=1e-9)
    assert result.y == pytest.approx(0.0, abs=1e-9)


def test_forward_concrete_values(miller):
    result = miller.forward(GeoCoordinate.from_degrees(45, 90))
    assert result.x == pytest.approx(SPHERE_RADIUS * math.pi / 2, rel=1e-9)
    assert result.x == pytest.approx(10007543.4, abs=0.1)
    assert result.y == pytest.approx(5369761.6, rel=1e-5)


def test_forward_is_antisymmetric(miller):
    north = miller.forward(GeoCoordinate.from_degrees(30, 45))
    south = miller.forward(GeoCoordinate.from_degrees(-30, -45))
    assert north.x == pytest.approx(-south.x)
    assert north.y == pytest.approx(-south.y)


def test_round_trip(miller):
    for latitude in range(-89, 90, 7):
        for longitude in range(-179, 180, 11):
            source = GeoCoordinate.from_degrees(latitude, longitude)
            result = miller.reverse(miller.forward(source))
            assert result.latitude.degrees == pytest.approx(latitude, abs=1e-6)
            assert result.longitude.degrees == pytest.approx(longitude, abs=1e-6)


def test_longitude_difference_wraps_once(sphere, miller_parameters):
    parameters = dict(miller_parameters)
    parameters[P.LONGITUDE_OF_NATURAL_ORIGIN] = Angle.from_degree(-179)
    projection = WorldMillerCylindricalProjection("TEST::1", "Miller", parameters, sphere, AreasOfUse.WORLD)

    result = projection.forward(GeoCoordinate.from_degrees(0, 179))

    assert result.x == pytest.approx(SPHERE_RADIUS * math.radians(-2))
    assert abs(result.x) < SPHERE_RADIUS * math.pi


def test_false_offsets_use_base_values(sphere):
    parameters = {
        P.FALSE_EASTING: Length.from_kilometre(1),
        P.FALSE_NORTHING: Length.from_foot(1000),
        P.LONGITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
    }
    projection = WorldMillerCylindricalProjection("TEST::1", "Miller", parameters, sphere, AreasOfUse.WORLD)

    result = projection.forward(GeoCoordinate.from_degrees(0, 0))
    assert result.x == pytest.approx(1000.0)
    assert result.y == pytest.approx(304.8)

    origin = projection.reverse(Coordinate(1000.0, 304.8))
    assert origin.latitude.degrees == pytest.approx(0.0, abs=1e-12)
    assert origin.longitude.degrees == pytest.approx(0.0, abs=1e-12)


def test_height_is_carried(miller):
    result = miller.forward(GeoCoordinate.from_degrees(10, 10, 250.0))
    assert result.z == 250.0
    assert miller.reverse(result).height.base_value == 250.0


def test_missing_false_northing(sphere):
    parameters = {
        P.FALSE_EASTING: Length.ZERO,
        P.LONGITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
    }
    with pytest.raises(MissingParameterError):
        WorldMillerCylindricalProjection("TEST::1", "Miller", parameters, sphere, AreasOfUse.WORLD)


def test_invalid_construction_arguments(sphere, miller_parameters):
    with pytest.raises(InvalidArgumentError):
        WorldMillerCylindricalProjection("TEST::1", "Miller", miller_parameters, None, AreasOfUse.WORLD)
    with pytest.raises(InvalidArgumentError):
        WorldMillerCylindricalProjection("TEST::1", "Miller", miller_parameters, sphere, None)
    with pytest.raises(InvalidArgumentError):
        WorldMillerCylindricalProjection("", "Miller", miller_parameters, sphere, AreasOfUse.WORLD)
    with pytest.raises(InvalidArgumentError):
        WorldMillerCylindricalProjection("TEST::1", "Miller", None, sphere, AreasOfUse.WORLD)


def test_none_coordinate(miller):
    with pytest.raises(InvalidArgumentError):
        miller.forward(None)
    with pytest.raises(InvalidArgumentError):
        miller.reverse(None)


def test_projection_properties(miller, sphere):
    assert miller.method is CoordinateOperationMethods.MILLER_CYLINDRICAL_PROJECTION
    assert miller.ellipsoid is sphere
    assert miller.is_reversible
    with pytest.raises(TypeError):
        miller.parameters[P.FALSE_EASTING] = Length.from_metre(1)
