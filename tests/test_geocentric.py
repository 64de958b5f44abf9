import math

import pytest

from reftransform.errors import InvalidArgumentError, MissingParameterError
from reftransform.models.coordinates import Coordinate, GeoCoordinate
from reftransform.models.measures import Length
from reftransform.operations.conversions import GeographicToGeocentricConversion
from reftransform.operations.factory import GeocentricTransformationFactory
from reftransform.operations.geocentric import GeocentricTranslation
from reftransform.operations.parameters import CoordinateOperationParameters as P
from reftransform.reference.catalog import AreasOfUse, Ellipsoids


@pytest.fixture
def conversion():
    return GeographicToGeocentricConversion(Ellipsoids.WGS84, AreasOfUse.WORLD)


def test_equator_and_pole(conversion):
    a = Ellipsoids.WGS84.semi_major_axis.base_value
    b = Ellipsoids.WGS84.semi_minor_axis.base_value

    equator = conversion.forward(GeoCoordinate.from_degrees(0, 0))
    assert equator.x == pytest.approx(a)
    assert equator.y == pytest.approx(0.0, abs=1e-9)
    assert equator.z == pytest.approx(0.0, abs=1e-9)

    pole = conversion.forward(GeoCoordinate.from_degrees(90, 0))
    assert pole.x == pytest.approx(0.0, abs=1e-6)
    assert pole.z == pytest.approx(b)


def test_round_trip(conversion):
    for latitude, longitude, height in [(0, 0, 0), (47.5, 19.04, 120.0), (-33.9, 151.2, -30.0),
                                        (89.5, -120.0, 2500.0), (-75.0, 179.9, 10.0)]:
        result = conversion.reverse(conversion.forward(GeoCoordinate.from_degrees(latitude, longitude, height)))
        assert result.latitude.degrees == pytest.approx(latitude, abs=1e-9)
        assert result.longitude.degrees == pytest.approx(longitude, abs=1e-9)
        assert result.height.base_value == pytest.approx(height, abs=1e-4)


def test_reverse_on_polar_axis(conversion):
    b = Ellipsoids.WGS84.semi_minor_axis.base_value
    result = conversion.reverse(Coordinate(0.0, 0.0, -(b + 100.0)))
    assert result.latitude.degrees == pytest.approx(-90.0)
    assert result.height.base_value == pytest.approx(100.0)


def test_sphere_reverse_is_spherical(sphere):
    conversion = GeographicToGeocentricConversion(sphere, AreasOfUse.WORLD)
    result = conversion.reverse(Coordinate(6371000.0, 0.0, 6371000.0))
    assert result.latitude.degrees == pytest.approx(45.0)
    assert result.height.base_value == pytest.approx(6371000.0 * (math.sqrt(2) - 1))


def test_conversion_arguments():
    with pytest.raises(InvalidArgumentError):
        GeographicToGeocentricConversion(None, AreasOfUse.WORLD)
    with pytest.raises(InvalidArgumentError):
        GeographicToGeocentricConversion(Ellipsoids.WGS84, AreasOfUse.WORLD, max_iterations=0)


def _translation(dx, dy, dz):
    return {
        P.X_AXIS_TRANSLATION: Length.from_metre(dx),
        P.Y_AXIS_TRANSLATION: Length.from_metre(dy),
        P.Z_AXIS_TRANSLATION: Length.from_metre(dz),
    }


def test_translation_forward_and_reverse():
    translation = GeocentricTranslation("TEST::1", "Shift", _translation(-87, -98, -121), AreasOfUse.WORLD)
    source = Coordinate(4000000.0, 1000000.0, 4800000.0)

    shifted = translation.forward(source)
    assert shifted == Coordinate(4000000.0 - 87, 1000000.0 - 98, 4800000.0 - 121)
    assert translation.reverse(shifted) == source


def test_translation_requires_all_axes():
    parameters = _translation(1, 2, 3)
    del parameters[P.Z_AXIS_TRANSLATION]
    with pytest.raises(MissingParameterError):
        GeocentricTranslation("TEST::1", "Shift", parameters, AreasOfUse.WORLD)


def test_predefined_translations():
    (ed50,) = GeocentricTransformationFactory.from_identifier("EPSG::1133")
    assert isinstance(ed50, GeocentricTranslation)
    assert ed50.translation == Coordinate(-87.0, -98.0, -121.0)
    assert ed50.area_of_use == AreasOfUse.EUROPE

    assert len(GeocentricTransformationFactory.from_name("to WGS 84")) == 3
