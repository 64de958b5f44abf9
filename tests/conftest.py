"""Shared fixtures for the reftransform tests."""

import pytest

from reftransform.models.geometry import GeometryFactory
from reftransform.models.measures import Angle, Length
from reftransform.operations.parameters import CoordinateOperationParameters
from reftransform.operations.projections import WorldMillerCylindricalProjection
from reftransform.reference.catalog import (
    AreasOfUse, GeographicCoordinateReferenceSystems, ProjectedCoordinateReferenceSystems,
)
from reftransform.reference.objects import Ellipsoid

P = CoordinateOperationParameters

SPHERE_RADIUS = 6371000.0


@pytest.fixture
def sphere():
    return Ellipsoid.sphere("TEST::7035", "Test sphere", Length.from_metre(SPHERE_RADIUS))


@pytest.fixture
def miller_parameters():
    return {
        P.FALSE_EASTING: Length.ZERO,
        P.FALSE_NORTHING: Length.ZERO,
        P.LONGITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
    }


@pytest.fixture
def miller(sphere, miller_parameters):
    return WorldMillerCylindricalProjection(
        "TEST::54002", "Miller on sphere", miller_parameters, sphere, AreasOfUse.WORLD
    )


@pytest.fixture
def wgs84():
    return GeographicCoordinateReferenceSystems.WGS84


@pytest.fixture
def world_miller():
    return ProjectedCoordinateReferenceSystems.WORLD_MILLER


@pytest.fixture
def wgs84_factory(wgs84):
    return GeometryFactory(wgs84)
