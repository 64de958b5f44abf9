import pytest

from reftransform.errors import InvalidArgumentError
from reftransform.models.coordinates import Coordinate
from reftransform.models.geometry import GeometryFactory, GeometryType


def _square(size):
    return [Coordinate(0.0, 0.0), Coordinate(size, 0.0), Coordinate(size, size), Coordinate(0.0, size)]


def test_linear_ring_is_closed(wgs84_factory):
    ring = wgs84_factory.create_linear_ring(_square(1.0))
    assert ring.coordinate_count == 5
    assert ring.is_closed
    assert ring.coordinates[-1] == ring.coordinates[0]

    closed = wgs84_factory.create_linear_ring(ring.coordinates)
    assert closed.coordinate_count == 5


def test_polygon_keeps_closed_holes(wgs84_factory):
    hole = [Coordinate(1.0, 1.0), Coordinate(2.0, 1.0), Coordinate(2.0, 2.0), Coordinate(1.0, 2.0)]
    polygon = wgs84_factory.create_polygon(_square(4.0), [hole])
    assert polygon.hole_count == 1
    assert polygon.holes[0].is_closed
    assert len(polygon.coordinates) == 10


def test_metadata_is_copied_and_read_only(wgs84_factory):
    metadata = {"name": "Block"}
    point = wgs84_factory.create_point(Coordinate(1.0, 2.0), metadata)
    metadata["name"] = "Changed"

    assert point.metadata["name"] == "Block"
    with pytest.raises(TypeError):
        point.metadata["name"] = "Changed"
    assert len(wgs84_factory.create_point(Coordinate(1.0, 2.0)).metadata) == 0


def test_collections_check_member_types(wgs84_factory):
    point = wgs84_factory.create_point(Coordinate(1.0, 2.0))
    line_string = wgs84_factory.create_line_string([Coordinate(0.0, 0.0), Coordinate(1.0, 1.0)])

    with pytest.raises(InvalidArgumentError):
        wgs84_factory.create_multi_point([point, line_string])
    with pytest.raises(InvalidArgumentError):
        wgs84_factory.create_line_string([(0.0, 0.0), (1.0, 1.0)])
    with pytest.raises(InvalidArgumentError):
        wgs84_factory.create_point(None)

    collection = wgs84_factory.create_geometry_collection([point, line_string])
    assert list(collection) == [point, line_string]
    assert collection.coordinates == (Coordinate(1.0, 2.0), Coordinate(0.0, 0.0), Coordinate(1.0, 1.0))


def test_geometry_types(wgs84_factory):
    point = wgs84_factory.create_point(Coordinate(0.0, 0.0))
    triangle = wgs84_factory.create_triangle(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0), Coordinate(0.0, 1.0))
    assert point.geometry_type is GeometryType.POINT
    assert triangle.geometry_type is GeometryType.TRIANGLE
    assert triangle.shell.coordinate_count == 4
    assert wgs84_factory.create_multi_polygon([]).geometry_type is GeometryType.MULTI_POLYGON


def test_factory_binds_reference_system(wgs84_factory, wgs84, world_miller):
    point = wgs84_factory.create_point(Coordinate(0.0, 0.0))
    assert point.reference_system is wgs84

    rebound = wgs84_factory.with_reference_system(world_miller)
    assert type(rebound) is GeometryFactory
    assert rebound.create_point(Coordinate(0.0, 0.0)).reference_system is world_miller
