import math
from dataclasses import dataclass

import pytest

from reftransform.config import TransformationConfig
from reftransform.errors import (
    ComputationError, InvalidArgumentError, MissingParameterError, UnitMismatchError, UnsupportedGeometryTypeError,
)
from reftransform.models.coordinates import Coordinate
from reftransform.models.geometry import (
    Geometry, GeometryCollection, GeometryFactory, LineString, MultiPolygon, Point, Polygon, Triangle,
)
from reftransform.reference.catalog import GeographicCoordinateReferenceSystems
from reftransform.spatial.operation import OperationState
from reftransform.spatial.parameters import OperationParameters
from reftransform.spatial.reference_transformation import ReferenceTransformation, transform_geometry

R = 6378137.0


def _miller_x(longitude):
    return R * math.radians(longitude)


class TaggingGeometryFactory(GeometryFactory):
    pass


@dataclass(frozen=True, eq=False)
class Circle(Geometry):
    center: Coordinate
    radius: float


def _transform(geometry, target, **extra):
    parameters = {OperationParameters.TARGET_REFERENCE_SYSTEM: target}
    parameters.update(extra)
    return ReferenceTransformation(geometry, parameters)


def test_geometry_in_target_system_is_returned_unchanged(wgs84_factory, wgs84):
    point = wgs84_factory.create_point(Coordinate(16.4, 48.2))
    operation = _transform(point, wgs84)

    assert operation.execute() is point
    assert operation.strategy is None


def test_geometry_without_reference_system_is_returned_unchanged(world_miller):
    point = GeometryFactory().create_point(Coordinate(1.0, 2.0))
    assert transform_geometry(point, world_miller) is point


def test_invalid_arguments(wgs84_factory, world_miller):
    point = wgs84_factory.create_point(Coordinate(0.0, 0.0))
    with pytest.raises(InvalidArgumentError):
        _transform(None, world_miller)
    with pytest.raises(InvalidArgumentError):
        ReferenceTransformation(point, None)
    with pytest.raises(MissingParameterError):
        ReferenceTransformation(point, {})
    with pytest.raises(UnitMismatchError):
        _transform(point, "ESRI::54003")
    with pytest.raises(InvalidArgumentError):
        ReferenceTransformation(point, {"target": world_miller})


def test_point(wgs84_factory, world_miller):
    point = wgs84_factory.create_point(Coordinate(90.0, 0.0))

    result = transform_geometry(point, world_miller)

    assert isinstance(result, Point)
    assert result.reference_system is world_miller
    assert result.x == pytest.approx(_miller_x(90.0))
    assert result.y == pytest.approx(0.0, abs=1e-9)


def test_metadata_preservation(wgs84_factory, world_miller):
    point = wgs84_factory.create_point(Coordinate(10.0, 10.0), {"name": "Summit", "height": 2962})

    assert dict(transform_geometry(point, world_miller).metadata) == {}
    assert dict(transform_geometry(point, world_miller, metadata_preservation=False).metadata) == {}

    preserved = transform_geometry(point, world_miller, metadata_preservation=True)
    assert dict(preserved.metadata) == {"name": "Summit", "height": 2962}

    configured = transform_geometry(point, world_miller, config=TransformationConfig(metadata_preservation=True))
    assert configured.metadata["name"] == "Summit"


def test_metadata_preservation_applies_to_parts(wgs84_factory, world_miller):
    shell = wgs84_factory.create_linear_ring(
        [Coordinate(0.0, 0.0), Coordinate(10.0, 0.0), Coordinate(10.0, 10.0)], {"part": "shell"}
    )
    polygon = wgs84_factory.create_polygon(shell, metadata={"part": "polygon"})

    result = transform_geometry(polygon, world_miller, metadata_preservation=True)

    assert result.metadata["part"] == "polygon"
    assert result.shell.metadata["part"] == "shell"


def test_polygon_without_holes(wgs84_factory, world_miller):
    polygon = wgs84_factory.create_polygon([Coordinate(0.0, 0.0), Coordinate(10.0, 0.0), Coordinate(10.0, 10.0)])

    result = transform_geometry(polygon, world_miller)

    assert isinstance(result, Polygon)
    assert result.hole_count == 0
    assert len(result.shell.coordinates) == 4
    assert result.shell.is_closed
    assert result.shell.coordinates[1].x == pytest.approx(_miller_x(10.0))


def test_polygon_with_hole(wgs84_factory, world_miller):
    polygon = wgs84_factory.create_polygon(
        [Coordinate(0.0, 0.0), Coordinate(10.0, 0.0), Coordinate(10.0, 10.0), Coordinate(0.0, 10.0)],
        [[Coordinate(2.0, 2.0), Coordinate(4.0, 2.0), Coordinate(4.0, 4.0)]],
    )

    result = transform_geometry(polygon, world_miller)

    assert result.hole_count == 1
    assert result.holes[0].reference_system is world_miller
    assert result.holes[0].coordinates[1].x == pytest.approx(_miller_x(4.0))


def test_line_string_keeps_order(wgs84_factory, world_miller):
    line_string = wgs84_factory.create_line_string([Coordinate(float(lon), 0.0) for lon in (-30, 0, 30, 60)])

    result = transform_geometry(line_string, world_miller)

    assert isinstance(result, LineString)
    assert [c.x for c in result.coordinates] == pytest.approx([_miller_x(lon) for lon in (-30, 0, 30, 60)])


def test_line(wgs84_factory, world_miller):
    line = wgs84_factory.create_line(Coordinate(0.0, 0.0), Coordinate(45.0, 0.0))

    result = transform_geometry(line, world_miller)

    assert result.start_coordinate.x == pytest.approx(0.0, abs=1e-9)
    assert result.end_coordinate.x == pytest.approx(_miller_x(45.0))


def test_triangle(wgs84_factory, world_miller):
    triangle = wgs84_factory.create_triangle(Coordinate(0.0, 0.0), Coordinate(10.0, 0.0), Coordinate(0.0, 10.0))

    result = transform_geometry(triangle, world_miller)

    assert isinstance(result, Triangle)
    assert result.shell.coordinates[1].x == pytest.approx(_miller_x(10.0))


def test_collections_keep_member_order(wgs84_factory, world_miller):
    first = wgs84_factory.create_polygon([Coordinate(0.0, 0.0), Coordinate(1.0, 0.0), Coordinate(1.0, 1.0)])
    second = wgs84_factory.create_polygon([Coordinate(20.0, 0.0), Coordinate(21.0, 0.0), Coordinate(21.0, 1.0)])
    multi_polygon = wgs84_factory.create_multi_polygon([first, second])
    point = wgs84_factory.create_point(Coordinate(30.0, 0.0))
    collection = wgs84_factory.create_geometry_collection([point, multi_polygon])

    result = transform_geometry(collection, world_miller)

    assert isinstance(result, GeometryCollection)
    assert isinstance(result[0], Point)
    assert isinstance(result[1], MultiPolygon)
    assert len(result[1]) == 2
    assert result[0].x == pytest.approx(_miller_x(30.0))
    assert result[1][1].shell.coordinates[0].x == pytest.approx(_miller_x(20.0))
    assert result[1][0].reference_system is world_miller


def test_multi_point(wgs84_factory, world_miller):
    points = [wgs84_factory.create_point(Coordinate(float(lon), 0.0)) for lon in (5, 15)]
    result = transform_geometry(wgs84_factory.create_multi_point(points), world_miller)
    assert [point.x for point in result] == pytest.approx([_miller_x(5.0), _miller_x(15.0)])


def test_unsupported_geometry(wgs84_factory, world_miller):
    circle = Circle(Coordinate(0.0, 0.0), 1.0, factory=wgs84_factory)
    with pytest.raises(UnsupportedGeometryTypeError):
        transform_geometry(circle, world_miller)


def test_execute_returns_cached_result(wgs84_factory, world_miller):
    operation = _transform(wgs84_factory.create_point(Coordinate(1.0, 1.0)), world_miller)
    assert operation.state is OperationState.INITIALIZED

    first = operation.execute()

    assert operation.state is OperationState.FINISHED
    assert operation.execute() is first
    assert operation.result is first


def test_explicit_geometry_factory(wgs84_factory, world_miller):
    factory = TaggingGeometryFactory(world_miller)
    point = wgs84_factory.create_point(Coordinate(1.0, 1.0))

    result = transform_geometry(point, world_miller, factory=factory)

    assert result.factory is factory


def test_derived_geometry_factory_keeps_family(world_miller, wgs84):
    point = TaggingGeometryFactory(wgs84).create_point(Coordinate(1.0, 1.0))

    result = transform_geometry(point, world_miller)

    assert isinstance(result.factory, TaggingGeometryFactory)
    assert result.reference_system is world_miller


def test_non_finite_coordinate(wgs84_factory, world_miller):
    point = wgs84_factory.create_point(Coordinate(math.nan, 0.0))
    with pytest.raises(ComputationError):
        transform_geometry(point, world_miller)


def test_round_trip(wgs84_factory, world_miller, wgs84):
    line_string = wgs84_factory.create_line_string([Coordinate(-120.5, 35.2), Coordinate(151.2, -33.9)])

    result = transform_geometry(transform_geometry(line_string, world_miller), wgs84)

    assert result.reference_system is wgs84
    for actual, expected in zip(result.coordinates, line_string.coordinates):
        assert actual.x == pytest.approx(expected.x)
        assert actual.y == pytest.approx(expected.y)


def test_datum_shift_of_geometry(wgs84_factory):
    ed50 = GeographicCoordinateReferenceSystems.ED50
    point = wgs84_factory.create_point(Coordinate(16.4, 48.2))

    result = transform_geometry(point, ed50)

    assert result.reference_system is ed50
    assert result.x != point.x
    assert result.x == pytest.approx(point.x, abs=1e-2)
