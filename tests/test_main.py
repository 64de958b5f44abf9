import argparse
import io
import json
import logging

import pytest

from reftransform.errors import InvalidArgumentError
from reftransform.main import main, parse_coordinate, run_transform
from reftransform.models.coordinates import Coordinate
from reftransform.reference.catalog import GeographicCoordinateReferenceSystems, find_reference_system


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("reftransform")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_parse_coordinate():
    assert parse_coordinate("16.4,48.2") == Coordinate(16.4, 48.2)
    assert parse_coordinate("1 2 3") == Coordinate(1.0, 2.0, 3.0)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coordinate("1")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coordinate("a,b")


def test_find_reference_system():
    assert find_reference_system("epsg::4326") is GeographicCoordinateReferenceSystems.WGS84
    assert find_reference_system("EPSG::32633").name == "WGS 84 / UTM zone 33N"
    assert find_reference_system("EPSG::32733").name == "WGS 84 / UTM zone 33S"
    for identifier in ("EPSG::32661", "EPSG::9999", ""):
        with pytest.raises(InvalidArgumentError):
            find_reference_system(identifier)


def test_run_transform_keeps_order():
    results = run_transform("EPSG::4326", "EPSG::32633", [Coordinate(15.0, 0.0), Coordinate(15.0, 10.0)])
    assert len(results) == 2
    assert results[0].x == pytest.approx(500000.0, abs=1e-6)
    assert results[1].y > results[0].y


def test_main_prints_coordinates(capsys):
    assert main(["--source", "EPSG::4326", "--target", "EPSG::32633", "15,0"]) == 0
    x, y, z = capsys.readouterr().out.split()
    assert float(x) == pytest.approx(500000.0, abs=1e-6)
    assert float(y) == pytest.approx(0.0, abs=1e-6)


def test_main_json_output(capsys):
    assert main(["-s", "EPSG::4326", "-t", "ESRI::54003", "--json", "0,0", "90,0"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["target"] == "ESRI::54003"
    assert len(output["coordinates"]) == 2
    assert output["coordinates"][1][0] == pytest.approx(6378137.0 * 1.5707963267948966)


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("# lon lat\n15 0\n\n"))
    assert main(["-s", "EPSG::4326", "-t", "EPSG::32633"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_main_lists_catalog(capsys):
    assert main(["--list"]) == 0
    output = capsys.readouterr().out
    assert "EPSG::4326" in output
    assert "ESRI::54003" in output


def test_main_reports_unsupported_transformation():
    assert main(["-s", "EPSG::4326", "-t", "EPSG::4035", "0,0"]) == 1


def test_main_requires_systems():
    with pytest.raises(SystemExit):
        main(["0,0"])
