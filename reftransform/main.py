"""
reftransform - Main CLI

Transforms coordinates between the reference systems of the catalog.

Usage:
    python -m reftransform.main --source <identifier> --target <identifier> [x,y[,z] ...]

Example:
    python -m reftransform.main --source EPSG::4326 --target ESRI::54003 16.4,48.2
    echo "15 0" | python -m reftransform.main --source EPSG::4326 --target EPSG::32633

Coordinates of geographic systems are given as longitude,latitude[,height].
Without coordinate arguments, one coordinate per line is read from stdin.
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from . import __version__
from .config import TransformationConfig
from .errors import ReferenceTransformError
from .models.coordinates import Coordinate
from .models.geometry import GeometryFactory
from .reference.catalog import find_reference_system, reference_systems
from .spatial.reference_transformation import transform_geometry
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def parse_coordinate(text: str) -> Coordinate:
    """Parse "x,y[,z]" or "x y [z]" into a Coordinate."""
    parts = text.replace(',', ' ').split()
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Expected 2 or 3 values, got '{text}'")
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number in '{text}'")
    return Coordinate(*values)


def run_transform(
    source_identifier: str,
    target_identifier: str,
    coordinates: Sequence[Coordinate],
    config: Optional[TransformationConfig] = None
) -> List[Coordinate]:
    """
    Transform coordinates between two catalog reference systems.

    Args:
        source_identifier: Identifier of the source system (e.g. "EPSG::4326")
        target_identifier: Identifier of the target system
        coordinates: Coordinates in the native units of the source system
        config: Runtime configuration

    Returns:
        Coordinates in the native units of the target system, in input order
    """
    source = find_reference_system(source_identifier)
    target = find_reference_system(target_identifier)
    logger.info(f"Transforming {len(coordinates)} coordinates: {source} -> {target}")

    factory = GeometryFactory(source)
    points = factory.create_multi_point([factory.create_point(coordinate) for coordinate in coordinates])
    result = transform_geometry(points, target, config=config)
    return [point.coordinate for point in result]


def _read_coordinates(lines: Iterable[str]) -> List[Coordinate]:
    return [parse_coordinate(line) for line in lines if line.strip() and not line.lstrip().startswith('#')]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='reftransform - Transform coordinates between reference systems'
    )

    parser.add_argument(
        'coordinates',
        nargs='*',
        type=parse_coordinate,
        help='Coordinates as x,y[,z] (default: read from stdin)'
    )

    parser.add_argument(
        '--source', '-s',
        help='Source reference system identifier (e.g., EPSG::4326)'
    )

    parser.add_argument(
        '--target', '-t',
        help='Target reference system identifier (e.g., ESRI::54003)'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the catalog reference systems and exit'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON'
    )

    parser.add_argument(
        '--no-check-finite',
        action='store_true',
        help='Accept NaN/infinite results instead of failing'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write the log to this file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    if args.list:
        for system in reference_systems():
            print(f"{system.identifier:<14} {system.name}")
        return 0

    if not args.source or not args.target:
        parser.error('--source and --target are required')

    try:
        coordinates = args.coordinates or _read_coordinates(sys.stdin)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    config = TransformationConfig(check_finite=not args.no_check_finite)

    try:
        results = run_transform(args.source, args.target, coordinates, config)
    except ReferenceTransformError as e:
        logger.error(f"Transformation failed: {e}")
        if args.log_file:
            print(f"See log file for details: {args.log_file}")
        return 1

    if args.json:
        print(json.dumps({
            'source': args.source,
            'target': args.target,
            'coordinates': [[c.x, c.y, c.z] for c in results],
        }, indent=2))
    else:
        for c in results:
            print(f"{c.x:.9f} {c.y:.9f} {c.z:.3f}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
