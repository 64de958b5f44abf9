"""
Catalog of predefined reference objects.

Provides commonly used ellipsoids, datums, areas of use, coordinate
systems and reference systems, including the World Miller and Sphere
Miller projected systems and the WGS 84 UTM zones.
"""

from functools import lru_cache
from typing import List
import re

from ..errors import InvalidArgumentError
from ..models.measures import Angle, Length
from ..models.units import UnitsOfMeasurement
from ..operations.factory import (
    UTM_ZONE_COUNT, CoordinateProjectionFactory, utm_central_meridian, utm_parameters,
)
from ..operations.methods import CoordinateOperationMethods
from ..operations.parameters import CoordinateOperationParameters
from .objects import (
    AreaOfUse, AxisDirection, CoordinateSystem, CoordinateSystemAxis, Ellipsoid, GeodeticDatum, PrimeMeridian,
)
from .systems import (
    CoordinateReferenceSystem, GeographicCoordinateReferenceSystem, ProjectedCoordinateReferenceSystem,
)


def _area(identifier: str, name: str, south: float, west: float, north: float, east: float) -> AreaOfUse:
    return AreaOfUse(
        identifier, name,
        Angle.from_degree(south), Angle.from_degree(west),
        Angle.from_degree(north), Angle.from_degree(east)
    )


class AreasOfUse:
    """Catalog of areas of use."""

    WORLD = _area("EPSG::1262", "World", -90.0, -180.0, 90.0, 180.0)

    EUROPE = _area("EPSG::1297", "Europe - ED50 by country", 34.88, -10.56, 84.73, 40.18)

    NORTH_AMERICA = _area("EPSG::1349", "North America - NAD27", 7.15, -172.54, 83.17, -47.74)

    AUSTRALIA = _area("EPSG::1036", "Australia - GDA", -60.56, 93.41, -8.47, 173.35)

    @staticmethod
    @lru_cache(maxsize=None)
    def utm_zone(zone: int, north: bool = True) -> AreaOfUse:
        """Extent of a UTM zone: 6 degrees of longitude in one hemisphere."""
        central = utm_central_meridian(zone)
        hemisphere = "N" if north else "S"
        south, top = (0.0, 84.0) if north else (-80.0, 0.0)
        return _area(
            f"UTM::{zone}{hemisphere}", f"UTM zone {zone}{hemisphere}",
            south, central - 3.0, top, central + 3.0
        )


class Ellipsoids:
    """Catalog of ellipsoids."""

    WGS84 = Ellipsoid.from_inverse_flattening(
        "EPSG::7030", "WGS 84", Length.from_metre(6378137.0), 298.257223563
    )

    GRS1980 = Ellipsoid.from_inverse_flattening(
        "EPSG::7019", "GRS 1980", Length.from_metre(6378137.0), 298.257222101
    )

    INTERNATIONAL_1924 = Ellipsoid.from_inverse_flattening(
        "EPSG::7022", "International 1924", Length.from_metre(6378388.0), 297.0,
    )

    CLARKE_1866 = Ellipsoid.from_semi_minor_axis(
        "EPSG::7008", "Clarke 1866", Length.from_metre(6378206.4), Length.from_metre(6356583.8)
    )

    SPHERE = Ellipsoid.sphere("EPSG::7035", "Sphere", Length.from_metre(6371000.0))


class PrimeMeridians:
    """Catalog of prime meridians."""

    GREENWICH = PrimeMeridian("EPSG::8901", "Greenwich", Angle.ZERO)


class GeodeticDatums:
    """Catalog of geodetic datums."""

    WGS84 = GeodeticDatum(
        "EPSG::6326", "World Geodetic System 1984", Ellipsoids.WGS84, PrimeMeridians.GREENWICH,
        to_wgs84=(0.0, 0.0, 0.0), aliases=("WGS 84",),
    )

    ED50 = GeodeticDatum(
        "EPSG::6230", "European Datum 1950", Ellipsoids.INTERNATIONAL_1924, PrimeMeridians.GREENWICH,
        to_wgs84=(-87.0, -98.0, -121.0), aliases=("ED50",),
    )

    NAD27 = GeodeticDatum(
        "EPSG::6267", "North American Datum 1927", Ellipsoids.CLARKE_1866, PrimeMeridians.GREENWICH,
        to_wgs84=(-8.0, 160.0, 176.0), aliases=("NAD27",),
    )

    GDA94 = GeodeticDatum(
        "EPSG::6283", "Geocentric Datum of Australia 1994", Ellipsoids.GRS1980, PrimeMeridians.GREENWICH,
        to_wgs84=(0.0, 0.0, 0.0), aliases=("GDA94",),
    )

    SPHERE = GeodeticDatum(
        "EPSG::6035", "Not specified (based on Authalic Sphere)", Ellipsoids.SPHERE, PrimeMeridians.GREENWICH,
    )


_LONGITUDE = CoordinateSystemAxis("Geodetic longitude", AxisDirection.EAST, UnitsOfMeasurement.DEGREE)
_LATITUDE = CoordinateSystemAxis("Geodetic latitude", AxisDirection.NORTH, UnitsOfMeasurement.DEGREE)
_HEIGHT = CoordinateSystemAxis("Ellipsoidal height", AxisDirection.UP, UnitsOfMeasurement.METRE)
_EASTING = CoordinateSystemAxis("Easting", AxisDirection.EAST, UnitsOfMeasurement.METRE)
_NORTHING = CoordinateSystemAxis("Northing", AxisDirection.NORTH, UnitsOfMeasurement.METRE)


class CoordinateSystems:
    """Catalog of coordinate systems."""

    ELLIPSOIDAL_2D = CoordinateSystem(
        "EPSG::6424", "Ellipsoidal 2D CS. Axes: longitude, latitude. UoM: degree",
        (_LONGITUDE, _LATITUDE),
    )

    ELLIPSOIDAL_3D = CoordinateSystem(
        "EPSG::6426", "Ellipsoidal 3D CS. Axes: longitude, latitude, height. UoM: degree, metre",
        (_LONGITUDE, _LATITUDE, _HEIGHT),
    )

    CARTESIAN_2D = CoordinateSystem(
        "EPSG::4400", "Cartesian 2D CS. Axes: easting, northing (E,N). UoM: m",
        (_EASTING, _NORTHING),
    )


class GeographicCoordinateReferenceSystems:
    """Catalog of geographic reference systems."""

    WGS84 = GeographicCoordinateReferenceSystem(
        "EPSG::4326", "WGS 84",
        CoordinateSystems.ELLIPSOIDAL_2D, GeodeticDatums.WGS84, AreasOfUse.WORLD,
    )

    WGS84_3D = GeographicCoordinateReferenceSystem(
        "EPSG::4979", "WGS 84 (3D)",
        CoordinateSystems.ELLIPSOIDAL_3D, GeodeticDatums.WGS84, AreasOfUse.WORLD,
    )

    ED50 = GeographicCoordinateReferenceSystem(
        "EPSG::4230", "ED50",
        CoordinateSystems.ELLIPSOIDAL_2D, GeodeticDatums.ED50, AreasOfUse.EUROPE,
    )

    NAD27 = GeographicCoordinateReferenceSystem(
        "EPSG::4267", "NAD27",
        CoordinateSystems.ELLIPSOIDAL_2D, GeodeticDatums.NAD27, AreasOfUse.NORTH_AMERICA,
    )

    GDA94 = GeographicCoordinateReferenceSystem(
        "EPSG::4283", "GDA94",
        CoordinateSystems.ELLIPSOIDAL_2D, GeodeticDatums.GDA94, AreasOfUse.AUSTRALIA,
    )

    SPHERE = GeographicCoordinateReferenceSystem(
        "EPSG::4035", "Unknown datum based upon the Authalic Sphere",
        CoordinateSystems.ELLIPSOIDAL_2D, GeodeticDatums.SPHERE, AreasOfUse.WORLD,
    )


_UTM_IDENTIFIER = re.compile(r"EPSG::32([67])(\d\d)")

_MILLER_PARAMETERS = {
    CoordinateOperationParameters.FALSE_EASTING: Length.ZERO,
    CoordinateOperationParameters.FALSE_NORTHING: Length.ZERO,
    CoordinateOperationParameters.LONGITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
}


class ProjectedCoordinateReferenceSystems:
    """Catalog of projected reference systems."""

    WORLD_MILLER = ProjectedCoordinateReferenceSystem.from_method(
        "ESRI::54003", "World Miller Cylindrical",
        GeographicCoordinateReferenceSystems.WGS84, CoordinateSystems.CARTESIAN_2D,
        CoordinateOperationMethods.MILLER_CYLINDRICAL_PROJECTION, _MILLER_PARAMETERS,
        AreasOfUse.WORLD,
    )

    SPHERE_MILLER = ProjectedCoordinateReferenceSystem.from_method(
        "ESRI::53003", "Sphere Miller Cylindrical",
        GeographicCoordinateReferenceSystems.SPHERE, CoordinateSystems.CARTESIAN_2D,
        CoordinateOperationMethods.MILLER_CYLINDRICAL_PROJECTION, _MILLER_PARAMETERS,
        AreasOfUse.WORLD,
    )

    @staticmethod
    @lru_cache(maxsize=None)
    def utm_zone(zone: int, north: bool = True) -> ProjectedCoordinateReferenceSystem:
        """
        WGS 84 / UTM zone reference system.

        Args:
            zone: UTM zone number (1-60)
            north: Northern hemisphere if True

        Raises:
            InvalidArgumentError: If the zone number is out of range
        """
        if not 1 <= zone <= UTM_ZONE_COUNT:
            raise InvalidArgumentError(f"UTM zone must be between 1 and {UTM_ZONE_COUNT}, got {zone}")

        hemisphere = "N" if north else "S"
        base = GeographicCoordinateReferenceSystems.WGS84
        area = AreasOfUse.utm_zone(zone, north)
        projection = CoordinateProjectionFactory.from_method(
            CoordinateOperationMethods.TRANSVERSE_MERCATOR_PROJECTION,
            utm_parameters(zone, north),
            ellipsoid=base.datum.ellipsoid,
            area_of_use=area,
        )
        return ProjectedCoordinateReferenceSystem(
            f"EPSG::{(32600 if north else 32700) + zone}",
            f"WGS 84 / UTM zone {zone}{hemisphere}",
            base, CoordinateSystems.CARTESIAN_2D, projection, area,
        )


def reference_systems() -> List[CoordinateReferenceSystem]:
    """Catalog reference systems, geographic first (UTM zones excluded)."""
    systems: List[CoordinateReferenceSystem] = []
    for catalog in (GeographicCoordinateReferenceSystems, ProjectedCoordinateReferenceSystems):
        systems.extend(
            value for value in vars(catalog).values() if isinstance(value, CoordinateReferenceSystem)
        )
    return systems


def find_reference_system(identifier: str) -> CoordinateReferenceSystem:
    """
    Look up a catalog reference system by its exact identifier.

    WGS 84 / UTM identifiers (EPSG::32601-32660 north, EPSG::32701-32760
    south) are built on demand.

    Raises:
        InvalidArgumentError: If identifier is empty or unknown
    """
    if not identifier:
        raise InvalidArgumentError("The identifier is empty")

    wanted = identifier.upper()
    for system in reference_systems():
        if system.identifier.upper() == wanted:
            return system

    match = _UTM_IDENTIFIER.fullmatch(wanted)
    if match:
        zone = int(match.group(2))
        if 1 <= zone <= UTM_ZONE_COUNT:
            return ProjectedCoordinateReferenceSystems.utm_zone(zone, match.group(1) == "6")

    raise InvalidArgumentError(f"Unknown reference system: {identifier}")
