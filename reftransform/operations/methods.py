"""
Coordinate operation methods.

A method names a transformation algorithm and declares the parameters
an implementation needs. The catalog lookups match the query as a
case-insensitive literal substring of identifiers, names and aliases.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import re

from ..errors import InvalidArgumentError
from .parameters import CoordinateOperationParameter, CoordinateOperationParameters


@dataclass(frozen=True, eq=False)
class CoordinateOperationMethod:
    """
    Coordinate operation method.

    Methods compare by identifier.

    Attributes:
        identifier: Authority identifier (e.g. "EPSG::9807")
        name: Method name
        parameters: Parameters every implementation requires
        is_reversible: Whether the operation can be inverted
        aliases: Alternative names
    """
    identifier: str
    name: str
    parameters: Tuple[CoordinateOperationParameter, ...] = ()
    is_reversible: bool = True
    aliases: Tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self):
        if not self.identifier:
            raise InvalidArgumentError("The identifier of the method is empty")
        object.__setattr__(self, 'parameters', tuple(self.parameters))
        object.__setattr__(self, 'aliases', tuple(self.aliases))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateOperationMethod):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __str__(self) -> str:
        return f"[{self.identifier}] {self.name}"

    def matches_identifier(self, identifier: str) -> bool:
        return matches(self.identifier, identifier)

    def matches_name(self, name: str) -> bool:
        return matches(self.name, name) or any(matches(alias, name) for alias in self.aliases)


def matches(value: Optional[str], query: str) -> bool:
    """Case-insensitive literal substring match."""
    if not value:
        return False
    return re.search(re.escape(query), value, re.IGNORECASE) is not None


def check_query(value: Optional[str], argument: str) -> None:
    """Reject None or empty lookup arguments."""
    if value is None:
        raise InvalidArgumentError(f"The {argument} is None")
    if not value:
        raise InvalidArgumentError(f"The {argument} is empty")


_P = CoordinateOperationParameters


class CoordinateOperationMethods:
    """Catalog of coordinate operation methods."""

    MILLER_CYLINDRICAL_PROJECTION = CoordinateOperationMethod(
        "ESRI::54002", "Miller Cylindrical Projection",
        (_P.FALSE_EASTING, _P.FALSE_NORTHING, _P.LONGITUDE_OF_NATURAL_ORIGIN),
        aliases=("Miller Cylindrical", "Miller_Cylindrical"),
    )

    TRANSVERSE_MERCATOR_PROJECTION = CoordinateOperationMethod(
        "EPSG::9807", "Transverse Mercator",
        (
            _P.LATITUDE_OF_NATURAL_ORIGIN,
            _P.LONGITUDE_OF_NATURAL_ORIGIN,
            _P.SCALE_FACTOR_AT_NATURAL_ORIGIN,
            _P.FALSE_EASTING,
            _P.FALSE_NORTHING,
        ),
        aliases=("Gauss-Kruger", "Transverse_Mercator"),
    )

    GEOCENTRIC_TRANSLATION = CoordinateOperationMethod(
        "EPSG::9603", "Geocentric translations",
        (_P.X_AXIS_TRANSLATION, _P.Y_AXIS_TRANSLATION, _P.Z_AXIS_TRANSLATION),
        aliases=("Three-parameter transformation",),
    )

    GEOGRAPHIC_GEOCENTRIC_CONVERSION = CoordinateOperationMethod(
        "EPSG::9602", "Geographic/geocentric conversions",
    )

    @classmethod
    def all(cls) -> List[CoordinateOperationMethod]:
        """All methods of the catalog, in declaration order."""
        return [value for value in vars(cls).values() if isinstance(value, CoordinateOperationMethod)]

    @classmethod
    def from_identifier(cls, identifier: str) -> List[CoordinateOperationMethod]:
        """
        Get all methods whose identifier contains the query.

        Raises:
            InvalidArgumentError: If identifier is None or empty
        """
        check_query(identifier, "identifier")
        return [method for method in cls.all() if method.matches_identifier(identifier)]

    @classmethod
    def from_name(cls, name: str) -> List[CoordinateOperationMethod]:
        """
        Get all methods whose name or an alias contains the query.

        Raises:
            InvalidArgumentError: If name is None or empty
        """
        check_query(name, "name")
        return [method for method in cls.all() if method.matches_name(name)]
