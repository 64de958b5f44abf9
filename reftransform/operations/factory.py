"""
Operation factories.

A factory resolves coordinate operations of one family (projections or
geocentric transformations) either from the catalog of predefined
operations or from an operation method and a parameter mapping.

The method -> implementation table is an explicit registration list,
populated lazily on first use exactly once under its own lock. The
predefined catalog is loaded the same way under a second lock. Its entries
refer to reference objects that build projections through the factory while
the catalog module is imported, so loading the catalog must never hold the
lock of the implementation table.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import logging
import threading

from ..errors import InvalidArgumentError
from ..models.measures import Angle, Length, Scale
from .geocentric import GeocentricTranslation
from .methods import CoordinateOperationMethod, check_query, matches
from .operation import CoordinateOperation
from .parameters import CoordinateOperationParameters, ParameterMap
from .projections import TransverseMercatorProjection, WorldMillerCylindricalProjection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationDefinition:
    """
    Predefined operation of a factory catalog.

    Attributes:
        identifier: Identifier of the operation
        name: Name of the operation
        method: Operation method
        parameters: Parameter values
        context: Additional constructor arguments (ellipsoid, area of use)
        aliases: Alternative names
    """
    identifier: str
    name: str
    method: CoordinateOperationMethod
    parameters: Mapping[Any, Any]
    context: Mapping[str, Any] = field(default_factory=dict)
    aliases: Tuple[str, ...] = ()

    def matches_identifier(self, identifier: str) -> bool:
        return matches(self.identifier, identifier)

    def matches_name(self, name: str) -> bool:
        return matches(self.name, name) or any(matches(alias, name) for alias in self.aliases)


Implementation = Callable[..., CoordinateOperation]
ImplementationLoader = Callable[[], Sequence[Implementation]]
DefinitionLoader = Callable[[], Sequence[OperationDefinition]]


class OperationFactory:
    """
    Factory of one coordinate operation family.

    Args:
        name: Name of the operation family, used in log messages
        implementation_loader: Returns the implementation classes; each one
            carries its operation method in a METHOD attribute
        definition_loader: Returns the predefined operations
        default_context: Constructor arguments applied when not supplied,
            each given as a function producing the value
    """

    def __init__(
        self,
        name: str,
        implementation_loader: ImplementationLoader,
        definition_loader: DefinitionLoader,
        default_context: Optional[Mapping[str, Callable[[], Any]]] = None
    ):
        self._name = name
        self._implementation_loader = implementation_loader
        self._definition_loader = definition_loader
        self._default_context = dict(default_context or {})
        self._operations_lock = threading.RLock()
        self._definitions_lock = threading.RLock()
        self._operations: Optional[Mapping[CoordinateOperationMethod, Implementation]] = None
        self._definitions: Optional[Tuple[OperationDefinition, ...]] = None

    @property
    def name(self) -> str:
        return self._name

    # -------------------------------------------------------------------------
    # registration
    # -------------------------------------------------------------------------

    def _get_operations(self) -> Mapping[CoordinateOperationMethod, Implementation]:
        operations = self._operations
        if operations is None:
            with self._operations_lock:
                if self._operations is None:
                    table: Dict[CoordinateOperationMethod, Implementation] = {}
                    for implementation in self._implementation_loader():
                        table[implementation.METHOD] = implementation
                    self._operations = MappingProxyType(table)
                    logger.debug(f"Registered {len(table)} {self._name} implementations")
                operations = self._operations
        return operations

    def _get_definitions(self) -> Tuple[OperationDefinition, ...]:
        definitions = self._definitions
        if definitions is None:
            with self._definitions_lock:
                if self._definitions is None:
                    self._definitions = tuple(self._definition_loader())
                    logger.debug(f"Loaded {len(self._definitions)} predefined {self._name} operations")
                definitions = self._definitions
        return definitions

    def reset(self) -> None:
        """Drop the registration tables; they are reloaded on next use."""
        with self._definitions_lock, self._operations_lock:
            self._operations = None
            self._definitions = None

    @property
    def methods(self) -> List[CoordinateOperationMethod]:
        """Methods with a registered implementation."""
        return list(self._get_operations())

    # -------------------------------------------------------------------------
    # predefined operations
    # -------------------------------------------------------------------------

    def from_identifier(self, identifier: str) -> List[CoordinateOperation]:
        """
        Get all predefined operations whose identifier contains the query.

        Raises:
            InvalidArgumentError: If identifier is None or empty
        """
        check_query(identifier, "identifier")
        return self._create_definitions(
            definition for definition in self._get_definitions() if definition.matches_identifier(identifier)
        )

    def from_name(self, name: str) -> List[CoordinateOperation]:
        """
        Get all predefined operations whose name or an alias contains the query.

        Raises:
            InvalidArgumentError: If name is None or empty
        """
        check_query(name, "name")
        return self._create_definitions(
            definition for definition in self._get_definitions() if definition.matches_name(name)
        )

    # -------------------------------------------------------------------------
    # operations from methods
    # -------------------------------------------------------------------------

    def from_method_identifier(
        self,
        identifier: str,
        parameters: ParameterMap,
        **context: Any
    ) -> List[CoordinateOperation]:
        """
        Create operations for every registered method whose identifier
        contains the query and whose parameters are all supplied.

        Raises:
            InvalidArgumentError: If identifier is None or empty
        """
        check_query(identifier, "identifier")
        return self._create_from_methods(
            [method for method in self._get_operations() if method.matches_identifier(identifier)],
            parameters,
            context
        )

    def from_method_name(
        self,
        name: str,
        parameters: ParameterMap,
        **context: Any
    ) -> List[CoordinateOperation]:
        """
        Create operations for every registered method whose name or an alias
        contains the query and whose parameters are all supplied.

        Raises:
            InvalidArgumentError: If name is None or empty
        """
        check_query(name, "name")
        return self._create_from_methods(
            [method for method in self._get_operations() if method.matches_name(name)],
            parameters,
            context
        )

    def from_method(
        self,
        method: CoordinateOperationMethod,
        parameters: ParameterMap,
        **context: Any
    ) -> Optional[CoordinateOperation]:
        """
        Create the operation implementing a method.

        Args:
            method: Operation method
            parameters: Parameter values
            **context: Additional constructor arguments (ellipsoid, area_of_use)

        Returns:
            New operation, or None if no implementation is registered

        Raises:
            InvalidArgumentError: If method is None, or the implementation
                rejects the arguments
        """
        if method is None:
            raise InvalidArgumentError("The method is None")

        implementation = self._get_operations().get(method)
        if implementation is None:
            return None

        return self._create(implementation, method.identifier, method.name, parameters, context)

    # -------------------------------------------------------------------------
    # construction
    # -------------------------------------------------------------------------

    def _create(
        self,
        implementation: Implementation,
        identifier: str,
        name: str,
        parameters: ParameterMap,
        context: Mapping[str, Any]
    ) -> CoordinateOperation:
        arguments = dict(context)
        for key, default in self._default_context.items():
            if key not in arguments:
                arguments[key] = default()
        return implementation(identifier, name, parameters, **arguments)

    def _create_definitions(self, definitions) -> List[CoordinateOperation]:
        operations = []
        table = self._get_operations()
        for definition in definitions:
            implementation = table.get(definition.method)
            if implementation is None:
                logger.debug(f"No {self._name} implementation for {definition.method}, skipping {definition.identifier}")
                continue
            try:
                operations.append(self._create(
                    implementation, definition.identifier, definition.name, definition.parameters, definition.context
                ))
            except InvalidArgumentError as e:
                logger.debug(f"Skipping {definition.identifier}: {e}")
        return operations

    def _create_from_methods(
        self,
        methods: List[CoordinateOperationMethod],
        parameters: ParameterMap,
        context: Mapping[str, Any]
    ) -> List[CoordinateOperation]:
        if parameters is None:
            raise InvalidArgumentError("The parameters are None")

        operations = []
        table = self._get_operations()
        for method in methods:
            if not all(parameter in parameters for parameter in method.parameters):
                continue
            try:
                operations.append(self._create(table[method], method.identifier, method.name, parameters, context))
            except InvalidArgumentError as e:
                logger.debug(f"Skipping {method}: {e}")
        return operations

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


# =============================================================================
# REGISTRATIONS
# =============================================================================

def _projection_implementations() -> List[Implementation]:
    return [
        WorldMillerCylindricalProjection,
        TransverseMercatorProjection,
    ]


def _geocentric_implementations() -> List[Implementation]:
    return [
        GeocentricTranslation,
    ]


def _world() -> Any:
    from ..reference.catalog import AreasOfUse

    return AreasOfUse.WORLD


# UTM zones: 6 degree wide, central meridian of zone 1 at 177W
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING_SOUTH = 10000000.0
UTM_ZONE_COUNT = 60


def utm_central_meridian(zone: int) -> float:
    """Central meridian of a UTM zone in degrees."""
    if not 1 <= zone <= UTM_ZONE_COUNT:
        raise InvalidArgumentError(f"UTM zone must be between 1 and {UTM_ZONE_COUNT}, got {zone}")
    return (zone - 1) * 6 - 180 + 3


def utm_parameters(zone: int, north: bool = True) -> Dict[Any, Any]:
    """Transverse Mercator parameters of a UTM zone."""
    P = CoordinateOperationParameters
    return {
        P.LATITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
        P.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(utm_central_meridian(zone)),
        P.SCALE_FACTOR_AT_NATURAL_ORIGIN: Scale.from_unity(UTM_SCALE_FACTOR),
        P.FALSE_EASTING: Length.from_metre(UTM_FALSE_EASTING),
        P.FALSE_NORTHING: Length.from_metre(0.0 if north else UTM_FALSE_NORTHING_SOUTH),
    }


def utm_projection_identifier(zone: int, north: bool = True) -> str:
    """EPSG identifier of a UTM zone projection (16001-16060 north, 16101-16160 south)."""
    return f"EPSG::{(16000 if north else 16100) + zone}"


def _projection_definitions() -> List[OperationDefinition]:
    from ..reference.catalog import AreasOfUse, Ellipsoids

    P = CoordinateOperationParameters
    miller = WorldMillerCylindricalProjection.METHOD
    miller_parameters = {
        P.FALSE_EASTING: Length.ZERO,
        P.FALSE_NORTHING: Length.ZERO,
        P.LONGITUDE_OF_NATURAL_ORIGIN: Angle.ZERO,
    }

    definitions = [
        OperationDefinition(
            "ESRI::54003", "World Miller Cylindrical", miller, miller_parameters,
            {'ellipsoid': Ellipsoids.WGS84, 'area_of_use': AreasOfUse.WORLD},
            aliases=("World_Miller_Cylindrical",),
        ),
        OperationDefinition(
            "ESRI::53003", "Sphere Miller Cylindrical", miller, miller_parameters,
            {'ellipsoid': Ellipsoids.SPHERE, 'area_of_use': AreasOfUse.WORLD},
            aliases=("Sphere_Miller_Cylindrical",),
        ),
    ]

    for north in (True, False):
        for zone in range(1, UTM_ZONE_COUNT + 1):
            hemisphere = "N" if north else "S"
            definitions.append(OperationDefinition(
                utm_projection_identifier(zone, north),
                f"UTM zone {zone}{hemisphere}",
                TransverseMercatorProjection.METHOD,
                utm_parameters(zone, north),
                {'ellipsoid': Ellipsoids.WGS84, 'area_of_use': AreasOfUse.utm_zone(zone, north)},
            ))

    return definitions


def _translation(dx: float, dy: float, dz: float) -> Dict[Any, Any]:
    P = CoordinateOperationParameters
    return {
        P.X_AXIS_TRANSLATION: Length.from_metre(dx),
        P.Y_AXIS_TRANSLATION: Length.from_metre(dy),
        P.Z_AXIS_TRANSLATION: Length.from_metre(dz),
    }


def _geocentric_definitions() -> List[OperationDefinition]:
    from ..reference.catalog import AreasOfUse

    method = GeocentricTranslation.METHOD
    return [
        OperationDefinition(
            "EPSG::1133", "ED50 to WGS 84 (1)", method, _translation(-87.0, -98.0, -121.0),
            {'area_of_use': AreasOfUse.EUROPE},
        ),
        OperationDefinition(
            "EPSG::1173", "NAD27 to WGS 84 (4)", method, _translation(-8.0, 160.0, 176.0),
            {'area_of_use': AreasOfUse.NORTH_AMERICA},
        ),
        OperationDefinition(
            "EPSG::1150", "GDA94 to WGS 84 (1)", method, _translation(0.0, 0.0, 0.0),
            {'area_of_use': AreasOfUse.AUSTRALIA},
        ),
    ]


CoordinateProjectionFactory = OperationFactory(
    "coordinate projection",
    _projection_implementations,
    _projection_definitions,
    {'ellipsoid': lambda: None, 'area_of_use': _world},
)

GeocentricTransformationFactory = OperationFactory(
    "geocentric transformation",
    _geocentric_implementations,
    _geocentric_definitions,
    {'area_of_use': _world},
)
