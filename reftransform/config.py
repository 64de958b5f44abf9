"""
Configuration constants for the reference transformation core.

Contains the numeric constants shared by the projection implementations
and the runtime options of the geometry transformation driver.
"""

from dataclasses import dataclass


# =============================================================================
# MILLER CYLINDRICAL PROJECTION
# =============================================================================

# Latitude scaling of the Miller formulas (Miller 1942: 4/5 of Mercator)
MILLER_LATITUDE_FACTOR = 0.8

# =============================================================================
# LONGITUDE HANDLING
# =============================================================================

# Half circle (degrees); longitude differences beyond it are wrapped once
LONGITUDE_HALF_CIRCLE_DEG = 180.0

# Full circle (degrees)
LONGITUDE_FULL_CIRCLE_DEG = 360.0

# =============================================================================
# GEOCENTRIC CONVERSION
# =============================================================================

# Maximum iterations of the geocentric to geographic latitude refinement
GEOCENTRIC_MAX_ITERATIONS = 10

# Latitude convergence threshold (radians), roughly 0.1 mm on the ground
GEOCENTRIC_TOLERANCE = 1e-12

# =============================================================================
# TRANSFORMATION DRIVER
# =============================================================================

# Copy source metadata onto transformed geometries unless told otherwise
METADATA_PRESERVATION = False

# Reject non-finite projection results with ComputationError
CHECK_FINITE_RESULTS = True


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class TransformationConfig:
    """
    Runtime configuration for reference transformations.

    Holds the defaults the geometry transformation driver falls back to
    when an operation parameter is not supplied explicitly.
    """

    # Default of the MetadataPreservation operation parameter
    metadata_preservation: bool = METADATA_PRESERVATION

    # Projection results are checked for NaN/inf
    check_finite: bool = CHECK_FINITE_RESULTS

    # Geocentric to geographic conversion
    geocentric_max_iterations: int = GEOCENTRIC_MAX_ITERATIONS
    geocentric_tolerance: float = GEOCENTRIC_TOLERANCE

    def __post_init__(self):
        """Validate configuration values."""
        if self.geocentric_max_iterations < 1:
            raise ValueError("geocentric_max_iterations must be at least 1")

        if not self.geocentric_tolerance > 0:
            raise ValueError("geocentric_tolerance must be positive")


# Default configuration instance
DEFAULT_CONFIG = TransformationConfig()
