"""
Mathematical utilities for reftransform.

Provides longitude wrapping and the meridional arc series
shared by the projection implementations.
"""

import math

from ..config import LONGITUDE_FULL_CIRCLE_DEG, LONGITUDE_HALF_CIRCLE_DEG

HALF_CIRCLE = math.radians(LONGITUDE_HALF_CIRCLE_DEG)
FULL_CIRCLE = math.radians(LONGITUDE_FULL_CIRCLE_DEG)


def wrap_longitude_delta(delta: float) -> float:
    """
    Bring a longitude difference back towards [-pi, pi].

    The difference is shifted by a single full circle when it lies beyond
    a half circle; larger differences are not reduced further.

    Args:
        delta: Longitude difference in radians

    Returns:
        Wrapped difference in radians
    """
    if delta > HALF_CIRCLE:
        return delta - FULL_CIRCLE
    if delta < -HALF_CIRCLE:
        return delta + FULL_CIRCLE
    return delta


def meridional_arc(semi_major_axis: float, eccentricity_squared: float, latitude: float) -> float:
    """
    Length of the meridian arc from the equator to a latitude.

    Truncated series in e^2 (Snyder, Map Projections, eq. 3-21).

    Args:
        semi_major_axis: Semi-major axis in metres
        eccentricity_squared: First eccentricity squared
        latitude: Latitude in radians

    Returns:
        Arc length in metres
    """
    e2 = eccentricity_squared
    e4 = e2 * e2
    e6 = e4 * e2
    return semi_major_axis * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * latitude
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * latitude)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * latitude)
        - (35 * e6 / 3072) * math.sin(6 * latitude)
    )
