"""
Map projection implementations.
"""

from .miller_cylindrical import WorldMillerCylindricalProjection
from .transverse_mercator import TransverseMercatorProjection

__all__ = [
    'WorldMillerCylindricalProjection',
    'TransverseMercatorProjection',
]
