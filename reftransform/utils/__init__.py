"""
Utility functions for reftransform.
"""

from .math_utils import (
    wrap_longitude_delta,
    meridional_arc,
)
from .logging_utils import setup_logging

__all__ = [
    'wrap_longitude_delta',
    'meridional_arc',
    'setup_logging',
]
