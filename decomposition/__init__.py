"""
Decomposition module - Triangulation and convex decomposition of concave polygons.
"""

from .ear_clipping import EarClippingTriangulator
from .convex_partition import HertelMehlhornDecomposer
from .orchestrator import (
    TRIANGULATORS,
    DECOMPOSERS,
    get_triangulator,
    get_decomposer,
    triangulate,
    decompose,
)

__all__ = [
    'EarClippingTriangulator',
    'HertelMehlhornDecomposer',
    'TRIANGULATORS',
    'DECOMPOSERS',
    'get_triangulator',
    'get_decomposer',
    'triangulate',
    'decompose',
]
