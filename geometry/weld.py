"""
Vertex Welding - Collapse runs of near-duplicate consecutive vertices.

Physics engines reject polygons whose vertices are closer than their
linear slop, so such vertices are merged before shapes are built.
Welding compacts the region in place; scalars after the returned vertex
count are stale.
"""

import numpy as np
from numba import njit
from typing import Optional
import logging

from config import get_weld_epsilon
from geometry.regions import as_vertex_array, check_even, require_buffer, resolve_region

logger = logging.getLogger(__name__)


@njit(cache=True)
def _weld(vertices: np.ndarray, offset: int, length: int, epsilon2: float, closed: bool) -> int:
    """
    Compact the region so no retained vertex is within sqrt(epsilon2) of its predecessor.

    Returns:
        Number of retained vertices
    """
    n = length // 2
    if n < 2:
        return n

    kept = 1
    last_x = vertices[offset]
    last_y = vertices[offset + 1]

    for k in range(1, n):
        i = offset + 2 * k
        x = vertices[i]
        y = vertices[i + 1]
        dx = x - last_x
        dy = y - last_y
        if dx * dx + dy * dy < epsilon2:
            continue
        j = offset + 2 * kept
        vertices[j] = x
        vertices[j + 1] = y
        last_x = x
        last_y = y
        kept += 1

    if closed:
        first_x = vertices[offset]
        first_y = vertices[offset + 1]
        while kept > 1:
            j = offset + 2 * (kept - 1)
            dx = vertices[j] - first_x
            dy = vertices[j + 1] - first_y
            if dx * dx + dy * dy >= epsilon2:
                break
            kept -= 1

    return kept


def weld(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None,
         epsilon: Optional[float] = None, closed: bool = False) -> int:
    """
    Merge near-duplicate consecutive vertices of a region in place.

    A vertex closer than `epsilon` to the last retained vertex is dropped.
    Regions with fewer than two points are left untouched.

    Args:
        vertices: Flat vertex array, compacted in place
        offset: Region start
        length: Region length in scalars (default: to the end)
        epsilon: Merge distance (default: CONFIG.tolerance.weld_epsilon)
        closed: Also drop trailing vertices that coincide with the first one

    Returns:
        Number of vertices left in the region

    Raises:
        MalformedVerticesError: odd region length (nothing is written)
    """
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    epsilon = get_weld_epsilon(epsilon)
    if epsilon < 0:
        raise ValueError(f"weld epsilon must not be negative: {epsilon}")

    count = int(_weld(vertices, offset, length, epsilon * epsilon, closed))
    if count != length // 2:
        logger.debug("Welded %d vertices down to %d (epsilon=%g)", length // 2, count, epsilon)
    return count


def welded(vertices, offset: int = 0, length: Optional[int] = None,
           epsilon: Optional[float] = None, closed: bool = False) -> np.ndarray:
    """
    Welded copy of a region, trimmed to the retained vertices.
    """
    source = as_vertex_array(vertices)
    offset, length = resolve_region(source, offset, length)
    copy = np.array(source[offset:offset + length], dtype=np.float64)
    count = weld(copy, 0, length, epsilon, closed)
    return copy[:2 * count]


def warmup():
    """Warm up JIT compilation."""
    v = np.array([0.0, 0.0, 0.0, 0.0, 1.0, 1.0])
    _weld(v, 0, len(v), 1e-4, True)
