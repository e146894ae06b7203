"""
Convex Arrangement - Turn an unordered convex point set into a polygon loop.

The points are chained along x, then the chord between the leftmost and the
rightmost point splits them into two hulls. Points on the requested side
of the chord are written front to back, the others back to front, which
closes the loop with the requested winding.
"""

import numpy as np
from numba import njit
from typing import Optional

from geometry.ordering import sort_points
from geometry.primitives import det
from geometry.regions import check_even, require_buffer, resolve_region, scratch_buffer


@njit(cache=True)
def _arrange(vertices: np.ndarray, offset: int, length: int, clockwise: bool, scratch: np.ndarray):
    """Distribute x-sorted points around the chord from the first to the last one."""
    for k in range(length):
        scratch[k] = vertices[offset + k]

    fx = scratch[0]
    fy = scratch[1]
    lx = scratch[length - 2]
    ly = scratch[length - 1]

    front = offset + 2
    back = offset + length - 2
    for k in range(2, length, 2):
        x = scratch[k]
        y = scratch[k + 1]
        d = det(fx, fy, lx, ly, x, y)
        if (d > 0) if clockwise else (d < 0):
            vertices[front] = x
            vertices[front + 1] = y
            front += 2
        else:
            vertices[back] = x
            vertices[back + 1] = y
            back -= 2


def arrange_convex_polygon(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None,
                           clockwise: bool = False, scratch: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Reorder the points of a convex polygon so they form a loop.

    Polygons with up to four vertices are left as they are. The input must
    already be convex; concave point sets produce a loop that may cross itself.

    Args:
        vertices: Flat vertex array, reordered in place
        offset: Region start
        length: Region length in scalars (default: to the end)
        clockwise: Wind clockwise instead of counter-clockwise
        scratch: Optional work buffer of at least `length` scalars

    Returns:
        The same array

    Example:
        [0, 0, .75, 2, 1.5, 2.5, 2.5, 2, 2, .5, 1, 0] counter-clockwise
        -> [0, 0, 1, 0, 2, .5, 2.5, 2, 1.5, 2.5, .75, 2]
    """
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    if length <= 8:
        return vertices

    scratch = scratch_buffer(scratch, length, vertices)
    sort_points(vertices, offset, length, by_y=False, scratch=scratch)
    _arrange(vertices, offset, length, clockwise, scratch)
    return vertices


def warmup():
    """Warm up JIT compilation."""
    v = np.array([0.0, 0.0, 2.0, 0.0, 1.0, -1.0, 2.0, 2.0, 0.0, 2.0])
    arrange_convex_polygon(v)
