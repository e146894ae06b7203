"""
Winding Analysis - Signed area, orientation and convexity of polygons.

Orientation follows the y-up convention: counter-clockwise polygons have a
positive signed area, clockwise ones a negative one. The closing edge from
the last back to the first point is always included.
"""

import numpy as np
from numba import njit
from typing import Optional

from geometry.errors import MalformedVerticesError
from geometry.primitives import turn_sign
from geometry.regions import as_vertex_array, check_even, require_buffer, resolve_region, wrap_index


# =============================================================================
# NUMBA KERNELS
# =============================================================================

@njit(cache=True)
def _polygon_area(vertices: np.ndarray, offset: int, length: int) -> float:
    """Signed shoelace area of a region."""
    area = 0.0
    end = offset + length
    for i in range(offset, end, 2):
        j = wrap_index(offset, length, i + 2)
        area += vertices[i] * vertices[j + 1]
        area -= vertices[i + 1] * vertices[j]
    return area / 2.0


@njit(cache=True)
def _is_convex(vertices: np.ndarray, offset: int, length: int) -> bool:
    direction = 0
    for a in range(offset, offset + length, 2):
        b = wrap_index(offset, length, a + 2)
        c = wrap_index(offset, length, a + 4)
        turn = turn_sign(vertices[a], vertices[a + 1], vertices[b], vertices[b + 1], vertices[c], vertices[c + 1])
        if turn == 0:
            continue
        if direction == 0:
            direction = turn
        elif turn != direction:
            return False
    return True


@njit(cache=True)
def _reverse(vertices: np.ndarray, offset: int, length: int, dim: int):
    i = offset
    j = offset + length - dim
    while i < j:
        for c in range(dim):
            tmp = vertices[i + c]
            vertices[i + c] = vertices[j + c]
            vertices[j + c] = tmp
        i += dim
        j -= dim


# =============================================================================
# PUBLIC API
# =============================================================================

def polygon_area(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Signed area of a simple polygon.

    Returns:
        Positive for counter-clockwise, negative for clockwise winding
        (0 for fewer than 3 points)

    Raises:
        MalformedVerticesError: odd region length
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    if length == 0:
        return 0.0
    return float(_polygon_area(vertices, offset, length))


def are_vertices_clockwise(vertices, offset: int = 0, length: Optional[int] = None) -> bool:
    """
    Whether a polygon's points are in clockwise order.

    One or two points have no orientation and count as clockwise.
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    return length <= 4 or polygon_area(vertices, offset, length) < 0


def is_convex(vertices, offset: int = 0, length: Optional[int] = None) -> bool:
    """
    Whether a polygon turns the same way at every vertex.

    Collinear vertices are ignored, so a square with an extra point on one
    side is still convex. The test does not detect self-intersection: a
    pentagram-like loop that always turns left passes as convex.
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    if length < 6:
        return True
    return bool(_is_convex(vertices, offset, length))


def reverse(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Reverse the order of a region's 2-D points in place."""
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    _reverse(vertices, offset, length, 2)
    return vertices


def reverse_3d(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Reverse the order of a region's 3-D points in place."""
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    if length % 3 != 0:
        raise MalformedVerticesError(f"malformed 3-D vertices, length is not a multiple of 3: {length}")
    _reverse(vertices, offset, length, 3)
    return vertices


def warmup():
    """Warm up JIT compilation."""
    v = np.array([0.0, 0.0, 1.0, 0.0, 1.0, 1.0])
    _ = polygon_area(v)
    _ = is_convex(v)
    reverse(v)
    reverse_3d(v)
