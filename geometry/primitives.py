"""
Primitives - Numba-accelerated scalar kernels shared by the whole package.
"""

import numpy as np
from numba import njit
import math


@njit(cache=True)
def det(x1, y1, x2, y2, x3, y3):
    """
    Determinant of the 3x3 matrix [[x1, y1, 1], [x2, y2, 1], [x3, y3, 1]].

    Twice the signed area of the triangle (p1, p2, p3):
    positive for a counter-clockwise turn, negative for clockwise, 0 if collinear.
    """
    return x1 * y2 + x2 * y3 + x3 * y1 - y1 * x2 - y2 * x3 - y3 * x1


@njit(cache=True)
def turn_sign(x1, y1, x2, y2, x3, y3) -> int:
    """Sign of det(): 1 (left turn), -1 (right turn) or 0 (collinear)."""
    d = det(x1, y1, x2, y2, x3, y3)
    if d > 0:
        return 1
    if d < 0:
        return -1
    return 0


@njit(cache=True)
def distance2(x1, y1, x2, y2):
    """Squared distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


@njit(cache=True)
def distance(x1, y1, x2, y2):
    """Distance between two points."""
    return math.sqrt(distance2(x1, y1, x2, y2))


@njit(cache=True)
def between_values(value, a, b, inclusive=True) -> bool:
    """Whether value lies between a and b (given in any order)."""
    lo = min(a, b)
    hi = max(a, b)
    if inclusive:
        return lo <= value <= hi
    return lo < value < hi


@njit(cache=True)
def between(x, y, ax, ay, bx, by, inclusive=True) -> bool:
    """
    Whether point (x, y) lies on the segment a-b.

    The point must be exactly collinear with a and b and within their bounds.
    """
    return (
        det(x, y, ax, ay, bx, by) == 0
        and between_values(x, ax, bx, inclusive)
        and between_values(y, ay, by, inclusive)
    )


@njit(cache=True)
def intersect_segment_pair(x1, y1, x2, y2, x3, y3, x4, y4):
    """
    Intersect segment p1-p2 with segment p3-p4.

    Parallel (and collinear) segments are reported as not intersecting.

    Returns:
        (intersects, x, y) - x and y are only meaningful if intersects is True
    """
    d = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if d == 0:
        return False, 0.0, 0.0

    yd = y1 - y3
    xd = x1 - x3
    ua = ((x4 - x3) * yd - (y4 - y3) * xd) / d
    if ua < 0.0 or ua > 1.0:
        return False, 0.0, 0.0

    ub = ((x2 - x1) * yd - (y2 - y1) * xd) / d
    if ub < 0.0 or ub > 1.0:
        return False, 0.0, 0.0

    return True, x1 + (x2 - x1) * ua, y1 + (y2 - y1) * ua


def warmup():
    """Warm up JIT compilation."""
    _ = det(0.0, 0.0, 1.0, 0.0, 0.0, 1.0)
    _ = turn_sign(0.0, 0.0, 1.0, 0.0, 0.0, 1.0)
    _ = distance(0.0, 0.0, 3.0, 4.0)
    _ = between(0.5, 0.5, 0.0, 0.0, 1.0, 1.0, True)
    _ = intersect_segment_pair(0.0, 0.0, 1.0, 1.0, 0.0, 1.0, 1.0, 0.0)
