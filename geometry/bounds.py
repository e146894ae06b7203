"""
Bounding Metrics - Axis-aligned extents of flat coordinate arrays.

All metrics read a region of the array without copying. An empty region
has no extent: min/max/amplitude return NaN instead of raising, so callers
can treat "nothing there" as a value.

Component filters pick one coordinate out of interleaved tuples:
    filter_x / filter_y            - 2-D points  (stride 2)
    filter_x3d / filter_y3d / filter_z - 3-D points (stride 3)
    filter_w                       - 4-D tuples  (stride 4)
"""

import numpy as np
from numba import njit
from typing import Optional, Tuple
import math

from geometry.regions import as_vertex_array, resolve_region, select


# =============================================================================
# NUMBA KERNELS
# =============================================================================

@njit(cache=True)
def _extent(values: np.ndarray) -> Tuple[float, float]:
    """
    Minimum and maximum of a 1-D array.

    Returns:
        (min, max), both NaN for an empty array
    """
    n = len(values)
    if n == 0:
        return math.nan, math.nan

    lo = values[0]
    hi = values[0]
    for i in range(1, n):
        v = values[i]
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return lo, hi


def _component(values, offset: int, length: Optional[int], start: int, stride: int) -> np.ndarray:
    """Strided view of one component of a region (no copy)."""
    values = as_vertex_array(values)
    offset, length = resolve_region(values, offset, length)
    if start >= length:
        return values[:0]
    return values[offset + start:offset + length:stride]


# =============================================================================
# SCALAR EXTENTS
# =============================================================================

def min_value(values, offset: int = 0, length: Optional[int] = None) -> float:
    """Smallest scalar of the region (NaN if empty)."""
    return float(_extent(_component(values, offset, length, 0, 1))[0])


def max_value(values, offset: int = 0, length: Optional[int] = None) -> float:
    """Largest scalar of the region (NaN if empty)."""
    return float(_extent(_component(values, offset, length, 0, 1))[1])


def amplitude(values, offset: int = 0, length: Optional[int] = None) -> float:
    """max - min of the region (NaN if empty)."""
    lo, hi = _extent(_component(values, offset, length, 0, 1))
    return float(hi - lo)


# =============================================================================
# COMPONENT FILTERS
# =============================================================================

def filter_x(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """x coordinates of 2-D points."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 0, 2, out, out_offset)


def filter_y(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """y coordinates of 2-D points."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 1, 2, out, out_offset)


def filter_x3d(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """x coordinates of 3-D points."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 0, 3, out, out_offset)


def filter_y3d(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """y coordinates of 3-D points."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 1, 3, out, out_offset)


def filter_z(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """z coordinates of 3-D points."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 2, 3, out, out_offset)


def filter_w(values, offset: int = 0, length: Optional[int] = None, out=None, out_offset: int = 0) -> np.ndarray:
    """w components of 4-D tuples."""
    offset, length = resolve_region(as_vertex_array(values), offset, length)
    return select(values, offset, length, 3, 4, out, out_offset)


# =============================================================================
# 2-D / 3-D EXTENTS
# =============================================================================

def min_x(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    return float(_extent(_component(vertices, offset, length, 0, 2))[0])


def min_y(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    return float(_extent(_component(vertices, offset, length, 1, 2))[0])


def max_x(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    return float(_extent(_component(vertices, offset, length, 0, 2))[1])


def max_y(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    return float(_extent(_component(vertices, offset, length, 1, 2))[1])


def width(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    """Extent along x of 2-D points."""
    lo, hi = _extent(_component(vertices, offset, length, 0, 2))
    return float(hi - lo)


def height(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    """Extent along y of 2-D points."""
    lo, hi = _extent(_component(vertices, offset, length, 1, 2))
    return float(hi - lo)


def depth(vertices, offset: int = 0, length: Optional[int] = None) -> float:
    """Extent along z of 3-D points."""
    lo, hi = _extent(_component(vertices, offset, length, 2, 3))
    return float(hi - lo)


def size(vertices, offset: int = 0, length: Optional[int] = None) -> Tuple[float, float]:
    """(width, height) of 2-D points."""
    return width(vertices, offset, length), height(vertices, offset, length)


def aabb(vertices, offset: int = 0, length: Optional[int] = None) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounding box as a rectangle.

    Returns:
        (min_x, min_y, width, height)
    """
    x_lo, x_hi = _extent(_component(vertices, offset, length, 0, 2))
    y_lo, y_hi = _extent(_component(vertices, offset, length, 1, 2))
    return float(x_lo), float(y_lo), float(x_hi - x_lo), float(y_hi - y_lo)


def bounding_box(vertices, offset: int = 0, length: Optional[int] = None) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounding box as corners.

    Returns:
        (min_x, min_y, max_x, max_y)
    """
    x_lo, x_hi = _extent(_component(vertices, offset, length, 0, 2))
    y_lo, y_hi = _extent(_component(vertices, offset, length, 1, 2))
    return float(x_lo), float(y_lo), float(x_hi), float(y_hi)


def warmup():
    """Warm up JIT compilation."""
    v = np.array([0.0, 0.0, 1.0, 2.0, 3.0, 1.0])
    _ = bounding_box(v)
    _ = amplitude(v)
