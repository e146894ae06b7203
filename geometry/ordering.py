"""
Point Ordering - Chain unordered point sets along an axis, find close points.

sort_points turns a point cloud into a chain that walks from the point with
the smallest coordinate to the one with the greatest, always stepping to
the nearest coordinate that is not behind the current point. Repeated
coordinates are consumed as often as they occur in the input, so no
point is emitted twice while another with the same coordinate is left out.

The walk is quadratic in the number of points; it is meant for the small
point sets of physics shapes.
"""

import numpy as np
from numba import njit
from typing import Optional

from geometry.regions import (
    as_vertex_array,
    check_even,
    require_buffer,
    resolve_region,
    scratch_buffer,
)


# =============================================================================
# NUMBA KERNELS
# =============================================================================

@njit(cache=True)
def _count_axis_value(values: np.ndarray, start: int, end: int, axis: int, value: float) -> int:
    """Number of points in values[start:end] whose `axis` coordinate equals value."""
    count = 0
    for i in range(start, end, 2):
        if values[i + axis] == value:
            count += 1
    return count


@njit(cache=True)
def _sort_points(vertices: np.ndarray, offset: int, length: int, axis: int, scratch: np.ndarray):
    end = offset + length

    smallest = offset
    for i in range(offset, end, 2):
        if vertices[i + axis] < vertices[smallest + axis]:
            smallest = i

    greatest = offset
    for i in range(offset, end, 2):
        if vertices[i + axis] > vertices[greatest + axis]:
            greatest = i

    scratch[0] = vertices[smallest]
    scratch[1] = vertices[smallest + 1]

    i = smallest
    for fi in range(2, length, 2):
        nxt = greatest
        coord = vertices[i + axis]
        for ii in range(offset, end, 2):
            if ii == i:
                continue
            coord2 = vertices[ii + axis]
            if coord2 < coord:
                continue
            if coord2 - coord <= vertices[nxt + axis] - coord:
                # skip values the chain already holds as often as the input does
                in_chain = _count_axis_value(scratch, 0, fi, axis, coord2)
                if in_chain > 0:
                    in_input = _count_axis_value(vertices, offset, end, axis, coord2)
                    if in_chain >= in_input:
                        continue
                nxt = ii
        scratch[fi] = vertices[nxt]
        scratch[fi + 1] = vertices[nxt + 1]
        i = nxt

    for k in range(length):
        vertices[offset + k] = scratch[k]


@njit(cache=True)
def _close_mask_distance(x: float, y: float, max_distance2: float,
                         vertices: np.ndarray, offset: int, length: int) -> np.ndarray:
    mask = np.zeros(length // 2, dtype=np.bool_)
    for k in range(length // 2):
        i = offset + 2 * k
        dx = vertices[i] - x
        dy = vertices[i + 1] - y
        mask[k] = dx * dx + dy * dy <= max_distance2
    return mask


@njit(cache=True)
def _close_mask_delta(x: float, y: float, delta_x: float, delta_y: float,
                      vertices: np.ndarray, offset: int, length: int) -> np.ndarray:
    mask = np.zeros(length // 2, dtype=np.bool_)
    for k in range(length // 2):
        i = offset + 2 * k
        mask[k] = abs(vertices[i] - x) <= delta_x and abs(vertices[i + 1] - y) <= delta_y
    return mask


# =============================================================================
# PUBLIC API
# =============================================================================

def sort_points(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None,
                by_y: bool = False, scratch: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Reorder a region's points into a chain ascending along x (or y).

    Args:
        vertices: Flat vertex array, reordered in place
        offset: Region start
        length: Region length in scalars (default: to the end)
        by_y: Chain along y instead of x
        scratch: Optional work buffer of at least `length` scalars that does
            not overlap `vertices`; allocated per call if omitted

    Returns:
        The same array

    Example:
        [0, 0, .75, 2, 1.5, 2.5, 2.5, 2, 2, .5, 1, 0, 0, 0]
        -> [0, 0, 0, 0, .75, 2, 1, 0, 1.5, 2.5, 2, .5, 2.5, 2]
    """
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    scratch = scratch_buffer(scratch, length, vertices)
    if length < 4:
        return vertices

    _sort_points(vertices, offset, length, 1 if by_y else 0, scratch)
    return vertices


def _close_mask(x, y, vertices, offset, length, max_distance2, delta_x, delta_y) -> np.ndarray:
    if max_distance2 is not None:
        if delta_x is not None or delta_y is not None:
            raise ValueError("pass either max_distance2 or delta_x/delta_y, not both")
        return _close_mask_distance(x, y, max_distance2, vertices, offset, length)
    if delta_x is None or delta_y is None:
        raise ValueError("close point search needs max_distance2 or both delta_x and delta_y")
    return _close_mask_delta(x, y, delta_x, delta_y, vertices, offset, length)


def close_points(x: float, y: float, vertices, offset: int = 0, length: Optional[int] = None,
                 max_distance2: Optional[float] = None, delta_x: Optional[float] = None,
                 delta_y: Optional[float] = None) -> np.ndarray:
    """
    Points of a region that are close to (x, y).

    Closeness is either a squared distance (`max_distance2`) or a per-axis
    difference (`delta_x` and `delta_y`). Both bounds are inclusive.

    Returns:
        Flat array of the close points, in region order
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    mask = _close_mask(x, y, vertices, offset, length, max_distance2, delta_x, delta_y)
    points = vertices[offset:offset + length].reshape(-1, 2)
    return points[mask].reshape(-1)


def count_close_points(x: float, y: float, vertices, offset: int = 0, length: Optional[int] = None,
                       max_distance2: Optional[float] = None, delta_x: Optional[float] = None,
                       delta_y: Optional[float] = None) -> int:
    """Number of points of a region that are close to (x, y). See close_points."""
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    return int(_close_mask(x, y, vertices, offset, length, max_distance2, delta_x, delta_y).sum())


def warmup():
    """Warm up JIT compilation."""
    v = np.array([2.0, 0.0, 0.0, 1.0, 1.0, 2.0])
    sort_points(v)
    _ = count_close_points(0.0, 0.0, v, max_distance2=1.0)
    _ = count_close_points(0.0, 0.0, v, delta_x=1.0, delta_y=1.0)
