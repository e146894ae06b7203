"""
Array Regions - Bounds-checked views over flat vertex arrays.

A vertex array stores 2-D points interleaved: [x0, y0, x1, y1, ...].
Every kernel operation works on a REGION of such an array, given as
(offset, length) in scalars, so sub-ranges can be processed without copying.

This module provides:
1. Region validation (offset/length against the array size)
2. Strided selection of one component (x, y, z, w) out of a region
3. Index wrapping for closing edges
4. Conversions between flat arrays and (n, 2) point arrays
"""

import numpy as np
from numba import njit
from typing import List, Optional, Sequence, Tuple, Union

from geometry.errors import MalformedVerticesError, RegionError


# =============================================================================
# REGION VALIDATION
# =============================================================================

def check_region(array, offset: int, length: int) -> None:
    """
    Validate that [offset, offset + length) lies inside the array.

    Raises:
        RegionError: offset < 0, length < 0 or offset + length > len(array)
    """
    size = len(array)
    if offset < 0 or length < 0 or offset + length > size:
        raise RegionError(offset, length, size)


def resolve_region(array, offset: int = 0, length: Optional[int] = None) -> Tuple[int, int]:
    """
    Default a missing length to "until the end of the array" and validate.

    Returns:
        (offset, length)
    """
    if length is None:
        length = len(array) - offset
    check_region(array, offset, length)
    return offset, length


def check_even(length: int, what: str = "vertices") -> None:
    """Raise MalformedVerticesError if a 2-D region has an odd scalar count."""
    if length % 2 != 0:
        raise MalformedVerticesError(f"malformed {what}, length is odd: {length}")


@njit(cache=True)
def wrap_index(offset: int, length: int, index: int) -> int:
    """
    Wrap an index into the region [offset, offset + length).

    Used to close polygons: the point after the last one is the first one.

    Example (offset=2, length=8):
        8 -> 8, 10 -> 2, 11 -> 3, 15 -> 7
    """
    return offset + (index - offset) % length


# =============================================================================
# BUFFERS
# =============================================================================

def as_vertex_array(values) -> np.ndarray:
    """
    Coerce a sequence of scalars (or an (n, 2) point array) to a flat float array.

    Numpy float arrays are returned as-is, so region operations on them
    still read the caller's memory.
    """
    if isinstance(values, np.ndarray) and values.ndim == 1 and np.issubdtype(values.dtype, np.floating):
        return values
    return np.asarray(values, dtype=np.float64).reshape(-1)


def require_buffer(vertices) -> np.ndarray:
    """
    Return vertices if they can be mutated in place.

    In-place operations hand their result back through the caller's buffer,
    so that buffer has to be a 1-D floating point numpy array.
    """
    if not isinstance(vertices, np.ndarray) or vertices.ndim != 1:
        raise TypeError(
            f"in-place operations need a 1-D numpy array, got {type(vertices).__name__}"
        )
    if not np.issubdtype(vertices.dtype, np.floating):
        raise TypeError(f"in-place operations need a floating point array, got dtype {vertices.dtype}")
    return vertices


def scratch_buffer(scratch: Optional[np.ndarray], length: int, like: np.ndarray) -> np.ndarray:
    """
    Validate a caller-supplied scratch buffer or allocate one for this call.

    The scratch buffer must hold at least `length` scalars and must not
    share memory with the array being processed.
    """
    if scratch is None:
        return np.empty(length, dtype=like.dtype)
    scratch = require_buffer(scratch)
    if len(scratch) < length:
        raise RegionError(0, length, len(scratch))
    if np.shares_memory(scratch, like):
        raise ValueError("scratch buffer must not overlap the vertices it works on")
    return scratch


# =============================================================================
# STRIDED SELECTION
# =============================================================================

def select(
    values,
    offset: int,
    length: int,
    start: int,
    stride: int,
    out: Optional[np.ndarray] = None,
    out_offset: int = 0,
) -> np.ndarray:
    """
    Select every `stride`-th scalar of a region, beginning at component `start`.

    Args:
        values: Flat array
        offset: Region start
        length: Region length
        start: Component index inside each tuple (0 = x, 1 = y, 2 = z, 3 = w)
        stride: Tuple size (2 for 2-D points, 3 or 4 for higher dimensions)
        out: Optional destination array
        out_offset: Where to start writing in `out`

    Returns:
        `out` if given, else a new array with the selected scalars
    """
    if stride <= 0:
        raise ValueError(f"stride must be positive: {stride}")
    values = as_vertex_array(values)
    check_region(values, offset, length)

    selected = values[offset + start:offset + length:stride] if start < length else values[:0]

    if out is None:
        return selected.copy()

    check_region(out, out_offset, len(selected))
    out[out_offset:out_offset + len(selected)] = selected
    return out


# =============================================================================
# CONVERSIONS
# =============================================================================

def to_points(vertices, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Copy a region of a flat vertex array into an (n, 2) point array.
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    return np.array(vertices[offset:offset + length], dtype=np.float64).reshape(-1, 2)


def to_vertex_array(points) -> np.ndarray:
    """
    Flatten an (n, 2) point array (or a list of (x, y) pairs) into [x0, y0, x1, y1, ...].
    """
    points = np.asarray(points, dtype=np.float64)
    if points.size == 0:
        return np.empty(0, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 2:
        raise MalformedVerticesError(f"expected an (n, 2) point array, got shape {points.shape}")
    return points.reshape(-1).copy()


def split_polygons(vertices, vertex_counts: Union[int, Sequence[int]]) -> List[np.ndarray]:
    """
    Split a flat array into consecutive polygons.

    Args:
        vertices: Flat array holding several polygons back to back
        vertex_counts: Points per polygon, either one count for all or one per polygon

    Returns:
        List of new flat arrays, one per polygon
    """
    vertices = as_vertex_array(vertices)
    check_even(len(vertices))
    n_points = len(vertices) // 2

    if isinstance(vertex_counts, int):
        if vertex_counts <= 0 or n_points % vertex_counts != 0:
            raise MalformedVerticesError(
                f"{n_points} points cannot be split into polygons of {vertex_counts} points"
            )
        vertex_counts = [vertex_counts] * (n_points // vertex_counts)

    if sum(vertex_counts) > n_points:
        raise RegionError(0, 2 * sum(vertex_counts), len(vertices))

    polygons = []
    start = 0
    for count in vertex_counts:
        polygons.append(vertices[start:start + 2 * count].copy())
        start += 2 * count
    return polygons
