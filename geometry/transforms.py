"""
Transforms - In-place affine helpers over regions of flat vertex arrays.

Every helper validates the region before writing and returns the same
array it was given, so calls can be chained:

    to_y_down(translate(v, 1.0, 2.0))

Rectangle helpers (rotate_rectangle, keep_within) work on scalars and
return new values.
"""

import numpy as np
from numba import njit
from typing import Optional, Tuple
import math

from geometry.bounds import amplitude, height, min_value, width
from geometry.regions import check_even, check_region, require_buffer, resolve_region


def _region(vertices, offset: int, length: Optional[int], points: bool = True) -> Tuple[np.ndarray, int, int]:
    vertices = require_buffer(vertices)
    offset, length = resolve_region(vertices, offset, length)
    if points:
        check_even(length)
    return vertices, offset, length


# =============================================================================
# TRANSLATION / SCALING
# =============================================================================

def translate(vertices: np.ndarray, dx: float, dy: float, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Add (dx, dy) to every point of the region."""
    vertices, offset, length = _region(vertices, offset, length)
    end = offset + length
    vertices[offset:end:2] += dx
    vertices[offset + 1:end:2] += dy
    return vertices


def subtract(vertices: np.ndarray, dx: float, dy: float, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Subtract (dx, dy) from every point of the region."""
    return translate(vertices, -dx, -dy, offset, length)


def multiply(vertices: np.ndarray, fx: float, fy: float, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Scale every point of the region by (fx, fy) around the origin."""
    vertices, offset, length = _region(vertices, offset, length)
    end = offset + length
    vertices[offset:end:2] *= fx
    vertices[offset + 1:end:2] *= fy
    return vertices


def divide(vertices: np.ndarray, dx: float, dy: float, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Divide every point of the region by (dx, dy).

    Raises:
        ZeroDivisionError: dx or dy is zero (nothing is written)
    """
    if dx == 0 or dy == 0:
        raise ZeroDivisionError(f"cannot divide vertices by ({dx}, {dy})")
    return multiply(vertices, 1.0 / dx, 1.0 / dy, offset, length)


def scale_values(values: np.ndarray, lo: float, hi: float, offset: int = 0, length: Optional[int] = None,
                 clamp: bool = False) -> np.ndarray:
    """
    Linearly rescale scalars in place so they span [lo, hi].

    A region whose values are all equal cannot be stretched; it is moved to `lo`.

    Args:
        clamp: Clip values above `hi` caused by rounding
    """
    values, offset, length = _region(values, offset, length, points=False)
    if length == 0:
        return values
    view = values[offset:offset + length]

    span = amplitude(values, offset, length)
    if span != 0 and hi != lo:
        view /= span / (hi - lo)
    view += lo - min_value(values, offset, length)

    if clamp:
        np.minimum(view, hi, out=view)
    return values


def scale_to_bounds(vertices: np.ndarray, min_x: float, min_y: float, max_x: float, max_y: float,
                    offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Fit the region's points into the rectangle [min_x, max_x] x [min_y, max_y].

    Each axis is scaled independently, so the aspect ratio is not preserved.
    """
    vertices, offset, length = _region(vertices, offset, length)
    end = offset + length
    for start, lo, hi in ((offset, min_x, max_x), (offset + 1, min_y, max_y)):
        view = vertices[start:end:2]
        if len(view) == 0:
            continue
        span = float(view.max() - view.min())
        if span != 0 and hi != lo:
            view /= span / (hi - lo)
        view += lo - view.min()
    return vertices


# =============================================================================
# AXIS INVERSION
# =============================================================================

def invert_axis(coord: float, axis_size: float) -> float:
    """
    Mirror a coordinate on an axis of the given size.

    The result is the coordinate seen from the other end of the axis.
    """
    return axis_size - coord


def invert_axes(vertices: np.ndarray, x: bool, y: bool, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Mirror the region on the x and/or y axis, using its own width and height as axis sizes.

    Example:
        [0, 0, 1, 0, 1, 1, 0, 1] with x and y -> [1, 1, 0, 1, 0, 0, 1, 0]
    """
    vertices, offset, length = _region(vertices, offset, length)
    if not x and not y:
        return vertices

    w = width(vertices, offset, length)
    h = height(vertices, offset, length)
    end = offset + length
    if x:
        vertices[offset:end:2] = w - vertices[offset:end:2]
    if y:
        vertices[offset + 1:end:2] = h - vertices[offset + 1:end:2]
    return vertices


def to_y_down(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Convert from a y-up to a y-down coordinate system.

    The y axis is mirrored and then shifted back by the region's height,
    which leaves every point at (x, -y).
    """
    vertices, offset, length = _region(vertices, offset, length)
    invert_axes(vertices, False, True, offset, length)
    return subtract(vertices, 0.0, height(vertices, offset, length), offset, length)


def to_y_up(vertices: np.ndarray, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """Convert from a y-down to a y-up coordinate system."""
    return to_y_down(vertices, offset, length)


# =============================================================================
# ROTATION
# =============================================================================

@njit(cache=True)
def _rotate_inplace(vertices: np.ndarray, offset: int, length: int,
                    angle_rad: float, origin_x: float, origin_y: float):
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)

    for i in range(offset, offset + length, 2):
        x = vertices[i] - origin_x
        y = vertices[i + 1] - origin_y
        vertices[i] = x * cos_a - y * sin_a + origin_x
        vertices[i + 1] = x * sin_a + y * cos_a + origin_y


def rotate_vertices(vertices: np.ndarray, angle_rad: float, origin_x: float = 0.0, origin_y: float = 0.0,
                    offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Rotate the region's points around (origin_x, origin_y), counter-clockwise.

    Args:
        vertices: Flat vertex array, modified in place
        angle_rad: Rotation angle in radians

    Returns:
        The same array
    """
    vertices, offset, length = _region(vertices, offset, length)
    _rotate_inplace(vertices, offset, length, angle_rad, origin_x, origin_y)
    return vertices


def rotate_rectangle(x: float, y: float, w: float, h: float, angle_rad: float,
                     out: Optional[np.ndarray] = None, out_offset: int = 0) -> np.ndarray:
    """
    Corners of a rectangle rotated around its center.

    Args:
        x, y: Lower-left corner of the unrotated rectangle
        w, h: Size of the rectangle
        angle_rad: Rotation in radians
        out: Optional destination for the 8 scalars

    Returns:
        [x0, y0, x1, y1, x2, y2, x3, y3] - the corners starting at the
        (rotated) upper-right one, then lower-right, lower-left, upper-left
    """
    if out is None:
        out = np.empty(8, dtype=np.float64)
        out_offset = 0
    check_region(out, out_offset, 8)

    rad = math.sqrt(w * w + h * h) / 2.0
    theta = math.atan2(h, w)
    x0 = rad * math.cos(theta + angle_rad)
    y0 = rad * math.sin(theta + angle_rad)
    x1 = rad * math.cos(-theta + angle_rad)
    y1 = rad * math.sin(-theta + angle_rad)
    cx = x + w / 2.0
    cy = y + h / 2.0

    out[out_offset:out_offset + 8] = (
        cx + x0, cy + y0,
        cx + x1, cy + y1,
        cx - x0, cy - y0,
        cx - x1, cy - y1,
    )
    return out


# =============================================================================
# RECTANGLES
# =============================================================================

def _keep_within_axis(pos: float, size: float, bound_pos: float, bound_size: float) -> float:
    if bound_size < size:
        return bound_pos + bound_size / 2.0 - size / 2.0
    if pos < bound_pos:
        return bound_pos
    if pos + size > bound_pos + bound_size:
        return bound_pos + bound_size - size
    return pos


def keep_within(x: float, y: float, w: float, h: float,
                x2: float, y2: float, w2: float, h2: float) -> Tuple[float, float]:
    """
    Position of rectangle (x, y, w, h) moved to lie inside rectangle (x2, y2, w2, h2).

    Along an axis where the outer rectangle is smaller, the inner one is
    centered on it instead.

    Returns:
        (x, y) - new lower-left corner
    """
    return _keep_within_axis(x, w, x2, w2), _keep_within_axis(y, h, y2, h2)


def warmup():
    """Warm up JIT compilation."""
    v = np.array([0.0, 0.0, 1.0, 0.0, 1.0, 1.0])
    rotate_vertices(v, 0.5)
