"""
Decomposition Orchestrator - Split concave polygons into triangles or convex pieces.

The actual algorithms are opaque collaborators:
- a triangulator maps a flat vertex array to triangle indices (3 per triangle)
- a decomposer maps an (n, 2) point array to a list of point arrays

This module converts between those formats and the flat vertex arrays used
everywhere else, validates what comes back, and picks defaults by name
from the configuration.
"""

import numpy as np
from typing import Callable, Dict, List, Optional, Union
import logging

from config import CONFIG
from decomposition.convex_partition import HertelMehlhornDecomposer
from decomposition.ear_clipping import EarClippingTriangulator
from geometry.errors import MalformedVerticesError
from geometry.regions import as_vertex_array, check_even, resolve_region
from geometry.validation import is_simple

logger = logging.getLogger(__name__)

Triangulator = Callable[[np.ndarray], np.ndarray]
Decomposer = Callable[[np.ndarray], List[np.ndarray]]


# =============================================================================
# REGISTRIES
# =============================================================================

TRIANGULATORS: Dict[str, Callable[[], Triangulator]] = {
    'ear_clipping': EarClippingTriangulator,
}

DECOMPOSERS: Dict[str, Callable[[], Decomposer]] = {
    'hertel_mehlhorn': HertelMehlhornDecomposer,
}


def get_triangulator(name: Optional[str] = None) -> Triangulator:
    """Instantiate a registered triangulator (default: CONFIG.decomposition.triangulator)."""
    name = name or CONFIG.decomposition.triangulator
    if name not in TRIANGULATORS:
        raise ValueError(f"Unknown triangulator: {name}")
    return TRIANGULATORS[name]()


def get_decomposer(name: Optional[str] = None) -> Decomposer:
    """Instantiate a registered decomposer (default: CONFIG.decomposition.decomposer)."""
    name = name or CONFIG.decomposition.decomposer
    if name not in DECOMPOSERS:
        raise ValueError(f"Unknown decomposer: {name}")
    return DECOMPOSERS[name]()


def _resolve(collaborator, factory):
    if collaborator is None or isinstance(collaborator, str):
        return factory(collaborator)
    return collaborator


def _polygon_region(vertices, offset: int, length: Optional[int], validate: Optional[bool]) -> np.ndarray:
    """Copy of a region that is a usable polygon."""
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    check_even(length)
    if length < 6:
        raise MalformedVerticesError(f"a polygon consists of at least 3 points, length: {length}")

    flat = np.array(vertices[offset:offset + length], dtype=np.float64)
    if validate is None:
        validate = CONFIG.decomposition.validate_input
    if validate and not is_simple(flat):
        raise MalformedVerticesError("polygon is not simple (its boundary intersects itself)")
    return flat


# =============================================================================
# OPERATIONS
# =============================================================================

def triangulate(vertices, offset: int = 0, length: Optional[int] = None,
                triangulator: Union[Triangulator, str, None] = None,
                validate: Optional[bool] = None) -> List[np.ndarray]:
    """
    Split a polygon into triangles.

    Args:
        vertices: Flat vertex array
        offset: Region start
        length: Region length in scalars (default: to the end)
        triangulator: Callable or registered name (default from CONFIG)
        validate: Reject self-intersecting polygons first (default from CONFIG)

    Returns:
        List of triangles, each a new flat array of 6 scalars

    Raises:
        MalformedVerticesError: odd length, fewer than 3 points, or the
            triangulator returned indices that do not describe triangles
    """
    flat = _polygon_region(vertices, offset, length, validate)
    triangulator = _resolve(triangulator, get_triangulator)

    indices = np.asarray(triangulator(flat)).reshape(-1)
    n_points = len(flat) // 2
    if len(indices) % 3 != 0:
        raise MalformedVerticesError(f"triangulator returned {len(indices)} indices, not a multiple of 3")
    if len(indices) and (indices.min() < 0 or indices.max() >= n_points):
        raise MalformedVerticesError(f"triangulator returned indices outside [0, {n_points})")

    points = flat.reshape(-1, 2)
    triangles = [points[indices[t:t + 3]].reshape(-1).copy() for t in range(0, len(indices), 3)]

    logger.debug("Triangulated %d points into %d triangles", n_points, len(triangles))
    return triangles


def decompose(vertices, offset: int = 0, length: Optional[int] = None,
              decomposer: Union[Decomposer, str, None] = None,
              validate: Optional[bool] = None) -> List[np.ndarray]:
    """
    Split a polygon into convex polygons.

    Args:
        vertices: Flat vertex array
        offset: Region start
        length: Region length in scalars (default: to the end)
        decomposer: Callable or registered name (default from CONFIG)
        validate: Reject self-intersecting polygons first (default from CONFIG)

    Returns:
        List of convex polygons as new flat arrays

    Raises:
        MalformedVerticesError: odd length, fewer than 3 points, or the
            decomposer returned a piece with fewer than 3 points
    """
    flat = _polygon_region(vertices, offset, length, validate)
    decomposer = _resolve(decomposer, get_decomposer)

    pieces = []
    for piece in decomposer(flat.reshape(-1, 2).copy()):
        piece = np.asarray(piece, dtype=np.float64)
        if piece.ndim != 2 or piece.shape[1] != 2 or len(piece) < 3:
            raise MalformedVerticesError(f"decomposer returned an invalid piece of shape {piece.shape}")
        pieces.append(piece.reshape(-1).copy())

    logger.debug("Decomposed %d points into %d convex pieces", len(flat) // 2, len(pieces))
    return pieces


def warmup():
    """Warm up JIT compilation."""
    triangulate(np.array([0.0, 0.0, 2.0, 0.0, 2.0, 2.0, 1.0, 1.0, 0.0, 2.0]))
