"""
Geometry Errors - Exception types raised by the polygon kernel.

Three kinds of failure exist:
1. Region violations - an (offset, length) pair reaching outside its array
2. Malformed vertices - odd scalar counts, too few points for the operation
3. Invalid shapes - a polygon or chain that fails a shape precondition

Numerically degenerate input (e.g. metrics over an empty region) is not an
error; those operations return NaN instead.
"""

from enum import Enum
from typing import Optional


class GeometryError(Exception):
    """Base class for all kernel errors."""


class RegionError(GeometryError, IndexError):
    """
    An (offset, length) region does not fit into its backing array.

    Attributes:
        offset: Requested start index
        length: Requested number of scalars
        size: Length of the backing array
    """

    def __init__(self, offset: int, length: int, size: int):
        self.offset = offset
        self.length = length
        self.size = size
        super().__init__(
            f"region [{offset}, {offset + length}) (offset={offset}, length={length}) "
            f"is out of bounds for array of size {size}"
        )


class MalformedVerticesError(GeometryError, ValueError):
    """Vertices that cannot describe the requested geometry (odd length, too few points)."""


class PolygonProblem(Enum):
    """Why a polygon fails the shape preconditions."""

    MALFORMED_VERTICES = "malformed vertices"
    VERTEX_COUNT = "invalid vertex count"
    CONCAVE = "concave"
    AREA = "area too small"


class ChainProblem(Enum):
    """Why a polyline fails the chain preconditions."""

    MALFORMED_VERTICES = "malformed vertices"
    VERTEX_COUNT = "invalid vertex count"
    CLOSE_VERTICES = "vertices too close"


class InvalidPolygonShapeError(MalformedVerticesError):
    """
    A polygon violates a shape precondition.

    Attributes:
        problem: The failed precondition
        offset, length: The region that was checked
    """

    def __init__(self, message: str, problem: PolygonProblem, offset: int = 0, length: Optional[int] = None):
        super().__init__(message)
        self.problem = problem
        self.offset = offset
        self.length = length


class InvalidChainShapeError(MalformedVerticesError):
    """A polyline violates a chain precondition."""

    def __init__(self, message: str, problem: ChainProblem, offset: int = 0, length: Optional[int] = None):
        super().__init__(message)
        self.problem = problem
        self.offset = offset
        self.length = length
