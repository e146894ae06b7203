"""
Polygon Kernel - Global Configuration
Tolerances, shape limits and default collaborators in one place.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging
import math


@dataclass
class ToleranceConfig:
    """Numeric tolerances."""
    # Box2D linear slop: vertices closer than this collapse in the solver
    linear_slop: float = 0.005

    # Welding distance; sqrt(linear_slop / 2) so it matches a squared-distance test against linear_slop / 2
    weld_epsilon: float = math.sqrt(0.005 / 2)

    # Smallest area a valid polygon may have
    area_epsilon: float = 1e-5


@dataclass
class ShapeLimits:
    """Vertex count limits for polygon and chain shapes."""
    max_polygon_vertices: int = 8
    min_polygon_vertices: int = 3
    min_chain_vertices: int = 2


@dataclass
class DecompositionConfig:
    """Default collaborators for concave polygons."""
    triangulator: str = 'ear_clipping'
    decomposer: str = 'hertel_mehlhorn'

    # Reject self-intersecting input before handing it to a collaborator
    validate_input: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: int = logging.INFO
    log_file: Optional[str] = None


@dataclass
class GeometryConfig:
    """Master configuration combining all sub-configs."""
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)
    limits: ShapeLimits = field(default_factory=ShapeLimits)
    decomposition: DecompositionConfig = field(default_factory=DecompositionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
CONFIG = GeometryConfig()


def get_weld_epsilon(epsilon: Optional[float] = None) -> float:
    """Per-call weld epsilon, falling back to the global default."""
    return CONFIG.tolerance.weld_epsilon if epsilon is None else epsilon


def get_max_polygon_vertices(max_vertices: Optional[int] = None) -> int:
    """Per-call polygon vertex limit, falling back to the global default."""
    return CONFIG.limits.max_polygon_vertices if max_vertices is None else max_vertices
