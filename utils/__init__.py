"""
Utilities module - Visualization helpers.
"""

from .visualization import plot_polygon, plot_polygons, plot_result

__all__ = [
    'plot_polygon',
    'plot_polygons',
    'plot_result',
]
