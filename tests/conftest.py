import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def unit_square():
    """Counter-clockwise unit square."""
    return np.array([0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0])


@pytest.fixture
def arrow():
    """Counter-clockwise concave polygon with one reflex vertex at (1, 1)."""
    return np.array([0.0, 0.0, 2.0, 0.0, 2.0, 2.0, 1.0, 1.0, 0.0, 2.0])


@pytest.fixture
def comb():
    """Counter-clockwise U-shaped polygon with two prongs, area 9."""
    return np.array([
        0.0, 0.0, 5.0, 0.0, 5.0, 3.0, 4.0, 3.0,
        4.0, 1.0, 1.0, 1.0, 1.0, 3.0, 0.0, 3.0,
    ])


@pytest.fixture
def hexagon():
    """Regular counter-clockwise hexagon."""
    angles = np.linspace(0.0, 2.0 * np.pi, 6, endpoint=False)
    return np.column_stack([np.cos(angles), np.sin(angles)]).reshape(-1)
