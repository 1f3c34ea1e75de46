"""Shared fixtures for site_percolation tests."""

import numpy as np
import pytest


@pytest.fixture
def grid_2x2():
    """2x2 lattice: top row {0, 1}, bottom row {2, 3}."""
    edges = np.array([[0, 1], [0, 2], [1, 3], [2, 3]])
    thresholds = np.array([0.1, 0.9, 0.2, 0.8])
    return edges, thresholds
