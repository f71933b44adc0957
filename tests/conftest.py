"""Pytest configuration for repository-relative imports."""

import os
import sys

import numpy as np
import pandas as pd
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def small_draws():
    """Five draws for two points with known order statistics."""
    draws = np.array([[1, 10], [2, 20], [3, 30], [4, 40], [5, 50]], dtype=float)
    points = pd.DataFrame({"id": [1, 2], "x": [0, 1]})
    return draws, points
