"""
Pytest configuration and shared fixtures for unravel tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import unravel


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with default configuration."""
    unravel.config.reset()
    yield unravel.config
    unravel.config.reset()


@pytest.fixture
def square_matrix():
    """3x3 int matrix.

    Matrix:
    [[0, 1, 2],
     [3, 4, 5],
     [6, 7, 8]]
    """
    return np.arange(9).reshape(3, 3)


@pytest.fixture
def rect_matrix():
    """3x4 int matrix, values 10 * row + col."""
    return np.array([
        [0, 1, 2, 3],
        [10, 11, 12, 13],
        [20, 21, 22, 23],
    ])


@pytest.fixture
def nested_matrix():
    """2x3 nested list of mixed Python objects."""
    return [
        ["a", 1, None],
        [2.5, "b", {"k": 1}],
    ]


@pytest.fixture(params=[(0, 0), (0, 3), (3, 0)], ids=["0x0", "0x3", "3x0"])
def empty_matrix(request):
    """Matrices with extent 0 on at least one axis."""
    return np.zeros(request.param, dtype=np.int64)


@pytest.fixture
def random_matrix():
    """Random 7x5 int matrix for property style checks."""
    rng = np.random.default_rng(42)
    return rng.integers(-100, 100, size=(7, 5))


# =============================================================================
# Helper Functions
# =============================================================================

def row_major(m):
    """Reference row-major reading of a 2D array."""
    m = np.asarray(m)
    return [m[i, j] for i in range(m.shape[0]) for j in range(m.shape[1])]


def col_major(m):
    """Reference column-major reading of a 2D array."""
    m = np.asarray(m)
    return [m[i, j] for j in range(m.shape[1]) for i in range(m.shape[0])]


def flatten(seqs):
    """Flatten a sequence of sequences into a list."""
    return [x for seq in seqs for x in seq]


def all_slices(shape):
    """Every valid (rs, rt, cs, ct) for a non-empty shape."""
    rows, cols = shape
    for rs in range(rows):
        for rt in range(1, rows - rs + 1):
            for cs in range(cols):
                for ct in range(1, cols - cs + 1):
                    yield rs, rt, cs, ct
