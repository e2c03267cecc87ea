"""
Pytest fixtures for ndmatrix tests.
"""

import numpy as np
import pytest

from ndmatrix import Config, Matrix, NDArray


@pytest.fixture(autouse=True)
def reset_config():
    """Restore default configuration around every test."""
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def seed():
    """Fixed random seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    return np.random.default_rng(seed)


@pytest.fixture
def filled_345():
    """Shape (3, 4, 5) int array holding k at flat index k."""
    arr = NDArray((3, 4, 5), dtype=np.int64)
    for k in range(arr.length):
        arr[k] = k
    return arr


@pytest.fixture
def matrix_4x3():
    """4x3 int matrix holding k at flat index k."""
    m = Matrix(4, 3, dtype=np.int64)
    for k in range(m.length):
        m[k] = k
    return m
