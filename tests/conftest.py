"""Test configuration fixtures."""
import pytest
from pathlib import Path
import tempfile
import shutil

import numpy as np


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def nine_values():
    """Small unordered stream whose median is 5."""
    return [9.0, 7.0, 3.0, 2.0, 6.0, 1.0, 8.0, 5.0, 4.0]


@pytest.fixture
def normal_sample():
    """Six draws from a standard normal (numpy seed 42)."""
    return [0.49671415, -0.1382643, 0.64768854, 1.52302986, -0.23415337, -0.23413696]


@pytest.fixture
def random_stream():
    """Reproducible stream of 500 normal values."""
    rng = np.random.default_rng(7)
    return rng.normal(loc=3.0, scale=2.0, size=500).tolist()


@pytest.fixture
def sample_config():
    """Sample configuration for testing."""
    return {
        "stream": {
            "default_window": 4,
            "statistics": [
                {"name": "mean", "kind": "mean"},
                {"name": "var_w", "kind": "rolling_var"},
                {"name": "p90", "kind": "rolling_quantile", "q": 0.9, "window": 10},
            ],
        },
        "log_level": "DEBUG",
    }
