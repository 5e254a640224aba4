"""Pytest fixtures for cerf-lab tests."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_points():
    """Finite points off the axes, at least one in every numerical region
    of w(z) and in every quadrant."""
    return [
        complex(1.0, 2.0),
        complex(0.3, 0.7),
        complex(2.5, -1.5),
        complex(-0.7, -0.7),
        complex(1e-5, 1.3),         # small |Re z| series
        complex(6.5, 0.05),         # series strip below the continued fraction
        complex(12.0, 1e-11),       # large-x series
        complex(-3.0, 9.0),         # continued fraction
        complex(3000.0, -1500.0),   # two-term fraction
        complex(2e7, 3e7),          # one-term fraction
    ]


@pytest.fixture
def branch_points():
    """Points inside the Taylor and underflow branches of erf and Dawson."""
    return [
        complex(1e-3, 2e-3),        # Taylor series at the origin
        complex(1e-3, 1.0),         # erf expanded around erf(iy)
        complex(100.0, 1e-6),       # Dawson near the axis, |x| > 40
        complex(1e8, 1e-12),        # Dawson near the axis, |x| > 5e7
        complex(40.0, 5.0),         # exp(-z^2) underflows
    ]


@pytest.fixture
def moderate_points():
    """Points where all derived functions are O(1) and far from zeros."""
    return [
        complex(1.0, 2.0),
        complex(0.3, 0.7),
        complex(2.5, -1.5),
        complex(0.05, 0.005),
        complex(-0.004, 0.4),
        complex(1.5, 0.001),
    ]
