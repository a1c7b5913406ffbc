"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def salary() -> float:
    """Reference salary used throughout the examples."""
    return 100000.0


@pytest.fixture
def daily() -> float:
    """Frequency multiplier for a once-per-working-day task."""
    return 250.0
