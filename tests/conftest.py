# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from hwfilter.cli import US_POPULATION


@pytest.fixture(scope="session")
def us_population():
    """US population in millions, one value per decade."""
    return np.array(US_POPULATION, dtype=np.float64)


@pytest.fixture
def seasonal_series():
    """Three seasons of a quarterly series with an upward drift."""
    base = np.array([10.0, 14.0, 8.0, 12.0])
    return np.concatenate([base, base + 2.0, base + 4.0])
