"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from lrc_app.config.defaults import get_default_config


@pytest.fixture
def flat_prices() -> List[float]:
    """Constant closes: no variance to explain."""
    return [10.0, 10.0, 10.0, 10.0, 10.0]


@pytest.fixture
def linear_prices() -> List[float]:
    """Closes lying exactly on y = x + 1."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def noisy_prices() -> List[float]:
    """Small series with a hand-checked fit: y = 0.8x + 1.3, R² = 0.64."""
    return [1.0, 3.0, 2.0, 4.0]


@pytest.fixture
def spike_up_prices() -> List[float]:
    """Steady rise with a sharp jump on the last close."""
    return [float(i + 1) for i in range(9)] + [20.0]


@pytest.fixture
def spike_down_prices() -> List[float]:
    """Steady rise with a sharp drop on the last close."""
    return [float(i + 1) for i in range(9)] + [0.0]


@pytest.fixture
def dashboard_prices() -> List[float]:
    """Thirty closes trending up with alternating noise."""
    return [100.0 + i * 0.5 + (1.5 if i % 2 else -1.5) for i in range(30)]


@pytest.fixture
def default_config():
    """Default engine configuration."""
    return get_default_config()
