"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def small_config():
    """Configuration for a 40x40 surface (2x2 grid)."""
    from halftone.core import SimulationConfig
    return SimulationConfig(width=40, height=40, seed=0)


@pytest.fixture
def small_sim(small_config):
    """Simulation on a 40x40 surface."""
    from halftone.core import HalftoneSimulation
    return HalftoneSimulation(small_config)


@pytest.fixture
def long_lived_pool(rng):
    """Pool whose impulses live long enough for many-tick motion tests."""
    from halftone.core import ImpulseConfig, ImpulsePool
    return ImpulsePool(ImpulseConfig(lifetime=1000.0), rng=rng)


@pytest.fixture
def restore_halftone_logger():
    """Undo setup_logging() side effects on the shared logger."""
    logger = logging.getLogger("halftone")
    level, propagate = logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = propagate
