"""Pytest configuration and shared fixtures for amoeba tests.

This module provides:
- A deterministic numpy RNG fixture for tests that draw random seeds
- Logging reset so that one test's verbosity does not leak into another
"""

import logging
import os

import numpy as np
import pytest

from amoeba.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_logging():
    """Restore the default WARNING level after every test."""
    yield
    configure_logging(level=logging.WARNING)
