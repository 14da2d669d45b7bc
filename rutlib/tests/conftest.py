"""
Pytest fixtures for rutlib tests.
"""

import random

import pytest
import structlog

from rutlib.settings import get_settings


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    """Undo logging configuration and cached settings made by a test."""
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for property-style tests."""
    return random.Random(20240917)
