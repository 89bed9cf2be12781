"""Shared fixtures for integration tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo setup_logger() so each test starts with the package silenced."""
    yield
    logger.remove()
    logger.disable("stringext")
