"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by every test package.
"""

import logging

import pytest


# Detach handlers installed by configure_logging before each test
@pytest.fixture(scope="function", autouse=True)
def reset_parlor_logger():
    """Leave the package logger without handlers between tests."""
    logger = logging.getLogger("parlor")
    saved = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(saved)
