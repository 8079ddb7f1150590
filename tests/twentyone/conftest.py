"""
Fixtures for twenty-one tests.
"""

import pytest


@pytest.fixture
def in_order(mocker):
    """Random source that always deals the first remaining card."""
    rng = mocker.Mock()
    rng.randrange.return_value = 0
    return rng
