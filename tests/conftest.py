"""
Root pytest configuration shared by every test module.
"""

import pytest

from tests.utils.factories import make_response


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def response_factory():
    """
    Factory for real `requests.Response` objects.

    Example:
        def test_x(response_factory):
            response = response_factory(200, {"key": "TEST-1"})
    """
    return make_response
