"""
Pytest configuration and fixtures
"""

import pytest

from quickrest import Client, ClientConfig
from tests.helpers import DummyAdapter


@pytest.fixture
def dummy_adapter():
    """Create dummy adapter fixture"""
    return DummyAdapter()


@pytest.fixture
def client(dummy_adapter):
    """Create client backed by the dummy adapter"""
    return Client(http_adapter=dummy_adapter)


@pytest.fixture
def live_client():
    """Create client with its own RequestsAdapter (mock it with requests_mock)"""
    client = Client(ClientConfig())
    yield client
    client.close()
