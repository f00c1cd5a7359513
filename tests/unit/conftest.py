"""
Shared fixtures for connector tests.

Requests are served by httpx.MockTransport, so no test touches the network.
"""

import httpx
import pytest
import pytest_asyncio

from bigcommerce_legacy.config import BodyFormat, ConnectorConfig
from bigcommerce_legacy.connector import Connector
from bigcommerce_legacy.transports.http import HttpxTransport

BASE_PATH = "https://store-abc123.mybigcommerce.com"
USERNAME = "admin"
TOKEN = "secret-token"


@pytest.fixture
def json_config():
    return ConnectorConfig(BASE_PATH, USERNAME, TOKEN)


@pytest.fixture
def xml_config():
    return ConnectorConfig(BASE_PATH, USERNAME, TOKEN, body_format=BodyFormat.XML)


@pytest_asyncio.fixture
async def connector_factory():
    """Yield a factory building connectors answered by an httpx handler.

    Clients created by the factory are closed on teardown.
    """
    clients = []

    def factory(config, handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return Connector(config, transport=HttpxTransport(client=client))

    yield factory

    for client in clients:
        await client.aclose()
