from __future__ import annotations

import httpx
import pytest

from blockfrost_sdk import clear_configs, configure
from blockfrost_sdk.transport import AsyncHTTPXTransport, HTTPXTransport

BASE_URL = "https://api.test/api/v0"
API_KEY = "preprodTestKey"


@pytest.fixture(autouse=True)
def test_config():
    config = configure("test", api_key=API_KEY, base_url=BASE_URL, retry_interval=0)
    yield config
    clear_configs()


def mock_transport(handler) -> HTTPXTransport:
    return HTTPXTransport(httpx.Client(transport=httpx.MockTransport(handler)))


def async_mock_transport(handler) -> AsyncHTTPXTransport:
    return AsyncHTTPXTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
