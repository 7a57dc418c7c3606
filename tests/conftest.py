"""Shared test fixtures for the SDK tests.

Provides:
  - JSON fixture loading helpers
  - Mock HTTP transport for httpx (intercepts all requests)
  - Pre-built Configuration instances for each credential mode
  - A helper that wires a channel client to a mock transport
"""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from infobip_sdk.configuration import Configuration

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://api.example.com"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture file by name."""
    return json.loads((FIXTURES_DIR / name).read_text())


class MockTransport(httpx.AsyncBaseTransport):
    """Mock HTTP transport that returns preconfigured responses.

    Usage:
        transport = MockTransport(responses=[
            httpx.Response(200, json={"messageId": "..."}),
        ])
        client = WhatsAppClient(config, http_client=httpx.AsyncClient(transport=transport))

    Each call to handle_async_request pops the next response from the list.
    If the list is exhausted, returns a 500 error. Request bodies are read
    eagerly so tests can assert on ``request.content`` (including multipart).
    """

    def __init__(self, responses: list[httpx.Response] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        if self.responses:
            response = self.responses.pop(0)
            response.stream = httpx.ByteStream(response.content)
            return response
        return httpx.Response(500, json={"error": "No more mock responses"})


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport that fails every request with a connection error."""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)


def make_client(cls, transport: httpx.AsyncBaseTransport, configuration: Configuration):
    """Build a channel client whose HTTP traffic goes to the given transport."""
    return cls(configuration, http_client=httpx.AsyncClient(transport=transport))


def sent_json(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


@pytest.fixture
def api_key_config() -> Configuration:
    return Configuration.with_api_key(BASE_URL, "test-api-key")


@pytest.fixture
def bearer_config() -> Configuration:
    return Configuration.with_bearer_token(BASE_URL, "test-bearer-token")


@pytest.fixture
def basic_config() -> Configuration:
    return Configuration.with_basic_auth(BASE_URL, "user", "secret")
