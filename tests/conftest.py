"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

from chirp_sdk.http import HTTPClient

BASE_URL = "https://api.chirp.test/1.1"


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            form = None
            if request.content:
                form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
                "headers": dict(request.headers),
                "form": form,
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient(BASE_URL, token="test-token")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(
        base_url=BASE_URL,
        transport=transport,
    )
    return client, transport, calls
