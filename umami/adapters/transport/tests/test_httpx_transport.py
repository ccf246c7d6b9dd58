"""Unit tests for HttpxTransport.

Injected clients use httpx.MockTransport so the real request path runs
without network access. The per-request client path patches
httpx.AsyncClient.
"""

import json
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from umami.adapters.transport.http import HttpxTransport
from umami.core.protocols.transport import Transport

URL = "https://example.com/api/send"
HEADERS = {"Content-Type": "application/json", "User-Agent": "Mozilla"}


def test_is_transport():
    assert isinstance(HttpxTransport(), Transport)


@pytest.mark.asyncio
async def test_injected_client_sends_body_and_headers():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = HttpxTransport(client=client)
        response = await transport.send(URL, "POST", HEADERS, '{"type": "event"}')

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == URL
    assert request.headers["content-type"] == "application/json"
    assert request.headers["user-agent"] == "Mozilla"
    assert json.loads(request.content) == {"type": "event"}


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "bad"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        response = await HttpxTransport(client=client).send(URL, "POST", HEADERS, "{}")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_network_errors_propagate(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("DNS failure", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError):
            with caplog.at_level(logging.ERROR, logger="umami.adapters.transport.http"):
                await HttpxTransport(client=client).send(URL, "POST", HEADERS, "{}")

    assert caplog.records[-1].getMessage().startswith(f"HttpxTransport: Request to {URL} failed")


@pytest.mark.asyncio
async def test_per_request_client_uses_timeout():
    mock_response = MagicMock()
    mock_response.status_code = 204

    with patch("umami.adapters.transport.http.httpx.AsyncClient") as mock_cls:
        mock_client = AsyncMock()
        mock_client.request = AsyncMock(return_value=mock_response)
        mock_cls.return_value.__aenter__ = AsyncMock(return_value=mock_client)
        mock_cls.return_value.__aexit__ = AsyncMock(return_value=False)

        response = await HttpxTransport(timeout=2.5).send(URL, "POST", HEADERS, "{}")

        assert response is mock_response
        mock_cls.assert_called_once_with(timeout=2.5)
        mock_client.request.assert_called_once_with(
            "POST", URL, headers=HEADERS, content=b"{}"
        )


@pytest.mark.asyncio
async def test_per_request_client_has_no_timeout_by_default():
    with patch("umami.adapters.transport.http.httpx.AsyncClient") as mock_cls:
        mock_client = AsyncMock()
        mock_cls.return_value.__aenter__ = AsyncMock(return_value=mock_client)
        mock_cls.return_value.__aexit__ = AsyncMock(return_value=False)

        await HttpxTransport().send(URL, "POST", HEADERS, "{}")

        mock_cls.assert_called_once_with(timeout=None)
