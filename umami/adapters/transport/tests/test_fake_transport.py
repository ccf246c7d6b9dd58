"""Tests for FakeTransport."""

import httpx
import pytest

from umami.adapters.transport.fake import FakeTransport
from umami.core.protocols.transport import Transport


def test_is_transport():
    assert isinstance(FakeTransport(), Transport)


@pytest.mark.asyncio
async def test_records_requests_and_returns_canned_response():
    fake = FakeTransport(status_code=202, response_json={"queued": True})
    response = await fake.send("https://h/api/send", "POST", {"A": "b"}, '{"k": 1}')

    assert response.status_code == 202
    assert response.json() == {"queued": True}
    assert fake.call_count == 1
    assert fake.last.json() == {"k": 1}
    assert fake.last.headers == {"A": "b"}


@pytest.mark.asyncio
async def test_should_raise_records_then_raises():
    fake = FakeTransport(should_raise=httpx.ConnectError("down"))
    with pytest.raises(httpx.ConnectError):
        await fake.send("https://h/api/send", "POST", {}, "{}")
    assert fake.call_count == 1


def test_last_without_requests_raises():
    with pytest.raises(AssertionError):
        FakeTransport().last
