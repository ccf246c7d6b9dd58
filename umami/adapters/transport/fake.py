"""Fake transport for testing.

Records requests in memory and answers with canned responses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx


@dataclass
class SentRequest:
    """Single recorded transport call."""

    url: str
    method: str
    headers: Dict[str, str]
    body: str

    def json(self) -> Any:
        """Decode the request body."""
        return json.loads(self.body)


class FakeTransport:
    """In-memory test double for the Transport protocol.

    Usage::

        transport = FakeTransport()
        client = Umami(ClientConfig(website_id="w"), transport=transport)
        await client.track("signup")
        assert transport.last.json()["payload"]["name"] == "signup"

        # Simulate a network failure
        failing = FakeTransport(should_raise=httpx.ConnectError("down"))
    """

    def __init__(
        self,
        status_code: int = 200,
        response_json: Optional[Any] = None,
        should_raise: Optional[Exception] = None,
    ) -> None:
        """Initialize the fake.

        Args:
            status_code: Status of every response.
            response_json: Body of every response. Defaults to ``{"ok": true}``.
            should_raise: If set, ``send`` records the call and raises this.
        """
        self._status_code = status_code
        self._response_json = {"ok": True} if response_json is None else response_json
        self._should_raise = should_raise
        self.requests: list[SentRequest] = []

    async def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: str,
    ) -> httpx.Response:
        """Record the call and return the canned response."""
        self.requests.append(SentRequest(url=url, method=method, headers=dict(headers), body=body))
        if self._should_raise is not None:
            raise self._should_raise
        return httpx.Response(
            self._status_code,
            json=self._response_json,
            request=httpx.Request(method, url),
        )

    # Test helpers

    @property
    def call_count(self) -> int:
        """Number of requests sent."""
        return len(self.requests)

    @property
    def last(self) -> SentRequest:
        """Most recent request, or raise AssertionError."""
        if not self.requests:
            raise AssertionError("No requests were sent.")
        return self.requests[-1]

    def clear(self) -> None:
        """Reset recorded requests."""
        self.requests.clear()
