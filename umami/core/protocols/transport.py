"""Transport protocol.

The transport is the only component that touches the network. It sends
one request and hands back whatever response the server produced; status
codes are not interpreted.

Usage::

    from umami.core.protocols.transport import Transport


    async def post(transport: Transport) -> httpx.Response:
        return await transport.send(url, "POST", headers, body)
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Structural protocol for HTTP transports."""

    async def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: str,
    ) -> httpx.Response:
        """Send a single request.

        Args:
            url: Absolute request URL.
            method: HTTP method, always ``"POST"`` for the client.
            headers: Request headers.
            body: Serialized JSON body.

        Returns:
            The raw response, whatever its status code.

        Raises:
            httpx.HTTPError: On network-level failures. Implementations
                must not swallow them.
        """
        ...
