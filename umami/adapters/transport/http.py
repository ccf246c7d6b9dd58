"""httpx-based transport.

Sends each request through ``httpx.AsyncClient``. Implements the
Transport protocol.
"""

from typing import Mapping, Optional

import httpx

from umami.core.logging import get_logger

logger = get_logger(__name__).with_prefix("HttpxTransport: ")


class HttpxTransport:
    """Deliver requests with httpx.

    When no client is injected, a short-lived ``httpx.AsyncClient`` is
    opened per request, so the transport can be shared across event loops.
    An injected client is reused and stays owned by the caller.

    Responses are returned whatever their status code; only network-level
    failures raise.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Optional pre-configured client to reuse.
            timeout: Seconds before a per-request client gives up. ``None``
                disables the timeout. Ignored when ``client`` is given.
        """
        self._client = client
        self._timeout = timeout

    async def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: str,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Raises:
            httpx.HTTPError: On connection failures and timeouts.
        """
        try:
            if self._client is not None:
                return await self._request(self._client, url, method, headers, body)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await self._request(client, url, method, headers, body)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", url, e)
            raise

    @staticmethod
    async def _request(
        client: httpx.AsyncClient,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: str,
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            headers=dict(headers),
            content=body.encode("utf-8"),
        )
