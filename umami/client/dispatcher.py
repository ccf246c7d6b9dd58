"""Envelope dispatch.

Wraps a payload as ``{"type": kind, "payload": {..., "website": id}}`` and
POSTs it to ``{host_url}/api/send``. One transport call per send; the
response is returned as-is.
"""

from typing import Dict

import httpx

from umami.core.config import ClientConfig
from umami.core.enums import EventKind
from umami.core.logging import get_logger
from umami.core.protocols.transport import Transport
from umami.schemas.payload import Envelope, Payload

logger = get_logger(__name__)


class Dispatcher:
    """Serialize payloads and hand them to the transport."""

    def __init__(self, transport: Transport) -> None:
        """Bind the dispatcher to ``transport``."""
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    @staticmethod
    def build_envelope(config: ClientConfig, payload: Payload, kind: EventKind) -> Envelope:
        """Wrap ``payload``; the configured website id always wins."""
        return Envelope(type=kind, payload={**payload.to_dict(), "website": config.website_id})

    @staticmethod
    def build_headers(config: ClientConfig) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": config.effective_user_agent,
        }

    async def send(
        self,
        config: ClientConfig,
        payload: Payload,
        kind: EventKind = EventKind.EVENT,
    ) -> httpx.Response:
        """Send ``payload`` as ``kind`` using ``config``.

        Returns:
            The transport response; non-2xx statuses are not raised.

        Raises:
            httpx.HTTPError: Propagated unchanged from the transport.
        """
        envelope = self.build_envelope(config, payload, kind)
        body = envelope.to_json()
        url = config.send_url
        log = logger.with_context(kind=kind.value, website=config.website_id or "<unset>")
        log.debug("Dispatching envelope to %s", url)
        return await self._transport.send(url, "POST", self.build_headers(config), body)
