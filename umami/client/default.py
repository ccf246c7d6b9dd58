"""Process-wide default client.

Module-level functions delegate to one shared Umami instance that lives
for the whole process. Nothing resets it between tests; code that needs
isolation should construct its own Umami or swap the shared one with
:func:`set_client`.

Usage::

    import umami

    umami.init(website_id="94db1cb1-...", host_url="https://stats.example.com")
    await umami.track("signup")
"""

import threading
from typing import Any, Awaitable, Mapping, Optional

import httpx

from umami.client.builder import PayloadLike
from umami.client.client import Umami
from umami.core.config import ClientConfig

_LOCK = threading.Lock()
_client: Optional[Umami] = None


def get_client() -> Umami:
    """Return the shared client, creating it on first use."""
    global _client
    with _LOCK:
        if _client is None:
            _client = Umami()
        return _client


def set_client(client: Optional[Umami]) -> None:
    """Install ``client`` as the shared instance (``None`` recreates it lazily)."""
    global _client
    with _LOCK:
        _client = client


def configure(config: Optional[ClientConfig] = None, **options: Any) -> ClientConfig:
    """Configure the shared client."""
    return get_client().configure(config, **options)


init = configure


def reset() -> None:
    """Clear the shared client's identity properties."""
    get_client().reset()


def track_page_view(payload: Optional[PayloadLike] = None) -> Awaitable[httpx.Response]:
    return get_client().track_page_view(payload)


def track_event(event_name: str, data: Optional[Mapping[str, Any]] = None) -> Awaitable[httpx.Response]:
    return get_client().track_event(event_name, data)


def track(event: Any, data: Optional[Mapping[str, Any]] = None) -> Awaitable[httpx.Response]:
    return get_client().track(event, data)


def identify(properties: Optional[Mapping[str, Any]] = None) -> Awaitable[httpx.Response]:
    return get_client().identify(properties)
