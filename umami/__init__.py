"""Umami Python client - lightweight, self-hostable usage analytics.

Usage:
    import umami

    umami.init(website_id="94db1cb1-...", host_url="https://stats.example.com")
    await umami.track_page_view({"title": "Home", "url": "/"})
    await umami.track("signup", {"plan": "pro"})
"""

from umami.adapters.environment import (
    FakeEnvironment,
    RequestEnvironment,
    StaticEnvironment,
    SystemEnvironment,
)
from umami.adapters.transport import FakeTransport, HttpxTransport
from umami.client import Umami
from umami.client.default import (
    configure,
    get_client,
    identify,
    init,
    reset,
    set_client,
    track,
    track_event,
    track_page_view,
)
from umami.core.config import DEFAULT_HOST_URL, ClientConfig
from umami.core.enums import EventKind
from umami.core.exceptions import (
    ConfigurationError,
    InvalidEventDataError,
    InvalidPayloadError,
    UmamiException,
)
from umami.schemas import EnvironmentSnapshot, Payload, TrackInput, revenue_data
from umami.version import __version__

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DEFAULT_HOST_URL",
    "EnvironmentSnapshot",
    "EventKind",
    "FakeEnvironment",
    "FakeTransport",
    "HttpxTransport",
    "InvalidEventDataError",
    "InvalidPayloadError",
    "Payload",
    "RequestEnvironment",
    "StaticEnvironment",
    "SystemEnvironment",
    "TrackInput",
    "Umami",
    "UmamiException",
    "__version__",
    "configure",
    "get_client",
    "identify",
    "init",
    "reset",
    "revenue_data",
    "set_client",
    "track",
    "track_event",
    "track_page_view",
]
