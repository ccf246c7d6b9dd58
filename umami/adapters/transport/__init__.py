"""Transport adapters."""

from umami.adapters.transport.fake import FakeTransport, SentRequest
from umami.adapters.transport.http import HttpxTransport

__all__ = ["FakeTransport", "HttpxTransport", "SentRequest"]
