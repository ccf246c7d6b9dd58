"""Envelope discriminator enums.

They inherit from str so the JSON body carries the plain value.
"""

from enum import Enum


class EventKind(str, Enum):
    """Kind of envelope sent to the collection endpoint.

    Only the ``type`` field of the envelope depends on it; the payload
    shape is decided by the builder.
    """

    EVENT = "event"
    """Page views and custom events."""

    IDENTIFY = "identify"
    """Identity property updates attached to the session."""
