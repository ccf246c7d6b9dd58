"""Schemas for payloads, envelopes and tracking inputs."""

from umami.schemas.environment import EnvironmentSnapshot
from umami.schemas.events import NamedEvent, PayloadEvent, TrackInput
from umami.schemas.payload import Envelope, EventData, EventDataValue, Payload
from umami.schemas.revenue import revenue_data

__all__ = [
    "EnvironmentSnapshot",
    "Envelope",
    "EventData",
    "EventDataValue",
    "NamedEvent",
    "Payload",
    "PayloadEvent",
    "TrackInput",
    "revenue_data",
]
