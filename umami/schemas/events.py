"""Input variants for the unified ``track`` entry point.

A tracking call is either *by name* (an event name plus optional data) or
*by payload* (a pre-built payload sent as-is). Build them with the
explicit constructors instead of relying on argument types:

    TrackInput.by_name("signup", {"plan": "pro"})
    TrackInput.by_payload(Payload(title="Pricing", url="/pricing"))
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from umami.schemas.payload import Payload


class TrackInput(BaseModel):
    """Base of the two tracking input variants."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def by_name(cls, name: str, data: Optional[Mapping[str, Any]] = None) -> "NamedEvent":
        """Create a named event with optional event data."""
        return NamedEvent(name=name, data=dict(data) if data is not None else None)

    @classmethod
    def by_payload(cls, payload: Union[Payload, Mapping[str, Any]]) -> "PayloadEvent":
        """Wrap a pre-built payload that bypasses environment defaults."""
        if not isinstance(payload, Payload):
            payload = Payload.from_mapping(payload)
        return PayloadEvent(payload=payload)


class NamedEvent(TrackInput):
    """An event identified by name; ``data`` is passed through verbatim."""

    name: str
    data: Optional[Dict[str, Any]] = None


class PayloadEvent(TrackInput):
    """A payload sent unmodified, apart from the injected ``website``."""

    payload: Payload
