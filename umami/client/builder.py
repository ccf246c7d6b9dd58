"""Payload construction.

Turns an environment snapshot plus caller arguments into a Payload. Four
shapes are produced:

- page view: snapshot fields, overridden key by key by the caller;
- named event: snapshot fields plus ``name`` and ``data``;
- bare event: ``name`` and ``data`` only (unified ``track`` by name);
- identify: ``session`` plus a copy of the identity properties.

The builder holds no state; identity properties are owned by the client.
"""

from typing import Any, Mapping, Optional, Union

from umami.core.exceptions import InvalidPayloadError
from umami.schemas.environment import EnvironmentSnapshot
from umami.schemas.events import NamedEvent, PayloadEvent, TrackInput
from umami.schemas.payload import Payload

PayloadLike = Union[Payload, Mapping[str, Any]]


class PayloadBuilder:
    """Stateless factory for outbound payloads."""

    def page_view(
        self,
        snapshot: EnvironmentSnapshot,
        overrides: Optional[PayloadLike] = None,
    ) -> Payload:
        """Merge caller overrides over the environment snapshot.

        Every key the caller set replaces the snapshot value, including keys
        set to ``None`` (which are then left out of the request).
        """
        fields = snapshot.to_payload_fields()
        if overrides is not None:
            fields.update(_as_payload(overrides).explicit_fields())
        return Payload(**fields)

    def named_event(
        self,
        snapshot: EnvironmentSnapshot,
        name: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Payload:
        """Build a custom event carrying the environment snapshot."""
        return Payload(
            **snapshot.to_payload_fields(),
            name=name,
            data=_copy_data(data),
        )

    def bare_event(self, name: str, data: Optional[Mapping[str, Any]] = None) -> Payload:
        """Build a custom event without any environment fields."""
        return Payload(name=name, data=_copy_data(data))

    def identify(self, session_id: Optional[str], properties: Mapping[str, Any]) -> Payload:
        """Build an identify payload from the accumulated identity properties."""
        return Payload(session=session_id, data=dict(properties))

    def from_input(self, track_input: TrackInput) -> Payload:
        """Resolve a tracking input variant into its payload."""
        if isinstance(track_input, NamedEvent):
            return self.bare_event(track_input.name, track_input.data)
        if isinstance(track_input, PayloadEvent):
            return track_input.payload
        raise InvalidPayloadError()

    def coerce_input(self, value: Any, data: Optional[Mapping[str, Any]] = None) -> TrackInput:
        """Map the loose arguments of ``track`` onto a TrackInput variant.

        ``str`` selects the by-name variant, a Payload or mapping the
        by-payload variant (``data`` is ignored). Anything else raises
        InvalidPayloadError.
        """
        if isinstance(value, TrackInput):
            return value
        if isinstance(value, str):
            if data is not None and not isinstance(data, Mapping):
                raise InvalidPayloadError()
            return TrackInput.by_name(value, data)
        if isinstance(value, (Payload, Mapping)):
            return TrackInput.by_payload(value)
        raise InvalidPayloadError()


def _as_payload(value: PayloadLike) -> Payload:
    if isinstance(value, Payload):
        return value
    if isinstance(value, Mapping):
        return Payload.from_mapping(value)
    raise InvalidPayloadError()


def _copy_data(data: Optional[Mapping[str, Any]]) -> Optional[dict]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise InvalidPayloadError()
    return dict(data)
