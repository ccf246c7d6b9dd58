"""Outbound payload and envelope schemas.

Wire format POSTed to ``{host_url}/api/send``::

    {
      "type": "event" | "identify",
      "payload": {
        "website": "<website-id>",
        "session"?: ..., "hostname"?: ..., "language"?: ..., "referrer"?: ...,
        "screen"?: "<WxH>", "title"?: ..., "url"?: ..., "name"?: ...,
        "data"?: {"<key>": <string|number|ISO-8601 date>}
      }
    }
"""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from umami.core.enums import EventKind
from umami.core.exceptions import InvalidPayloadError

EventDataValue = Union[str, int, float, datetime, date, None]
EventData = Dict[str, EventDataValue]


class Payload(BaseModel):
    """A single event payload.

    All fields are optional. Unknown keys are carried through untouched so
    callers can send fields newer servers understand.
    """

    model_config = ConfigDict(extra="allow")

    session: Optional[str] = None
    hostname: Optional[str] = None
    language: Optional[str] = None
    referrer: Optional[str] = None
    screen: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    website: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Payload":
        """Validate a plain mapping into a Payload.

        Raises:
            InvalidPayloadError: If the mapping does not describe a payload.
        """
        try:
            return cls.model_validate(dict(values))
        except (ValidationError, TypeError, ValueError) as e:
            raise InvalidPayloadError() from e

    def explicit_fields(self) -> Dict[str, Any]:
        """Return only the keys the caller actually set, including ``None`` ones."""
        explicit = {k: v for k, v in self.model_dump().items() if k in self.model_fields_set}
        explicit.update(self.model_extra or {})
        return explicit

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict for sending, excluding top-level None values.

        ``None`` values nested inside ``data`` are kept.
        """
        return {k: v for k, v in self.model_dump().items() if v is not None}


class Envelope(BaseModel):
    """The ``{type, payload}`` wrapper sent to the collection endpoint."""

    type: EventKind
    payload: Dict[str, Any]

    def to_json(self) -> str:
        """Serialize to JSON; dates and datetimes become ISO-8601 strings."""
        return self.model_dump_json()
