"""Tests for the TrackInput variants."""

import pytest
from pydantic import ValidationError

from umami.core.exceptions import InvalidPayloadError
from umami.schemas.events import NamedEvent, PayloadEvent, TrackInput
from umami.schemas.payload import Payload


def test_by_name_copies_data():
    data = {"x": 1}
    event = TrackInput.by_name("click", data)
    data["x"] = 2

    assert isinstance(event, NamedEvent)
    assert event.name == "click"
    assert event.data == {"x": 1}


def test_by_name_without_data():
    assert TrackInput.by_name("click").data is None


def test_by_payload_accepts_payload_instance():
    payload = Payload(title="t")
    event = TrackInput.by_payload(payload)
    assert isinstance(event, PayloadEvent)
    assert event.payload.to_dict() == {"title": "t"}


def test_by_payload_validates_mappings():
    assert TrackInput.by_payload({"url": "/a"}).payload.to_dict() == {"url": "/a"}
    with pytest.raises(InvalidPayloadError):
        TrackInput.by_payload({"url": 1})


def test_inputs_are_frozen():
    event = TrackInput.by_name("click")
    with pytest.raises(ValidationError):
        event.name = "other"
