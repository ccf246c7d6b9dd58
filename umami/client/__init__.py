"""Umami client: state, payload builder and dispatcher."""

from umami.client.builder import PayloadBuilder
from umami.client.client import Umami
from umami.client.dispatcher import Dispatcher

__all__ = ["Dispatcher", "PayloadBuilder", "Umami"]
