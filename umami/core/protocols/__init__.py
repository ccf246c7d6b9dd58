"""Core protocols for dependency injection."""

from umami.core.protocols.environment import EnvironmentProvider
from umami.core.protocols.transport import Transport

__all__ = [
    "EnvironmentProvider",
    "Transport",
]
