"""Environment snapshot adapters."""

from umami.adapters.environment.fake import FakeEnvironment
from umami.adapters.environment.request import RequestEnvironment
from umami.adapters.environment.static import StaticEnvironment
from umami.adapters.environment.system import SystemEnvironment

__all__ = [
    "FakeEnvironment",
    "RequestEnvironment",
    "StaticEnvironment",
    "SystemEnvironment",
]
