"""Environment snapshot provider protocol.

Providers describe where the tracked application currently "is" (host,
language, referrer, screen, title, path). The client only reads them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from umami.schemas.environment import EnvironmentSnapshot


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Source of payload defaults for page views and named events."""

    def snapshot(self) -> "EnvironmentSnapshot":
        """Return the current environment.

        Must be side-effect free and always succeed.
        """
        ...
