"""Fixed environment provider."""

from typing import Optional

from umami.schemas.environment import EnvironmentSnapshot


class StaticEnvironment:
    """Return the same snapshot on every call.

    Useful for server-side tracking where the "page" is known up front,
    and as the base of request-derived environments.
    """

    def __init__(self, snapshot: Optional[EnvironmentSnapshot] = None) -> None:
        """Store ``snapshot`` (an empty snapshot by default)."""
        self._snapshot = snapshot or EnvironmentSnapshot()

    def snapshot(self) -> EnvironmentSnapshot:
        """Return the stored snapshot."""
        return self._snapshot
