"""Fake environment provider for testing."""

from typing import Optional

from umami.schemas.environment import EnvironmentSnapshot

DEFAULT_FAKE_SNAPSHOT = EnvironmentSnapshot(
    hostname="example.com",
    language="en-US",
    referrer="https://referrer.example/",
    screen_width=1920,
    screen_height=1080,
    title="Example Page",
    url="/example",
)


class FakeEnvironment:
    """Test implementation of EnvironmentProvider.

    Returns a settable snapshot and counts how often it was read.

    Usage::

        env = FakeEnvironment()
        env.current = env.current.model_copy(update={"title": "Other"})
    """

    def __init__(self, snapshot: Optional[EnvironmentSnapshot] = None) -> None:
        """Initialize with ``snapshot`` or a fully populated default."""
        self.current = snapshot or DEFAULT_FAKE_SNAPSHOT
        self.reads = 0

    def snapshot(self) -> EnvironmentSnapshot:
        """Return the current snapshot and count the read."""
        self.reads += 1
        return self.current
