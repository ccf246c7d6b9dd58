"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and the colocated umami/**/tests/),
so its fixtures are available everywhere.
"""

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """Fake Transport that records sent requests."""
    from umami.adapters.transport.fake import FakeTransport

    return FakeTransport()


@pytest.fixture
def fake_environment():
    """Fake EnvironmentProvider with a fully populated snapshot."""
    from umami.adapters.environment.fake import FakeEnvironment

    return FakeEnvironment()


@pytest.fixture
def client(fake_transport, fake_environment):
    """Configured Umami client wired to the fakes."""
    from umami.client.client import Umami
    from umami.core.config import ClientConfig

    return Umami(
        ClientConfig(website_id="test-website", host_url="https://example.com"),
        transport=fake_transport,
        environment=fake_environment,
    )


@pytest.fixture
def isolated_default_client(fake_transport, fake_environment):
    """Swap the process-wide default client for one wired to the fakes."""
    from umami.client import default
    from umami.client.client import Umami

    previous = default._client
    shared = Umami(transport=fake_transport, environment=fake_environment)
    default.set_client(shared)
    yield shared
    default.set_client(previous)
