"""The Umami tracking client.

Holds configuration and accumulated identity properties, builds payloads
and dispatches them. Every tracking method validates its arguments, updates
local state and builds the payload immediately, then returns an awaitable
resolving to the raw ``httpx.Response``. The request is sent once that
awaitable is awaited or scheduled.

Usage::

    client = Umami(ClientConfig(website_id="94db1cb1-...", host_url="https://stats.example.com"))

    await client.track_page_view({"title": "Pricing"})
    await client.track("signup", {"plan": "pro"})
    await client.identify({"user_id": "u_123"})

    # Fire-and-forget
    asyncio.create_task(client.track_event("download"))
"""

from typing import Any, Awaitable, Dict, Mapping, Optional

import httpx

from umami.adapters.environment.system import SystemEnvironment
from umami.adapters.transport.http import HttpxTransport
from umami.client.builder import PayloadBuilder, PayloadLike
from umami.client.dispatcher import Dispatcher
from umami.core.config import ClientConfig
from umami.core.enums import EventKind
from umami.core.exceptions import InvalidPayloadError
from umami.core.logging import get_logger
from umami.core.protocols.environment import EnvironmentProvider
from umami.core.protocols.transport import Transport
from umami.schemas.revenue import revenue_data

logger = get_logger(__name__)


class Umami:
    """Stateful analytics client for one website.

    Instances share nothing; construct one per website or per isolation
    boundary. The client does no locking: in multi-threaded hosts, guard
    each instance externally.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[Transport] = None,
        environment: Optional[EnvironmentProvider] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Initial configuration. Defaults to an unconfigured
                client (empty website id) pointing at the public cloud.
            transport: Transport used for requests. Defaults to HttpxTransport.
            environment: Source of page-view defaults. Defaults to
                SystemEnvironment.
        """
        self._config = config or ClientConfig()
        self._properties: Dict[str, Any] = {}
        self._environment = environment or SystemEnvironment()
        self._builder = PayloadBuilder()
        self._dispatcher = Dispatcher(transport or HttpxTransport())

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def properties(self) -> Dict[str, Any]:
        """Snapshot of the accumulated identity properties."""
        return dict(self._properties)

    @property
    def environment(self) -> EnvironmentProvider:
        return self._environment

    @property
    def transport(self) -> Transport:
        return self._dispatcher.transport

    def configure(self, config: Optional[ClientConfig] = None, **options: Any) -> ClientConfig:
        """Replace the configuration wholesale.

        Fields not given fall back to their defaults, never to the previous
        configuration. Identity properties are untouched.

        Args:
            config: A complete configuration.
            **options: ClientConfig fields; they win over ``config``.

        Returns:
            The installed configuration.

        Raises:
            ConfigurationError: On unknown or invalid options.
        """
        self._config = ClientConfig.from_options(config, **options)
        logger.info(
            "Umami client configured (website=%s, host=%s)",
            self._config.website_id or "<unset>",
            self._config.host_url,
        )
        return self._config

    init = configure

    def reset(self) -> None:
        """Forget all identity properties. Configuration is kept."""
        self._properties = {}

    # ------------------------------------------------------------------
    # Tracking
    #
    # Validation, the identity merge and payload building happen when the
    # method is called. Only the network request is deferred to the
    # returned awaitable.
    # ------------------------------------------------------------------

    def track_page_view(self, payload: Optional[PayloadLike] = None) -> Awaitable[httpx.Response]:
        """Track a page view.

        Args:
            payload: Fields overriding the environment defaults.
        """
        built = self._builder.page_view(self._environment.snapshot(), payload)
        return self._dispatcher.send(self._config, built, EventKind.EVENT)

    def track_event(
        self,
        event_name: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[httpx.Response]:
        """Track a named custom event together with the environment defaults.

        Args:
            event_name: Name of the event.
            data: Event data, sent verbatim.

        Raises:
            InvalidPayloadError: If ``event_name`` is not a string.
        """
        if not isinstance(event_name, str):
            raise InvalidPayloadError()
        built = self._builder.named_event(self._environment.snapshot(), event_name, data)
        return self._dispatcher.send(self._config, built, EventKind.EVENT)

    def track(self, event: Any, data: Optional[Mapping[str, Any]] = None) -> Awaitable[httpx.Response]:
        """Track an event by name or send a pre-built payload.

        ``event`` may be a TrackInput, an event name (sent with ``data`` and
        no environment fields) or a Payload/mapping (sent as-is).

        Raises:
            InvalidPayloadError: For any other argument; nothing is sent.
        """
        track_input = self._builder.coerce_input(event, data)
        built = self._builder.from_input(track_input)
        return self._dispatcher.send(self._config, built, EventKind.EVENT)

    def track_revenue(
        self,
        event_name: str,
        revenue: float,
        currency: str,
        **data: Any,
    ) -> Awaitable[httpx.Response]:
        """Track a named event carrying validated revenue data.

        Raises:
            InvalidEventDataError: If revenue or currency is unusable.
        """
        return self.track_event(event_name, revenue_data(revenue, currency, **data))

    def identify(self, properties: Optional[Mapping[str, Any]] = None) -> Awaitable[httpx.Response]:
        """Merge ``properties`` into the identity and send them for the session.

        The merge is applied immediately, whether or not the returned
        request is ever awaited, and is kept even if sending fails.

        Raises:
            InvalidPayloadError: If ``properties`` is not a mapping.
        """
        if properties is None:
            properties = {}
        if not isinstance(properties, Mapping):
            raise InvalidPayloadError()
        self._properties = {**self._properties, **properties}
        built = self._builder.identify(self._config.session_id, self._properties)
        return self._dispatcher.send(self._config, built, EventKind.IDENTIFY)
