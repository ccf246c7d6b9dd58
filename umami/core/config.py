"""Client configuration.

Configuration is passed explicitly; nothing is read from the process
environment.

Usage:
    from umami.core.config import ClientConfig

    config = ClientConfig(website_id="d1f2...", host_url="https://stats.example.com/")
    assert config.host_url == "https://stats.example.com"
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from umami.core.exceptions import ConfigurationError
from umami.version import __version__

DEFAULT_HOST_URL = "https://cloud.umami.is"
SEND_PATH = "/api/send"
DEFAULT_USER_AGENT = f"Mozilla/5.0 Umami/{__version__}"


class ClientConfig(BaseModel):
    """Immutable options for one Umami client.

    An empty ``website_id`` marks an unconfigured client; events are still
    sent, carrying an empty ``website`` field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    website_id: str = Field("", description="Identifier of the tracked website")
    host_url: str = Field(DEFAULT_HOST_URL, description="Base URL of the Umami server")
    session_id: Optional[str] = Field(None, description="Session correlation token")
    user_agent: Optional[str] = Field(None, description="Override for the User-Agent header")

    @field_validator("host_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Store the base URL without trailing slashes."""
        return value.rstrip("/")

    @property
    def send_url(self) -> str:
        """Full URL of the collection endpoint."""
        return f"{self.host_url}{SEND_PATH}"

    @property
    def effective_user_agent(self) -> str:
        """User-Agent header value: the override if set, else the default."""
        return self.user_agent or DEFAULT_USER_AGENT

    @classmethod
    def from_options(cls, config: Optional["ClientConfig"] = None, **options: Any) -> "ClientConfig":
        """Build a config from an existing instance and/or keyword options.

        Keyword options win over fields of ``config``. Validation failures
        are raised as ConfigurationError.
        """
        values: Dict[str, Any] = config.model_dump() if config is not None else {}
        values.update(options)
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e
