"""Environment snapshot schema."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentSnapshot(BaseModel):
    """Ambient values used as payload defaults.

    Mirrors what a browser exposes through ``window.location``,
    ``navigator.language``, ``document.referrer``, ``window.screen`` and
    ``document.title``.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = ""
    language: str = ""
    referrer: str = ""
    screen_width: int = Field(0, ge=0)
    screen_height: int = Field(0, ge=0)
    title: str = ""
    url: str = Field("", description="Current path, e.g. '/pricing'")

    @property
    def screen(self) -> str:
        """Screen dimensions formatted as ``{width}x{height}``."""
        return f"{self.screen_width}x{self.screen_height}"

    def to_payload_fields(self) -> Dict[str, Any]:
        """Return the six payload fields derived from this snapshot."""
        return {
            "hostname": self.hostname,
            "language": self.language,
            "referrer": self.referrer,
            "screen": self.screen,
            "title": self.title,
            "url": self.url,
        }
