"""Environment provider built from an incoming HTTP request.

Server-side applications track the page a visitor requested rather than
a browser window. The request URL and headers carry most of what a
browser would report:

- ``Host`` / URL host -> ``hostname``
- first ``Accept-Language`` tag -> ``language``
- ``Referer`` -> ``referrer``
- URL path -> ``url``
"""

from typing import Mapping, Union

import httpx

from umami.adapters.environment.static import StaticEnvironment
from umami.schemas.environment import EnvironmentSnapshot


def primary_language(accept_language: str) -> str:
    """Return the first language tag of an ``Accept-Language`` header."""
    first = accept_language.split(",", 1)[0]
    tag = first.split(";", 1)[0].strip()
    return "" if tag == "*" else tag


class RequestEnvironment(StaticEnvironment):
    """Snapshot describing one incoming request."""

    @classmethod
    def from_headers(
        cls,
        url: Union[str, httpx.URL],
        headers: Mapping[str, str],
        *,
        title: str = "",
        screen_width: int = 0,
        screen_height: int = 0,
    ) -> "RequestEnvironment":
        """Build an environment from a request URL and its headers.

        Args:
            url: Absolute or path-only request URL.
            headers: Request headers (any casing).
            title: Title of the page being served, if known.
            screen_width: Viewport width, if the client reported it.
            screen_height: Viewport height, if the client reported it.
        """
        request_url = httpx.URL(url)
        request_headers = httpx.Headers(headers)

        hostname = request_url.host
        if not hostname:
            hostname = request_headers.get("host", "").rsplit(":", 1)[0]

        return cls(
            EnvironmentSnapshot(
                hostname=hostname,
                language=primary_language(request_headers.get("accept-language", "")),
                referrer=request_headers.get("referer", ""),
                screen_width=screen_width,
                screen_height=screen_height,
                title=title,
                url=request_url.path,
            )
        )
