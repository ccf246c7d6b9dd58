"""Environment provider backed by the running process.

A Python process has no page, so only the host name and the locale are
discovered; the remaining fields come from constructor arguments.
"""

import locale
import re
import socket
from typing import Optional

from umami.schemas.environment import EnvironmentSnapshot

_LANGUAGE_RE = re.compile(r"[A-Za-z]{2,3}(_[A-Za-z0-9]{2,8})?")


def locale_to_language_tag(name: Optional[str]) -> str:
    """Convert a POSIX locale name like ``en_US.UTF-8`` to ``en-US``.

    The C/POSIX locales and names without a language part (``UTF-8``)
    yield ``""``.
    """
    if not name:
        return ""
    base = name.split(".", 1)[0].split("@", 1)[0]
    if base in ("C", "POSIX") or not _LANGUAGE_RE.fullmatch(base):
        return ""
    return base.replace("_", "-")


def process_locale_name() -> Optional[str]:
    """Return the raw LC_CTYPE locale name of the process.

    Queried with ``setlocale`` rather than ``getlocale``, which rewrites
    ``C.UTF-8`` to ``en_US`` and raises ValueError on names such as
    ``UTF-8``.
    """
    try:
        return locale.setlocale(locale.LC_CTYPE)
    except locale.Error:
        return None


class SystemEnvironment:
    """Derive hostname and language from the process, the rest from arguments."""

    def __init__(
        self,
        *,
        referrer: str = "",
        screen_width: int = 0,
        screen_height: int = 0,
        title: str = "",
        url: str = "",
    ) -> None:
        """Store the values the process cannot discover by itself."""
        self._referrer = referrer
        self._screen_width = screen_width
        self._screen_height = screen_height
        self._title = title
        self._url = url

    def snapshot(self) -> EnvironmentSnapshot:
        """Build a snapshot from the current host name and locale."""
        return EnvironmentSnapshot(
            hostname=socket.gethostname(),
            language=locale_to_language_tag(process_locale_name()),
            referrer=self._referrer,
            screen_width=self._screen_width,
            screen_height=self._screen_height,
            title=self._title,
            url=self._url,
        )
