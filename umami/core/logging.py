"""Logging helpers for the Umami client.

The library never configures handlers; applications decide where records go.
A ``NullHandler`` on the package logger keeps "no handler" warnings away.

Usage::

    from umami.core.logging import logger

    dispatch_logger = logger.with_prefix("Dispatch: ").with_context(kind="event")
    dispatch_logger.debug("sending")
"""

import logging
from typing import Any, Dict, MutableMapping, Optional, Tuple

PACKAGE_LOGGER_NAME = "umami"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries key/value context and an optional prefix.

    Context is attached to each record under ``extra`` and rendered as a
    ``key=value`` suffix so it survives plain formatters.
    """

    def __init__(
        self,
        logger: logging.Logger,
        context: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with the given context and prefix."""
        super().__init__(logger, dict(context or {}))
        self.prefix = prefix

    @property
    def context(self) -> Dict[str, Any]:
        """Return a copy of the bound context."""
        return dict(self.extra)

    def with_context(self, **context: Any) -> "ContextualLogger":
        """Return a new logger with ``context`` merged over the current one."""
        return ContextualLogger(self.logger, {**self.extra, **context}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, dict(self.extra), self.prefix + prefix)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        """Apply prefix and context to a log call."""
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        message = f"{self.prefix}{msg}"
        if self.extra:
            rendered = " ".join(f"{key}={value}" for key, value in self.extra.items())
            message = f"{message} [{rendered}]"
        return message, kwargs


def get_logger(name: str = PACKAGE_LOGGER_NAME, **context: Any) -> ContextualLogger:
    """Return a ContextualLogger for ``name`` bound to ``context``."""
    return ContextualLogger(logging.getLogger(name), context)


logger = get_logger()
