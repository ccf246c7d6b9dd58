"""Revenue event data.

Revenue reports read two reserved keys from event data: ``revenue`` (a
number) and ``currency`` (an ISO 4217 code; servers fall back to USD for
codes they do not recognize). Everything else in the map is free-form.
Plain dicts are never validated; use :func:`revenue_data` when you want
the reserved keys checked.
"""

import re
from typing import Any, Dict

from umami.core.exceptions import InvalidEventDataError

REVENUE_KEY = "revenue"
CURRENCY_KEY = "currency"

_CURRENCY_RE = re.compile(r"[A-Za-z]{3}")


def validate_revenue(value: Any) -> float:
    """Return ``value`` if it is a usable revenue amount."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidEventDataError(REVENUE_KEY, "Revenue must be a number")
    if value != value or value in (float("inf"), float("-inf")):
        raise InvalidEventDataError(REVENUE_KEY, "Revenue must be finite")
    return value


def validate_currency(value: Any) -> str:
    """Return ``value`` upper-cased if it looks like an ISO 4217 code."""
    if not isinstance(value, str) or not _CURRENCY_RE.fullmatch(value):
        raise InvalidEventDataError(CURRENCY_KEY, "Currency must be a three-letter ISO 4217 code")
    return value.upper()


def revenue_data(revenue: Any, currency: Any, **extra: Any) -> Dict[str, Any]:
    """Build event data carrying validated revenue and currency.

    Args:
        revenue: Amount earned by the event.
        currency: ISO 4217 currency code, e.g. ``"EUR"``.
        **extra: Additional free-form event data.

    Returns:
        Event data with ``revenue`` and ``currency`` set.

    Raises:
        InvalidEventDataError: If either reserved value is unusable.
    """
    data: Dict[str, Any] = dict(extra)
    data[REVENUE_KEY] = validate_revenue(revenue)
    data[CURRENCY_KEY] = validate_currency(currency)
    return data
