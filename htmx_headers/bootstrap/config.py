"""Process-wide HTMX defaults seeded from the environment."""

import logging
import os
from dataclasses import dataclass
from datetime import timedelta

CONFIG_LOGGER = logging.getLogger("htmx_headers.config")


def _env_millis(name: str, default: int) -> timedelta:
    """Read a non-negative millisecond count, keeping the default on bad input."""
    value = os.getenv(name)
    if value is None:
        return timedelta(milliseconds=default)
    try:
        millis = int(value)
    except ValueError:
        millis = -1
    if millis < 0:
        CONFIG_LOGGER.warning(
            "Ignoring invalid %s=%r, using %dms",
            name,
            value,
            default,
            extra={"event": "invalid_setting", "setting": name, "value": value},
        )
        millis = default
    return timedelta(milliseconds=millis)


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


DEFAULT_SWAP_DURATION = _env_millis("HTMX_SWAP_DURATION_MS", 0)
DEFAULT_SETTLE_DELAY = _env_millis("HTMX_SETTLE_DELAY_MS", 20)
DEFAULT_NOTIFICATION_KEY = _env_str("HTMX_NOTIFICATION_KEY", "showMessage")


@dataclass(frozen=True)
class HtmxDefaults:
    """Timing and notification defaults handed to every request handler."""

    swap_duration: timedelta = DEFAULT_SWAP_DURATION
    settle_delay: timedelta = DEFAULT_SETTLE_DELAY
    notification_key: str = DEFAULT_NOTIFICATION_KEY


_DEFAULTS = HtmxDefaults()


def load_defaults() -> HtmxDefaults:
    """Return the defaults captured when the module was imported."""
    return _DEFAULTS
