"""Registry of the HTMX request and response header names."""

from enum import Enum
from typing import Optional, Union

TRUE_VALUE = "true"
FALSE_VALUE = "false"


class RequestHeader(str, Enum):
    """Headers an HTMX client attaches to the requests it issues."""

    BOOSTED = "HX-Boosted"
    CURRENT_URL = "HX-Current-URL"
    HISTORY_RESTORE_REQUEST = "HX-History-Restore-Request"
    PROMPT = "HX-Prompt"
    REQUEST = "HX-Request"
    TARGET = "HX-Target"
    TRIGGER_NAME = "HX-Trigger-Name"
    TRIGGER = "HX-Trigger"
    TRIGGER_EVENT = "Triggering-Event"

    def __str__(self) -> str:
        return self.value


class ResponseHeader(str, Enum):
    """Headers a server sets to steer how the client applies a response."""

    LOCATION = "HX-Location"
    PUSH_URL = "HX-Push-Url"
    REDIRECT = "HX-Redirect"
    REFRESH = "HX-Refresh"
    REPLACE_URL = "HX-Replace-Url"
    RESWAP = "HX-Reswap"
    RETARGET = "HX-Retarget"
    RESELECT = "HX-Reselect"
    TRIGGER = "HX-Trigger"
    TRIGGER_AFTER_SETTLE = "HX-Trigger-After-Settle"
    TRIGGER_AFTER_SWAP = "HX-Trigger-After-Swap"
    SWAP_DURATION = "HX-Swap-Duration"
    SETTLE_DELAY = "HX-Settle-Delay"

    def __str__(self) -> str:
        return self.value


BOOLEAN_REQUEST_HEADERS = frozenset(
    {
        RequestHeader.BOOSTED,
        RequestHeader.HISTORY_RESTORE_REQUEST,
        RequestHeader.REQUEST,
    }
)


def wire_name(header: Union[RequestHeader, ResponseHeader]) -> str:
    """Return the canonical on-the-wire spelling of a header."""
    return header.value


def parse_bool(raw: Optional[str]) -> bool:
    """Coerce a header value to a boolean; only a case-insensitive "true" is true."""
    if not raw:
        return False
    return raw.lower() == TRUE_VALUE


def format_bool(value: bool) -> str:
    """Render a boolean the way HTMX clients expect to read it."""
    return TRUE_VALUE if value else FALSE_VALUE
