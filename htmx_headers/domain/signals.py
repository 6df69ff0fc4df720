"""Typed accessors between HTMX signals and raw header collections."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from htmx_headers.domain.headers import (
    BOOLEAN_REQUEST_HEADERS,
    RequestHeader,
    ResponseHeader,
    format_bool,
    parse_bool,
)
from htmx_headers.domain.http_types import (
    HttpRequest,
    HttpResponse,
    header_value,
    replace_header,
)

Duration = Union[timedelta, int]


@dataclass(frozen=True)
class HxRequestHeaders:
    """Snapshot of every HTMX signal carried by one request."""

    boosted: bool
    current_url: str
    history_restore_request: bool
    prompt: str
    request: bool
    target: str
    trigger_name: str
    trigger: str
    trigger_event: str


def get_string(request: HttpRequest, header: RequestHeader) -> str:
    """Return the raw header value, or an empty string when absent."""
    return header_value(request.headers, header.value)


def _marker(request: HttpRequest, header: RequestHeader) -> bool:
    return parse_bool(get_string(request, header))


def is_hx_request(request: HttpRequest) -> bool:
    """Return True when the request was issued by an HTMX client."""
    return _marker(request, RequestHeader.REQUEST)


def is_hx_boosted(request: HttpRequest) -> bool:
    """Return True when the request comes from a boosted link or form."""
    return _marker(request, RequestHeader.BOOSTED)


def is_hx_history_restore_request(request: HttpRequest) -> bool:
    """Return True when the client is restoring history after a cache miss."""
    return _marker(request, RequestHeader.HISTORY_RESTORE_REQUEST)


def render_partial(request: HttpRequest) -> bool:
    """Decide whether the handler should answer with a fragment.

    History restores always get the full page, even when the request or
    boosted markers are also present.
    """
    return (
        is_hx_request(request) or is_hx_boosted(request)
    ) and not is_hx_history_restore_request(request)


def read_request_headers(request: HttpRequest) -> HxRequestHeaders:
    """Collect all HTMX request signals into a single value."""
    values = {
        header.name.lower(): (
            _marker(request, header)
            if header in BOOLEAN_REQUEST_HEADERS
            else get_string(request, header)
        )
        for header in RequestHeader
    }
    return HxRequestHeaders(**values)


def set_string(response: HttpResponse, header: ResponseHeader, value: str) -> None:
    """Write a directive verbatim, replacing any previous value."""
    replace_header(response.headers, header.value, value)


def set_bool(response: HttpResponse, header: ResponseHeader, value: bool) -> None:
    """Write a boolean directive as "true" or "false"."""
    set_string(response, header, format_bool(value))


def to_milliseconds(duration: Duration) -> int:
    """Return the whole number of milliseconds in ``duration``."""
    if isinstance(duration, timedelta):
        # truncate toward zero
        millis = abs(duration) // timedelta(milliseconds=1)
        return -millis if duration < timedelta(0) else millis
    return int(duration)


def set_duration(response: HttpResponse, header: ResponseHeader, duration: Duration) -> None:
    """Write a duration directive as a decimal count of milliseconds."""
    set_string(response, header, str(to_milliseconds(duration)))
