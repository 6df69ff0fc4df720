"""Per-request HTMX handler binding one request to one response."""

import logging
from typing import Any, Mapping, Optional, Union

from htmx_headers.bootstrap.config import HtmxDefaults, load_defaults
from htmx_headers.bootstrap.logging_setup import configure_logging, get_logger, null_logger
from htmx_headers.domain.headers import ResponseHeader
from htmx_headers.domain.http_types import HttpRequest, HttpResponse
from htmx_headers.domain.location import HxLocation
from htmx_headers.domain.signals import (
    Duration,
    read_request_headers,
    set_bool,
    set_duration,
    set_string,
)
from htmx_headers.domain.swap import Swap
from htmx_headers.domain.trigger import NotificationLevel, Trigger, notification_trigger

Logger = Union[logging.Logger, logging.LoggerAdapter]


class HxHandler:
    """Reads the signals of one request and writes directives to its response.

    Handlers are created per request by :meth:`Htmx.new_handler` and must not
    outlive it. The request signals, including ``is_hx_request``, are captured
    at construction time and are not refreshed if the request headers change
    afterwards.
    """

    def __init__(
        self,
        request: HttpRequest,
        response: HttpResponse,
        log: Optional[Logger] = None,
        defaults: Optional[HtmxDefaults] = None,
    ) -> None:
        self._request = request
        self._response = response
        self.log = log if log is not None else null_logger()
        self.defaults = defaults if defaults is not None else load_defaults()
        self.request = read_request_headers(request)
        self.is_hx_request = self.request.request

    @property
    def response(self) -> HttpResponse:
        return self._response

    def render_partial(self) -> bool:
        """Return True when the bound request should get a fragment."""
        signals = self.request
        partial = (
            signals.request or signals.boosted
        ) and not signals.history_restore_request
        self.log.debug(
            "Render decision",
            extra={
                "event": "render_decision",
                "hx_request": self.is_hx_request,
                "render_partial": partial,
                "method": self._request.method,
                "path": self._request.path,
            },
        )
        return partial

    def _set(self, header: ResponseHeader, value: str) -> None:
        set_string(self._response, header, value)
        self._logged(header)

    def _logged(self, header: ResponseHeader) -> None:
        value = self._response.headers[header.value]
        self.log.debug(
            "Response header set",
            extra={"event": "header_set", "header": header.value, "value": value},
        )

    def redirect(self, url: str) -> None:
        """Ask the client to perform a full redirect to ``url``."""
        self._set(ResponseHeader.REDIRECT, url)

    def refresh(self, refresh: bool = True) -> None:
        set_bool(self._response, ResponseHeader.REFRESH, refresh)
        self._logged(ResponseHeader.REFRESH)

    def push_url(self, url: str) -> None:
        self._set(ResponseHeader.PUSH_URL, url)

    def replace_url(self, url: str) -> None:
        self._set(ResponseHeader.REPLACE_URL, url)

    def location(self, location: Union[str, HxLocation]) -> None:
        """Navigate client-side without a full page reload."""
        self._set(ResponseHeader.LOCATION, str(location))

    def retarget(self, selector: str) -> None:
        self._set(ResponseHeader.RETARGET, selector)

    def reselect(self, selector: str) -> None:
        self._set(ResponseHeader.RESELECT, selector)

    def reswap(self, swap: Union[str, Swap]) -> None:
        self._set(ResponseHeader.RESWAP, str(swap))

    def swap_timing(
        self, swap: Optional[Duration] = None, settle: Optional[Duration] = None
    ) -> None:
        """Write swap and settle timings, falling back to the handler defaults."""
        swap = self.defaults.swap_duration if swap is None else swap
        settle = self.defaults.settle_delay if settle is None else settle
        set_duration(self._response, ResponseHeader.SWAP_DURATION, swap)
        self._logged(ResponseHeader.SWAP_DURATION)
        set_duration(self._response, ResponseHeader.SETTLE_DELAY, settle)
        self._logged(ResponseHeader.SETTLE_DELAY)

    def trigger(self, trigger: Union[str, Trigger]) -> None:
        self._set(ResponseHeader.TRIGGER, str(trigger))

    def trigger_after_settle(self, trigger: Union[str, Trigger]) -> None:
        self._set(ResponseHeader.TRIGGER_AFTER_SETTLE, str(trigger))

    def trigger_after_swap(self, trigger: Union[str, Trigger]) -> None:
        self._set(ResponseHeader.TRIGGER_AFTER_SWAP, str(trigger))

    def trigger_notification(
        self,
        level: NotificationLevel,
        message: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Send a notification event keyed by the configured notification key."""
        self.log.debug(
            "Notification triggered",
            extra={"event": "notification", "notification_level": str(level)},
        )
        self.trigger(
            notification_trigger(
                self.defaults.notification_key, level, message, variables
            )
        )

    def trigger_info(
        self, message: str, variables: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.trigger_notification(NotificationLevel.INFO, message, variables)

    def trigger_success(
        self, message: str, variables: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.trigger_notification(NotificationLevel.SUCCESS, message, variables)

    def trigger_warning(
        self, message: str, variables: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.trigger_notification(NotificationLevel.WARNING, message, variables)

    def trigger_error(
        self, message: str, variables: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.trigger_notification(NotificationLevel.ERROR, message, variables)


class Htmx:
    """Factory for per-request handlers sharing one logger and set of defaults."""

    def __init__(
        self, defaults: Optional[HtmxDefaults] = None, log: Optional[Logger] = None
    ) -> None:
        self.defaults = defaults if defaults is not None else load_defaults()
        self.log = log if log is not None else get_logger("handler")

    def set_log(self, log: Optional[Logger]) -> None:
        """Replace the diagnostics sink; ``None`` silences handler logging."""
        self.log = log if log is not None else null_logger()

    def configure_logging(
        self,
        level: str = "INFO",
        destination: Optional[str] = None,
        use_json: bool = True,
    ) -> None:
        """Send handler diagnostics to stdout or a rotating file.

        An unusable destination leaves the factory on the null sink.
        """
        self.log = configure_logging(level, destination, use_json, component="handler")

    def new_handler(self, request: HttpRequest, response: HttpResponse) -> HxHandler:
        return HxHandler(request, response, self.log, self.defaults)