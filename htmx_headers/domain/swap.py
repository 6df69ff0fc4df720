"""Swap specifications sent through the HX-Reswap header."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from htmx_headers.bootstrap.config import HtmxDefaults, load_defaults
from htmx_headers.domain.headers import format_bool
from htmx_headers.domain.signals import Duration, to_milliseconds


class SwapStyle(str, Enum):
    """How the returned markup is placed relative to the target element."""

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


class ScrollMode(str, Enum):
    """Whether the client scrolls the element or merely brings it into view."""

    SCROLL = "scroll"
    SHOW = "show"


class ScrollDirection(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Scrolling:
    mode: ScrollMode
    direction: ScrollDirection
    target: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.mode.value]
        if self.target:
            parts.append(self.target)
        parts.append(self.direction.value)
        return ":".join(parts)


@dataclass(frozen=True)
class Swap:
    """An immutable swap style plus its optional modifiers.

    Builder methods return a new value, so a shared base swap can be
    specialised per request without leaking changes.
    """

    style: SwapStyle = SwapStyle.INNER_HTML
    transition: Optional[bool] = None
    swap_delay: Optional[Duration] = None
    settle_delay: Optional[Duration] = None
    scrolling: Optional[Scrolling] = None
    ignore_title: Optional[bool] = None
    focus_scroll: Optional[bool] = None

    def with_style(self, style: SwapStyle) -> "Swap":
        return replace(self, style=style)

    def with_transition(self, enabled: bool = True) -> "Swap":
        return replace(self, transition=enabled)

    def with_swap_delay(
        self, duration: Optional[Duration] = None, defaults: Optional[HtmxDefaults] = None
    ) -> "Swap":
        """Delay the swap; without a duration the configured default applies."""
        if duration is None:
            duration = (defaults or load_defaults()).swap_duration
        return replace(self, swap_delay=duration)

    def with_settle_delay(
        self, duration: Optional[Duration] = None, defaults: Optional[HtmxDefaults] = None
    ) -> "Swap":
        """Delay settling; without a duration the configured default applies."""
        if duration is None:
            duration = (defaults or load_defaults()).settle_delay
        return replace(self, settle_delay=duration)

    def scroll(
        self, direction: ScrollDirection = ScrollDirection.TOP, target: Optional[str] = None
    ) -> "Swap":
        return replace(self, scrolling=Scrolling(ScrollMode.SCROLL, direction, target))

    def show(
        self, direction: ScrollDirection = ScrollDirection.TOP, target: Optional[str] = None
    ) -> "Swap":
        return replace(self, scrolling=Scrolling(ScrollMode.SHOW, direction, target))

    def with_ignore_title(self, ignore: bool = True) -> "Swap":
        return replace(self, ignore_title=ignore)

    def with_focus_scroll(self, enabled: bool = True) -> "Swap":
        return replace(self, focus_scroll=enabled)

    def __str__(self) -> str:
        parts = [self.style.value]
        if self.transition is not None:
            parts.append(f"transition:{format_bool(self.transition)}")
        if self.swap_delay is not None:
            parts.append(f"swap:{to_milliseconds(self.swap_delay)}ms")
        if self.settle_delay is not None:
            parts.append(f"settle:{to_milliseconds(self.settle_delay)}ms")
        if self.ignore_title is not None:
            parts.append(f"ignoreTitle:{format_bool(self.ignore_title)}")
        if self.scrolling is not None:
            parts.append(str(self.scrolling))
        if self.focus_scroll is not None:
            parts.append(f"focus-scroll:{format_bool(self.focus_scroll)}")
        return " ".join(parts)
