"""Client-side event maps for the HX-Trigger family of headers."""

import json
from enum import Enum
from typing import Any, Mapping, Optional


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


_NO_DETAIL = object()


class Trigger:
    """Ordered collection of events for the client to dispatch.

    Events without details serialize as a comma-separated list of names;
    as soon as one event carries a detail the whole set is sent as JSON.
    """

    def __init__(self) -> None:
        self._events: dict[str, Any] = {}

    def add_event(self, name: str) -> "Trigger":
        self._events[name] = _NO_DETAIL
        return self

    def add_event_detail(self, name: str, detail: Any) -> "Trigger":
        """Attach a JSON-serializable detail to the event ``name``."""
        self._events[name] = detail
        return self

    def add_event_object(self, name: str, **fields: Any) -> "Trigger":
        return self.add_event_detail(name, dict(fields))

    @property
    def events(self) -> list[str]:
        return list(self._events)

    def has_details(self) -> bool:
        return any(detail is not _NO_DETAIL for detail in self._events.values())

    def __bool__(self) -> bool:
        return bool(self._events)

    def __str__(self) -> str:
        if not self.has_details():
            return ", ".join(self._events)
        payload = {
            name: (None if detail is _NO_DETAIL else detail)
            for name, detail in self._events.items()
        }
        return json.dumps(payload)


def notification_trigger(
    key: str,
    level: NotificationLevel,
    message: str,
    variables: Optional[Mapping[str, Any]] = None,
) -> Trigger:
    """Build a trigger carrying a user-facing notification under ``key``.

    ``level`` and ``message`` always win over same-named entries in ``variables``.
    """
    detail = {
        **(variables or {}),
        "level": NotificationLevel(level).value,
        "message": message,
    }
    return Trigger().add_event_detail(key, detail)
