"""Payload of the HX-Location header."""

import json
from dataclasses import dataclass, fields
from typing import Any, Optional


@dataclass(frozen=True)
class HxLocation:
    """Client-side navigation target, optionally with request options.

    Without options the header value is the bare path; otherwise the client
    expects a JSON object.
    """

    path: str
    source: Optional[str] = None
    event: Optional[str] = None
    handler: Optional[str] = None
    target: Optional[str] = None
    swap: Optional[Any] = None
    values: Optional[dict[str, Any]] = None
    headers: Optional[dict[str, str]] = None
    select: Optional[str] = None

    def options(self) -> dict[str, Any]:
        options = {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if field.name != "path" and getattr(self, field.name) is not None
        }
        if "swap" in options:
            options["swap"] = str(options["swap"])
        return options

    def __str__(self) -> str:
        options = self.options()
        if not options:
            return self.path
        return json.dumps({"path": self.path, **options})
