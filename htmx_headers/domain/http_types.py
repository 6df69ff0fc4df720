"""Transport value types shared by the header accessors."""

from dataclasses import dataclass, field
from typing import Mapping, MutableMapping


@dataclass
class HttpRequest:
    """Represents a parsed HTTP request with lower-cased header keys."""

    method: str
    path: str
    headers: dict[str, str]
    body: bytes = b""


@dataclass
class HttpResponse:
    """Represents an HTTP response whose headers are still being assembled."""

    status_line: str = "HTTP/1.1 200 OK"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def header_value(headers: Mapping[str, str], name: str) -> str:
    """Return the value stored under ``name`` ignoring case, or an empty string."""
    key = name.lower()
    value = headers.get(key)
    if value is not None:
        return value
    for candidate, candidate_value in headers.items():
        if candidate.lower() == key:
            return candidate_value
    return ""


def replace_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Store ``value`` under ``name``, dropping any differently-cased duplicate."""
    key = name.lower()
    for existing in [k for k in headers if k.lower() == key and k != name]:
        del headers[existing]
    headers[name] = value
