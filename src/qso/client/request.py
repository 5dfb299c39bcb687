"""Request descriptors and response checks shared by the sync and async bridges."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from qso.connection import Connection
from qso.exceptions import EndpointError

_FORMATTER = string.Formatter()


def format_path(path_template: str, *params: Any) -> str:
    """Substitute ``{0}``-style placeholders positionally.

    Values are inserted as-is, without URL escaping.

    Raises:
        ValueError: If the number of params does not match the placeholders.
    """
    placeholders = [
        name for _, name, _, _ in _FORMATTER.parse(path_template) if name is not None
    ]
    if len(placeholders) != len(params):
        raise ValueError(
            f"Path {path_template!r} has {len(placeholders)} placeholder(s) "
            f"but {len(params)} parameter(s) were given"
        )
    return path_template.format(*params)


@dataclass(frozen=True)
class RequestDescriptor:
    """One call to the League client API."""

    path_template: str
    method: str = "GET"
    body: str | None = None
    params: tuple[Any, ...] = ()
    query: Mapping[str, Any] | None = field(default=None)

    @property
    def path(self) -> str:
        return format_path(self.path_template, *self.params)

    def headers(self, connection: Connection) -> dict[str, str]:
        """Authorization and content negotiation headers for this request."""
        headers = {
            "Authorization": f"Basic {connection.auth_token}",
            "Accept": "application/json",
        }
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        return headers


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def check_response(status_code: int, body: str) -> str:
    """Return ``body`` for a 2xx status, raise EndpointError otherwise."""
    if not is_success(status_code):
        raise EndpointError(body, status_code)
    return body
