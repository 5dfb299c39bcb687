"""Synchronous HTTP bridge to the League client REST API.

LeagueHTTPClient owns a single httpx.Client bound to the local client's
https endpoint. Calls block the calling thread until the exchange completes;
the underlying httpx.Client is shared and safe to use from several threads.
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

from qso.client.request import RequestDescriptor, check_response
from qso.connection import Connection
from qso.exceptions import ClientNotConnectedError, QsoTransportError
from qso.serialization import decode_body

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LeagueHTTPClient:
    """Blocking request/response bridge.

    Example:
        with LeagueHTTPClient(connection) as http:
            raw = http.call("/lol-summoner/v1/summoners/{0}", "GET", None, 42)
            build = http.get_dto(BuildInfo, "/system/v1/builds")
    """

    def __init__(
        self,
        connection: Connection,
        connect_timeout: float = 10.0,
        very_verbose: bool = False,
    ):
        """Initialize the HTTP bridge.

        Args:
            connection: Host, port and credential of the League client.
            connect_timeout: Connect timeout in seconds. Reads never time out.
            very_verbose: Log response bodies at DEBUG level.
        """
        self.connection = connection
        self.connect_timeout = connect_timeout
        self.very_verbose = very_verbose
        self._client: httpx.Client | None = None

    def __enter__(self) -> LeagueHTTPClient:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self, verify: ssl.SSLContext | bool = True) -> None:
        """Create the underlying httpx.Client.

        Args:
            verify: SSL context deciding which certificates are trusted,
                usually from ``negotiate_ssl_context``.
        """
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.connection.base_url,
                verify=verify,
                timeout=httpx.Timeout(None, connect=self.connect_timeout),
            )
            logger.debug("HTTP client connected to %s", self.connection.base_url)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Request Bridge
    # =========================================================================

    def call(
        self,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """Perform one request and return the raw response body.

        Args:
            path: Path template with ``{0}``-style placeholders.
            method: HTTP method.
            body: JSON body sent verbatim, or None for no body.
            *params: Values substituted into the path template.
            query: Optional query string parameters.

        Returns:
            The response body, unchanged.

        Raises:
            EndpointError: If the status code is not 2xx.
            QsoTransportError: On network, TLS or timeout failures.
            ValueError: If params do not match the path placeholders.
        """
        request = RequestDescriptor(
            path_template=path,
            method=method.upper(),
            body=body,
            params=params,
            query=query,
        )
        return self.send(request)

    def get_dto(
        self,
        target_type: type[T] | Any,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> T:
        """Perform one request and deserialize the body as ``target_type``.

        Raises:
            DeserializationError: If the body does not match ``target_type``.
        """
        raw = self.call(path, method, body, *params, query=query)
        return decode_body(raw, target_type)

    def send(self, request: RequestDescriptor) -> str:
        """Execute a RequestDescriptor."""
        if self._client is None:
            raise ClientNotConnectedError("HTTP client not connected. Call connect() first.")

        path = request.path
        logger.debug("Requesting %s (%s)", path, request.method)
        try:
            response = self._client.request(
                request.method,
                path,
                headers=request.headers(self.connection),
                content=request.body.encode("utf-8") if request.body is not None else None,
                params=request.query,
            )
        except httpx.HTTPError as e:
            logger.warning("Request %s %s failed: %s", request.method, path, e)
            raise QsoTransportError(f"{request.method} {path} failed: {e}") from e

        text = response.text
        logger.debug("Response status: %d (%s)", response.status_code, response.reason_phrase)
        if self.very_verbose:
            logger.debug("Response body: %s", text)
        return check_response(response.status_code, text)
