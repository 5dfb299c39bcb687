"""Asynchronous client for the local League client API.

AsyncLeagueClient follows the same request/response contract as LeagueClient
over ``httpx.AsyncClient``, and feeds endpoint events to async handlers from
an asyncio listener task. DTOs it returns are not bound to a client; use the
synchronous client for the DTO convenience methods.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

import httpx
import websockets
from websockets import ClientConnection
from websockets.exceptions import ConnectionClosed, WebSocketException

from qso.client.events import SUBSCRIBE_MESSAGE, parse_event_frame
from qso.client.request import RequestDescriptor, check_response
from qso.config import QsoConfig
from qso.connection import Connection, locate_connection, negotiate_ssl_context
from qso.exceptions import (
    ClientNotConnectedError,
    QsoConnectionError,
    QsoError,
    QsoTransportError,
)
from qso.models import (
    BuildInfo,
    EndpointEvent,
    Lobby,
    MyChatUser,
    MySummoner,
    Queue,
    QueueRequest,
    QueueType,
)
from qso.serialization import decode_body, encode_body

logger = logging.getLogger(__name__)

T = TypeVar("T")

AsyncEventHandler = Callable[[EndpointEvent], Awaitable[None]]


class AsyncLeagueClient:
    """Async connection handle for one running League client.

    Example:
        async with await AsyncLeagueClient.connect() as client:
            client.register_event_handler(on_event)
            summoner = await client.get_my_summoner()
    """

    def __init__(self, connection: Connection, config: QsoConfig | None = None):
        self.connection = connection
        self.config = config or QsoConfig()

        self._client: httpx.AsyncClient | None = None
        self._websocket: ClientConnection | None = None
        self._listener_task: asyncio.Task[None] | None = None
        self._event_handlers: list[AsyncEventHandler] = []

        self.ssl_context: ssl.SSLContext | None = None
        self.build: BuildInfo | None = None

    @classmethod
    async def connect(
        cls,
        host: str | None = None,
        port: int | None = None,
        password: str | None = None,
        *,
        config: QsoConfig | None = None,
    ) -> AsyncLeagueClient:
        """Locate the League client (or use the given parameters) and open it."""
        config = config or QsoConfig()
        connection = locate_connection(host, port, password, config=config)
        client = cls(connection, config)
        await client.open()
        return client

    # =========================================================================
    # Context Manager
    # =========================================================================

    async def __aenter__(self) -> AsyncLeagueClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    # =========================================================================
    # Connection Lifecycle
    # =========================================================================

    @property
    def is_open(self) -> bool:
        return self.build is not None

    async def open(self) -> BuildInfo:
        """Set up TLS trust, HTTP and WebSocket, then verify with one request.

        Raises:
            QsoConnectionError: If any part of the initialization fails.
        """
        if self.build is not None:
            return self.build

        try:
            # The probe handshake blocks, keep it off the event loop.
            self.ssl_context = await asyncio.to_thread(
                negotiate_ssl_context,
                self.connection.host,
                self.connection.port,
                self.config.certificate_thumbprint,
                self.config.connect_timeout,
            )
            self._client = httpx.AsyncClient(
                base_url=self.connection.base_url,
                verify=self.ssl_context,
                timeout=httpx.Timeout(None, connect=self.config.connect_timeout),
            )
            if self.config.subscribe_events:
                await self._connect_websocket()
            build = await self.get_build()
        except QsoConnectionError:
            await self.close()
            raise
        except (QsoError, OSError, WebSocketException) as e:
            await self.close()
            raise QsoConnectionError(
                f"Could not initialize connection to {self.connection.base_url}: {e}"
            ) from e

        logger.info(
            "Qso initialized. (League branch %s, League version %s)",
            build.branch,
            build.version,
        )
        self.build = build
        return build

    async def close(self) -> None:
        """Stop the listener, close the WebSocket and the HTTP client."""
        if self._listener_task is not None:
            self._listener_task.cancel()
            try:
                await self._listener_task
            except asyncio.CancelledError:
                pass
            self._listener_task = None

        if self._websocket is not None:
            try:
                await self._websocket.close()
            except Exception as e:
                logger.warning("Error closing WebSocket: %s", e)
            self._websocket = None

        if self._client is not None:
            await self._client.aclose()
            self._client = None

        self.build = None

    # =========================================================================
    # Event Bridge
    # =========================================================================

    async def _connect_websocket(self) -> None:
        if self._websocket is not None:
            return

        logger.info("Connecting to WebSocket at %s", self.connection.ws_url)
        self._websocket = await websockets.connect(
            self.connection.ws_url,
            ssl=self.ssl_context,
            additional_headers={"Authorization": f"Basic {self.connection.auth_token}"},
            open_timeout=self.config.connect_timeout,
        )
        await self._websocket.send(SUBSCRIBE_MESSAGE)
        self._listener_task = asyncio.create_task(self._listen_for_events())

    async def _listen_for_events(self) -> None:
        if self._websocket is None:
            return

        try:
            async for message in self._websocket:
                await self._handle_frame(message)
        except ConnectionClosed:
            logger.warning("WebSocket connection closed")
        except Exception as e:
            logger.exception("Error in WebSocket listener: %s", e)

    async def _handle_frame(self, message: str | bytes) -> None:
        event = parse_event_frame(message)
        if event is None:
            return

        logger.debug("Event %s (%s)", event.uri, event.event_type)
        for handler in list(self._event_handlers):
            try:
                await handler(event)
            except Exception as e:
                logger.exception("Error in event handler %r: %s", handler, e)

    def register_event_handler(self, handler: AsyncEventHandler) -> AsyncEventHandler:
        """Register an async function called with every EndpointEvent."""
        self._event_handlers.append(handler)
        return handler

    def unregister_event_handler(self, handler: AsyncEventHandler) -> None:
        """Remove a previously registered event handler."""
        if handler in self._event_handlers:
            self._event_handlers.remove(handler)

    # =========================================================================
    # Request Bridge
    # =========================================================================

    async def call(
        self,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """Perform one request and return the raw response body.

        Raises:
            EndpointError: If the status code is not 2xx.
            QsoTransportError: On network, TLS or timeout failures.
        """
        if self._client is None:
            raise ClientNotConnectedError("HTTP client not connected. Call open() first.")

        request = RequestDescriptor(
            path_template=path,
            method=method.upper(),
            body=body,
            params=params,
            query=query,
        )
        path = request.path
        logger.debug("Requesting %s (%s)", path, request.method)
        try:
            response = await self._client.request(
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
        if self.config.very_verbose:
            logger.debug("Response body: %s", text)
        return check_response(response.status_code, text)

    async def get_dto(
        self,
        target_type: type[T] | Any,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> T:
        """Perform one request and deserialize the body as ``target_type``."""
        raw = await self.call(path, method, body, *params, query=query)
        return decode_body(raw, target_type)

    # =========================================================================
    # API
    # =========================================================================

    async def get_build(self) -> BuildInfo:
        return await self.get_dto(BuildInfo, "/system/v1/builds")

    async def get_my_summoner(self) -> MySummoner:
        return await self.get_dto(MySummoner, "/lol-summoner/v1/current-summoner")

    async def get_my_chat_user(self) -> MyChatUser:
        return await self.get_dto(MyChatUser, "/lol-chat/v1/me")

    async def get_queues(self) -> list[Queue]:
        return await self.get_dto(list[Queue], "/lol-game-queues/v1/queues")

    async def get_my_lobby(self) -> Lobby:
        return await self.get_dto(Lobby, "/lol-lobby/v2/lobby")

    async def create_lobby(self, queue_id: QueueType | int) -> Lobby:
        body = QueueRequest(queue_id=queue_id)
        return await self.get_dto(Lobby, "/lol-lobby/v2/lobby", "POST", encode_body(body))

    async def leave_my_lobby(self) -> None:
        await self.call("/lol-lobby/v2/lobby", "DELETE")

    async def start_queue(self) -> None:
        await self.call("/lol-lobby/v2/lobby/matchmaking/search", "POST")

    async def stop_queue(self) -> None:
        await self.call("/lol-lobby/v2/lobby/matchmaking/search", "DELETE")

    async def accept_queue(self) -> None:
        await self.call("/lol-matchmaking/v1/ready-check/accept", "POST")

    async def decline_queue(self) -> None:
        await self.call("/lol-matchmaking/v1/ready-check/decline", "POST")
