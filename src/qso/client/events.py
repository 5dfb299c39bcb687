"""WebSocket event bridge.

The League client pushes state changes as WAMP-style frames
``[opcode, topic, {"uri": ..., "eventType": ..., "data": ...}]``. Only the
third element is interpreted; the first two are passed over untouched.
Frames are handled one at a time in arrival order and every subscriber is
called synchronously on the listener thread, so a slow subscriber delays
every later event.
"""

from __future__ import annotations

import json
import logging
import ssl
import threading
from collections.abc import Callable
from contextlib import ExitStack

from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed
from websockets.sync.client import ClientConnection, connect

from qso.connection import Connection
from qso.models import EndpointEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[EndpointEvent], None]

# WAMP subscribe (opcode 5) to the topic carrying every endpoint event.
SUBSCRIBE_MESSAGE = json.dumps([5, "OnJsonApiEvent"])


def parse_event_frame(message: str | bytes) -> EndpointEvent | None:
    """Extract the event envelope from a frame.

    Returns None, after logging, for frames that are not a JSON array whose
    third element is an object with string ``uri`` and ``eventType``.
    """
    if not message:
        logger.debug("Ignoring empty WebSocket frame")
        return None

    try:
        data = json.loads(message)
    except ValueError:
        logger.error("Invalid JSON sent over WebSocket: %r", message)
        return None

    if not isinstance(data, list) or len(data) < 3 or not isinstance(data[2], dict):
        logger.error("Unexpected WebSocket frame: %r", message)
        return None

    try:
        return EndpointEvent.model_validate(data[2])
    except ValidationError as e:
        logger.error("Malformed event envelope: %s", e)
        return None


class EventDispatcher:
    """Thread-safe registry of event subscribers."""

    def __init__(self, very_verbose: bool = False) -> None:
        self.very_verbose = very_verbose
        self._handlers: list[EventHandler] = []
        self._lock = threading.Lock()

    @property
    def handlers(self) -> tuple[EventHandler, ...]:
        with self._lock:
            return tuple(self._handlers)

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register ``handler``; returns it so this can be used as a decorator."""
        with self._lock:
            self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove a previously registered handler. Unknown handlers are ignored."""
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    def dispatch(self, event: EndpointEvent) -> None:
        """Invoke every handler registered at the time of the call."""
        for handler in self.handlers:
            try:
                handler(event)
            except Exception as e:
                logger.exception("Error in event handler %r: %s", handler, e)

    def dispatch_frame(self, message: str | bytes) -> EndpointEvent | None:
        """Parse a raw frame and dispatch it. Malformed frames are dropped."""
        event = parse_event_frame(message)
        if event is None:
            return None

        logger.debug("Event %s (%s)", event.uri, event.event_type)
        if self.very_verbose:
            logger.debug("Event data: %s", event.data)
        self.dispatch(event)
        return event


class EventStream:
    """Persistent WebSocket feeding an EventDispatcher from a listener thread."""

    def __init__(
        self,
        connection: Connection,
        dispatcher: EventDispatcher,
        connect_timeout: float = 10.0,
    ) -> None:
        self.connection = connection
        self.dispatcher = dispatcher
        self.connect_timeout = connect_timeout
        self._websocket: ClientConnection | None = None
        self._exit_stack: ExitStack | None = None
        self._thread: threading.Thread | None = None

    @property
    def is_open(self) -> bool:
        return self._websocket is not None

    def open(self, ssl_context: ssl.SSLContext) -> None:
        """Connect, subscribe to endpoint events and start the listener thread."""
        if self._websocket is not None:
            return

        logger.info("Connecting to WebSocket at %s", self.connection.ws_url)
        exit_stack = ExitStack()
        self._websocket = exit_stack.enter_context(
            connect(
                self.connection.ws_url,
                ssl=ssl_context,
                additional_headers={"Authorization": f"Basic {self.connection.auth_token}"},
                open_timeout=self.connect_timeout,
            )
        )
        self._exit_stack = exit_stack
        self._websocket.send(SUBSCRIBE_MESSAGE)

        self._thread = threading.Thread(
            target=self._listen, name="qso-events", daemon=True
        )
        self._thread.start()

    def _listen(self) -> None:
        websocket = self._websocket
        if websocket is None:
            return

        try:
            for message in websocket:
                self.dispatcher.dispatch_frame(message)
        except ConnectionClosed:
            logger.warning("WebSocket connection closed")
        except Exception as e:
            logger.exception("Error in WebSocket listener: %s", e)
        else:
            logger.info("WebSocket connection closed by the client")

    def close(self) -> None:
        if self._exit_stack is not None:
            try:
                self._exit_stack.close()
            except Exception as e:
                logger.warning("Error closing WebSocket: %s", e)
            self._exit_stack = None
        self._websocket = None

        if self._thread is not None:
            if self._thread is not threading.current_thread():
                self._thread.join(timeout=self.connect_timeout)
            self._thread = None
