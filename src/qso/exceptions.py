"""Exception hierarchy for the qso client.

Every error raised by the library derives from QsoError so callers can catch
the whole family in one place, or pick out a specific failure mode.
"""


class QsoError(Exception):
    """Base exception for qso errors."""

    pass


class DiscoveryError(QsoError):
    """Raised when the local client process or its credentials cannot be found."""

    pass


class QsoConnectionError(QsoError):
    """Raised when the initial connection to the local client fails."""

    pass


class QsoTransportError(QsoError):
    """Raised on network or TLS failures while performing a request."""

    pass


class EndpointError(QsoError):
    """Raised when an endpoint answers with a non-success status code.

    Attributes:
        body: Raw response body as returned by the server.
        status_code: HTTP status code of the response.
    """

    def __init__(self, body: str, status_code: int):
        super().__init__(f"Endpoint returned {status_code}: {body}")
        self.body = body
        self.status_code = status_code


class DeserializationError(QsoError):
    """Raised when a response body is not valid JSON or has an unexpected shape."""

    pass


class ClientNotConnectedError(QsoError):
    """Raised when a request is attempted before open() or after close()."""

    pass


class UnboundModelError(QsoError):
    """Raised when a model method needs a client but none is bound to it."""

    pass
