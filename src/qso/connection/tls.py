"""TLS trust policy for the local League client.

The client serves a certificate issued by Riot's private root. A peer is
trusted when its certificate chain validates against the system trust store,
or when the SHA-1 thumbprint of its leaf certificate equals the pinned one.
"""

from __future__ import annotations

import hashlib
import logging
import socket
import ssl

from qso.exceptions import QsoConnectionError

logger = logging.getLogger(__name__)


def certificate_thumbprint(der_certificate: bytes) -> str:
    """Return the lowercase hex SHA-1 thumbprint of a DER certificate."""
    return hashlib.sha1(der_certificate).hexdigest()


def is_trusted_certificate(
    der_certificate: bytes | None,
    chain_valid: bool,
    pinned_thumbprint: str,
) -> bool:
    """Composite trust predicate: chain-valid OR thumbprint matches the pin."""
    if chain_valid:
        return True
    if not der_certificate:
        return False
    return certificate_thumbprint(der_certificate) == pinned_thumbprint.lower()


def _check_pinned_peer(ssl_sock: ssl.SSLSocket | ssl.SSLObject) -> None:
    pinned = getattr(ssl_sock.context, "pinned_thumbprint", "")
    der = ssl_sock.getpeercert(binary_form=True)
    if not is_trusted_certificate(der, False, pinned):
        got = certificate_thumbprint(der) if der else "none"
        raise ssl.SSLCertVerificationError(
            f"Peer certificate thumbprint {got} does not match pinned {pinned}"
        )


class PinnedSSLSocket(ssl.SSLSocket):
    """SSLSocket that checks the pinned thumbprint once the handshake completes."""

    def do_handshake(self, block: bool = False) -> None:
        super().do_handshake(block)
        _check_pinned_peer(self)


class PinnedSSLObject(ssl.SSLObject):
    """SSLObject (memory BIO, used by asyncio) with the same pinned check."""

    def do_handshake(self) -> None:
        super().do_handshake()
        _check_pinned_peer(self)


class PinnedSSLContext(ssl.SSLContext):
    """Client context trusting only peers whose leaf matches a thumbprint.

    Chain and hostname verification are disabled; the thumbprint check runs
    right after the handshake, before any application data is written.
    """

    sslsocket_class = PinnedSSLSocket
    sslobject_class = PinnedSSLObject

    def __new__(cls, pinned_thumbprint: str) -> PinnedSSLContext:
        return super().__new__(cls, ssl.PROTOCOL_TLS_CLIENT)

    def __init__(self, pinned_thumbprint: str) -> None:
        self.pinned_thumbprint = pinned_thumbprint.replace(":", "").lower()
        self.check_hostname = False
        self.verify_mode = ssl.CERT_NONE


def _handshake(context: ssl.SSLContext, host: str, port: int, timeout: float) -> None:
    with socket.create_connection((host, port), timeout=timeout) as sock:
        with context.wrap_socket(sock, server_hostname=host):
            pass


def negotiate_ssl_context(
    host: str,
    port: int,
    pinned_thumbprint: str,
    timeout: float = 10.0,
) -> ssl.SSLContext:
    """Pick the SSL context to use for ``host:port``.

    Probes the endpoint with the default verifying context first. If the
    chain does not validate, falls back to a PinnedSSLContext, which accepts
    the peer only if its thumbprint matches.

    Raises:
        QsoConnectionError: If the endpoint is unreachable or not trusted.
    """
    default_context = ssl.create_default_context()
    try:
        _handshake(default_context, host, port, timeout)
        logger.debug("Certificate of %s:%d passed chain validation", host, port)
        return default_context
    except ssl.SSLCertVerificationError:
        logger.debug("Chain validation failed for %s:%d, trying pinned thumbprint", host, port)
    except OSError as e:
        raise QsoConnectionError(f"Could not reach {host}:{port}: {e}") from e

    pinned_context = PinnedSSLContext(pinned_thumbprint)
    try:
        _handshake(pinned_context, host, port, timeout)
    except ssl.SSLCertVerificationError as e:
        raise QsoConnectionError(f"Untrusted certificate at {host}:{port}: {e}") from e
    except OSError as e:
        raise QsoConnectionError(f"Could not reach {host}:{port}: {e}") from e
    return pinned_context
