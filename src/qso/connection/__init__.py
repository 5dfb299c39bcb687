"""Connection discovery and TLS trust for the local League client.

Usage:
    from qso.connection import locate_connection

    connection = locate_connection()  # auto-discovery
    connection = locate_connection(port=51234, password="secret")
"""

from qso.connection.locator import (
    Connection,
    discover_connection,
    find_client_process,
    locate_connection,
    parse_command_line,
    read_lockfile,
    read_process_arguments,
)
from qso.connection.tls import (
    PinnedSSLContext,
    certificate_thumbprint,
    is_trusted_certificate,
    negotiate_ssl_context,
)

__all__ = [
    "Connection",
    "discover_connection",
    "find_client_process",
    "locate_connection",
    "parse_command_line",
    "read_lockfile",
    "read_process_arguments",
    "PinnedSSLContext",
    "certificate_thumbprint",
    "is_trusted_certificate",
    "negotiate_ssl_context",
]
