"""Discovery of the local League client endpoint and credentials.

The client UX process is started with ``--install-directory`` and
``--app-port`` arguments. The install directory holds a ``lockfile`` of the
form ``name:pid:port:password:protocol`` whose fourth field is the secret used
for HTTP Basic authentication.
"""

from __future__ import annotations

import base64
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import psutil

from qso.config import QsoConfig
from qso.exceptions import DiscoveryError

logger = logging.getLogger(__name__)

AUTH_USERNAME = "riot"

# "--key=value", --key="value" or a bare --key=value without spaces.
_ARG_RE = re.compile(
    r'"--([a-z-]+)=([^"]*)"|--([a-z-]+)="([^"]*)"|--([a-z-]+)=([^"\s]*)'
)


@dataclass(frozen=True)
class Connection:
    """Host, port and secret of a running League client."""

    host: str
    port: int
    password: str

    @property
    def auth_token(self) -> str:
        """Base64 encoded ``riot:<password>`` for the Authorization header."""
        raw = f"{AUTH_USERNAME}:{self.password}".encode()
        return base64.b64encode(raw).decode("ascii")

    @property
    def base_url(self) -> str:
        return f"https://{self.host}:{self.port}"

    @property
    def ws_url(self) -> str:
        return f"wss://{self.host}:{self.port}"


def parse_command_line(command_line: str | Sequence[str]) -> dict[str, str]:
    """Parse ``--key=value`` arguments into a dictionary.

    Accepts either the argv list reported by the OS or a single command-line
    string. Values may be quoted. Arguments without ``=`` are ignored.

    Example:
        >>> parse_command_line(['"--app-port=51234"', "--install-directory=C:/LoL"])
        {'app-port': '51234', 'install-directory': 'C:/LoL'}
    """
    args: dict[str, str] = {}
    if isinstance(command_line, str):
        for match in _ARG_RE.finditer(command_line):
            key = match.group(1) or match.group(3) or match.group(5)
            value = match.group(2) or match.group(4) or match.group(6) or ""
            args[key] = value
        return args

    # An argv element is a single argument, spaces included.
    for token in command_line:
        token = token.strip().strip('"')
        if not token.startswith("--") or "=" not in token:
            continue
        key, value = token[2:].split("=", 1)
        args[key] = value.strip('"')
    return args


def read_lockfile(path: str | Path) -> list[str]:
    """Read a lockfile and return its colon separated fields.

    Raises:
        DiscoveryError: If the file cannot be read or has fewer than 4 fields.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DiscoveryError(f"Could not open lockfile {path}: {e}") from e

    fields = content.strip().split(":")
    if len(fields) < 4:
        raise DiscoveryError(f"Unexpected lockfile format in {path}")
    return fields


def find_client_process(process_name: str) -> psutil.Process:
    """Return the single running process called ``process_name``.

    Raises:
        DiscoveryError: If no process or more than one process matches.
    """
    wanted = {process_name.lower(), f"{process_name.lower()}.exe"}
    matches = []
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name") or ""
        if name.lower() in wanted:
            matches.append(proc)

    if len(matches) != 1:
        raise DiscoveryError(
            f"Found {len(matches)} {process_name} processes. "
            "Is the League client not running, or are there multiple instances?"
        )
    return matches[0]


def read_process_arguments(process: psutil.Process) -> dict[str, str]:
    """Read and parse the command line of ``process``.

    Raises:
        DiscoveryError: If access is denied or the process has exited.
    """
    try:
        cmdline = process.cmdline()
    except psutil.AccessDenied as e:
        raise DiscoveryError(
            f"Access denied reading command line of process {process.pid}"
        ) from e
    except (psutil.NoSuchProcess, psutil.ZombieProcess) as e:
        raise DiscoveryError(f"Process {process.pid} exited during discovery") from e

    if not cmdline:
        raise DiscoveryError(f"Command line of process {process.pid} is unavailable")
    return parse_command_line(cmdline)


def discover_connection(
    config: QsoConfig | None = None, host: str | None = None
) -> Connection:
    """Locate the running League client and build a Connection for it.

    ``host`` overrides ``config.host`` as the address to connect to.

    Raises:
        DiscoveryError: If any step of the discovery fails.
    """
    config = config or QsoConfig()
    process = find_client_process(config.process_name)
    args = read_process_arguments(process)

    install_dir = args.get("install-directory")
    if not install_dir:
        raise DiscoveryError("Could not determine the League client install directory")

    fields = read_lockfile(Path(install_dir) / config.lockfile_name)
    port_text = args.get("app-port") or fields[2]
    try:
        port = int(port_text)
    except ValueError as e:
        raise DiscoveryError(f"Invalid client port: {port_text!r}") from e

    logger.info("Discovered League client (pid %d) on port %d", process.pid, port)
    return Connection(host=host or config.host, port=port, password=fields[3])


def locate_connection(
    host: str | None = None,
    port: int | None = None,
    password: str | None = None,
    *,
    config: QsoConfig | None = None,
) -> Connection:
    """Return explicit connection parameters, or discover them.

    When both ``port`` and ``password`` are given they are passed through
    untouched; otherwise the running client is discovered. An explicit ``host``
    is kept in both cases.
    """
    config = config or QsoConfig()
    if port is not None and password is not None:
        return Connection(host=host or config.host, port=port, password=password)
    return discover_connection(config, host=host)
