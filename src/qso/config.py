"""Configuration for the qso client.

QsoConfig gathers the handful of knobs the client has: where to look for the
League client process, which certificate thumbprint to pin, the transport
connect timeout and logging verbosity. It can be round-tripped through YAML.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "QSO_CONFIG"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PROCESS_NAME = "LeagueClientUx"
DEFAULT_LOCKFILE_NAME = "lockfile"
RIOT_CERT_THUMBPRINT = "8259aafd8f71a809d2b154dd1cdb492981e448bd"


@dataclass
class QsoConfig:
    """Configuration for LeagueClient and AsyncLeagueClient.

    Attributes:
        host: Address the local client listens on.
        process_name: Process name used for auto-discovery.
        lockfile_name: Name of the credential file inside the install directory.
        certificate_thumbprint: SHA-1 thumbprint of the pinned client certificate.
        connect_timeout: Connect timeout in seconds for HTTP and WebSocket.
        subscribe_events: Open the WebSocket event stream on connect.
        very_verbose: Log request and response bodies at DEBUG level.

    Example:
        config = QsoConfig(connect_timeout=5.0, very_verbose=True)
        client = LeagueClient.connect(config=config)
    """

    host: str = DEFAULT_HOST
    process_name: str = DEFAULT_PROCESS_NAME
    lockfile_name: str = DEFAULT_LOCKFILE_NAME
    certificate_thumbprint: str = RIOT_CERT_THUMBPRINT
    connect_timeout: float = 10.0
    subscribe_events: bool = True
    very_verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.process_name:
            raise ValueError("process_name must not be empty")
        if not self.lockfile_name:
            raise ValueError("lockfile_name must not be empty")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if not isinstance(self.certificate_thumbprint, str):
            raise ValueError("certificate_thumbprint must be a string")
        thumbprint = self.certificate_thumbprint.replace(":", "").lower()
        if len(thumbprint) != 40 or any(c not in "0123456789abcdef" for c in thumbprint):
            raise ValueError("certificate_thumbprint must be a 40 digit hex SHA-1")
        self.certificate_thumbprint = thumbprint

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to the output YAML file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QsoConfig:
        """Create configuration from a dictionary.

        Raises:
            TypeError: If the dictionary contains unknown keys.
            ValueError: If a value is out of range.
        """
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> QsoConfig:
        """Load configuration from a YAML file.

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a YAML mapping: {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls) -> QsoConfig:
        """Load the file named by $QSO_CONFIG, or return the defaults."""
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return cls()
        return cls.from_yaml(path)
