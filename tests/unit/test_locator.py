"""Unit tests for connection discovery.

Tests cover:
- Command-line argument parsing (argv lists and raw strings)
- Lockfile parsing
- Process lookup with psutil mocked out
- Explicit versus auto-discovered connection parameters
"""

import base64
from pathlib import Path
from unittest.mock import MagicMock, patch

import psutil
import pytest

from qso.config import QsoConfig
from qso.connection import (
    Connection,
    discover_connection,
    find_client_process,
    locate_connection,
    parse_command_line,
    read_lockfile,
    read_process_arguments,
)
from qso.exceptions import DiscoveryError


def make_process(name: str, cmdline: list[str] | None = None, pid: int = 4242) -> MagicMock:
    """Build a psutil.Process stand-in as yielded by process_iter()."""
    proc = MagicMock(spec=psutil.Process)
    proc.pid = pid
    proc.info = {"name": name}
    proc.cmdline.return_value = cmdline or []
    return proc


class TestConnection:
    """Tests for the Connection value object."""

    def test_auth_token_is_base64_of_riot_and_password(self) -> None:
        """Test the Basic credential is riot:<password>."""
        conn = Connection(host="127.0.0.1", port=1, password="pw")
        assert base64.b64decode(conn.auth_token) == b"riot:pw"

    def test_urls(self) -> None:
        """Test base and WebSocket URLs use the host and port."""
        conn = Connection(host="127.0.0.1", port=51234, password="pw")
        assert conn.base_url == "https://127.0.0.1:51234"
        assert conn.ws_url == "wss://127.0.0.1:51234"

    def test_is_immutable(self) -> None:
        """Test Connection cannot be modified after creation."""
        conn = Connection(host="127.0.0.1", port=1, password="pw")
        with pytest.raises(AttributeError):
            conn.port = 2  # type: ignore[misc]


class TestParseCommandLine:
    """Tests for parse_command_line()."""

    def test_argv_list(self) -> None:
        """Test argv elements with quoted and bare values."""
        args = parse_command_line(
            [
                "LeagueClientUx.exe",
                '"--app-port=51234"',
                '--install-directory="C:/Riot Games/League of Legends"',
                "--remoting-auth-token=abc",
                "--no-rads",
            ]
        )
        assert args == {
            "app-port": "51234",
            "install-directory": "C:/Riot Games/League of Legends",
            "remoting-auth-token": "abc",
        }

    def test_raw_string(self) -> None:
        """Test a single command-line string with mixed quoting."""
        args = parse_command_line(
            '"C:/LoL/LeagueClientUx.exe" "--app-port=51234" '
            '--install-directory="C:/Riot Games/LoL" --region=EUW'
        )
        assert args["app-port"] == "51234"
        assert args["install-directory"] == "C:/Riot Games/LoL"
        assert args["region"] == "EUW"

    def test_empty_value(self) -> None:
        """Test an argument with an empty value is kept."""
        assert parse_command_line(["--locale="]) == {"locale": ""}

    def test_value_containing_equals(self) -> None:
        """Test only the first '=' separates key and value."""
        assert parse_command_line(["--flag=a=b"]) == {"flag": "a=b"}


class TestReadLockfile:
    """Tests for read_lockfile()."""

    def test_fields(self, tmp_path: Path) -> None:
        """Test the lockfile is split on colons."""
        lockfile = tmp_path / "lockfile"
        lockfile.write_text("LeagueClient:1234:51234:s3cret:https")
        assert read_lockfile(lockfile) == [
            "LeagueClient",
            "1234",
            "51234",
            "s3cret",
            "https",
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing lockfile raises DiscoveryError."""
        with pytest.raises(DiscoveryError, match="Could not open lockfile"):
            read_lockfile(tmp_path / "missing")

    def test_too_few_fields(self, tmp_path: Path) -> None:
        """Test a malformed lockfile raises DiscoveryError."""
        lockfile = tmp_path / "lockfile"
        lockfile.write_text("LeagueClient:1234")
        with pytest.raises(DiscoveryError, match="Unexpected lockfile format"):
            read_lockfile(lockfile)


class TestFindClientProcess:
    """Tests for find_client_process()."""

    def test_single_match(self) -> None:
        """Test exactly one matching process is returned."""
        ux = make_process("LeagueClientUx.exe")
        with patch(
            "qso.connection.locator.psutil.process_iter",
            return_value=[make_process("explorer.exe"), ux],
        ):
            assert find_client_process("LeagueClientUx") is ux

    def test_match_without_extension(self) -> None:
        """Test process names without .exe match as well."""
        ux = make_process("LeagueClientUx")
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            assert find_client_process("LeagueClientUx") is ux

    def test_no_match(self) -> None:
        """Test zero matches raises DiscoveryError."""
        with patch("qso.connection.locator.psutil.process_iter", return_value=[]):
            with pytest.raises(DiscoveryError, match="Found 0"):
                find_client_process("LeagueClientUx")

    def test_multiple_matches(self) -> None:
        """Test several running instances raise DiscoveryError."""
        procs = [make_process("LeagueClientUx.exe", pid=1), make_process("LeagueClientUx.exe", pid=2)]
        with patch("qso.connection.locator.psutil.process_iter", return_value=procs):
            with pytest.raises(DiscoveryError, match="Found 2"):
                find_client_process("LeagueClientUx")


class TestReadProcessArguments:
    """Tests for read_process_arguments()."""

    def test_access_denied(self) -> None:
        """Test AccessDenied is reported as DiscoveryError."""
        proc = make_process("LeagueClientUx.exe")
        proc.cmdline.side_effect = psutil.AccessDenied(pid=4242)
        with pytest.raises(DiscoveryError, match="Access denied"):
            read_process_arguments(proc)

    def test_process_exited(self) -> None:
        """Test a vanished process is reported as DiscoveryError."""
        proc = make_process("LeagueClientUx.exe")
        proc.cmdline.side_effect = psutil.NoSuchProcess(pid=4242)
        with pytest.raises(DiscoveryError, match="exited"):
            read_process_arguments(proc)

    def test_empty_command_line(self) -> None:
        """Test an unavailable command line raises DiscoveryError."""
        with pytest.raises(DiscoveryError, match="unavailable"):
            read_process_arguments(make_process("LeagueClientUx.exe", []))


class TestDiscoverConnection:
    """Tests for discover_connection() and locate_connection()."""

    def test_discovers_port_and_password(self, tmp_path: Path) -> None:
        """Test port comes from --app-port and password from the lockfile."""
        (tmp_path / "lockfile").write_text("LeagueClient:1234:60000:s3cret:https")
        ux = make_process(
            "LeagueClientUx.exe",
            ["LeagueClientUx.exe", "--app-port=51234", f"--install-directory={tmp_path}"],
        )
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            conn = discover_connection()

        assert conn == Connection(host="127.0.0.1", port=51234, password="s3cret")

    def test_port_falls_back_to_lockfile(self, tmp_path: Path) -> None:
        """Test the lockfile port is used when --app-port is absent."""
        (tmp_path / "lockfile").write_text("LeagueClient:1234:60000:s3cret:https")
        ux = make_process(
            "LeagueClientUx.exe",
            ["LeagueClientUx.exe", f"--install-directory={tmp_path}"],
        )
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            conn = discover_connection()

        assert conn.port == 60000

    def test_missing_install_directory(self) -> None:
        """Test discovery fails without --install-directory."""
        ux = make_process("LeagueClientUx.exe", ["LeagueClientUx.exe", "--app-port=1"])
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            with pytest.raises(DiscoveryError, match="install directory"):
                discover_connection()

    def test_invalid_port(self, tmp_path: Path) -> None:
        """Test a non-numeric port raises DiscoveryError."""
        (tmp_path / "lockfile").write_text("LeagueClient:1234:60000:s3cret:https")
        ux = make_process(
            "LeagueClientUx.exe",
            ["--app-port=abc", f"--install-directory={tmp_path}"],
        )
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            with pytest.raises(DiscoveryError, match="Invalid client port"):
                discover_connection()

    def test_custom_process_and_lockfile_name(self, tmp_path: Path) -> None:
        """Test discovery honours the configured names."""
        (tmp_path / "creds").write_text("X:1:2:pw:https")
        proc = make_process("MyClient", ["--app-port=7", f"--install-directory={tmp_path}"])
        config = QsoConfig(process_name="MyClient", lockfile_name="creds", host="localhost")
        with patch("qso.connection.locator.psutil.process_iter", return_value=[proc]):
            conn = discover_connection(config)

        assert conn == Connection(host="localhost", port=7, password="pw")

    def test_explicit_parameters_skip_discovery(self) -> None:
        """Test explicit port and password are used as-is."""
        with patch("qso.connection.locator.discover_connection") as mock_discover:
            conn = locate_connection(port=51234, password="pw")

        mock_discover.assert_not_called()
        assert conn == Connection(host="127.0.0.1", port=51234, password="pw")

    def test_partial_parameters_discover(self) -> None:
        """Test a port without a password still triggers discovery."""
        expected = Connection(host="127.0.0.1", port=1, password="x")
        with patch(
            "qso.connection.locator.discover_connection", return_value=expected
        ) as mock_discover:
            assert locate_connection(port=51234) is expected

        mock_discover.assert_called_once()

    def test_explicit_host_survives_discovery(self, tmp_path: Path) -> None:
        """Test a host given without port and password is used for the discovered client."""
        (tmp_path / "lockfile").write_text("LeagueClient:1234:60000:s3cret:https")
        ux = make_process(
            "LeagueClientUx.exe",
            ["LeagueClientUx.exe", "--app-port=51234", f"--install-directory={tmp_path}"],
        )
        with patch("qso.connection.locator.psutil.process_iter", return_value=[ux]):
            conn = locate_connection(host="10.0.0.5")

        assert conn == Connection(host="10.0.0.5", port=51234, password="s3cret")
        assert conn.base_url == "https://10.0.0.5:51234"
