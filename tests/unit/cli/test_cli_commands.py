"""Unit tests for CLI commands."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from qso.cli.main import app
from qso.config import QsoConfig
from qso.exceptions import DiscoveryError, EndpointError
from qso.models import BuildInfo, MySummoner

runner = CliRunner()


def make_client() -> MagicMock:
    """A connected LeagueClient stand-in usable as a context manager."""
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    client.connection.base_url = "https://127.0.0.1:51234"
    client.build = BuildInfo(branch="LeagueClient_release", version="14.21.1")
    return client


class TestMainApp:
    """Tests for the main CLI application."""

    def test_help_output(self) -> None:
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "League client" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Test that running without arguments shows help."""
        result = runner.invoke(app, [])
        assert "info" in result.stdout
        assert "call" in result.stdout
        assert "watch" in result.stdout
        assert "config" in result.stdout


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self) -> None:
        client = make_client()
        client.get_my_summoner.return_value = MySummoner(
            summoner_id=2468, game_name="Teemo", tag_line="EUW", summoner_level=30
        )
        with patch(
            "qso.cli.commands.api.LeagueClient.connect", return_value=client
        ) as mock_connect:
            result = runner.invoke(app, ["info", "--port", "51234", "--password", "pw"])

        assert result.exit_code == 0
        assert "14.21.1" in result.stdout
        assert "Teemo#EUW" in result.stdout
        args = mock_connect.call_args
        assert args.args == (None, 51234, "pw")
        assert args.kwargs["config"].subscribe_events is False

    def test_info_not_logged_in(self) -> None:
        """Test info still shows the build before login."""
        client = make_client()
        client.get_my_summoner.side_effect = EndpointError("not logged in", 404)
        with patch("qso.cli.commands.api.LeagueClient.connect", return_value=client):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "LeagueClient_release" in result.stdout

    def test_discovery_failure(self) -> None:
        with patch(
            "qso.cli.commands.api.LeagueClient.connect",
            side_effect=DiscoveryError("Found 0 LeagueClientUx processes."),
        ):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "Found 0" in result.stdout


class TestCallCommand:
    """Tests for the call command."""

    def test_call_prints_body(self) -> None:
        client = make_client()
        client.call.return_value = '{"queueId": 450}'
        with patch("qso.cli.commands.api.LeagueClient.connect", return_value=client):
            result = runner.invoke(
                app, ["call", "POST", "/lol-lobby/v2/lobby", "--body", '{"queueId": 450}']
            )

        assert result.exit_code == 0
        assert "queueId" in result.stdout
        client.call.assert_called_once_with(
            "/lol-lobby/v2/lobby", "POST", '{"queueId": 450}'
        )

    def test_call_endpoint_error(self) -> None:
        client = make_client()
        client.call.side_effect = EndpointError('{"message": "No lobby"}', 404)
        with patch("qso.cli.commands.api.LeagueClient.connect", return_value=client):
            result = runner.invoke(app, ["call", "GET", "/lol-lobby/v2/lobby"])

        assert result.exit_code == 1
        assert "404" in result.stdout
        assert "No lobby" in result.stdout


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_show_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QSO_CONFIG", raising=False)
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "LeagueClientUx" in result.stdout

    def test_config_generate_and_validate(self, tmp_path: Path) -> None:
        output = tmp_path / "qso.yaml"
        result = runner.invoke(app, ["config", "generate", str(output)])
        assert result.exit_code == 0
        assert QsoConfig.from_yaml(output) == QsoConfig()

        result = runner.invoke(app, ["config", "validate", str(output)])
        assert result.exit_code == 0
        assert "valid" in result.stdout

    def test_config_generate_refuses_overwrite(self, tmp_path: Path) -> None:
        output = tmp_path / "qso.yaml"
        output.write_text("host: localhost\n")
        result = runner.invoke(app, ["config", "generate", str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.stdout

    def test_config_validate_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "qso.yaml"
        path.write_text(yaml.dump({"connect_timeout": -1}))
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert "connect_timeout" in result.stdout

    def test_config_validate_numeric_thumbprint(self, tmp_path: Path) -> None:
        """Test a thumbprint YAML reads as a number is reported, not raised."""
        path = tmp_path / "qso.yaml"
        path.write_text("certificate_thumbprint: 1234\n")
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, AttributeError)
        assert "certificate_thumbprint" in result.stdout
