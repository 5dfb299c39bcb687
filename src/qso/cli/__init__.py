"""CLI module for inspecting a running League client.

This module provides command-line tools to check the connection, issue raw
requests against the client API and watch the endpoint event stream.

Usage:
    python -m qso.cli --help
    python -m qso.cli info
    python -m qso.cli call GET /lol-summoner/v1/current-summoner
"""

from qso.cli.main import app

__all__ = ["app"]
