"""Commands talking to a running League client."""

from __future__ import annotations

import dataclasses
import time
from pathlib import Path
from typing import Annotated

import typer

from qso.cli.commands.config import load_config
from qso.cli.utils.output import (
    console,
    create_build_panel,
    format_event,
    print_error,
    render_body,
)
from qso.client import LeagueClient
from qso.exceptions import EndpointError, QsoError
from qso.models import EndpointEvent

HostOption = Annotated[
    str | None,
    typer.Option("--host", help="Client address (default: from configuration)"),
]
PortOption = Annotated[
    int | None,
    typer.Option("--port", "-p", help="Client port; skips auto-discovery with --password"),
]
PasswordOption = Annotated[
    str | None,
    typer.Option("--password", help="Client password; skips auto-discovery with --port"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file", dir_okay=False),
]


def _connect(
    host: str | None,
    port: int | None,
    password: str | None,
    config_path: Path | None,
    subscribe_events: bool = False,
) -> LeagueClient:
    config = dataclasses.replace(
        load_config(config_path), subscribe_events=subscribe_events
    )

    try:
        return LeagueClient.connect(host, port, password, config=config)
    except QsoError as e:
        print_error(str(e))
        raise typer.Exit(1)


def info(
    host: HostOption = None,
    port: PortOption = None,
    password: PasswordOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Connect to the client and show its build and the logged in summoner.

    Examples:
        python -m qso.cli info
        python -m qso.cli info --port 51234 --password secret
    """
    with _connect(host, port, password, config_path) as client:
        try:
            summoner = client.get_my_summoner()
        except EndpointError:
            # Not logged in yet.
            summoner = None
        console.print(create_build_panel(client.connection.base_url, client.build, summoner))


def call(
    method: Annotated[str, typer.Argument(help="HTTP method (GET, POST, ...)")],
    path: Annotated[str, typer.Argument(help="Endpoint path, e.g. /lol-lobby/v2/lobby")],
    body: Annotated[
        str | None,
        typer.Option("--body", "-b", help="JSON request body"),
    ] = None,
    host: HostOption = None,
    port: PortOption = None,
    password: PasswordOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Issue a single request and print the response body.

    Examples:
        python -m qso.cli call GET /lol-summoner/v1/current-summoner
        python -m qso.cli call POST /lol-lobby/v2/lobby --body '{"queueId": 450}'
    """
    with _connect(host, port, password, config_path) as client:
        try:
            raw = client.call(path, method, body)
        except EndpointError as e:
            print_error(f"{method.upper()} {path} returned {e.status_code}")
            console.print(render_body(e.body))
            raise typer.Exit(1)
        except QsoError as e:
            print_error(str(e))
            raise typer.Exit(1)
        console.print(render_body(raw))


def watch(
    uri_prefix: Annotated[
        str | None,
        typer.Option("--uri", "-u", help="Only show events whose URI starts with this"),
    ] = None,
    show_data: Annotated[
        bool,
        typer.Option("--data", "-d", help="Print event payloads"),
    ] = False,
    host: HostOption = None,
    port: PortOption = None,
    password: PasswordOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Print endpoint events as they arrive, until interrupted.

    Examples:
        python -m qso.cli watch
        python -m qso.cli watch --uri /lol-lobby --data
    """

    def on_event(event: EndpointEvent) -> None:
        if uri_prefix is None or event.uri.startswith(uri_prefix):
            console.print(format_event(event, show_data))

    with _connect(host, port, password, config_path, subscribe_events=True) as client:
        client.subscribe(on_event)
        console.print("[dim]Watching events, press Ctrl+C to stop[/dim]")
        try:
            while True:
                time.sleep(0.5)
        except KeyboardInterrupt:
            console.print("\n[yellow]Stopped[/yellow]")
