"""Rich console output formatting utilities."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from qso.models import BuildInfo, EndpointEvent, MySummoner

console = Console()

_EVENT_COLORS = {
    "Create": "green",
    "Update": "yellow",
    "Delete": "red",
}


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def create_build_panel(
    base_url: str, build: BuildInfo, summoner: MySummoner | None = None
) -> Panel:
    """Create a panel describing the connected client.

    Args:
        base_url: Address of the client API.
        build: Build information from /system/v1/builds.
        summoner: Logged in summoner, if any.

    Returns:
        Rich Panel instance
    """
    content = f"""[bold]Address:[/bold] {base_url}
[bold]Branch:[/bold] {build.branch}
[bold]Version:[/bold] {build.version}"""

    if build.game_branch:
        content += f"\n[bold]Game Branch:[/bold] {build.game_branch}"

    if summoner is not None:
        content += f"""

[bold cyan]Summoner[/bold cyan]
  Name: {summoner.riot_id or summoner.display_name or "N/A"}
  Summoner ID: {summoner.summoner_id}
  Level: {summoner.summoner_level if summoner.summoner_level is not None else "N/A"}"""

    return Panel(content, title="[bold]League Client[/bold]", border_style="blue")


def format_event(event: EndpointEvent, show_data: bool = False) -> str:
    """Format an endpoint event as a single line of console markup."""
    color = _EVENT_COLORS.get(event.event_type, "white")
    line = f"[{color}]{event.event_type:<6}[/{color}] {event.uri}"
    if show_data:
        line += f" {json.dumps(event.data)}"
    return line


def render_body(raw: str) -> Any:
    """Pretty print a JSON response body, or return it unchanged."""
    if not raw:
        return "[dim](empty body)[/dim]"
    try:
        data = json.loads(raw)
    except ValueError:
        return raw
    return Syntax(json.dumps(data, indent=2), "json", word_wrap=True)
