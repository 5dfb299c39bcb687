"""Main CLI application and entry point.

This module defines the main Typer application and aggregates the client
commands and the config command group.
"""

import logging

import typer

from qso.cli.commands import api as api_commands
from qso.cli.commands import config as config_commands

app = typer.Typer(
    name="qso",
    help="Inspect and drive a running League client",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

app.command("info")(api_commands.info)
app.command("call")(api_commands.call)
app.command("watch")(api_commands.watch)
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """qso command line.

    Connects to the local League client by auto-discovery unless both
    --port and --password are given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


if __name__ == "__main__":
    app()
