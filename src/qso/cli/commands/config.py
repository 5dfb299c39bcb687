"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from qso.cli.utils.output import console, print_error, print_success
from qso.config import CONFIG_ENV_VAR, QsoConfig

app = typer.Typer(no_args_is_help=True)


def load_config(config_path: Path | None) -> QsoConfig:
    """Load the configuration named on the command line, or $QSO_CONFIG.

    Exits with status 1 and an error message if the file is invalid.
    """
    try:
        if config_path is not None:
            return QsoConfig.from_yaml(config_path)
        return QsoConfig.from_env()
    except FileNotFoundError as e:
        print_error(f"Configuration file not found: {e.filename}")
        raise typer.Exit(1)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)


@app.command("show")
def show(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=f"Configuration file (default: ${CONFIG_ENV_VAR} or built-in defaults)",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Show the effective configuration.

    Examples:
        python -m qso.cli config show
        python -m qso.cli config show --config qso.yaml
    """
    config = load_config(config_path)
    console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a configuration file.

    Examples:
        python -m qso.cli config validate qso.yaml
    """
    load_config(config_path)
    print_success(f"Configuration is valid: {config_path}")


@app.command("generate")
def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a configuration file holding the defaults.

    Examples:
        python -m qso.cli config generate qso.yaml
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    QsoConfig().to_yaml(output)
    print_success(f"Configuration written to {output}")
