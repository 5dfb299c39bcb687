"""Entry point for running the CLI as a module.

Usage:
    python -m qso.cli --help
"""

from qso.cli.main import app

if __name__ == "__main__":
    app()
