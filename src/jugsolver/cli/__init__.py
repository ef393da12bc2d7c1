"""jugsolver CLI - Command line interface for jugsolver."""

from __future__ import annotations

from jugsolver.cli.commands import cli, setup_logging


def main() -> None:
    """Main entry point for the jugsolver CLI."""
    cli()


__all__ = [
    "main",
    "cli",
    "setup_logging",
]
