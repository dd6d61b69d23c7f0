# ABOUTME: CLI package for filedigest, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from filedigest.cli.commands import hash_cmd, settings_cmd


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(package_name="filedigest")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """filedigest - compute a file's digest with live progress."""
    _configure_logging(verbose)


cli.add_command(hash_cmd.hash_file)
cli.add_command(settings_cmd.settings)
