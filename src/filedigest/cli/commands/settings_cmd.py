# ABOUTME: The `filedigest settings` command group for persisted preferences.
# ABOUTME: Provides show, set, and reset subcommands over the JSON settings file.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filedigest.cli.options import settings_option
from filedigest.core.settings import (
    SettingsError,
    load_settings,
    reset_settings,
    save_settings,
    update_setting,
)

console = Console()


@click.group("settings")
def settings() -> None:
    """View or change persisted settings."""


@settings.command("show")
@settings_option
def settings_show(settings_path: Path | None) -> None:
    """Show the current settings."""
    try:
        current = load_settings(settings_path)
    except SettingsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    table = Table(title="Settings")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in current.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@settings.command("set")
@click.argument("key")
@click.argument("value")
@settings_option
def settings_set(key: str, value: str, settings_path: Path | None) -> None:
    """Change one setting, e.g. `filedigest settings set uppercase true`."""
    try:
        updated = update_setting(load_settings(settings_path), key, value)
    except SettingsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    save_settings(updated, settings_path)
    console.print(f"Set [bold]{key}[/bold] to [cyan]{getattr(updated, key)}[/cyan].")


@settings.command("reset")
@settings_option
def settings_reset(settings_path: Path | None) -> None:
    """Restore the default settings."""
    reset_settings(settings_path)
    console.print("[green]Settings restored to defaults.[/green]")
