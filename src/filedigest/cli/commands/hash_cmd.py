# ABOUTME: The `filedigest hash` command: hashes one file with a live progress bar.
# ABOUTME: Ctrl-C cancels the running digest cooperatively instead of killing the process.

import asyncio
import json as json_lib
import signal
from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from filedigest.cli.options import settings_option
from filedigest.core.commands import DigestCommands
from filedigest.core.engine import SUPPORTED_ALGORITHMS, DigestError
from filedigest.core.formatting import format_bytes, format_duration, format_throughput
from filedigest.core.settings import Settings, SettingsError, load_settings
from filedigest.core.validators import is_valid_file_path, sanitize_path

console = Console()


def _make_progress() -> Progress:
    """Create a Rich progress bar for a single file."""
    return Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        DownloadColumn(),
        TransferSpeedColumn(),
        TimeRemainingColumn(),
        console=console,
    )


async def _run_digest(
    file_path: str, settings: Settings, progress: Progress | None
) -> dict[str, Any]:
    """Start the digest and wire SIGINT to cancel_digest while it runs."""
    task_id = progress.add_task("Hashing", total=None) if progress is not None else None

    def emit(event: str, payload: dict[str, Any]) -> None:
        if progress is not None and task_id is not None:
            progress.update(task_id, completed=payload["processed"], total=payload["total"])

    commands = DigestCommands(emit, settings)

    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, commands.cancel_digest)
        handler_installed = True
    except (NotImplementedError, RuntimeError, ValueError):
        # Windows event loops and non-main threads cannot install handlers.
        handler_installed = False

    try:
        return await commands.start_digest(file_path)
    finally:
        if handler_installed:
            loop.remove_signal_handler(signal.SIGINT)


def _print_result(result: dict[str, Any], settings: Settings) -> None:
    hex_digest = result["hex"].upper() if settings.uppercase else result["hex"]
    rows = [
        ("Algorithm", settings.algorithm),
        ("Hex", hex_digest),
        ("Base64", result["base64"]),
        ("Size", f"{format_bytes(result['bytes'])} ({result['bytes']} bytes)"),
        ("Elapsed", format_duration(result["elapsed_ms"])),
        ("Throughput", format_throughput(result["bytes"], result["elapsed_ms"])),
        ("Path", result["path"]),
    ]
    for label, value in rows:
        console.print(f"[bold]{label}:[/bold] {escape(str(value))}", soft_wrap=True)


@click.command("hash")
@click.argument("path")
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice(SUPPORTED_ALGORITHMS),
    default=None,
    help="Digest algorithm (default: from settings, sha256).",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help="Bytes read per iteration (default: from settings, 4 MiB).",
)
@click.option(
    "--uppercase/--lowercase",
    default=None,
    help="Display the hex digest in upper or lower case.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output the result as JSON.",
)
@settings_option
def hash_file(
    path: str,
    algorithm: str | None,
    chunk_size: int | None,
    uppercase: bool | None,
    json_output: bool,
    settings_path: Path | None,
) -> None:
    """Compute the digest of a single file."""
    file_path = sanitize_path(path)
    if not is_valid_file_path(file_path):
        console.print("[red]Invalid file path[/red]")
        raise SystemExit(1)

    try:
        settings = load_settings(settings_path)
        overrides = {
            key: value
            for key, value in (
                ("algorithm", algorithm),
                ("chunk_size", chunk_size),
                ("uppercase", uppercase),
            )
            if value is not None
        }
        settings = replace(settings, **overrides)
    except SettingsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    try:
        if json_output:
            result = asyncio.run(_run_digest(file_path, settings, None))
        else:
            with _make_progress() as progress:
                result = asyncio.run(_run_digest(file_path, settings, progress))
    except DigestError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    if json_output:
        if settings.uppercase:
            result = {**result, "hex": result["hex"].upper()}
        click.echo(json_lib.dumps(result, indent=2))
        return

    _print_result(result, settings)
