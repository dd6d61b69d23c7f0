# ABOUTME: Shared Click options for filedigest CLI commands.
# ABOUTME: Provides the reusable --settings flag pointing at the settings file.

from pathlib import Path

import click

from filedigest.core.settings import DEFAULT_SETTINGS_PATH

settings_option = click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Path to settings file (default: {DEFAULT_SETTINGS_PATH})",
)
