"""``pvs local``: pin the current directory to a PHP version."""

from __future__ import annotations

import os
from typing import Optional

import typer

from pvs_cli.cli.helpers import build_switcher, current_directory, load_config_or_exit


def local(
    version: Optional[str] = typer.Argument(None, help="Version to pin, e.g. 8.2"),
) -> None:
    """Create the version file in the current directory."""
    config = load_config_or_exit(os.environ)
    switcher = build_switcher(config)

    if switcher.create_pin(current_directory(), version or "") is None:
        raise typer.Exit(1)
