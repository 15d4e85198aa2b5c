"""``pvs use``: switch to an explicit or resolved PHP version.

Usage:
    eval "$(pvs use)"        # Version from .php-version, default or newest
    eval "$(pvs use 8.2)"    # Explicit version

The shell function installed by ``pvs init`` does the ``eval`` for you.
"""

from __future__ import annotations

import os
from typing import Optional

import typer

from pvs_cli.cli.helpers import build_switcher, current_directory, load_config_or_exit
from pvs_cli.cli.shell import render_exports


def use(
    version: Optional[str] = typer.Argument(None, help="Version to switch to, e.g. 8.2"),
) -> None:
    """Switch PHP version (prints shell exports on stdout)."""
    environ = dict(os.environ)
    before = dict(environ)

    config = load_config_or_exit(environ)
    switcher = build_switcher(config)
    ok = switcher.use(current_directory(environ), environ, version)

    exports = render_exports(before, environ)
    if exports:
        typer.echo(exports)

    if not ok:
        raise typer.Exit(1)
