"""CLI command modules for pvs.

This package contains individual command implementations.
"""

from __future__ import annotations

import typer

from .help_cmd import help_cmd
from .hook import hook, init
from .info import info
from .local import local
from .use import use


def register_commands(app: typer.Typer) -> None:
    """Attach every command to *app*."""
    app.command()(use)
    app.command()(local)
    app.command()(info)
    app.command()(hook)
    app.command()(init)
    app.command(name="help")(help_cmd)


__all__ = ["register_commands"]
