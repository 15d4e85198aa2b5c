"""``pvs info``: show the current status. Never fails."""

from __future__ import annotations

import os

from rich.console import Console

from pvs_cli.cli.helpers import build_switcher, current_directory
from pvs_cli.cli.ui import render_status
from pvs_cli.config import SwitcherConfig, load_config
from pvs_cli.runtime.exceptions import ConfigError

console = Console(soft_wrap=True)


def info() -> None:
    """Show current, default and installed PHP versions."""
    environ = dict(os.environ)
    config_error = None
    try:
        config = load_config(environ)
    except ConfigError as exc:
        # Report on built-in defaults and show the error in the report
        config = SwitcherConfig()
        config_error = str(exc)

    switcher = build_switcher(config)
    report = switcher.status(current_directory(environ), environ)
    report.config_error = config_error
    render_status(report, console)
