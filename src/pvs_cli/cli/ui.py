"""Reusable UI helpers: the message sink and the status renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.text import Text

if TYPE_CHECKING:
    from pvs_cli.switcher import StatusReport

from pvs_cli.config import CONFIG_KEYS
from pvs_cli.runtime.probe import COMMAND_NAME


class LogLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class LevelStyle:
    prefix: str
    style: str


LEVEL_STYLES: dict[LogLevel, LevelStyle] = {
    LogLevel.SUCCESS: LevelStyle("[PVS]", "green"),
    LogLevel.ERROR: LevelStyle("[PVS ERROR]", "red"),
    LogLevel.WARNING: LevelStyle("[PVS WARNING]", "yellow"),
    LogLevel.INFO: LevelStyle("[PVS]", "cyan"),
}


def stderr_console() -> Console:
    """Console for messages; stdout is reserved for shell code."""
    return Console(stderr=True, highlight=False, soft_wrap=True)


class Reporter:
    """Prints user-facing messages with a level prefix.

    In quiet mode only errors are printed.
    """

    def __init__(self, console: Console | None = None, quiet: bool = False):
        self.console = console or stderr_console()
        self.quiet = quiet

    def log(self, level: LogLevel, message: str) -> None:
        if self.quiet and level is not LogLevel.ERROR:
            return
        style = LEVEL_STYLES[level]
        line = Text(style.prefix, style=style.style)
        line.append(f" {message}")
        self.console.print(line)

    def success(self, message: str) -> None:
        self.log(LogLevel.SUCCESS, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)


def render_status(report: StatusReport, console: Console) -> None:
    """Print the ``pvs info`` report. Missing data is shown as none/not found."""
    current = str(report.current) if report.current else "none"
    default = str(report.default) if report.default else "none"

    console.print("[bold]PHP Version Switcher Info[/bold]")
    console.print("=========================")
    console.print()
    console.print(f"Current PHP version: {current}")
    if report.default_error:
        console.print(f"Default PHP version: {default} [red]({escape(report.default_error)})[/red]")
    else:
        console.print(f"Default PHP version: {default}")
    console.print(f"PHP symlinks stored in: {report.config.bin_dir}", markup=False)
    if report.link_target is not None:
        console.print(f"Managed php link: {report.config.bin_dir / COMMAND_NAME} -> {report.link_target}", markup=False)
    else:
        console.print("Managed php link: not created yet")

    if report.pin_file is not None:
        console.print(f"Version file: {report.pin_file.path} ({report.pin_file.version})", markup=False)
    elif report.pin_error:
        console.print(f"Version file: [red]{escape(report.pin_error)}[/red]")
    else:
        console.print("Version file: not found")

    console.print()
    console.print("Available PHP versions:")
    if not report.installed:
        console.print(f"  [yellow]none found in {escape(str(report.config.install_dir))}[/yellow]")
    for installed in report.installed:
        marker = "*" if installed.version == report.current else " "
        suffix = " (default)" if installed.version == report.default else ""
        console.print(f"  {marker} {installed.version} ({installed.path}){suffix}", markup=False)

    console.print()
    console.print("Configuration:")
    if report.config_error:
        console.print(f"- [red]{escape(report.config_error)}[/red] (showing built-in defaults)")
    if report.config.config_file is not None:
        console.print(f"- config file: {report.config.config_file}", markup=False)
    for key in CONFIG_KEYS:
        value = getattr(report.config, key.name)
        if value is None:
            shown = "not set (newest available version)" if key.name == "default_version" else "not set"
        elif isinstance(value, bool):
            shown = "true" if value else "false"
        else:
            shown = str(value)
        console.print(f"- {key.env_var}: {shown}", markup=False)
