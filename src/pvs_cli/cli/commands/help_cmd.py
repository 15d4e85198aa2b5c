"""``pvs help``: configuration reference."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from pvs_cli.config import CONFIG_KEYS

console = Console(soft_wrap=True)

COMMANDS: tuple[tuple[str, str], ...] = (
    ("pvs use [version]", "Manually switch version"),
    ("pvs local <version>", "Create the version file in the current directory"),
    ("pvs info", "Show current status"),
    ("pvs init [--shell zsh|bash]", "Print the shell hook, add eval \"$(pvs init)\" to your rc file"),
    ("pvs help", "Show this help"),
)


def help_cmd() -> None:
    """Show configuration variables and commands."""
    console.print("[bold]PHP Version Switcher Help[/bold]")
    console.print()

    table = Table(title="Configuration (environment variables or config.yaml keys)")
    table.add_column("Variable", style="cyan")
    table.add_column("config.yaml key", style="magenta")
    table.add_column("Description")
    for key in CONFIG_KEYS:
        table.add_row(key.env_var, key.yaml_key, key.description)
    console.print(table)

    console.print()
    console.print("Available commands:")
    for usage, description in COMMANDS:
        console.print(f"- {usage:<30} # {description}", markup=False)

    console.print()
    console.print("How it works:")
    console.print("- Creates a php symlink in PVS_BIN_DIR")
    console.print("- Prepends that directory to PATH")
    console.print("- No system modifications required")
