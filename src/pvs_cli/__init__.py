"""
PHP Version Switcher (pvs) - per-directory PHP versions through PATH.

Usage:
    eval "$(pvs init)"    # in ~/.zshrc
    pvs use 8.2
    pvs local 8.3
    pvs info
"""

__version__ = "1.0.0"

import logging

import typer

from pvs_cli.cli.commands import register_commands

app = typer.Typer(
    name="pvs",
    help="Switch PHP versions per directory using .php-version files",
    add_completion=False,
    no_args_is_help=True,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
) -> None:
    """Switch PHP versions per directory using .php-version files."""
    _setup_logging(verbose)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
