"""``pvs hook`` and ``pvs init``: directory-change integration.

``pvs init`` prints a snippet that registers a directory-change hook in the
shell. The hook runs ``pvs hook --last-dir "$PVS_LAST_CHECKED_DIR"`` and
evaluates its output, which carries both the ``PATH`` change and the new
``PVS_LAST_CHECKED_DIR`` value.
"""

from __future__ import annotations

import os
from pathlib import Path

import typer

from pvs_cli.cli.helpers import build_switcher, current_directory, load_config_or_exit
from pvs_cli.cli.shell import LAST_CHECKED_DIR_VAR, SUPPORTED_SHELLS, init_snippet, render_assignment, render_exports
from pvs_cli.runtime.controller import DirectoryChangeController, SessionState


def hook(
    last_dir: str = typer.Option(
        "",
        "--last-dir",
        help="Directory checked by the previous hook run ($PVS_LAST_CHECKED_DIR)",
    ),
) -> None:
    """Directory-change hook (prints shell code on stdout). Always exits 0."""
    environ = dict(os.environ)
    before = dict(environ)

    config = load_config_or_exit(environ, exit_code=0)
    controller = DirectoryChangeController(build_switcher(config), auto_switch=config.auto_switch)

    state = SessionState(Path(last_dir) if last_dir else None)
    new_state = controller.on_directory_change(state, current_directory(environ), environ)

    lines = []
    exports = render_exports(before, environ)
    if exports:
        lines.append(exports)
    if new_state != state and new_state.last_checked_directory is not None:
        lines.append(render_assignment(LAST_CHECKED_DIR_VAR, str(new_state.last_checked_directory)))

    if lines:
        typer.echo("\n".join(lines))


def init(
    shell: str = typer.Option(
        "zsh",
        "--shell",
        "-s",
        help=f"Shell to print the hook for ({', '.join(SUPPORTED_SHELLS)})",
    ),
) -> None:
    """Print the shell snippet that enables automatic switching.

    Add to ~/.zshrc:  eval "$(pvs init)"
    """
    try:
        snippet = init_snippet(shell)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--shell") from None
    typer.echo(snippet, nl=False)
