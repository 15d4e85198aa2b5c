"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import typer

from pvs_cli.cli.ui import Reporter
from pvs_cli.config import SwitcherConfig, load_config
from pvs_cli.runtime.exceptions import ConfigError
from pvs_cli.switcher import VersionSwitcher


def current_directory(environ: Mapping[str, str] | None = None) -> Path:
    """Return the working directory, keeping the shell's logical ``$PWD``.

    ``$PWD`` preserves symlinked path components; it is only trusted when
    it still names the process working directory.
    """
    env = os.environ if environ is None else environ
    cwd = os.getcwd()
    pwd = env.get("PWD")
    if pwd:
        try:
            if os.path.samefile(pwd, cwd):
                return Path(pwd)
        except OSError:
            pass
    return Path(cwd)


def load_config_or_exit(environ: Mapping[str, str], exit_code: int = 1) -> SwitcherConfig:
    """Load configuration; report a ConfigError and exit with *exit_code*."""
    try:
        return load_config(environ)
    except ConfigError as exc:
        Reporter().error(str(exc))
        raise typer.Exit(exit_code) from None


def build_switcher(config: SwitcherConfig) -> VersionSwitcher:
    return VersionSwitcher(config, Reporter(quiet=config.quiet))
