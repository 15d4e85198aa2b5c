"""Platform-dependent locations and hints.

Provides the canonical functions for locating:
- The user config file (cross-platform, via platformdirs)
- The managed symlink directory default
- The PHP install directory (auto-detected)
- The install command suggested when a version is missing
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Mapping

from platformdirs import user_config_dir

from .catalog import list_installed
from .version import Version

APP_NAME = "pvs"

INSTALL_DIR_CANDIDATES: tuple[Path, ...] = (
    Path("/usr/bin"),
    Path("/usr/local/bin"),
    Path("/opt/homebrew/bin"),
)

# Package manager executable -> install command template
PACKAGE_MANAGERS: tuple[tuple[str, str], ...] = (
    ("apt", "sudo apt install php{version}"),
    ("apk", "apk add php{concatenated}"),
    ("brew", "brew install php@{version}"),
)


def get_config_file(environ: Mapping[str, str] | None = None) -> Path:
    """Return the path of the YAML config file.

    Resolution order:
    1. PVS_CONFIG_FILE environment variable
    2. ``<user config dir>/pvs/config.yaml`` (platformdirs)
    """
    env = os.environ if environ is None else environ
    if env_file := env.get("PVS_CONFIG_FILE"):
        return Path(env_file).expanduser()
    return Path(user_config_dir(APP_NAME)) / "config.yaml"


def get_default_bin_dir() -> Path:
    """Return the default managed directory, ``~/.local/bin/pvs``."""
    return Path.home() / ".local" / "bin" / APP_NAME


def detect_install_dir(candidates: tuple[Path, ...] = INSTALL_DIR_CANDIDATES) -> Path:
    """Return the first candidate that holds a versioned PHP binary.

    Falls back to the first candidate (``/usr/bin``) when none does.
    """
    for candidate in candidates:
        if list_installed(candidate):
            return candidate
    return candidates[0]


def install_hint(version: Version, install_command: str | None = None) -> str:
    """Return the command a user would run to install *version*.

    An explicit *install_command* (``PVS_INSTALL_COMMAND``) is used as a
    prefix, e.g. ``"sudo apt install"`` gives ``"sudo apt install php8.2"``.
    Otherwise the first package manager found on PATH decides.
    """
    if install_command:
        return f"{install_command} php{version}"

    for executable, template in PACKAGE_MANAGERS:
        if shutil.which(executable):
            return template.format(version=version, concatenated=version.concatenated)

    return f"install php{version} with your system package manager"
