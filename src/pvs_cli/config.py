"""Configuration for the version switcher.

Values come from three layers, highest priority first:

1. Environment variables (``PVS_*`` and ``PHP_DEFAULT_VERSION``)
2. The YAML config file (``$PVS_CONFIG_FILE`` or the platform config dir)
3. Built-in defaults
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from pvs_cli.runtime.exceptions import ConfigError
from pvs_cli.runtime.home import detect_install_dir, get_config_file, get_default_bin_dir
from pvs_cli.runtime.pinfile import DEFAULT_PIN_FILE_NAME
from pvs_cli.runtime.probe import DEFAULT_PROBE_TIMEOUT

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class ConfigKey:
    """One configuration setting and where it can be set."""

    name: str
    env_var: str
    yaml_key: str
    description: str


CONFIG_KEYS: tuple[ConfigKey, ...] = (
    ConfigKey("version_file", "PVS_VERSION_FILE", "version_file", "Version file name"),
    ConfigKey("bin_dir", "PVS_BIN_DIR", "bin_dir", "Directory for the managed php symlink"),
    ConfigKey("install_dir", "PVS_PHP_INSTALL_DIR", "install_dir", "PHP installation directory"),
    ConfigKey("auto_switch", "PVS_AUTO_SWITCH", "auto_switch", "Auto-switch when changing directories"),
    ConfigKey("quiet", "PVS_QUIET_MODE", "quiet", "Quiet mode, only errors are shown"),
    ConfigKey("default_version", "PHP_DEFAULT_VERSION", "default_version", "Version used when no version file is found"),
    ConfigKey("install_command", "PVS_INSTALL_COMMAND", "install_command", "Install command prefix shown for missing versions"),
    ConfigKey("probe_timeout", "PVS_PROBE_TIMEOUT", "probe_timeout", "Seconds to wait for php to report its version"),
)


@dataclass
class SwitcherConfig:
    """Complete configuration snapshot."""

    version_file: str = DEFAULT_PIN_FILE_NAME
    bin_dir: Path = field(default_factory=get_default_bin_dir)
    install_dir: Path = field(default_factory=detect_install_dir)
    auto_switch: bool = True
    quiet: bool = False
    default_version: str | None = None  # validated by the resolver
    install_command: str | None = None
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    # File the values were loaded from, if any
    config_file: Path | None = None

    def __post_init__(self) -> None:
        self.bin_dir = Path(self.bin_dir).expanduser()
        self.install_dir = Path(self.install_dir).expanduser()


def parse_bool(key: str, value: Any) -> bool:
    """Interpret true/false/1/0/yes/no/on/off (case-insensitive)."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(key, value, "true or false")


def parse_timeout(key: str, value: Any) -> float:
    """Interpret a positive number of seconds."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigError(key, value, "a number of seconds") from None
    if seconds <= 0:
        raise ConfigError(key, value, "a positive number of seconds")
    return seconds


def _as_str(key: str, value: Any) -> str | None:
    text = str(value).strip()
    return text or None


def _as_version_str(key: str, value: Any) -> str | None:
    # YAML reads an unquoted 8.10 as the float 8.1
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        raise ConfigError(key, value, "a quoted string such as \"8.2\"")
    return _as_str(key, value)


_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "version_file": _as_str,
    "bin_dir": _as_str,
    "install_dir": _as_str,
    "auto_switch": parse_bool,
    "quiet": parse_bool,
    "default_version": _as_version_str,
    "install_command": _as_str,
    "probe_timeout": parse_timeout,
}


def load_config_file(path: Path) -> dict[str, Any]:
    """Load the YAML config file, returning an empty mapping if absent.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    if not path.is_file():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(str(path), "<unreadable>", f"a readable YAML file ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(str(path), type(data).__name__, "a YAML mapping")
    return data


def load_config(environ: Mapping[str, str] | None = None) -> SwitcherConfig:
    """Build the configuration snapshot from file and environment.

    Args:
        environ: Environment to read (defaults to ``os.environ``)

    Returns:
        SwitcherConfig with every layer applied.

    Raises:
        ConfigError: If a value cannot be interpreted.
    """
    env = os.environ if environ is None else environ
    config_path = get_config_file(env)
    file_data = load_config_file(config_path)

    values: dict[str, Any] = {}
    for key in CONFIG_KEYS:
        convert = _CONVERTERS[key.name]
        if key.yaml_key in file_data and file_data[key.yaml_key] is not None:
            values[key.name] = convert(key.yaml_key, file_data[key.yaml_key])
        # An empty env var counts as unset
        if env.get(key.env_var):
            values[key.name] = convert(key.env_var, env[key.env_var])

    unknown = set(file_data) - {key.yaml_key for key in CONFIG_KEYS}
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", config_path, ", ".join(sorted(unknown)))

    values = {name: value for name, value in values.items() if value is not None}
    return SwitcherConfig(
        config_file=config_path if file_data else None,
        **values,
    )
