"""Tests for configuration loading: environment over YAML over defaults."""

from __future__ import annotations

from pathlib import Path

import pytest

from pvs_cli.config import (
    CONFIG_KEYS,
    SwitcherConfig,
    load_config,
    load_config_file,
    parse_bool,
    parse_timeout,
)
from pvs_cli.runtime.exceptions import ConfigError
from pvs_cli.runtime.probe import DEFAULT_PROBE_TIMEOUT
from tests.utils import write_file


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config.yaml"


def _env(config_file: Path, **values: str) -> dict[str, str]:
    return {"PVS_CONFIG_FILE": str(config_file), **values}


class TestDefaults:
    def test_defaults(self, config_file: Path) -> None:
        config = load_config(_env(config_file))

        assert config.version_file == ".php-version"
        assert config.bin_dir == Path.home() / ".local" / "bin" / "pvs"
        assert config.install_dir.is_absolute()
        assert config.auto_switch is True
        assert config.quiet is False
        assert config.default_version is None
        assert config.install_command is None
        assert config.probe_timeout == DEFAULT_PROBE_TIMEOUT
        assert config.config_file is None

    def test_every_key_maps_to_a_field(self) -> None:
        config = SwitcherConfig(install_dir=Path("/usr/bin"))
        for key in CONFIG_KEYS:
            assert hasattr(config, key.name), key

    def test_paths_are_expanded(self) -> None:
        config = SwitcherConfig(bin_dir="~/bin/pvs", install_dir="~/php")  # type: ignore[arg-type]
        assert config.bin_dir == Path.home() / "bin" / "pvs"
        assert config.install_dir == Path.home() / "php"


class TestEnvironment:
    def test_env_values(self, config_file: Path, tmp_path: Path) -> None:
        config = load_config(
            _env(
                config_file,
                PVS_VERSION_FILE=".phpv",
                PVS_BIN_DIR=str(tmp_path / "managed"),
                PVS_PHP_INSTALL_DIR=str(tmp_path / "install"),
                PVS_AUTO_SWITCH="false",
                PVS_QUIET_MODE="TRUE",
                PHP_DEFAULT_VERSION="8.1",
                PVS_INSTALL_COMMAND="sudo dnf install",
                PVS_PROBE_TIMEOUT="2.5",
            )
        )
        assert config.version_file == ".phpv"
        assert config.bin_dir == tmp_path / "managed"
        assert config.install_dir == tmp_path / "install"
        assert config.auto_switch is False
        assert config.quiet is True
        assert config.default_version == "8.1"
        assert config.install_command == "sudo dnf install"
        assert config.probe_timeout == 2.5

    def test_empty_env_var_counts_as_unset(self, config_file: Path, tmp_path: Path) -> None:
        config = load_config(_env(config_file, PVS_VERSION_FILE="", PHP_DEFAULT_VERSION="", PVS_PHP_INSTALL_DIR=str(tmp_path)))
        assert config.version_file == ".php-version"
        assert config.default_version is None

    def test_default_version_is_not_validated_here(self, config_file: Path, tmp_path: Path) -> None:
        config = load_config(_env(config_file, PHP_DEFAULT_VERSION="latest", PVS_PHP_INSTALL_DIR=str(tmp_path)))
        assert config.default_version == "latest"

    def test_bad_bool(self, config_file: Path) -> None:
        with pytest.raises(ConfigError, match="PVS_AUTO_SWITCH"):
            load_config(_env(config_file, PVS_AUTO_SWITCH="maybe"))

    def test_reads_os_environ_by_default(self, config_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PVS_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("PVS_PHP_INSTALL_DIR", str(tmp_path))
        monkeypatch.setenv("PVS_QUIET_MODE", "1")
        config = load_config()
        assert config.quiet is True


class TestConfigFile:
    def test_yaml_values(self, config_file: Path, tmp_path: Path) -> None:
        write_file(
            config_file,
            f"version_file: .phpv\n"
            f"install_dir: {tmp_path / 'install'}\n"
            f"auto_switch: no\n"
            f"default_version: '8.10'\n"
            f"probe_timeout: 3\n",
        )
        config = load_config(_env(config_file))
        assert config.version_file == ".phpv"
        assert config.install_dir == tmp_path / "install"
        assert config.auto_switch is False
        assert config.default_version == "8.10"
        assert config.probe_timeout == 3.0
        assert config.config_file == config_file

    def test_env_beats_file(self, config_file: Path, tmp_path: Path) -> None:
        write_file(config_file, f"install_dir: {tmp_path}\nquiet: true\ndefault_version: '7.4'\n")
        config = load_config(_env(config_file, PVS_QUIET_MODE="false", PHP_DEFAULT_VERSION="8.3"))
        assert config.quiet is False
        assert config.default_version == "8.3"
        assert config.install_dir == tmp_path

    def test_unquoted_default_version_is_rejected(self, config_file: Path, tmp_path: Path) -> None:
        write_file(config_file, f"install_dir: {tmp_path}\ndefault_version: 8.10\n")
        with pytest.raises(ConfigError, match="default_version"):
            load_config(_env(config_file))

    def test_empty_file(self, config_file: Path, tmp_path: Path) -> None:
        write_file(config_file, "")
        config = load_config(_env(config_file, PVS_PHP_INSTALL_DIR=str(tmp_path)))
        assert config.config_file is None

    def test_null_values_are_ignored(self, config_file: Path, tmp_path: Path) -> None:
        write_file(config_file, f"install_dir: {tmp_path}\ndefault_version:\n")
        assert load_config(_env(config_file)).default_version is None

    def test_unknown_keys_warn(self, config_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        write_file(config_file, f"install_dir: {tmp_path}\ncolour: blue\n")
        with caplog.at_level("WARNING", logger="pvs_cli.config"):
            load_config(_env(config_file))
        assert "colour" in caplog.text

    def test_invalid_yaml(self, config_file: Path) -> None:
        write_file(config_file, "quiet: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config_file(config_file)

    def test_not_a_mapping(self, config_file: Path) -> None:
        write_file(config_file, "- quiet\n- true\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config_file(config_file)

    def test_missing_file(self, config_file: Path) -> None:
        assert load_config_file(config_file) == {}


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), ("Yes", True), ("on", True), (True, True),
     ("false", False), ("0", False), ("NO", False), ("off", False), (False, False)],
)
def test_parse_bool(value: object, expected: bool) -> None:
    assert parse_bool("KEY", value) is expected


def test_parse_bool_rejects() -> None:
    with pytest.raises(ConfigError, match="expected true or false"):
        parse_bool("KEY", "sometimes")


@pytest.mark.parametrize("value", ["0", "-1", "soon", None])
def test_parse_timeout_rejects(value: object) -> None:
    with pytest.raises(ConfigError):
        parse_timeout("PVS_PROBE_TIMEOUT", value)


def test_parse_timeout() -> None:
    assert parse_timeout("PVS_PROBE_TIMEOUT", "0.5") == 0.5
