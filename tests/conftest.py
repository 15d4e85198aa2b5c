from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from pvs_cli.config import CONFIG_KEYS, SwitcherConfig
from tests.utils import TEST_PIN_NAME, FilenameProber


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the user's own pvs settings and config file out of every test."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key.env_var, raising=False)
    monkeypatch.delenv("PVS_LAST_CHECKED_DIR", raising=False)
    monkeypatch.setenv("PVS_CONFIG_FILE", str(tmp_path / "no-such-config.yaml"))
    yield


@pytest.fixture()
def install_dir(tmp_path: Path) -> Path:
    path = tmp_path / "install"
    path.mkdir()
    return path


@pytest.fixture()
def bin_dir(tmp_path: Path) -> Path:
    """Managed directory (not created, activation creates it)."""
    return tmp_path / "home" / ".local" / "bin" / "pvs"


@pytest.fixture()
def empty_path_dir(tmp_path: Path) -> Path:
    """A directory with no php in it, used as the base PATH."""
    path = tmp_path / "empty-bin"
    path.mkdir()
    return path


@pytest.fixture()
def config(install_dir: Path, bin_dir: Path) -> SwitcherConfig:
    return SwitcherConfig(
        version_file=TEST_PIN_NAME,
        bin_dir=bin_dir,
        install_dir=install_dir,
    )


@pytest.fixture()
def prober() -> FilenameProber:
    return FilenameProber()


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "projects" / "app"
    path.mkdir(parents=True)
    return path
