"""Helpers shared by the test suite."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Mapping

import pytest

from pvs_cli.runtime.catalog import version_from_filename
from pvs_cli.runtime.version import Version

# Pin file name used by tests, so a stray .php-version above the temp dir
# can never leak into a test.
TEST_PIN_NAME = ".pvs-test-version"

posix_only = pytest.mark.skipif(os.name == "nt", reason="fake PHP binaries are /bin/sh scripts")


def make_php_binary(directory: Path, name: str, output: str | None = None, exit_code: int = 0) -> Path:
    """Create an executable shell script posing as a PHP binary.

    The script ignores its arguments and prints *output* (by default the
    version its name denotes), which is what the version probe reads.
    """
    directory.mkdir(parents=True, exist_ok=True)
    if output is None:
        version = version_from_filename(name)
        output = str(version) if version else ""
    path = directory / name
    path.write_text(f"#!/bin/sh\necho '{output}'\nexit {exit_code}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def write_file(path: Path, content: str) -> Path:
    """Create a file (and any missing parent dirs), return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class FilenameProber:
    """Fake version prober that reads the version off the binary's filename.

    Follows the managed symlink like the real probe would, without running
    anything.
    """

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, environ: Mapping[str, str]) -> Version | None:
        self.calls += 1
        found = shutil.which("php", path=environ.get("PATH", ""))
        if found is None:
            return None
        return version_from_filename(Path(os.path.realpath(found)).name)
