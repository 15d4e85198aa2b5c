"""Ask the ``php`` currently resolvable on ``PATH`` for its own version."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Callable, Mapping

from .exceptions import InvalidVersionFormat
from .version import Version

logger = logging.getLogger(__name__)

COMMAND_NAME = "php"
DEFAULT_PROBE_TIMEOUT = 5.0

VERSION_SCRIPT = "echo PHP_MAJOR_VERSION . '.' . PHP_MINOR_VERSION . PHP_EOL;"

# Given an environment mapping, return the version its PATH resolves to.
VersionProber = Callable[[Mapping[str, str]], Version | None]


def find_command(environ: Mapping[str, str], command: str = COMMAND_NAME) -> str | None:
    """Locate *command* on the ``PATH`` of *environ* (first match wins)."""
    return shutil.which(command, path=environ.get("PATH", os.defpath))


def probe_current_version(
    environ: Mapping[str, str] | None = None,
    timeout: float = DEFAULT_PROBE_TIMEOUT,
) -> Version | None:
    """Return the version of the ``php`` that *environ*'s PATH resolves to.

    Missing binary, failed or timed-out invocation, and unparsable output
    all yield None.
    """
    env = dict(os.environ if environ is None else environ)
    executable = find_command(env)
    if executable is None:
        logger.debug("No %s on PATH", COMMAND_NAME)
        return None

    try:
        result = subprocess.run(
            [executable, "-r", VERSION_SCRIPT],
            capture_output=True,
            text=True,
            timeout=timeout,
            env=env,
        )
    except subprocess.TimeoutExpired:
        logger.warning("%s did not report its version within %ss", executable, timeout)
        return None
    except OSError as exc:
        logger.debug("Cannot run %s: %s", executable, exc)
        return None

    if result.returncode != 0:
        logger.debug("%s exited with %s", executable, result.returncode)
        return None

    try:
        return Version.parse(result.stdout.strip())
    except InvalidVersionFormat:
        logger.debug("Unparsable version output from %s: %r", executable, result.stdout)
        return None


def make_prober(timeout: float = DEFAULT_PROBE_TIMEOUT) -> VersionProber:
    """Bind *timeout* into a ``VersionProber``."""

    def prober(environ: Mapping[str, str]) -> Version | None:
        return probe_current_version(environ, timeout=timeout)

    return prober
