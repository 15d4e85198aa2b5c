"""Pin file (``.php-version``) lookup and creation.

The nearest pin file governs: the walk goes from the working directory up
to and including the filesystem root and stops at the first pin file it
finds, even if that file turns out to be malformed.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .exceptions import InvalidPinFormat, PinFileUnreadable
from .version import VERSION_PATTERN, Version

logger = logging.getLogger(__name__)

DEFAULT_PIN_FILE_NAME = ".php-version"

_PIN_LINE_RE = re.compile(rf"^\s*({VERSION_PATTERN})", re.MULTILINE)


@dataclass(frozen=True)
class PinFile:
    """A pin file and the version it names."""

    path: Path
    version: Version


class CandidateDirectories:
    """Directories searched for a pin file, most specific first.

    Iterating yields *start* followed by each of its parents, ending with
    the filesystem root. Each ``iter()`` starts a fresh walk.
    """

    def __init__(self, start: Path):
        # abspath collapses ".." lexically
        self.start = Path(os.path.abspath(start))

    def __iter__(self) -> Iterator[Path]:
        yield self.start
        yield from self.start.parents

    def __repr__(self) -> str:
        return f"<CandidateDirectories from {self.start}>"


def candidate_directories(start: Path) -> CandidateDirectories:
    """Return the restartable sequence of directories above *start*."""
    return CandidateDirectories(start)


def parse_pin_content(content: str) -> Version | None:
    """Return the version on the first line that starts with one, or None."""
    match = _PIN_LINE_RE.search(content)
    if match is None:
        return None
    return Version.parse(match.group(1).strip())


def read_pin_file(path: Path) -> PinFile:
    """Read and parse a single pin file.

    Raises:
        PinFileUnreadable: If the file cannot be opened or decoded.
        InvalidPinFormat: If no line carries a ``<major>.<minor>`` version.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PinFileUnreadable(path, str(exc)) from exc

    version = parse_pin_content(content)
    if version is None:
        raise InvalidPinFormat(path, content)
    return PinFile(path=path, version=version)


def find_pin_file(start: Path, file_name: str = DEFAULT_PIN_FILE_NAME) -> PinFile | None:
    """Find the nearest pin file at or above *start*.

    Args:
        start: Working directory to start the walk from
        file_name: Pin file name (``PVS_VERSION_FILE``)

    Returns:
        The nearest PinFile, or None if no directory up to the root has one.

    Raises:
        PinFileUnreadable: If the nearest pin file cannot be opened.
        InvalidPinFormat: If the nearest pin file is malformed. Ancestor pin
            files are not consulted in that case.
    """
    for directory in candidate_directories(start):
        candidate = directory / file_name
        if os.path.isfile(candidate):
            logger.debug("Found pin file %s", candidate)
            return read_pin_file(candidate)
    logger.debug("No %s found at or above %s", file_name, start)
    return None


def write_pin_file(directory: Path, version: Version, file_name: str = DEFAULT_PIN_FILE_NAME) -> Path:
    """Write ``<version>\\n`` to the pin file in *directory*, replacing it.

    Returns:
        Path of the written pin file.
    """
    path = Path(directory) / file_name
    path.write_text(f"{version}\n", encoding="utf-8")
    return path
