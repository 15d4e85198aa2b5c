"""Discovery of installed PHP binaries in an install directory.

Binary names are matched against a declarative list of naming patterns,
evaluated in a fixed priority order. To support another naming scheme, add
a ``NamingPattern`` to ``NAMING_PATTERNS``.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from .version import Version

logger = logging.getLogger(__name__)

BINARY_PREFIX = "php"


@dataclass(frozen=True)
class NamingPattern:
    """One way of spelling a versioned binary name."""

    name: str
    regex: re.Pattern[str]
    has_minor: bool = True


NAMING_PATTERNS: tuple[NamingPattern, ...] = (
    # php8.2, php-8.2, php@8.2
    NamingPattern("dotted", re.compile(rf"{BINARY_PREFIX}[-@]?(\d+)\.(\d+)")),
    # php82 -> 8.2, php810 -> 8.10 (first digit is the major)
    NamingPattern("concatenated", re.compile(rf"{BINARY_PREFIX}(\d)(\d+)")),
    # php8, php-8: no minor component, so never a usable Version
    NamingPattern("major_only", re.compile(rf"{BINARY_PREFIX}[-@]?(\d+)"), has_minor=False),
)


@dataclass(frozen=True)
class InstalledVersion:
    """A PHP version found in the install directory."""

    version: Version
    path: Path

    def __repr__(self) -> str:
        return f"<InstalledVersion {self.version} @ {self.path}>"


def _is_executable(path: Path) -> bool:
    """Executable regular file, following symlinks."""
    return path.is_file() and os.access(path, os.X_OK)


def version_from_filename(filename: str) -> Version | None:
    """Extract the version a binary filename denotes, or None."""
    for pattern in NAMING_PATTERNS:
        match = pattern.regex.fullmatch(filename)
        if match is None:
            continue
        if not pattern.has_minor:
            logger.debug("Skipping %s: no minor version in name", filename)
            return None
        return Version(int(match.group(1)), int(match.group(2)))
    return None


def list_installed(install_dir: Path) -> list[InstalledVersion]:
    """Return installed versions in ascending numeric order.

    Entries are visited in sorted filename order, so when two filenames
    denote the same version (``php8.2`` and ``php82``) the lexicographically
    smallest one wins.

    Args:
        install_dir: Directory holding the PHP binaries (e.g. ``/usr/bin``)

    Returns:
        Deduplicated list of InstalledVersion; empty if the directory is
        missing or holds no matching executables.
    """
    try:
        entries = sorted(install_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.debug("Cannot scan %s: %s", install_dir, exc)
        return []

    found: dict[Version, InstalledVersion] = {}
    for entry in entries:
        version = version_from_filename(entry.name)
        if version is None or version in found:
            continue
        if not _is_executable(entry):
            logger.debug("Skipping %s: not an executable file", entry)
            continue
        found[version] = InstalledVersion(version=version, path=entry)

    if not found:
        logger.debug("No PHP versions found in %s", install_dir)
    return [found[v] for v in sorted(found)]


def newest_installed(install_dir: Path) -> Version | None:
    """Return the highest installed version, or None."""
    installed = list_installed(install_dir)
    if not installed:
        return None
    return installed[-1].version


def binary_candidates(version: Version) -> list[str]:
    """Filenames tried for *version*, in lookup order."""
    return [
        f"{BINARY_PREFIX}{version}",
        f"{BINARY_PREFIX}{version.concatenated}",
        f"{BINARY_PREFIX}-{version}",
        f"{BINARY_PREFIX}@{version}",
    ]


def binary_for(install_dir: Path, version: Version) -> Path | None:
    """Return the executable for *version* in *install_dir*, or None.

    The canonical names from ``binary_candidates`` are tried first. Any
    other name that ``list_installed`` maps to *version* (``php8.02``,
    ``php100``) is used as a fallback, so every listed version can be
    activated.
    """
    for name in binary_candidates(version):
        candidate = install_dir / name
        if _is_executable(candidate):
            return candidate
    for installed in list_installed(install_dir):
        if installed.version == version:
            return installed.path
    return None
