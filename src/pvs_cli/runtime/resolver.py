"""4-level version resolution: explicit > pin file > default > newest installed.

Resolution levels (checked in order, first match wins):
1. EXPLICIT          -- version given on the command line
2. PIN_FILE          -- nearest .php-version at or above the working directory
3. DEFAULT           -- PHP_DEFAULT_VERSION
4. NEWEST_INSTALLED  -- highest version found in the install directory

A malformed pin file or default version is an error; it never falls
through to the next level. Only absence does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pvs_cli.runtime.catalog import newest_installed
from pvs_cli.runtime.exceptions import NoVersionsAvailable
from pvs_cli.runtime.pinfile import PinFile, find_pin_file
from pvs_cli.runtime.version import Version

logger = logging.getLogger(__name__)

DEFAULT_VERSION_ORIGIN = "PHP_DEFAULT_VERSION"


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

class ResolutionSource(Enum):
    EXPLICIT = "explicit"
    PIN_FILE = "pin_file"
    DEFAULT = "default"
    NEWEST_INSTALLED = "newest_installed"


@dataclass(frozen=True)
class Resolution:
    version: Version
    source: ResolutionSource
    pin_file: PinFile | None = None


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class VersionResolver:
    """Compute the effective version for a working directory."""

    def __init__(self, install_dir: Path, pin_file_name: str, default_version: str | None = None):
        """Initialize resolver.

        Args:
            install_dir: Directory holding the installed PHP binaries
            pin_file_name: Name of the pin file to look for
            default_version: Configured default (unvalidated), if any
        """
        self.install_dir = Path(install_dir)
        self.pin_file_name = pin_file_name
        self.default_version = default_version

    def configured_default(self) -> Version | None:
        """Return the configured default version, validated.

        Raises:
            InvalidVersionFormat: If the configured value is malformed.
        """
        if not self.default_version:
            return None
        return Version.parse(self.default_version, origin=DEFAULT_VERSION_ORIGIN)

    def default_version_or_newest(self) -> Resolution | None:
        """Levels 3 and 4 only: what applies when no pin file is found."""
        configured = self.configured_default()
        if configured is not None:
            return Resolution(configured, ResolutionSource.DEFAULT)

        newest = newest_installed(self.install_dir)
        if newest is not None:
            return Resolution(newest, ResolutionSource.NEWEST_INSTALLED)
        return None

    def resolve(self, cwd: Path, explicit_version: str | None = None) -> Resolution:
        """Resolve the effective version for *cwd*.

        Args:
            cwd: Working directory the pin file walk starts from
            explicit_version: Version requested by the caller, if any

        Returns:
            Resolution with the winning version and the level that fired.

        Raises:
            InvalidVersionFormat: If the explicit version, the nearest pin
                file or the default version is malformed.
            PinFileUnreadable: If the nearest pin file cannot be read.
            NoVersionsAvailable: If no level yields a version.
        """
        # Level 1 -- explicit
        if explicit_version is not None:
            return Resolution(Version.parse(explicit_version), ResolutionSource.EXPLICIT)

        # Level 2 -- pin file
        pin = find_pin_file(cwd, self.pin_file_name)
        if pin is not None:
            return Resolution(pin.version, ResolutionSource.PIN_FILE, pin_file=pin)

        # Levels 3 and 4 -- default, then newest installed
        resolution = self.default_version_or_newest()
        if resolution is not None:
            logger.debug("Resolved %s from %s", resolution.version, resolution.source.value)
            return resolution

        raise NoVersionsAvailable(self.install_dir)
