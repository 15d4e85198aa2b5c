"""Exception hierarchy for version resolution and activation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .version import Version


class SwitcherError(Exception):
    """Base exception for version switcher errors."""
    pass


class ConfigError(SwitcherError):
    """A configuration value could not be interpreted."""

    def __init__(self, key: str, value: object, expected: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r} (expected {expected})")


class InvalidVersionFormat(SwitcherError):
    """A user or file supplied a string that is not ``<major>.<minor>``."""

    def __init__(self, value: str, origin: str | None = None, message: str | None = None):
        """Initialize InvalidVersionFormat.

        Args:
            value: The offending string
            origin: Where the string came from (e.g. ``PHP_DEFAULT_VERSION``)
            message: Optional custom message (defaults to a generic message)
        """
        self.value = value
        self.origin = origin

        if message:
            super().__init__(message)
        elif origin:
            super().__init__(f"Invalid {origin} format: {value!r}. Use format like 8.2")
        else:
            super().__init__(f"Invalid version format: {value!r}. Use format like 8.2")


class InvalidPinFormat(InvalidVersionFormat):
    """A pin file exists but names no valid version.

    Raised by the pin file walk. The walk stops here: a malformed pin file
    shadows any pin file further up the tree.
    """

    def __init__(self, path: Path, content: str = ""):
        self.path = path
        super().__init__(
            content.strip(),
            origin=str(path),
            message=f"Invalid version format in {path}. Use format like 8.2",
        )


class PinFileUnreadable(SwitcherError):
    """A pin file exists but cannot be opened."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot read version file {path}{detail}")


class VersionNotInstalled(SwitcherError):
    """A well-formed version has no matching binary in the install directory."""

    def __init__(self, version: "Version", install_dir: Path):
        self.version = version
        self.install_dir = install_dir
        super().__init__(f"PHP {version} is not installed in {install_dir}")


class NoVersionsAvailable(SwitcherError):
    """Nothing resolved: no explicit version, pin file, default or installed binary."""

    def __init__(self, install_dir: Path | None = None):
        self.install_dir = install_dir
        where = f" in {install_dir}" if install_dir else ""
        super().__init__(f"No PHP versions found{where}")


class LinkCreationFailed(SwitcherError):
    """The filesystem refused to create or replace the managed symlink."""

    def __init__(self, link: Path, target: Path, reason: str = ""):
        self.link = link
        self.target = target
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Failed to create symlink {link} -> {target}{detail}")


class ActivationVerificationFailed(SwitcherError):
    """After activation the resolved ``php`` reports a different version.

    Usually another ``php`` earlier on ``PATH`` shadows the managed
    directory, or the link target misreports its own version.
    """

    def __init__(self, expected: "Version", actual: "Version | None"):
        self.expected = expected
        self.actual = actual
        got = str(actual) if actual is not None else "none"
        super().__init__(f"Failed to switch to PHP {expected} (got {got})")
