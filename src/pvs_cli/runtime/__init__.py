"""Version resolution and activation engine.

This subpackage finds installed PHP versions, pin files and the effective
version for a directory, and activates a version through the managed
symlink directory.
"""

from pvs_cli.runtime.activation import ActivationManager, rewrite_search_path
from pvs_cli.runtime.catalog import InstalledVersion, binary_for, list_installed, newest_installed
from pvs_cli.runtime.controller import DirectoryChangeController, SessionState
from pvs_cli.runtime.exceptions import (
    ActivationVerificationFailed,
    ConfigError,
    InvalidPinFormat,
    InvalidVersionFormat,
    LinkCreationFailed,
    NoVersionsAvailable,
    PinFileUnreadable,
    SwitcherError,
    VersionNotInstalled,
)
from pvs_cli.runtime.pinfile import PinFile, candidate_directories, find_pin_file, write_pin_file
from pvs_cli.runtime.probe import VersionProber, make_prober, probe_current_version
from pvs_cli.runtime.resolver import Resolution, ResolutionSource, VersionResolver
from pvs_cli.runtime.version import Version, validate_version_format

__all__ = [
    "ActivationManager",
    "ActivationVerificationFailed",
    "ConfigError",
    "DirectoryChangeController",
    "InstalledVersion",
    "InvalidPinFormat",
    "InvalidVersionFormat",
    "LinkCreationFailed",
    "NoVersionsAvailable",
    "PinFile",
    "PinFileUnreadable",
    "Resolution",
    "ResolutionSource",
    "SessionState",
    "SwitcherError",
    "Version",
    "VersionNotInstalled",
    "VersionProber",
    "VersionResolver",
    "binary_for",
    "candidate_directories",
    "find_pin_file",
    "list_installed",
    "make_prober",
    "newest_installed",
    "probe_current_version",
    "rewrite_search_path",
    "validate_version_format",
    "write_pin_file",
]
