"""User-facing operations: use, auto-switch, pin creation and status.

This is the error boundary. Every ``SwitcherError`` raised by the runtime
engine is caught here and reported; nothing propagates to the shell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import MutableMapping

from pvs_cli.cli.ui import Reporter
from pvs_cli.config import SwitcherConfig
from pvs_cli.runtime.activation import ActivationManager
from pvs_cli.runtime.catalog import InstalledVersion, list_installed
from pvs_cli.runtime.exceptions import (
    InvalidVersionFormat,
    NoVersionsAvailable,
    SwitcherError,
    VersionNotInstalled,
)
from pvs_cli.runtime.home import install_hint
from pvs_cli.runtime.pinfile import PinFile, find_pin_file, write_pin_file
from pvs_cli.runtime.probe import VersionProber, make_prober
from pvs_cli.runtime.resolver import Resolution, ResolutionSource, VersionResolver
from pvs_cli.runtime.version import Version

logger = logging.getLogger(__name__)


@dataclass
class StatusReport:
    """Everything ``pvs info`` shows."""

    config: SwitcherConfig
    current: Version | None = None
    default: Version | None = None
    default_error: str | None = None
    link_target: Path | None = None
    pin_file: PinFile | None = None
    pin_error: str | None = None
    config_error: str | None = None
    installed: list[InstalledVersion] = field(default_factory=list)


def describe_resolution(resolution: Resolution) -> str:
    """One-line message saying where a version came from."""
    version = resolution.version
    if resolution.source is ResolutionSource.PIN_FILE and resolution.pin_file is not None:
        return f"Using PHP version from: {resolution.pin_file.path} ({version})"
    if resolution.source is ResolutionSource.DEFAULT:
        return f"Using default PHP version: {version}"
    if resolution.source is ResolutionSource.NEWEST_INSTALLED:
        return f"Using newest installed PHP version: {version}"
    return f"Using PHP version: {version}"


class VersionSwitcher:
    """Runs switcher operations against an environment mapping."""

    def __init__(
        self,
        config: SwitcherConfig,
        reporter: Reporter,
        prober: VersionProber | None = None,
    ):
        """Initialize the switcher.

        Args:
            config: Configuration snapshot
            reporter: Sink for user-facing messages
            prober: Version prober (defaults to running ``php`` with the
                configured timeout)
        """
        self.config = config
        self.reporter = reporter
        self.prober = prober or make_prober(config.probe_timeout)
        self.resolver = VersionResolver(
            install_dir=config.install_dir,
            pin_file_name=config.version_file,
            default_version=config.default_version,
        )
        self.activation = ActivationManager(
            install_dir=config.install_dir,
            managed_dir=config.bin_dir,
            prober=self.prober,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def use(self, cwd: Path, environ: MutableMapping[str, str], version: str | None = None) -> bool:
        """Switch to *version*, or to the version resolved for *cwd*.

        Returns:
            True if the requested version is active afterwards.
        """
        try:
            resolution = self.resolver.resolve(cwd, version)
        except SwitcherError as exc:
            self.reporter.error(str(exc))
            return False

        self.reporter.info(describe_resolution(resolution))

        current = self.prober(environ)
        if current == resolution.version:
            self.reporter.info(f"Already using PHP {current}")
            return True

        return self._switch(resolution.version, environ)

    def auto_switch(self, cwd: Path, environ: MutableMapping[str, str]) -> bool:
        """Resolve for *cwd* and activate if the active version differs.

        Returns:
            True if the resolved version is active afterwards.
        """
        try:
            resolution = self.resolver.resolve(cwd)
        except NoVersionsAvailable:
            self.reporter.warning("No PHP versions found")
            return False
        except SwitcherError as exc:
            self.reporter.error(str(exc))
            return False

        pin = resolution.pin_file
        if pin is not None:
            self.reporter.info(f"Found version file: {pin.path} ({pin.version})")

        current = self.prober(environ)
        if current == resolution.version:
            if pin is not None:
                self.reporter.info(f"Already using PHP {current}")
            return True

        return self._switch(resolution.version, environ)

    def create_pin(self, directory: Path, version: str) -> Path | None:
        """Write a pin file for *version* in *directory*.

        Whitespace anywhere in *version* is removed before validation.

        Returns:
            The pin file path, or None if nothing was written.
        """
        cleaned = "".join(version.split())
        if not cleaned:
            self.reporter.error("Usage: pvs local <version>")
            self.reporter.info("Example: pvs local 8.2")
            return None

        try:
            parsed = Version.parse(cleaned)
        except InvalidVersionFormat as exc:
            self.reporter.error(str(exc))
            return None

        try:
            path = write_pin_file(directory, parsed, self.config.version_file)
        except OSError as exc:
            self.reporter.error(f"Cannot write {Path(directory) / self.config.version_file}: {exc}")
            return None

        self.reporter.success(f"Created version file: {path.name} ({parsed})")
        return path

    def status(self, cwd: Path, environ: MutableMapping[str, str]) -> StatusReport:
        """Collect the status report. Never raises a ``SwitcherError``."""
        report = StatusReport(config=self.config)
        report.current = self.prober(environ)
        report.link_target = self.activation.current_target()
        report.installed = list_installed(self.config.install_dir)

        try:
            default = self.resolver.default_version_or_newest()
        except SwitcherError as exc:
            report.default_error = str(exc)
        else:
            report.default = default.version if default else None

        try:
            report.pin_file = find_pin_file(cwd, self.config.version_file)
        except SwitcherError as exc:
            report.pin_error = str(exc)

        return report

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _switch(self, version: Version, environ: MutableMapping[str, str]) -> bool:
        try:
            self.activation.activate(version, environ)
        except VersionNotInstalled as exc:
            self.reporter.error(str(exc))
            self.reporter.info(
                f"Install it with: {install_hint(version, self.config.install_command)}"
            )
            return False
        except SwitcherError as exc:
            self.reporter.error(str(exc))
            return False

        self.reporter.success(f"Switched to PHP {version}")
        return True
