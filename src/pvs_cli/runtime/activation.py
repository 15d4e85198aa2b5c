"""Activation: point the managed ``php`` symlink at a version and put the
managed directory first on ``PATH``.

The managed directory (``~/.local/bin/pvs`` by default) belongs to this tool
alone and holds a single symlink. Nothing under the install directory is
ever modified.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping

from .catalog import binary_for
from .exceptions import ActivationVerificationFailed, LinkCreationFailed, VersionNotInstalled
from .probe import COMMAND_NAME, VersionProber
from .version import Version

logger = logging.getLogger(__name__)


def _same_dir(entry: str, directory: str) -> bool:
    return bool(entry) and os.path.normpath(entry) == os.path.normpath(directory)


def rewrite_search_path(path_value: str, managed_dir: Path) -> str:
    """Return *path_value* with *managed_dir* as its only first entry.

    Every existing occurrence of *managed_dir* is dropped, then it is
    prepended. The other entries keep their relative order; empty entries
    are kept as they are.
    """
    managed = str(managed_dir)
    entries = path_value.split(os.pathsep) if path_value else []
    kept = [entry for entry in entries if not _same_dir(entry, managed)]
    return os.pathsep.join([managed, *kept])


def replace_symlink(link: Path, target: Path) -> None:
    """Atomically (re)point *link* at *target*.

    A temporary link is created next to *link* and renamed over it, so
    readers see either the old or the new target, never a missing link.

    Raises:
        LinkCreationFailed: If the filesystem refuses either step.
    """
    tmp_link = link.with_name(f".{link.name}.{os.getpid()}.tmp")
    try:
        if tmp_link.is_symlink() or tmp_link.exists():
            tmp_link.unlink()
        os.symlink(target, tmp_link)
        os.replace(tmp_link, link)
    except OSError as exc:
        try:
            tmp_link.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temporary link %s", tmp_link)
        raise LinkCreationFailed(link, target, exc.strerror or str(exc)) from exc


class ActivationManager:
    """Owns the managed directory and its ``php`` symlink."""

    def __init__(self, install_dir: Path, managed_dir: Path, prober: VersionProber):
        """Initialize the manager.

        Args:
            install_dir: Directory holding the installed PHP binaries
            managed_dir: Directory this tool owns (``PVS_BIN_DIR``)
            prober: Callable reporting the version an environment resolves to
        """
        self.install_dir = Path(install_dir)
        self.managed_dir = Path(managed_dir)
        self.prober = prober

    @property
    def link_path(self) -> Path:
        return self.managed_dir / COMMAND_NAME

    def current_target(self) -> Path | None:
        """Return where the managed link points, or None if there is no link."""
        if not self.link_path.is_symlink():
            return None
        return Path(os.readlink(self.link_path))

    def activate(self, version: Version, environ: MutableMapping[str, str]) -> Path:
        """Make *version* the ``php`` that *environ*'s PATH resolves to.

        Args:
            version: Version to activate
            environ: Environment to update in place (its ``PATH``)

        Returns:
            The binary the managed link now points to.

        Raises:
            VersionNotInstalled: If no binary for *version* exists. The link
                and PATH are left untouched.
            LinkCreationFailed: If the managed link cannot be replaced.
            ActivationVerificationFailed: If the probe reports another version
                afterwards.
        """
        target = binary_for(self.install_dir, version)
        if target is None:
            raise VersionNotInstalled(version, self.install_dir)

        try:
            self.managed_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LinkCreationFailed(self.link_path, target, exc.strerror or str(exc)) from exc

        replace_symlink(self.link_path, target)
        logger.debug("Linked %s -> %s", self.link_path, target)

        environ["PATH"] = rewrite_search_path(environ.get("PATH", ""), self.managed_dir)

        actual = self.prober(environ)
        if actual != version:
            raise ActivationVerificationFailed(version, actual)

        return target
