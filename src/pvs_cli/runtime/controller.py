"""Directory-change handling for the shell hook.

The session state (the last directory checked) is passed in and handed back
rather than kept in a global; the shell carries it between invocations in
the ``PVS_LAST_CHECKED_DIR`` shell variable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, MutableMapping

if TYPE_CHECKING:
    from pvs_cli.switcher import VersionSwitcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    last_checked_directory: Path | None = None


class DirectoryChangeController:
    """Trigger resolution and activation when the working directory changes."""

    def __init__(self, switcher: VersionSwitcher, auto_switch: bool = True):
        self.switcher = switcher
        self.auto_switch = auto_switch

    def on_directory_change(
        self,
        state: SessionState,
        cwd: Path,
        environ: MutableMapping[str, str],
    ) -> SessionState:
        """Handle one directory-change event.

        Re-entering the directory that was checked last is a no-op, as is
        any event while auto-switching is disabled.

        Returns:
            The state to pass to the next event.
        """
        if not self.auto_switch:
            return state

        cwd = Path(cwd)
        if cwd == state.last_checked_directory:
            logger.debug("Still in %s, nothing to do", cwd)
            return state

        new_state = replace(state, last_checked_directory=cwd)
        self.switcher.auto_switch(cwd, environ)
        return new_state
