"""Shell glue: environment changes as shell code, and the init snippets.

A child process cannot change its parent shell's environment, so commands
that activate a version print ``export`` lines on stdout for the shell to
``eval``. Messages go to stderr and never mix with them.
"""

from __future__ import annotations

import shlex
from typing import Mapping

LAST_CHECKED_DIR_VAR = "PVS_LAST_CHECKED_DIR"

SUPPORTED_SHELLS = ("zsh", "bash")


def render_exports(before: Mapping[str, str], after: Mapping[str, str]) -> str:
    """Return shell code turning *before* into *after*.

    Only changed variables are emitted: ``export`` for new or changed
    values, ``unset`` for removed ones.
    """
    lines: list[str] = []
    for name in sorted(set(before) | set(after)):
        if name not in after:
            lines.append(f"unset {name}")
        elif before.get(name) != after[name]:
            lines.append(f"export {name}={shlex.quote(after[name])}")
    return "\n".join(lines)


def render_assignment(name: str, value: str) -> str:
    """Plain (non-exported) shell variable assignment."""
    return f"{name}={shlex.quote(value)}"


_ZSH_INIT = """\
pvs() {
  case "$1" in
    use) eval "$(command pvs "$@")" ;;
    *) command pvs "$@" ;;
  esac
}

_pvs_chpwd_hook() {
  eval "$(command pvs hook --last-dir "${PVS_LAST_CHECKED_DIR:-}")"
}

if (( ! ${chpwd_functions[(I)_pvs_chpwd_hook]} )); then
  chpwd_functions+=(_pvs_chpwd_hook)
fi

_pvs_chpwd_hook
"""

_BASH_INIT = """\
pvs() {
  case "$1" in
    use) eval "$(command pvs "$@")" ;;
    *) command pvs "$@" ;;
  esac
}

_pvs_prompt_hook() {
  if [[ "$PWD" != "${PVS_LAST_CHECKED_DIR:-}" ]]; then
    eval "$(command pvs hook --last-dir "${PVS_LAST_CHECKED_DIR:-}")"
  fi
}

if [[ ";${PROMPT_COMMAND:-};" != *";_pvs_prompt_hook;"* ]]; then
  PROMPT_COMMAND="_pvs_prompt_hook${PROMPT_COMMAND:+;$PROMPT_COMMAND}"
fi
"""

_INIT_SNIPPETS = {"zsh": _ZSH_INIT, "bash": _BASH_INIT}


def init_snippet(shell: str) -> str:
    """Return the hook registration code for *shell*.

    Raises:
        ValueError: If *shell* is not supported.
    """
    try:
        return _INIT_SNIPPETS[shell]
    except KeyError:
        supported = ", ".join(SUPPORTED_SHELLS)
        raise ValueError(f"Shell '{shell}' not supported. Supported shells: {supported}") from None
