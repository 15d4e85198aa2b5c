"""CLI helpers exposed for other modules."""

from .ui import LogLevel, Reporter, render_status, stderr_console

__all__ = ["LogLevel", "Reporter", "render_status", "stderr_console"]
