"""
Build the OS-specific command that opens a new terminal window running a dev server.
"""

from __future__ import annotations

import shlex
import sys
from pathlib import Path
from typing import Optional

from ..commands import CommandSpec


def resolve_launch_mode(mode: str, platform: Optional[str] = None) -> str:
    """
    Turn "auto" into a concrete mode: a new window on macOS/Windows, foreground elsewhere.
    """
    if mode != "auto":
        return mode
    platform = platform or sys.platform
    if platform == "darwin" or platform.startswith("win"):
        return "terminal"
    return "foreground"


def _applescript_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def terminal_command(
    server: CommandSpec,
    cwd: Path,
    *,
    terminal: str = "x-terminal-emulator",
    platform: Optional[str] = None,
) -> CommandSpec:
    """
    Wrap a server command so a new terminal window runs it from cwd.

    Args:
        server: The dev-server command (e.g. `npm run dev`).
        cwd: Directory the server must start in.
        terminal: Emulator executable used on Linux/BSD.
        platform: Override for sys.platform.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        script = _applescript_string(f"cd {shlex.quote(str(cwd))} && {server}")
        return CommandSpec("osascript", ("-e", f'tell app "Terminal" to do script "{script}"'))
    if platform.startswith("win"):
        return CommandSpec("cmd", ("/c", "start", "cmd", "/k", f'cd /d "{cwd}" && {server}'))
    script = f"cd {shlex.quote(str(cwd))} && {server}; exec \"${{SHELL:-sh}}\""
    return CommandSpec(terminal, ("-e", "sh", "-c", script))
