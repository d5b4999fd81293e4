"""
Recover the project name the generator chose from its human-oriented output.
"""

from __future__ import annotations

from ..errors import ProjectNameError

CD_HINT_PREFIX = "  cd "


def extract_project_name(output: str) -> str:
    """
    Return the folder named by the first `  cd <name>` hint line.

    create-vite ends with "Now run:" followed by an indented `cd` line; the
    remainder of that line, trimmed, is the folder it created.

    Raises:
        ProjectNameError: If no line carries the hint.
    """
    for line in output.splitlines():
        if line.startswith(CD_HINT_PREFIX):
            name = line[len(CD_HINT_PREFIX):].strip()
            if name:
                return name
    raise ProjectNameError("Failed to capture project name.")
