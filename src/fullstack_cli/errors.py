"""
Exception hierarchy shared by the CLI, configuration and workflow modules.

Every fatal condition is a ScaffoldError; the CLI catches it once, prints the
message and exits non-zero.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandSpec


class ScaffoldError(RuntimeError):
    """Base class for errors that abort a scaffolding run."""


class InvalidSelectionError(ScaffoldError):
    """Raised when free-text input does not name a supported choice."""


class ProjectNameError(ScaffoldError):
    """Raised when the generator output carries no `cd <name>` hint."""


class FilesystemError(ScaffoldError):
    """Raised when a directory change or file write fails."""


class FetchError(ScaffoldError):
    """Raised when a remote payload cannot be downloaded."""


class StepFailedError(ScaffoldError):
    """
    Raised when an external command exits non-zero or cannot be started.

    Attributes:
        step: Name of the pipeline step that issued the command.
        command: The command that failed, when one was run.
    """

    def __init__(self, step: str, message: str, command: Optional["CommandSpec"] = None) -> None:
        super().__init__(message)
        self.step = step
        self.command = command
