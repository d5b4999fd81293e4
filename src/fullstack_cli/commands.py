"""
Deterministic mapping from (package manager, action, arguments) to a concrete command.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .config import PackageManager


class Action(str, Enum):
    SCAFFOLD = "scaffold"
    INSTALL = "install"
    ADD_DEV = "add-dev"
    ADD = "add"
    EXEC = "exec"
    INIT = "init"
    RUN_SCRIPT = "run-script"


@dataclass(frozen=True)
class CommandSpec:
    """
    An external program plus its ordered arguments.

    Attributes:
        program: Executable name looked up on PATH.
        args: Arguments passed after the program name.
    """
    program: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)


# Only the binary name and flag spelling differ between the two package managers.
_PREFIXES: Dict[PackageManager, Dict[Action, Tuple[str, ...]]] = {
    PackageManager.NPM: {
        Action.SCAFFOLD: ("npm", "create", "vite@latest"),
        Action.INSTALL: ("npm", "install"),
        Action.ADD_DEV: ("npm", "install", "-D"),
        Action.ADD: ("npm", "install"),
        Action.EXEC: ("npx",),
        Action.INIT: ("npm", "init", "-y"),
        Action.RUN_SCRIPT: ("npm", "run"),
    },
    PackageManager.BUN: {
        Action.SCAFFOLD: ("bun", "create", "vite"),
        Action.INSTALL: ("bun", "install"),
        Action.ADD_DEV: ("bun", "add", "-D"),
        Action.ADD: ("bun", "add"),
        Action.EXEC: ("bunx",),
        Action.INIT: ("bun", "init", "-y"),
        Action.RUN_SCRIPT: ("bun", "run"),
    },
}

_TAKES_NO_ARGS = {Action.INSTALL, Action.INIT}
_NEEDS_ARGS = {Action.ADD_DEV, Action.ADD, Action.EXEC, Action.RUN_SCRIPT}


def derive_command(package_manager: PackageManager, action: Action, *args: str) -> CommandSpec:
    """
    Build the command for an abstract action.

    Args:
        package_manager: The run's package manager.
        action: What to do (install, add a dependency, run a sub-tool...).
        *args: Packages, tool arguments or the project name, appended in order.

    Returns:
        A CommandSpec that depends only on the inputs.

    Raises:
        ValueError: If the action is given arguments it does not accept, or lacks
            arguments it requires.
    """
    if action in _TAKES_NO_ARGS and args:
        raise ValueError(f"{action.value} does not take arguments")
    if action in _NEEDS_ARGS and not args:
        raise ValueError(f"{action.value} requires at least one argument")
    prefix = _PREFIXES[PackageManager(package_manager)][action]
    return CommandSpec(program=prefix[0], args=(*prefix[1:], *args))
