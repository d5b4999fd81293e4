"""
Execute the step plan for a workflow, owning all state changes and the abort policy.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Protocol

from rich.console import Console

from ..api import fetch_compose_file
from ..commands import Action, CommandSpec, derive_command
from ..config import ScaffoldConfig, Workflow
from ..errors import FilesystemError, ScaffoldError, StepFailedError
from ..process import RunResult
from ..util import is_plain_component, write_bytes_file
from .payloads import StaticPayload
from .prompts import Prompter
from .state import StepStatus, WorkflowState
from .steps import Step, build_plan

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, command: CommandSpec, *, capture: bool = False) -> RunResult: ...

    def spawn(self, command: CommandSpec) -> RunResult: ...


class Orchestrator:
    """
    Runs a workflow's steps in order and stops at the first failure.

    Steps talk to the outside world only through the helpers on this class
    (run, launch, descend, ascend, write, fetch) so every failure is turned
    into a ScaffoldError carrying the step that raised it.

    Args:
        state: Run state; its package manager is already fixed.
        config: Non-interactive settings (launch mode, compose URL, ...).
        runner: Executes commands (Runner, or DryRunRunner for --dry-run).
        prompter: Source of yes/no and free-text answers.
        console: Where progress messages go.
        fetch: Downloads the compose payload.
        dry_run: Simulate directory changes, downloads and file writes.
    """

    def __init__(
        self,
        state: WorkflowState,
        *,
        config: ScaffoldConfig,
        runner: CommandRunner,
        prompter: Prompter,
        console: Optional[Console] = None,
        fetch: Callable[[str], bytes] = fetch_compose_file,
        dry_run: bool = False,
    ) -> None:
        self.state = state
        self.config = config
        self.runner = runner
        self.prompter = prompter
        self.console = console or Console()
        self.dry_run = dry_run
        self._fetch = fetch
        # Directories to return to, innermost last.
        self._dirs: List[Path] = []
        self._virtual_cwd = state.root
        self._step: Optional[Step] = None
        self._commands: List[CommandSpec] = []

    @property
    def cwd(self) -> Path:
        if self.dry_run:
            return self._virtual_cwd
        return Path.cwd()

    def execute(self, workflow: Workflow) -> WorkflowState:
        """
        Run every step that belongs to workflow.

        Raises:
            ScaffoldError: The first failure; nothing after it runs.
        """
        plan = build_plan(workflow)
        logger.info("Running %s workflow with %s (%d steps)", workflow.value, self.state.package_manager.value, len(plan))
        for step in plan:
            self._execute_step(step)
        return self.state

    def _execute_step(self, step: Step) -> None:
        if step.question:
            if not self.prompter.confirm(step.question.format(config=self.config)):
                self.state.record(step.name, StepStatus.SKIPPED)
                return
            self.state.accepted.add(step.name)

        self._step = step
        self._commands = []
        logger.debug("Starting step %s", step.name)
        try:
            message = step.run(self)
        except ScaffoldError as exc:
            self.state.record(step.name, StepStatus.FAILURE, str(exc))
            logger.debug("Step %s failed: %s", step.name, exc)
            raise
        finally:
            self._step = None
        if not message:
            message = "; ".join(str(command) for command in self._commands)
        self.state.record(step.name, StepStatus.SUCCESS, message)

    def _step_name(self) -> str:
        return self._step.name if self._step else "unknown"

    def _failure(self, result: RunResult) -> StepFailedError:
        label = self._step.label if self._step else "running a command"
        return StepFailedError(self._step_name(), f"Error {label}: {result.describe_failure()}", result.command)

    def command(self, action: Action, *args: str) -> CommandSpec:
        return derive_command(self.state.package_manager, action, *args)

    def run(self, command: CommandSpec, *, capture: bool = False) -> RunResult:
        """Run a command; a non-zero exit aborts the step."""
        self._commands.append(command)
        result = self.runner.run(command, capture=capture)
        if not result.ok:
            raise self._failure(result)
        return result

    def launch(self, command: CommandSpec) -> RunResult:
        """Start a command without waiting; only a failure to start aborts."""
        self._commands.append(command)
        result = self.runner.spawn(command)
        if not result.ok:
            raise self._failure(result)
        return result

    def make_directory(self, name: str) -> None:
        if self.dry_run:
            self.console.print(f"[dim]would create directory:[/] {name}", highlight=False)
            return
        try:
            Path(name).mkdir(exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Error creating directory {name}: {exc}") from exc

    def descend(self, name: str) -> None:
        """Enter a project folder, counting the descent."""
        if not is_plain_component(name):
            raise FilesystemError(f"Cannot change into {name!r}: expected a single folder name.")
        previous = self.cwd
        if self.dry_run:
            self.console.print(f"[dim]would change directory:[/] {name}", highlight=False)
            self._virtual_cwd = previous / name
        else:
            try:
                os.chdir(name)
            except OSError as exc:
                raise FilesystemError(f"Error changing to project directory: {exc}") from exc
        self._dirs.append(previous)
        self.state.directory_depth += 1
        logger.info("Entered %s (depth %d)", self.cwd, self.state.directory_depth)

    def ascend(self) -> None:
        """Return to the directory the latest descent started from."""
        if not self._dirs:
            raise FilesystemError("Cannot leave the directory the run started in.")
        previous = self._dirs[-1]
        if self.dry_run:
            self.console.print(f"[dim]would change directory:[/] {previous}", highlight=False)
            self._virtual_cwd = previous
        else:
            try:
                os.chdir(previous)
            except OSError as exc:
                raise FilesystemError(f"Error returning to parent directory: {exc}") from exc
        self._dirs.pop()
        self.state.directory_depth -= 1
        logger.info("Returned to %s (depth %d)", self.cwd, self.state.directory_depth)

    def write(self, payloads: Iterable[StaticPayload]) -> None:
        for payload in payloads:
            if self.dry_run:
                self.console.print(f"[dim]would write:[/] {payload.path}", highlight=False)
                continue
            try:
                write_bytes_file(payload.path, payload.content)
            except OSError as exc:
                raise FilesystemError(f"Error updating {payload.path}: {exc}") from exc

    def fetch(self, url: str) -> bytes:
        if self.dry_run:
            self.console.print(f"[dim]would download:[/] {url}", highlight=False)
            return b""
        return self._fetch(url)
