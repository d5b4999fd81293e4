from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional

import pytest
from rich.console import Console
from typer.testing import CliRunner

from fullstack_cli.commands import CommandSpec
from fullstack_cli.config import PackageManager, ScaffoldConfig
from fullstack_cli.process import RunResult
from fullstack_cli.util import is_yes
from fullstack_cli.workflow import Orchestrator, WorkflowState


class FakeRunner:
    """
    Records commands instead of running them.

    A `create` command makes the project folder the real generator would, so
    later directory changes succeed. Commands whose string form is in `fail_on`
    exit with status 1.
    """

    def __init__(self, *, fail_on: Iterable[str] = (), generated_name: str = "my-app") -> None:
        self.commands: List[CommandSpec] = []
        self.spawned: List[CommandSpec] = []
        self.captures: List[bool] = []
        self.fail_on = set(fail_on)
        self.generated_name = generated_name

    @property
    def command_lines(self) -> List[str]:
        return [str(command) for command in self.commands]

    def run(self, command: CommandSpec, *, capture: bool = False) -> RunResult:
        self.commands.append(command)
        self.captures.append(capture)
        if str(command) in self.fail_on:
            return RunResult(command=command, returncode=1)
        output = ""
        if command.args[:1] == ("create",):
            explicit = command.args[2:]
            name = explicit[0] if explicit else self.generated_name
            Path(name).mkdir()
            output = f"\nScaffolding project in ./{name}...\n\nDone. Now run:\n\n  cd {name}\n  npm install\n  npm run dev\n"
        return RunResult(command=command, returncode=0, output=output if capture else "")

    def spawn(self, command: CommandSpec) -> RunResult:
        self.spawned.append(command)
        if str(command) in self.fail_on:
            return RunResult(command=command, returncode=-1, error="spawn failed")
        return RunResult(command=command, returncode=0)


class ScriptedPrompter:
    """Answers questions from a list; running out behaves like end of input."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.questions: List[str] = []

    def ask(self, prompt: str) -> str:
        self.questions.append(prompt)
        if not self.answers:
            return ""
        return self.answers.pop(0).strip()

    def confirm(self, question: str) -> bool:
        return is_yes(self.ask(question))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from tmp_path; monkeypatch restores the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def quiet_console() -> Console:
    return Console(quiet=True)


@pytest.fixture
def make_orchestrator(workdir: Path, quiet_console: Console) -> Callable[..., tuple]:
    def _make(
        package_manager: PackageManager,
        answers: Iterable[str],
        *,
        config: Optional[ScaffoldConfig] = None,
        fake: Optional[FakeRunner] = None,
        fetch: Optional[Callable[[str], bytes]] = None,
        dry_run: bool = False,
    ):
        fake = fake or FakeRunner()
        prompter = ScriptedPrompter(answers)
        state = WorkflowState(package_manager=package_manager, root=workdir)
        kwargs = {}
        if fetch is not None:
            kwargs["fetch"] = fetch
        orchestrator = Orchestrator(
            state,
            config=config or ScaffoldConfig(launch_mode="foreground"),
            runner=fake,
            prompter=prompter,
            console=quiet_console,
            dry_run=dry_run,
            **kwargs,
        )
        return orchestrator, fake, prompter

    return _make


@pytest.fixture
def fake_runner_cls() -> type:
    return FakeRunner
