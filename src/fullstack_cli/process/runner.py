"""
Run external programs attached to the user's terminal, optionally keeping a copy of stdout.
"""

from __future__ import annotations

import io
import logging
import subprocess
import sys
from dataclasses import dataclass
from typing import BinaryIO, List, Optional, cast

from rich.console import Console

from ..commands import CommandSpec

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


@dataclass
class RunResult:
    """
    Outcome of one external command.

    Attributes:
        command: The command that was run.
        returncode: Exit status; -1 when the program could not be started.
        output: Captured stdout (empty unless capture was requested).
        error: Launch error description, if the program never ran.
    """
    command: CommandSpec
    returncode: int
    output: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None

    def describe_failure(self) -> str:
        if self.error:
            return self.error
        return f"`{self.command}` exited with status {self.returncode}"


class TeeWriter:
    """Forward every write to each of the underlying binary sinks, in order."""

    def __init__(self, *sinks: BinaryIO) -> None:
        self._sinks = sinks

    def write(self, data: bytes) -> int:
        for sink in self._sinks:
            sink.write(data)
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()
        return len(data)


def _terminal_stdout() -> BinaryIO:
    return getattr(sys.stdout, "buffer", sys.stdout)


class Runner:
    """
    Executes commands with stdin/stderr inherited so children can prompt the user.

    Never raises for a failing child: callers inspect RunResult.ok and decide.
    """

    def __init__(self, stdout: Optional[BinaryIO] = None) -> None:
        self._stdout = stdout

    def run(self, command: CommandSpec, *, capture: bool = False) -> RunResult:
        """
        Run a command to completion.

        Args:
            command: Program and arguments.
            capture: Also keep a copy of stdout while streaming it live.

        Returns:
            RunResult with the exit status and, when capturing, the stdout text.
        """
        logger.info("Running %s", command)
        if not capture and self._stdout is None:
            try:
                completed = subprocess.run(command.argv, check=False)
            except OSError as exc:
                logger.debug("Failed to start %s (%s)", command, exc)
                return RunResult(command=command, returncode=-1, error=f"Unable to run `{command}`: {exc}")
            return RunResult(command=command, returncode=completed.returncode)

        try:
            process = subprocess.Popen(command.argv, stdout=subprocess.PIPE, bufsize=0)
        except OSError as exc:
            logger.debug("Failed to start %s (%s)", command, exc)
            return RunResult(command=command, returncode=-1, error=f"Unable to run `{command}`: {exc}")

        buffer = io.BytesIO()
        sinks: List[BinaryIO] = [self._stdout or _terminal_stdout()]
        if capture:
            sinks.append(buffer)
        writer = TeeWriter(*sinks)
        stdout = cast(BinaryIO, process.stdout)
        with process:
            # read() on an unbuffered pipe returns as soon as any bytes arrive,
            # so prompts without a trailing newline still reach the terminal.
            for chunk in iter(lambda: stdout.read(CHUNK_SIZE), b""):
                writer.write(chunk)
            returncode = process.wait()
        output = buffer.getvalue().decode("utf-8", errors="replace")
        logger.debug("%s exited with %s", command, returncode)
        return RunResult(command=command, returncode=returncode, output=output)

    def spawn(self, command: CommandSpec) -> RunResult:
        """
        Start a command without waiting for it; only a failure to launch is reported.
        """
        logger.info("Spawning %s", command)
        try:
            subprocess.Popen(
                command.argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.debug("Failed to spawn %s (%s)", command, exc)
            return RunResult(command=command, returncode=-1, error=f"Unable to run `{command}`: {exc}")
        return RunResult(command=command, returncode=0)


class DryRunRunner:
    """
    Prints commands instead of executing them.

    Captured output is always empty, so generator name scraping cannot succeed.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self.commands: List[CommandSpec] = []

    def _record(self, command: CommandSpec) -> RunResult:
        self.commands.append(command)
        self.console.print(f"[dim]would run:[/] {command}", highlight=False)
        return RunResult(command=command, returncode=0)

    def run(self, command: CommandSpec, *, capture: bool = False) -> RunResult:
        return self._record(command)

    def spawn(self, command: CommandSpec) -> RunResult:
        return self._record(command)
