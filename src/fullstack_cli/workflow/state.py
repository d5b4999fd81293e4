"""
Mutable state threaded through a single scaffolding run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Set

from ..config import PackageManager


class StepStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass
class StepOutcome:
    step: str
    status: StepStatus
    message: str = ""


@dataclass
class WorkflowState:
    """
    Everything the pipeline learns or changes while it runs.

    Attributes:
        package_manager: Chosen once; assigning it again raises AttributeError.
        project_name: Frontend folder name, typed by the user or scraped from the generator.
        directory_depth: Descents into project folders not yet matched by an ascent.
        root: Directory the run started from.
        outcomes: Ordered record of every step that was reached.
        accepted: Optional steps the user said yes to.
    """
    package_manager: PackageManager
    project_name: str = ""
    directory_depth: int = 0
    root: Path = field(default_factory=Path.cwd)
    outcomes: List[StepOutcome] = field(default_factory=list)
    accepted: Set[str] = field(default_factory=set)

    def __setattr__(self, name: str, value) -> None:
        if name == "package_manager" and "package_manager" in self.__dict__:
            raise AttributeError("package_manager cannot change once the run has started")
        super().__setattr__(name, value)

    def record(self, step: str, status: StepStatus, message: str = "") -> StepOutcome:
        outcome = StepOutcome(step=step, status=status, message=message)
        self.outcomes.append(outcome)
        return outcome

    @property
    def failed(self) -> bool:
        return any(outcome.status is StepStatus.FAILURE for outcome in self.outcomes)

    def summary_rows(self) -> Iterable[tuple[str, str, str]]:
        for outcome in self.outcomes:
            yield (outcome.step, outcome.status.value, outcome.message)
