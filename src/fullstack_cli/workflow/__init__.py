"""
The step pipeline and the orchestrator that runs it.
"""

from .orchestrator import Orchestrator
from .payloads import StaticPayload
from .project_name import extract_project_name
from .prompts import Prompter
from .state import StepOutcome, StepStatus, WorkflowState
from .steps import PIPELINE, Step, build_plan

__all__ = [
    "Orchestrator",
    "StaticPayload",
    "extract_project_name",
    "Prompter",
    "StepOutcome",
    "StepStatus",
    "WorkflowState",
    "PIPELINE",
    "Step",
    "build_plan",
]
