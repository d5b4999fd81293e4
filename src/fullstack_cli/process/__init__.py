"""
External process execution (interactive runs, output capture, terminal launches).
"""

from .launch import resolve_launch_mode, terminal_command
from .runner import DryRunRunner, Runner, RunResult, TeeWriter

__all__ = ["resolve_launch_mode", "terminal_command", "DryRunRunner", "Runner", "RunResult", "TeeWriter"]
