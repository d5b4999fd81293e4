"""
Line-oriented questions asked on the terminal.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from ..util import is_yes


class Prompter:
    """Reads one full line per question; end of input counts as an empty answer."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def ask(self, prompt: str) -> str:
        try:
            answer = self.console.input(f"{prompt} ")
        except EOFError:
            answer = ""
        return answer.strip()

    def confirm(self, question: str) -> bool:
        """Only y/yes (any case) is an agreement."""
        return is_yes(self.ask(f"{question} (y/n):"))
