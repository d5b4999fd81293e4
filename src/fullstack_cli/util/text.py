"""
Text-related helpers.
"""

from __future__ import annotations

from typing import Optional

YES_ANSWERS = frozenset({"y", "yes"})


def normalize_choice(value: Optional[str]) -> str:
    """
    Trim surrounding whitespace (including the trailing newline) and case-fold.
    """
    return (value or "").strip().lower()


def is_yes(value: Optional[str]) -> bool:
    """Return True when the answer is an affirmative y/yes."""
    return normalize_choice(value) in YES_ANSWERS


def is_plain_component(value: Optional[str]) -> bool:
    """Return True for a single folder name: no separators, not "." or ".."."""
    if not value or value in {".", ".."}:
        return False
    return "/" not in value and "\\" not in value
