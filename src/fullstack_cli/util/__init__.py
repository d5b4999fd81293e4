"""
Shared utility helpers for filesystem writes, text normalisation and HTTP errors.
"""

from .filesystem import write_bytes_file
from .http import format_request_exception
from .text import is_plain_component, is_yes, normalize_choice

__all__ = [
    "write_bytes_file",
    "format_request_exception",
    "is_plain_component",
    "is_yes",
    "normalize_choice",
]
