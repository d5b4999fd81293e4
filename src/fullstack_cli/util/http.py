"""
Helpers for reporting HTTP failures.
"""

from __future__ import annotations

import requests


def format_request_exception(exc: requests.RequestException) -> str:
    """
    Render a requests exception as a short single-line message.

    Includes the HTTP status and URL when a response is attached.
    """
    response = getattr(exc, "response", None)
    if response is not None:
        reason = getattr(response, "reason", "") or ""
        return f"HTTP {response.status_code} {reason} for {response.url}".replace("  ", " ").strip()
    return f"{type(exc).__name__}: {exc}"
