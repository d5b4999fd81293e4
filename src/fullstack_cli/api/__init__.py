"""
Network clients.
"""

from .compose import fetch_compose_file

__all__ = ["fetch_compose_file"]
