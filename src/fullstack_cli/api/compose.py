"""
Download the docker compose file used to run the backend database.
"""

from __future__ import annotations

import logging

import requests

from ..errors import FetchError
from ..util import format_request_exception

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 30


def fetch_compose_file(url: str, *, timeout: int = FETCH_TIMEOUT_SECONDS) -> bytes:
    """
    Fetch the compose YAML with a single unauthenticated GET.

    Args:
        url: Location of the compose file.
        timeout: Seconds before the request is abandoned.

    Returns:
        The response body, unmodified.

    Raises:
        FetchError: On any transport error or non-2xx response. There are no retries.
    """
    logger.info("Fetching compose file from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Unable to download compose file: {format_request_exception(exc)}") from exc
    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.content
