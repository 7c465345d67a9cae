"""
fetch_upcoming.py
-----------------
Queries the Launch Library 2 upcoming-launches endpoint, optionally
filtered by a free-text search term, and parses the body into models.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from src.config import FETCH_TIMEOUT, UPCOMING_URL
from src.models import UpcomingLaunches

logger = logging.getLogger(__name__)

Fetcher = Callable[[Optional[str]], UpcomingLaunches]

# Characters JavaScript's encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


class LaunchFetchError(Exception):
    """Request rejected, body not JSON, or body shaped unexpectedly."""


def build_upcoming_url(search: Optional[str] = None, base_url: str = UPCOMING_URL) -> str:
    url = base_url
    if search:
        url += f"&search={quote(search, safe=_URI_COMPONENT_SAFE)}"
    return url


def parse_upcoming(data: Any) -> UpcomingLaunches:
    if not isinstance(data, dict):
        raise LaunchFetchError(f"expected a JSON object, got {type(data).__name__}")
    results = data.get("results")
    if not isinstance(results, list):
        results = None
    try:
        return UpcomingLaunches(results=results)
    except ValidationError as e:
        raise LaunchFetchError(f"unexpected launch shape: {e.error_count()} error(s)") from e


def fetch_upcoming(
    search: Optional[str] = None,
    session: Any = None,
    base_url: str = UPCOMING_URL,
    timeout: float = FETCH_TIMEOUT,
) -> UpcomingLaunches:
    """One GET against the upcoming endpoint. No retries."""
    url = build_upcoming_url(search, base_url)
    http = session if session is not None else requests
    logger.info("Fetching %s", url)
    try:
        resp = http.get(url, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except ValueError as e:
        # requests.JSONDecodeError is a ValueError too
        raise LaunchFetchError(f"response from {url} is not valid JSON") from e
    except requests.RequestException as e:
        raise LaunchFetchError(f"request failed for {url}: {e}") from e

    parsed = parse_upcoming(data)
    logger.info("Received %d launches", len(parsed.results or []))
    return parsed
