"""
populate_dropdown.py
--------------------
Fills the rocket <select> with the distinct rocket names found in the
next batch of upcoming launches. Runs once when the page is created.
"""

from __future__ import annotations

import logging
from typing import List

from src.dom import SelectControl
from src.fetch_upcoming import Fetcher, LaunchFetchError, fetch_upcoming
from src.models import UpcomingLaunches, rocket_display_name

logger = logging.getLogger(__name__)


def collect_rocket_names(upcoming: UpcomingLaunches) -> List[str]:
    """Distinct derivable rocket names, sorted by code point."""
    names = set()
    for launch in upcoming.results or []:
        name = rocket_display_name(launch)
        if name:
            names.add(name)
    return sorted(names)


def populate_rocket_dropdown(select: SelectControl, fetch: Fetcher = fetch_upcoming) -> List[str]:
    try:
        upcoming = fetch(None)
    except LaunchFetchError:
        logger.exception("Error populating rocket dropdown")
        return []

    names = collect_rocket_names(upcoming)
    for name in names:
        select.add_option(name, name)
    logger.info("Rocket dropdown populated with %d names", len(names))
    return names
