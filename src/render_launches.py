"""
render_launches.py
------------------
Re-queries upcoming launches for the rocket currently selected and
rebuilds the launch cards in the results container.

Overlapping renders: each call takes a ticket from the container before
fetching. A response whose ticket has been superseded is dropped, so the
container always ends up showing the most recently issued request.
"""

from __future__ import annotations

import enum
import logging
from typing import List

from src.config import FETCH_FAILED_MESSAGE, NO_RESULTS_MESSAGE
from src.dom import Element, ResultsContainer, SelectControl
from src.fetch_upcoming import Fetcher, LaunchFetchError, fetch_upcoming
from src.models import LaunchSummary, summarize

logger = logging.getLogger(__name__)

CARD_STYLE = {"border": "1px solid #ccc", "margin-bottom": "10px", "padding": "10px"}
ERROR_STYLE = {"color": "red"}


class RenderOutcome(enum.Enum):
    CARDS = "cards"
    EMPTY = "empty"
    ERROR = "error"
    SUPERSEDED = "superseded"


def build_card(summary: LaunchSummary) -> Element:
    card = Element("div", style=CARD_STYLE, **{"class": "launch-card"})
    card.append_child(Element("h2", summary.name))
    card.append_child(Element("p", f"Launch Time (NET): {summary.net}"))
    card.append_child(Element("p", f"Mission: {summary.mission}"))
    if summary.rocket:
        card.append_child(Element("p", f"Rocket: {summary.rocket}"))
    return card


def _apply(container: ResultsContainer, ticket: int, children: List[Element]) -> bool:
    with container.lock:
        if not container.is_current(ticket):
            logger.debug("Dropping superseded render #%d", ticket)
            return False
        container.replace_children(children)
        return True


def render_filtered_launches(
    select: SelectControl,
    container: ResultsContainer,
    fetch: Fetcher = fetch_upcoming,
) -> RenderOutcome:
    ticket = container.next_ticket()
    _apply(container, ticket, [])

    selected = select.value.strip()
    try:
        upcoming = fetch(selected or None)
    except LaunchFetchError:
        logger.exception("Error fetching filtered launches")
        error = Element("p", FETCH_FAILED_MESSAGE, style=ERROR_STYLE, **{"class": "error"})
        if not _apply(container, ticket, [error]):
            return RenderOutcome.SUPERSEDED
        return RenderOutcome.ERROR

    launches = upcoming.results
    if not launches:
        if not _apply(container, ticket, [Element("p", NO_RESULTS_MESSAGE)]):
            return RenderOutcome.SUPERSEDED
        return RenderOutcome.EMPTY

    cards = [build_card(summarize(launch)) for launch in launches]
    if not _apply(container, ticket, cards):
        return RenderOutcome.SUPERSEDED
    logger.info("Rendered %d launch cards (rocket=%r)", len(cards), selected)
    return RenderOutcome.CARDS
