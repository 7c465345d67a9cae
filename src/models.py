"""
models.py
---------
Launch Library 2 response shapes. Every field is optional and unknown
fields are ignored; defaults are applied when rendering, not here.

Fields are validated one by one: a value of the wrong shape becomes None
instead of rejecting the launch (or the whole batch) it belongs to.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, WrapValidator

from src.config import NO_MISSION, UNKNOWN_LAUNCH, UNKNOWN_NET
from src.utils import safe_get

logger = logging.getLogger(__name__)


def _or_none(value: Any, handler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        logger.debug("Ignoring off-shape value %r", value)
        return None


def _text(value: Any, handler) -> Any:
    # numbers are shown as-is, anything else non-textual is dropped
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    return _or_none(value, handler)


def _launch(value: Any, handler) -> Any:
    if not isinstance(value, dict):
        logger.debug("Treating non-object launch %r as blank", value)
        value = {}
    return handler(value)


Text = Annotated[Optional[str], WrapValidator(_text)]


class _LL2Model(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RocketConfiguration(_LL2Model):
    name: Text = None
    full_name: Text = None


class Rocket(_LL2Model):
    configuration: Annotated[Optional[RocketConfiguration], WrapValidator(_or_none)] = None


class Mission(_LL2Model):
    description: Text = None


class Launch(_LL2Model):
    name: Text = None
    net: Text = None
    mission: Annotated[Optional[Mission], WrapValidator(_or_none)] = None
    rocket: Annotated[Optional[Rocket], WrapValidator(_or_none)] = None


class UpcomingLaunches(_LL2Model):
    # None when the field is absent or not a list; callers decide the fallback
    results: Optional[List[Annotated[Launch, WrapValidator(_launch)]]] = None


class LaunchSummary(BaseModel):
    """What a launch card shows, fallbacks already applied."""
    name: str
    net: str
    mission: str
    rocket: Optional[str] = None


def rocket_display_name(launch: Launch) -> Optional[str]:
    """full_name if present, else name, else None (empty strings count as absent)."""
    config = safe_get(launch, "rocket", "configuration")
    if config is None:
        return None
    return config.full_name or config.name or None


def summarize(launch: Launch) -> LaunchSummary:
    return LaunchSummary(
        name=launch.name or UNKNOWN_LAUNCH,
        net=launch.net or UNKNOWN_NET,
        mission=safe_get(launch, "mission", "description") or NO_MISSION,
        rocket=rocket_display_name(launch),
    )
