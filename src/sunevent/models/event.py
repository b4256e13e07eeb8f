"""Sun event definitions.

Each event is fixed by two parameters: whether the sun is rising or
setting, and the zenith angle (degrees from vertical) at which the event
is defined.

| Event   | Direction | Zenith          |
|---------|-----------|-----------------|
| sunrise | rising    | official (90.0) |
| sunset  | setting   | official (90.0) |
| dawn    | rising    | civil (83.0)    |
| dusk    | setting   | civil (83.0)    |
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

ZENITH_OFFICIAL = 90.0
ZENITH_CIVIL = 83.0


class Direction(str, Enum):
    """Which half of the diurnal cycle an event belongs to."""

    RISING = "rising"
    SETTING = "setting"


class SunEvent(str, Enum):
    """The four supported solar events."""

    SUNRISE = "sunrise"
    SUNSET = "sunset"
    DAWN = "dawn"  # Civil twilight start
    DUSK = "dusk"  # Civil twilight end

    @property
    def direction(self) -> Direction:
        if self in (SunEvent.SUNRISE, SunEvent.DAWN):
            return Direction.RISING
        return Direction.SETTING

    @property
    def rising(self) -> bool:
        return self.direction is Direction.RISING

    @property
    def is_twilight(self) -> bool:
        return self in (SunEvent.DAWN, SunEvent.DUSK)


class EventParameters(NamedTuple):
    """Inputs the calculator needs for one event."""

    direction: Direction
    zenith: float

    @property
    def rising(self) -> bool:
        return self.direction is Direction.RISING


def event_parameters(event: SunEvent | str) -> EventParameters:
    """Map an event to its direction and zenith angle.

    Args:
        event: Event or its name ("sunrise", "sunset", "dawn", "dusk")

    Returns:
        EventParameters for the event
    """
    event = SunEvent(event)
    zenith = ZENITH_CIVIL if event.is_twilight else ZENITH_OFFICIAL
    return EventParameters(direction=event.direction, zenith=zenith)
