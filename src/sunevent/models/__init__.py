"""Domain models for sun event calculations."""

from sunevent.models.location import Coordinates
from sunevent.models.event import (
    Direction,
    EventParameters,
    SunEvent,
    ZENITH_CIVIL,
    ZENITH_OFFICIAL,
    event_parameters,
)

__all__ = [
    # Location
    "Coordinates",
    # Event
    "Direction",
    "EventParameters",
    "SunEvent",
    "ZENITH_CIVIL",
    "ZENITH_OFFICIAL",
    "event_parameters",
]
