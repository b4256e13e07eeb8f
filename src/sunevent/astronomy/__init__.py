"""Sunrise equation: sun event times and the degree trigonometry behind them."""

from sunevent.astronomy.calculator import (
    SunEventCalculator,
    SunEventTimes,
    compute_event_time,
    dawn,
    dusk,
    event_time,
    get_sun_event_times,
    local_utc_offset_hours,
    resolve_reference,
    sunrise,
    sunset,
)
from sunevent.astronomy.errors import (
    SunEventError,
    SunNeverRises,
    SunNeverRisesError,
    SunNeverSets,
    SunNeverSetsError,
)

__all__ = [
    "SunEventCalculator",
    "SunEventTimes",
    "compute_event_time",
    "dawn",
    "dusk",
    "event_time",
    "get_sun_event_times",
    "local_utc_offset_hours",
    "resolve_reference",
    "sunrise",
    "sunset",
    "SunEventError",
    "SunNeverRises",
    "SunNeverRisesError",
    "SunNeverSets",
    "SunNeverSetsError",
]
