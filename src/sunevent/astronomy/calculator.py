"""Sunrise, sunset, dawn and dusk using the sunrise equation.

This module implements the Almanac for Computers approximation of the
sun's position (mean anomaly, true longitude, right ascension and
declination) to find the local clock time at which the sun crosses a
given zenith angle:

- Sunrise/sunset: official zenith (90°)
- Dawn/dusk: civil zenith (83°)

Times are computed for the calendar date of a reference instant and
expressed in the UTC offset in effect at that instant. The offset is
applied uniformly, so on a daylight-saving transition day every event
uses the offset of the reference instant.

Reference:
    https://github.com/BigZaphod/CLLocation-SunriseSunset
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from sunevent.astronomy.errors import (
    SunEventError,
    SunNeverRisesError,
    SunNeverSetsError,
)
from sunevent.astronomy.trig import (
    degree_acos,
    degree_asin,
    degree_atan,
    degree_cos,
    degree_sin,
    degree_tan,
    normalize_range,
)
from sunevent.models.event import SunEvent, event_parameters
from sunevent.models.location import Coordinates

logger = logging.getLogger(__name__)


def resolve_reference(reference: datetime | None = None) -> datetime:
    """Return an aware datetime for the reference instant.

    Args:
        reference: Reference instant. None means now; a naive datetime is
            taken to be in the process's local time zone.

    Returns:
        Timezone-aware datetime
    """
    if reference is None:
        return datetime.now().astimezone()
    if reference.tzinfo is None or reference.utcoffset() is None:
        return reference.astimezone()
    return reference


def local_utc_offset_hours(reference: datetime | None = None) -> float:
    """UTC offset in effect at the reference instant, in hours."""
    offset = resolve_reference(reference).utcoffset()
    return offset.total_seconds() / 3600.0


def compute_event_time(
    rising: bool,
    latitude: float,
    longitude: float,
    zenith: float,
    reference: datetime | None = None,
) -> datetime:
    """Calculate when the sun crosses a zenith angle on the reference date.

    Args:
        rising: True for a morning (rising) event, False for an evening one
        latitude: Observer latitude in degrees (north positive)
        longitude: Observer longitude in degrees (east positive)
        zenith: Zenith angle in degrees that defines the event
        reference: Instant supplying the date and UTC offset (default: now)

    Returns:
        Local time of the event on the reference date, with a fixed-offset
        tzinfo equal to the reference's offset

    Raises:
        SunNeverRisesError: The sun stays below the zenith all day
        SunNeverSetsError: The sun stays above the zenith all day
    """
    reference = resolve_reference(reference)
    utc_offset = reference.utcoffset()
    local_offset = utc_offset.total_seconds() / 3600.0

    # 1. Day of the year
    day_of_year = reference.timetuple().tm_yday

    # 2. Longitude as hours, and an approximate time of the event
    lng_hour = longitude / 15.0
    if rising:
        t = day_of_year + ((6 - lng_hour) / 24)
    else:
        t = day_of_year + ((18 - lng_hour) / 24)

    # 3. Sun's mean anomaly
    mean_anomaly = (0.9856 * t) - 3.289

    # 4. Sun's true longitude
    true_longitude = (
        mean_anomaly
        + (1.916 * degree_sin(mean_anomaly))
        + (0.020 * degree_sin(2 * mean_anomaly))
        + 282.634
    )
    true_longitude = normalize_range(true_longitude, 360.0)

    # 5. Right ascension, moved into the same quadrant as L, in hours
    right_ascension = degree_atan(0.91764 * degree_tan(true_longitude))
    right_ascension = normalize_range(right_ascension, 360.0)
    l_quadrant = math.floor(true_longitude / 90.0) * 90.0
    ra_quadrant = math.floor(right_ascension / 90.0) * 90.0
    right_ascension = (right_ascension + (l_quadrant - ra_quadrant)) / 15.0

    # 6. Declination
    sin_dec = 0.39782 * degree_sin(true_longitude)
    cos_dec = degree_cos(degree_asin(sin_dec))

    # 7. Local hour angle
    cos_h = (degree_cos(zenith) - (sin_dec * degree_sin(latitude))) / (
        cos_dec * degree_cos(latitude)
    )
    if cos_h > 1.0:
        logger.debug("cosH=%.4f at (%s, %s): sun never rises", cos_h, latitude, longitude)
        raise SunNeverRisesError(latitude, longitude, reference.date(), zenith, cos_h)
    if cos_h < -1.0:
        logger.debug("cosH=%.4f at (%s, %s): sun never sets", cos_h, latitude, longitude)
        raise SunNeverSetsError(latitude, longitude, reference.date(), zenith, cos_h)

    if rising:
        hour_angle = 360 - degree_acos(cos_h)
    else:
        hour_angle = degree_acos(cos_h)
    hour_angle = hour_angle / 15.0

    # 8. Local mean time of the event
    local_mean_time = hour_angle + right_ascension - (0.06571 * t) - 6.622

    # 9. Back to UTC, then into local civil time
    ut = normalize_range(local_mean_time - lng_hour, 24.0)
    local_t = normalize_range(ut + local_offset, 24.0)

    logger.debug(
        "N=%s t=%.5f M=%.4f L=%.4f RA=%.5fh cosH=%.5f H=%.5fh T=%.5f UT=%.5f local=%.5f",
        day_of_year,
        t,
        mean_anomaly,
        true_longitude,
        right_ascension,
        cos_h,
        hour_angle,
        local_mean_time,
        ut,
        local_t,
    )

    # 10. Split into clock fields on the reference date
    hour = math.floor(local_t)
    minute = min(math.floor((local_t - hour) * 60.0), 59)
    second = min(math.floor(((local_t - hour) * 60.0 - minute) * 60.0), 59)

    name = reference.tzname()
    tz = timezone(utc_offset, name) if name else timezone(utc_offset)
    return datetime(
        reference.year,
        reference.month,
        reference.day,
        hour,
        minute,
        second,
        tzinfo=tz,
    )


def event_time(
    event: SunEvent | str,
    latitude: float,
    longitude: float,
    reference: datetime | None = None,
) -> datetime:
    """Calculate the local time of a named sun event.

    Args:
        event: SunEvent or its name
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        reference: Instant supplying the date and UTC offset (default: now)

    Raises:
        SunNeverRisesError: The sun stays below the event zenith all day
        SunNeverSetsError: The sun stays above the event zenith all day
    """
    params = event_parameters(event)
    return compute_event_time(params.rising, latitude, longitude, params.zenith, reference)


def sunrise(latitude: float, longitude: float, reference: datetime | None = None) -> datetime:
    """Local time of sunrise on the reference date."""
    return event_time(SunEvent.SUNRISE, latitude, longitude, reference)


def sunset(latitude: float, longitude: float, reference: datetime | None = None) -> datetime:
    """Local time of sunset on the reference date."""
    return event_time(SunEvent.SUNSET, latitude, longitude, reference)


def dawn(latitude: float, longitude: float, reference: datetime | None = None) -> datetime:
    """Local time of dawn (civil zenith, rising) on the reference date."""
    return event_time(SunEvent.DAWN, latitude, longitude, reference)


def dusk(latitude: float, longitude: float, reference: datetime | None = None) -> datetime:
    """Local time of dusk (civil zenith, setting) on the reference date."""
    return event_time(SunEvent.DUSK, latitude, longitude, reference)


@dataclass
class SunEventTimes:
    """All sun events for one date and location.

    An event that does not happen on the date is None, and the polar
    condition that prevented it is kept in `errors`.
    """

    date: date

    sunrise: datetime | None
    sunset: datetime | None
    dawn: datetime | None
    dusk: datetime | None

    # Midpoint of sunrise and sunset; None unless both occur in that order
    solar_noon: datetime | None

    errors: dict[SunEvent, SunEventError] = field(default_factory=dict)

    def get(self, event: SunEvent | str) -> datetime | None:
        """Time of an event by name."""
        return getattr(self, SunEvent(event).value)

    @property
    def is_polar_day(self) -> bool:
        """The sun stays above the horizon for the whole date."""
        return isinstance(self.errors.get(SunEvent.SUNRISE), SunNeverSetsError)

    @property
    def is_polar_night(self) -> bool:
        """The sun stays below the horizon for the whole date."""
        return isinstance(self.errors.get(SunEvent.SUNRISE), SunNeverRisesError)


def get_sun_event_times(
    coords: Coordinates,
    reference: datetime | None = None,
) -> SunEventTimes:
    """Calculate sunrise, sunset, dawn and dusk for a date.

    Polar conditions are collected instead of raised, so one missing event
    does not hide the others.

    Args:
        coords: Geographic coordinates
        reference: Instant supplying the date and UTC offset (default: now)

    Returns:
        SunEventTimes with every event that occurs on the date
    """
    # Resolve once so every event shares the same date and offset
    reference = resolve_reference(reference)

    times: dict[SunEvent, datetime | None] = {}
    errors: dict[SunEvent, SunEventError] = {}
    for event in SunEvent:
        try:
            times[event] = event_time(event, coords.latitude, coords.longitude, reference)
        except SunEventError as e:
            logger.info("No %s at %s on %s: %s", event.value, coords, e.date, type(e).__name__)
            times[event] = None
            errors[event] = e

    rise = times[SunEvent.SUNRISE]
    set_ = times[SunEvent.SUNSET]
    solar_noon = None
    if rise is not None and set_ is not None and rise <= set_:
        solar_noon = rise + (set_ - rise) / 2

    return SunEventTimes(
        date=reference.date(),
        sunrise=rise,
        sunset=set_,
        dawn=times[SunEvent.DAWN],
        dusk=times[SunEvent.DUSK],
        solar_noon=solar_noon,
        errors=errors,
    )


class SunEventCalculator:
    """Calculator for sun events at a fixed location.

    Example:
        ```python
        calc = SunEventCalculator(Coordinates(latitude=40.7128, longitude=-74.0060))

        # All events for today
        times = calc.get_event_times()

        # A single event; raises SunNeverRisesError/SunNeverSetsError near the poles
        rise = calc.event_time(SunEvent.SUNRISE)
        ```
    """

    def __init__(self, coordinates: Coordinates):
        """Initialize calculator for a specific location.

        Args:
            coordinates: Geographic coordinates for calculations
        """
        self.coordinates = coordinates

    def get_event_times(self, reference: datetime | None = None) -> SunEventTimes:
        """Get all sun events for the reference date."""
        return get_sun_event_times(self.coordinates, reference)

    def event_time(
        self,
        event: SunEvent | str,
        reference: datetime | None = None,
    ) -> datetime:
        """Get one sun event, raising the polar condition if it does not occur."""
        return event_time(
            event, self.coordinates.latitude, self.coordinates.longitude, reference
        )

    def is_daylight(self, moment: datetime | None = None) -> bool:
        """Check whether the sun is up (between sunrise and sunset)."""
        moment = resolve_reference(moment)
        times = self.get_event_times(moment)
        if times.is_polar_day:
            return True
        if times.is_polar_night:
            return False
        if times.sunrise is None or times.sunset is None:
            return False
        if times.sunrise <= times.sunset:
            return times.sunrise <= moment < times.sunset
        # Sunset wrapped past local midnight onto the start of the date
        return moment >= times.sunrise or moment < times.sunset
