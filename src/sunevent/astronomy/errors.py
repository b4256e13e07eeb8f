"""Polar conditions reported by the sun event calculator.

Near the poles the local hour angle has no solution for part of the year.
That is a legitimate astronomical outcome, so it is reported with its own
exception types rather than a generic error or a meaningless timestamp.
"""

from __future__ import annotations

from datetime import date


class SunEventError(Exception):
    """Base exception for sun events that do not occur on a date."""

    condition = "has no solution"

    def __init__(
        self,
        latitude: float,
        longitude: float,
        on_date: date,
        zenith: float,
        cos_hour_angle: float,
    ):
        super().__init__(
            f"The sun {self.condition} for zenith {zenith}° at "
            f"({latitude}, {longitude}) on {on_date.isoformat()}"
        )
        self.latitude = latitude
        self.longitude = longitude
        self.date = on_date
        self.zenith = zenith
        self.cos_hour_angle = cos_hour_angle

    def __reduce__(self):
        return (
            type(self),
            (self.latitude, self.longitude, self.date, self.zenith, self.cos_hour_angle),
        )


class SunNeverRisesError(SunEventError):
    """Raised when the sun stays below the event zenith all day (cosH > 1)."""

    condition = "never rises"


class SunNeverSetsError(SunEventError):
    """Raised when the sun stays above the event zenith all day (cosH < -1)."""

    condition = "never sets"


SunNeverRises = SunNeverRisesError
SunNeverSets = SunNeverSetsError
