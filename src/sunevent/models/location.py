"""Observer location for sun event calculations."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """Validated observer position.

    Latitude is north positive and longitude east positive, both in
    decimal degrees. The bare `sunrise`/`sunset`/`dawn`/`dusk` functions
    take unchecked floats; this model is the checked input for
    `get_sun_event_times` and `SunEventCalculator`.
    """

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
