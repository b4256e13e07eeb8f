"""Local times of sunrise, sunset, dawn and dusk for a latitude/longitude.

```python
from sunevent import sunrise, SunNeverSetsError

try:
    print(sunrise(59.9139, 10.7522))
except SunNeverSetsError:
    print("Midnight sun")
```
"""

from sunevent.astronomy import (
    SunEventCalculator,
    SunEventError,
    SunEventTimes,
    SunNeverRises,
    SunNeverRisesError,
    SunNeverSets,
    SunNeverSetsError,
    compute_event_time,
    dawn,
    dusk,
    event_time,
    get_sun_event_times,
    sunrise,
    sunset,
)
from sunevent.config import Settings, configure_logging, get_settings
from sunevent.models import Coordinates, Direction, SunEvent, event_parameters

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "sunrise",
    "sunset",
    "dawn",
    "dusk",
    "event_time",
    "compute_event_time",
    "get_sun_event_times",
    "SunEventCalculator",
    "SunEventTimes",
    # Errors
    "SunEventError",
    "SunNeverRises",
    "SunNeverRisesError",
    "SunNeverSets",
    "SunNeverSetsError",
    # Models
    "Coordinates",
    "Direction",
    "SunEvent",
    "event_parameters",
    # Configuration
    "Settings",
    "configure_logging",
    "get_settings",
]
