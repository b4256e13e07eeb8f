"""Pytest fixtures for sun event tests.

Fixtures pin every calculation to a fixed reference instant and offset so
results never depend on the machine's clock or time zone.
"""

from datetime import datetime, timedelta, timezone

import pytest

from sunevent.models.location import Coordinates

SETTINGS_ENV_VARS = (
    "SUNEVENT_LOG_LEVEL",
    "SUNEVENT_DEBUG",
)

EDT = timezone(timedelta(hours=-4), "EDT")


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Reset settings cache and environment before each test."""
    from sunevent.config import get_settings

    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Location and Time Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Sample coordinates for New York City."""
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def equator_coordinates() -> Coordinates:
    """Where the equator meets the prime meridian."""
    return Coordinates(latitude=0.0, longitude=0.0)


@pytest.fixture
def arctic_coordinates() -> Coordinates:
    """High arctic, inside the polar circle."""
    return Coordinates(latitude=85.0, longitude=0.0)


@pytest.fixture
def summer_solstice_edt() -> datetime:
    """Midday on the June solstice in New York daylight time."""
    return datetime(2024, 6, 21, 12, 0, tzinfo=EDT)


@pytest.fixture
def march_equinox_utc() -> datetime:
    """Midday on the March equinox in UTC."""
    return datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def summer_solstice_utc() -> datetime:
    """Midday on the June solstice in UTC."""
    return datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def winter_solstice_utc() -> datetime:
    """Midday on the December solstice in UTC."""
    return datetime(2024, 12, 21, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def restore_package_logger_level():
    """Undo level changes made by configure_logging."""
    import logging

    logger = logging.getLogger("sunevent")
    level = logger.level
    yield
    logger.setLevel(level)
