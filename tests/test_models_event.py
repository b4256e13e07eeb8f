"""Tests for sun event definitions."""

import pytest

from sunevent.models.event import (
    ZENITH_CIVIL,
    ZENITH_OFFICIAL,
    Direction,
    SunEvent,
    event_parameters,
)


class TestSunEvent:
    """Tests for the SunEvent enum."""

    def test_directions(self):
        """Test that morning events rise and evening events set."""
        assert SunEvent.SUNRISE.direction is Direction.RISING
        assert SunEvent.DAWN.direction is Direction.RISING
        assert SunEvent.SUNSET.direction is Direction.SETTING
        assert SunEvent.DUSK.direction is Direction.SETTING

    def test_rising_flag(self):
        """Test the boolean rising shortcut."""
        assert SunEvent.SUNRISE.rising is True
        assert SunEvent.DUSK.rising is False

    def test_lookup_by_name(self):
        """Test creating events from their string names."""
        assert SunEvent("dawn") is SunEvent.DAWN
        with pytest.raises(ValueError):
            SunEvent("noon")


class TestEventParameters:
    """Tests for mapping events to direction and zenith."""

    @pytest.mark.parametrize(
        "event,direction,zenith",
        [
            (SunEvent.SUNRISE, Direction.RISING, 90.0),
            (SunEvent.SUNSET, Direction.SETTING, 90.0),
            (SunEvent.DAWN, Direction.RISING, 83.0),
            (SunEvent.DUSK, Direction.SETTING, 83.0),
        ],
    )
    def test_default_table(self, event, direction, zenith):
        """Test the default direction and zenith for every event."""
        params = event_parameters(event)
        assert params.direction is direction
        assert params.zenith == zenith
        assert params.rising is (direction is Direction.RISING)

    def test_defaults_match_constants(self):
        """Test that the table uses the module constants."""
        assert event_parameters("sunrise").zenith == ZENITH_OFFICIAL
        assert event_parameters("dusk").zenith == ZENITH_CIVIL

    def test_environment_does_not_change_zenith(self, monkeypatch):
        """Test that the zenith table ignores environment variables."""
        monkeypatch.setenv("SUNEVENT_CIVIL_ZENITH", "96")
        monkeypatch.setenv("SUNEVENT_OFFICIAL_ZENITH", "abc")
        assert event_parameters(SunEvent.DUSK).zenith == 83.0
        assert event_parameters(SunEvent.SUNRISE).zenith == 90.0

    def test_unknown_event_rejected(self):
        """Test that names outside the four events raise."""
        with pytest.raises(ValueError):
            event_parameters("golden_hour")
