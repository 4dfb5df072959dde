"""Tests for presentation hints."""
import pytest

from forecast_core.services.presentation_hints import sky_category, tide_trend, wind_intensity


class TestWindIntensity:
    """Tests for wind intensity bands."""

    @pytest.mark.parametrize(
        "wind_speed,expected",
        [
            (0, "low"),
            (10, "low"),
            (10.5, "moderate"),
            (25, "moderate"),
            (26, "high"),
            (30, "high"),
            (30.5, None),
            (45, None),
        ],
    )
    def test_bands(self, wind_speed, expected):
        assert wind_intensity(wind_speed) == expected


class TestSkyCategory:
    """Tests for description to icon category mapping."""

    @pytest.mark.parametrize(
        "description,expected",
        [
            ("Sunny", "sunny"),
            ("Partly Cloudy", "cloudy"),
            ("Cloudy", "cloudy"),
            ("Light Rain", "rain"),
            ("Showers", "rain"),
            ("Strong Winds", "windy"),
            ("Overcast", "cloudy"),
            ("CLEAR", "sunny"),
            ("Fog", "cloudy"),
        ],
    )
    def test_mapping(self, description, expected):
        assert sky_category(description) == expected


class TestTideTrend:
    """Tests for tide status to trend mapping."""

    def test_all_statuses(self):
        assert tide_trend("Rising Tide") == "up"
        assert tide_trend("Falling Tide") == "down"
        assert tide_trend("High Tide") == "high"
        assert tide_trend("Low Tide") == "low"
        assert tide_trend("Stable") is None
