"""Tests for the tide simulator."""
import math

import pytest

from forecast_core.config import HOURS_OF_DAY
from forecast_core.services.random_source import SequenceRandomSource
from forecast_core.services.tide_simulator import TideSimulator


class TestTideHeight:
    """Tests for the tide height curve."""

    def test_midnight_day_zero_is_base(self):
        """Test the curve starts at the base height on day 0."""
        assert TideSimulator.tide_height(0, 0, 1.2, 2.4) == pytest.approx(1.2)

    def test_peak_at_six(self):
        """Test the day 0 curve peaks at 06:00 with half the range."""
        assert TideSimulator.tide_height(6, 0, 1.2, 2.4) == pytest.approx(2.4)

    def test_trough_at_eighteen(self):
        """Test the day 0 curve bottoms out at 18:00."""
        assert TideSimulator.tide_height(18, 0, 1.2, 2.4) == pytest.approx(0.0, abs=1e-9)

    def test_day_phase_shift(self):
        """Test each day shifts the phase by pi/3."""
        expected = 1.0 + 1.5 * math.sin(2 * math.pi * 3 / 24 + 2 * math.pi / 3)
        assert TideSimulator.tide_height(3, 2, 1.0, 3.0) == pytest.approx(expected)

    def test_six_days_complete_a_cycle(self):
        """Test day 6 is back in phase with day 0."""
        for hour in HOURS_OF_DAY:
            assert TideSimulator.tide_height(hour, 6, 1.3, 2.2) == pytest.approx(
                TideSimulator.tide_height(hour, 0, 1.3, 2.2)
            )


class TestClassify:
    """Tests for tide status classification."""

    def setup_method(self):
        self.simulator = TideSimulator()

    def test_high_tide(self):
        assert self.simulator.classify(2.6) == "High Tide"

    def test_low_tide(self):
        assert self.simulator.classify(0.9) == "Low Tide"

    def test_band_edges_are_exclusive(self):
        """Test exactly 2.5 and 1.0 fall through to trend checks."""
        assert self.simulator.classify(2.5) == "Stable"
        assert self.simulator.classify(1.0) == "Stable"

    def test_rising(self):
        assert self.simulator.classify(1.8, 1.5) == "Rising Tide"

    def test_falling(self):
        assert self.simulator.classify(1.5, 1.8) == "Falling Tide"

    def test_equal_to_previous_is_stable(self):
        assert self.simulator.classify(1.5, 1.5) == "Stable"

    def test_first_sample_without_previous(self):
        """Test the first sample only uses the absolute bands."""
        assert self.simulator.classify(1.7, None) == "Stable"
        assert self.simulator.classify(2.7, None) == "High Tide"

    def test_bands_take_precedence_over_trend(self):
        """Test high/low labels win even when a trend exists."""
        assert self.simulator.classify(2.8, 2.6) == "High Tide"
        assert self.simulator.classify(2.6, 2.9) == "High Tide"
        assert self.simulator.classify(0.5, 0.2) == "Low Tide"
        assert self.simulator.classify(0.2, 0.5) == "Low Tide"

    def test_idempotent(self):
        """Test repeated classification of the same inputs agrees."""
        results = {self.simulator.classify(1.9, 1.4) for _ in range(5)}
        assert results == {"Rising Tide"}


class TestBuildCurve:
    """Tests for the ordered daily tide curve."""

    def test_curve_length_and_statuses(self):
        """Test a day 0 curve with base 1.25 and range 2.5."""
        simulator = TideSimulator()
        curve = simulator.build_curve(0, 1.25, 2.5)

        assert len(curve) == 8
        statuses = [status for _, status in curve]
        assert statuses == [
            "Stable",
            "Rising Tide",
            "Rising Tide",
            "Falling Tide",
            "Falling Tide",
            "Low Tide",
            "Low Tide",
            "Low Tide",
        ]

    def test_curve_heights_unrounded(self):
        """Test heights in the curve keep full precision."""
        curve = TideSimulator().build_curve(0, 1.25, 2.5)
        assert curve[1][0] == pytest.approx(1.25 + 1.25 * math.sin(math.pi / 4))
        assert curve[1][0] != round(curve[1][0], 2)

    def test_default_hours_are_immutable(self):
        """Test the default hour sequence cannot be mutated through a caller."""
        assert isinstance(HOURS_OF_DAY, tuple)
        assert HOURS_OF_DAY == (0, 3, 6, 9, 12, 15, 18, 21)
        curve = TideSimulator().build_curve(1, 1.2, 2.4)
        assert len(curve) == len(HOURS_OF_DAY)

    def test_draw_day_parameters_ranges(self):
        """Test base and range draws map onto their intervals."""
        low = TideSimulator.draw_day_parameters(SequenceRandomSource([0.0]))
        high = TideSimulator.draw_day_parameters(SequenceRandomSource([0.999]))

        assert low == (1.0, 2.0)
        assert 1.0 <= high[0] < 1.5
        assert 2.0 <= high[1] < 3.0
