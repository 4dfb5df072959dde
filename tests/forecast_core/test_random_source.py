"""Tests for random sources."""
import pytest

from forecast_core.services.random_source import NumpyRandomSource, SequenceRandomSource


class TestNumpyRandomSource:
    """Tests for NumpyRandomSource."""

    def test_values_in_unit_interval(self):
        source = NumpyRandomSource(seed=7)
        values = [source.next() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_same_seed_same_sequence(self):
        """Test a seed fully determines the sequence."""
        a = NumpyRandomSource(seed=123)
        b = NumpyRandomSource(seed=123)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_different_seeds_differ(self):
        a = NumpyRandomSource(seed=1)
        b = NumpyRandomSource(seed=2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_unseeded_returns_floats(self):
        """Test entropy seeding works without a seed."""
        source = NumpyRandomSource()
        assert source.seed is None
        assert isinstance(source.next(), float)


class TestSequenceRandomSource:
    """Tests for SequenceRandomSource."""

    def test_replays_and_cycles(self):
        source = SequenceRandomSource([0.1, 0.2, 0.3])
        assert [source.next() for _ in range(7)] == [0.1, 0.2, 0.3, 0.1, 0.2, 0.3, 0.1]

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([])

    @pytest.mark.parametrize("value", [-0.1, 1.0, 1.5])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            SequenceRandomSource([0.5, value])


class TestDrawHelpers:
    """Tests for the derived draw helpers."""

    def test_uniform_int_bounds(self):
        """Test integer draws stay within [low, high)."""
        assert SequenceRandomSource([0.0]).uniform_int(5, 40) == 5
        assert SequenceRandomSource([0.999999]).uniform_int(5, 40) == 39

    def test_uniform_float(self):
        assert SequenceRandomSource([0.5]).uniform(2.0, 3.0) == pytest.approx(2.5)

    def test_choice(self):
        options = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
        assert SequenceRandomSource([0.0]).choice(options) == "N"
        assert SequenceRandomSource([0.5]).choice(options) == "S"
        assert SequenceRandomSource([0.99]).choice(options) == "NW"
