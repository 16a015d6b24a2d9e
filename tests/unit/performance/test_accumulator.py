"""Tests for the cumulative log-return accumulator."""

import math

import pytest

from perfpath.errors import NotComputableError
from perfpath.performance.accumulator import log_cumulative, to_drawdown_percent, to_gain_percent


class TestLogCumulative:
    """Test log_cumulative()."""

    def test_starts_at_zero_and_accumulates(self):
        """Element 0 is 0.0 and each step adds ln(1 + r/100)."""
        series = log_cumulative([10.0, -20.0, 5.0])

        assert len(series) == 4
        assert series[0] == 0.0
        assert series[1] == pytest.approx(math.log(1.1))
        assert series[2] == pytest.approx(math.log(1.1) + math.log(0.8))
        assert series[3] == pytest.approx(math.log(1.1 * 0.8 * 1.05))

    def test_zero_returns_stay_flat(self):
        """Zero returns add nothing."""
        assert log_cumulative([0.0, 0.0]) == [0.0, 0.0, 0.0]

    def test_difference_is_compounded_return(self):
        """The log change between two elements compounds the periods between them."""
        series = log_cumulative([5.0, -10.0, 20.0, 3.0])

        compounded = (math.exp(series[3] - series[1]) - 1.0) * 100.0

        assert compounded == pytest.approx((0.9 * 1.2 - 1.0) * 100.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, bad):
        """Any non-finite sample makes the whole series not computable."""
        with pytest.raises(NotComputableError):
            log_cumulative([1.0, bad, 2.0])

    def test_total_loss_raises(self):
        """A return of -100% has no logarithm."""
        with pytest.raises(NotComputableError):
            log_cumulative([5.0, -100.0])

    def test_input_not_mutated(self):
        """The caller's list is left untouched."""
        values = [1.0, 2.0]

        log_cumulative(values)

        assert values == [1.0, 2.0]


class TestPercentConversions:
    """Test conversion of log magnitudes back to percentages."""

    def test_drawdown_percent(self):
        """A decline of ln(0.8) reports as -20%."""
        assert to_drawdown_percent(-math.log(0.8)) == pytest.approx(-20.0)

    def test_gain_percent(self):
        """A rise of ln(1.5) reports as +50%."""
        assert to_gain_percent(math.log(1.5)) == pytest.approx(50.0)

    def test_zero_magnitude(self):
        """Zero magnitude reports zero."""
        assert to_drawdown_percent(0.0) == 0.0
        assert to_gain_percent(0.0) == 0.0
