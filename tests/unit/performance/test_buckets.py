"""Tests for one-year bucketing and average annual drawdown."""

import logging
import math
from datetime import date

import pytest

from perfpath.calendar import Frequency, to_serial
from perfpath.errors import InvalidParameterError
from perfpath.performance.buckets import annual_buckets, average_drawdown
from perfpath.performance.drawdown import max_drawdown


def two_years_of_losses() -> list[float]:
    """Monthly returns: a -10% month in year one and a -20% month in year two."""
    year_one = [0.0] * 5 + [-10.0] + [0.0] * 6
    year_two = [0.0] * 2 + [-20.0] + [0.0] * 9
    return year_one + year_two


class TestAnnualBuckets:
    """Test annual_buckets()."""

    def test_full_years(self, month_ends):
        """24 month-ends starting in January give two 12-month buckets."""
        values = list(range(24))

        buckets = annual_buckets(values, month_ends(24), Frequency.MONTHLY)

        assert [len(b) for b in buckets] == [12, 12]
        assert buckets[1][0] == 12

    def test_trailing_partial_year(self, month_ends):
        """A short final year is its own bucket."""
        buckets = annual_buckets([1.0] * 18, month_ends(18), Frequency.MONTHLY)

        assert [len(b) for b in buckets] == [12, 6]

    def test_anchored_at_first_period(self, month_ends):
        """Buckets start at the period containing the first date, not at January."""
        dates = month_ends(14, first=date(2008, 7, 31))

        buckets = annual_buckets([1.0] * 14, dates, Frequency.MONTHLY)

        # July 2008 .. June 2009, then July 2009 .. August 2009
        assert [len(b) for b in buckets] == [12, 2]

    def test_empty_year_skipped(self):
        """A year with no samples produces no bucket."""
        dates = [to_serial(date(2008, 1, 31)), to_serial(date(2008, 6, 30)), to_serial(date(2010, 3, 31))]

        buckets = annual_buckets([1.0, 2.0, 3.0], dates, Frequency.MONTHLY)

        assert buckets == [[1.0, 2.0], [3.0]]

    def test_single_sample(self):
        """One sample is one bucket."""
        assert annual_buckets([4.0], [to_serial(date(2020, 5, 31))], Frequency.MONTHLY) == [[4.0]]

    def test_unsorted_dates_raise(self):
        """Dates must be strictly ascending."""
        dates = [to_serial(date(2008, 2, 29)), to_serial(date(2008, 1, 31))]

        with pytest.raises(InvalidParameterError):
            annual_buckets([1.0, 2.0], dates, Frequency.MONTHLY)

    def test_duplicate_dates_raise(self):
        """Repeated dates are not ascending."""
        day = to_serial(date(2008, 1, 31))

        with pytest.raises(InvalidParameterError):
            annual_buckets([1.0, 2.0], [day, day], Frequency.MONTHLY)


class TestAverageDrawdown:
    """Test average_drawdown()."""

    def test_average_of_yearly_worst(self, month_ends):
        """(-10 + -20) scaled by 12 / 24 periods."""
        result = average_drawdown(two_years_of_losses(), month_ends(24), Frequency.MONTHLY)

        assert result == pytest.approx(-15.0)

    def test_uses_configured_frequency(self, month_ends):
        """Without a frequency the configured default (monthly) applies."""
        values = two_years_of_losses()
        dates = month_ends(24)

        assert average_drawdown(values, dates) == pytest.approx(average_drawdown(values, dates, Frequency.MONTHLY))

    def test_no_drawdown(self, month_ends):
        """Only gains: zero average drawdown."""
        assert average_drawdown([1.0] * 24, month_ends(24), Frequency.MONTHLY) == 0.0

    def test_non_finite_bucket_skipped(self, month_ends):
        """A year holding a gap contributes nothing; the other years still count."""
        values = two_years_of_losses()
        values[0] = math.nan

        result = average_drawdown(values, month_ends(24), Frequency.MONTHLY)

        assert result == pytest.approx(-10.0)  # -20 * 12 / 24

    def test_skipped_bucket_is_logged_while_whole_series_is_nan(self, month_ends, caplog):
        """Per-year handling keeps a number where the whole-series drawdown is NaN."""
        # Arrange
        values = two_years_of_losses()
        values[0] = math.nan
        dates = month_ends(24)

        # Act
        with caplog.at_level(logging.WARNING, logger="perfpath"):
            average = average_drawdown(values, dates, Frequency.MONTHLY)

        # Assert
        assert average == pytest.approx(-10.0)
        assert math.isnan(max_drawdown(values, dates).max_drawdown)
        skipped = [r for r in caplog.records if r.getMessage() == "buckets.bucket_skipped"]
        assert len(skipped) == 1
        assert skipped[0].bucket == 0

    def test_all_buckets_non_finite(self, month_ends):
        """No computable year gives NaN."""
        values = [math.nan] * 24

        assert math.isnan(average_drawdown(values, month_ends(24), Frequency.MONTHLY))

    def test_requires_dates(self):
        """Bucketing needs dates."""
        with pytest.raises(InvalidParameterError):
            average_drawdown([1.0, 2.0], [], Frequency.MONTHLY)

    def test_empty_raises(self):
        """Empty input is rejected."""
        with pytest.raises(InvalidParameterError):
            average_drawdown([], [], Frequency.MONTHLY)
