"""Calendar bucketing and average annual drawdown.

Splits a dated series into consecutive one-year buckets anchored at the
period containing the first date, computes each bucket's maximum drawdown
on its own, and scales the sum to a per-year average.
"""

import math
from typing import Sequence

from perfpath.calendar.enums import Anchor, Frequency
from perfpath.calendar.periods import advance_periods, period_begin
from perfpath.errors import NotComputableError
from perfpath.performance.accumulator import log_cumulative, to_drawdown_percent
from perfpath.performance.annualization import annual_multiplier
from perfpath.performance.extremum import find_max_drawdown
from perfpath.performance.validation import validate_series
from perfpath.system.config import get_system_config
from perfpath.system.log_system import get_logger

logger = get_logger(__name__)


def annual_buckets(values: Sequence[float], dates: Sequence[int], freq: Frequency) -> list[list[float]]:
    """
    Split a dated series into consecutive one-year buckets.

    Bucket ``k`` holds the samples dated in
    ``[anchor + k years, anchor + (k + 1) years)`` where ``anchor`` is the
    begin of the ``freq`` period containing the first date. Years with no
    samples produce no bucket; a short trailing year is its own bucket.

    Raises:
        InvalidParameterError: Empty series, length mismatch or unsorted dates
    """
    validate_series(values, dates, require_sorted=True)

    anchor = period_begin(freq, dates[0])
    years_ahead = 1
    boundary = advance_periods(Frequency.ANNUAL, years_ahead, anchor, Anchor.NONE)

    buckets: list[list[float]] = []
    current: list[float] = []
    for value, serial in zip(values, dates):
        if serial >= boundary:
            if current:
                buckets.append(current)
                current = []
            while serial >= boundary:
                years_ahead += 1
                boundary = advance_periods(Frequency.ANNUAL, years_ahead, anchor, Anchor.NONE)
        current.append(value)
    buckets.append(current)

    return buckets


def average_drawdown(
    values: Sequence[float],
    dates: Sequence[int],
    freq: Frequency | None = None,
    business_days: bool | None = None,
) -> float:
    """
    Calculate the average annual maximum drawdown.

    Each one-year bucket's maximum drawdown (percent, <= 0) is computed
    independently; the sum is scaled by ``annual multiplier / sample count``.

    Args:
        values: Period returns in percent
        dates: Date serials, strictly ascending
        freq: Sampling frequency (defaults to the configured frequency)
        business_days: Daily annualization basis (defaults to configuration)

    Returns:
        Average drawdown in percent, NaN if no bucket could be computed.

        Non-finite samples are handled per bucket, not per series: a year
        holding one is left out of the sum (and logged as
        ``buckets.bucket_skipped``) while the other years still count, so
        the result can be a number even though the whole-series statistics
        (max_drawdown, calmar_ratio) would be NaN for the same input. The
        divisor stays the full sample count.

    Raises:
        InvalidParameterError: Empty series, length mismatch or unsorted dates

    Example:
        >>> # Two years of monthly data: -10% worst in year one, -20% in year two
        >>> average_drawdown(values, dates, Frequency.MONTHLY)
        -15.0
    """
    analytics = get_system_config().analytics
    if freq is None:
        freq = analytics.default_frequency
    if business_days is None:
        business_days = analytics.business_days

    buckets = annual_buckets(values, dates, freq)

    total = 0.0
    computed = 0
    for index, bucket in enumerate(buckets):
        try:
            series = log_cumulative(bucket)
        except NotComputableError as e:
            logger.warning("buckets.bucket_skipped", bucket=index, reason=str(e))
            continue
        interval = find_max_drawdown(series)
        if not interval.is_degenerate:
            total += to_drawdown_percent(interval.magnitude)
        computed += 1

    logger.debug("buckets.average_drawdown", buckets=len(buckets), computed=computed, total=total)

    if computed == 0:
        return math.nan
    return total * annual_multiplier(freq, business_days) / len(values)
