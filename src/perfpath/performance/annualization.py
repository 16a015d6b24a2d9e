"""Annualization helpers.

Frequency multipliers and the conversion of a whole-period return to its
annual equivalent. Non-finite input yields NaN rather than an exception.
"""

import math
from typing import Sequence

from perfpath.calendar.enums import Frequency

_ANNUAL_MULTIPLIERS = {
    Frequency.WEEKLY: 52.0,
    Frequency.MONTHLY: 12.0,
    Frequency.QUARTERLY: 4.0,
    Frequency.SEMIANNUAL: 2.0,
    Frequency.ANNUAL: 1.0,
}

CALENDAR_DAYS_PER_YEAR = 365.25
BUSINESS_DAYS_PER_YEAR = 250.0


def annual_multiplier(freq: Frequency, business_days: bool = False) -> float:
    """
    Number of periods of ``freq`` in one year.

    Args:
        freq: Sampling frequency
        business_days: For daily series, count 250 business days instead of
            365.25 calendar days

    Example:
        >>> annual_multiplier(Frequency.MONTHLY)
        12.0
    """
    if freq == Frequency.DAILY:
        return BUSINESS_DAYS_PER_YEAR if business_days else CALENDAR_DAYS_PER_YEAR
    return _ANNUAL_MULTIPLIERS[freq]


def annualize(
    return_percent: float,
    freq: Frequency,
    periods: float,
    geometric: bool = True,
    business_days: bool = False,
) -> float:
    """
    Convert a return observed over ``periods`` periods to an annual rate.

    Args:
        return_percent: Whole-period return in percent
        freq: Sampling frequency of the periods
        periods: Number of periods observed
        geometric: Compound (True) or scale linearly (False)
        business_days: Daily multiplier choice, see annual_multiplier()

    Returns:
        Annualized return in percent, NaN for non-finite input, negative or
        zero periods

    Example:
        >>> annualize(21.0, Frequency.MONTHLY, 24)
        10.0  # (1.21 ** 0.5 - 1) * 100
    """
    if not math.isfinite(return_percent) or periods <= 0:
        return math.nan

    multiplier = annual_multiplier(freq, business_days)
    if periods == multiplier:
        return return_percent
    if geometric:
        growth = 1.0 + return_percent / 100.0
        if growth < 0:
            return math.nan
        return (growth ** (multiplier / periods) - 1.0) * 100.0
    return return_percent * multiplier / periods


def total_return(values: Sequence[float]) -> float:
    """Compounded return of the whole series in percent, NaN if any sample is non-finite."""
    factor = 1.0
    for value in values:
        if not math.isfinite(value):
            return math.nan
        factor *= 1.0 + value / 100.0
    return (factor - 1.0) * 100.0
