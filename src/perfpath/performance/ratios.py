"""Calmar and Sterling ratios.

Both divide the annualized geometric return of the whole series by a
drawdown measure: the maximum drawdown (Calmar) or the average annual
drawdown (Sterling).

Drawdown sentinels are kept apart:
- NaN drawdown (not computable) gives a NaN ratio
- 0.0 drawdown (none observed) gives ``inf`` for a positive return, NaN otherwise
"""

import math
from typing import Sequence

from perfpath.calendar.enums import Frequency
from perfpath.performance.annualization import annualize, total_return
from perfpath.performance.buckets import average_drawdown
from perfpath.performance.drawdown import max_drawdown
from perfpath.performance.validation import validate_series
from perfpath.system.config import get_system_config


def _resolve(freq: Frequency | None, business_days: bool | None) -> tuple[Frequency, bool]:
    analytics = get_system_config().analytics
    return (
        freq if freq is not None else analytics.default_frequency,
        business_days if business_days is not None else analytics.business_days,
    )


def annualized_return(
    values: Sequence[float],
    freq: Frequency | None = None,
    business_days: bool | None = None,
) -> float:
    """Annualized geometric return of the whole series in percent (NaN if not computable)."""
    validate_series(values)
    freq, business_days = _resolve(freq, business_days)
    return annualize(total_return(values), freq, len(values), geometric=True, business_days=business_days)


def _risk_adjusted(annual_return: float, drawdown: float) -> float:
    if math.isnan(annual_return) or math.isnan(drawdown):
        return math.nan
    if drawdown == 0.0:
        return math.inf if annual_return > 0 else math.nan
    return annual_return / abs(drawdown)


def calmar_ratio(
    values: Sequence[float],
    freq: Frequency | None = None,
    business_days: bool | None = None,
) -> float:
    """
    Calculate Calmar ratio (annualized return / |maximum drawdown|).

    Args:
        values: Period returns in percent
        freq: Sampling frequency (defaults to configuration)
        business_days: Daily annualization basis (defaults to configuration)

    Returns:
        Calmar ratio (dimensionless)

    Example:
        >>> calmar_ratio([10.0, -20.0, 10.0, 10.0], Frequency.ANNUAL)
        0.0791...  # 1.58% p.a. over a 20% drawdown
    """
    freq, business_days = _resolve(freq, business_days)
    drawdown = max_drawdown(values).max_drawdown
    return _risk_adjusted(annualized_return(values, freq, business_days), drawdown)


def sterling_ratio(
    values: Sequence[float],
    dates: Sequence[int],
    freq: Frequency | None = None,
    business_days: bool | None = None,
) -> float:
    """
    Calculate Sterling ratio (annualized return / |average annual drawdown|).

    Args:
        values: Period returns in percent
        dates: Date serials, strictly ascending
        freq: Sampling frequency (defaults to configuration)
        business_days: Daily annualization basis (defaults to configuration)

    Returns:
        Sterling ratio (dimensionless)
    """
    freq, business_days = _resolve(freq, business_days)
    drawdown = average_drawdown(values, dates, freq, business_days)
    return _risk_adjusted(annualized_return(values, freq, business_days), drawdown)
