"""Performance-path analytics over per-period return series.

1. **Models** (`models.py`): Pydantic data structures
   - ReturnSeries: Percent returns paired with date serials
   - Interval: Located region of a cumulative log series
   - DrawdownResult / GainResult: Labeled extremum intervals
   - StreakResult / RollingResult: Scanner outputs

2. **Engine** (`accumulator.py`, `extremum.py`)
   - log_cumulative: Cumulative log-return series
   - find_max_drawdown / find_max_gain: Divide-and-conquer interval search

3. **Analytics** (`drawdown.py`, `streaks.py`, `rolling.py`, `buckets.py`, `ratios.py`)
   - max_drawdown (with recovery), max_gain
   - longest_up_streak, longest_down_streak
   - best_rolling_return, worst_rolling_return, rolling_returns
   - average_drawdown over one-year buckets
   - calmar_ratio, sterling_ratio

Sentinels:
    - 0.0 / unset fields: nothing observed (no drawdown, no streak)
    - NaN primary field: not computable (non-finite sample in the data)
    - InvalidParameterError: malformed input (empty, mismatched, unsorted)

Usage:
    >>> from perfpath.performance import max_drawdown
    >>> result = max_drawdown(returns, dates)
    >>> print(f"Max DD: {result.max_drawdown:.2f}% from {result.peak_date} to {result.trough_date}")
"""

from perfpath.performance.accumulator import log_cumulative
from perfpath.performance.annualization import annual_multiplier, annualize, total_return
from perfpath.performance.buckets import annual_buckets, average_drawdown
from perfpath.performance.drawdown import find_recovery, max_drawdown, max_gain
from perfpath.performance.extremum import find_max_drawdown, find_max_gain
from perfpath.performance.models import (
    DrawdownResult,
    GainResult,
    Interval,
    ReturnSeries,
    RollingResult,
    StreakResult,
)
from perfpath.performance.ratios import annualized_return, calmar_ratio, sterling_ratio
from perfpath.performance.rolling import (
    best_or_worst_rolling,
    best_rolling_return,
    rolling_returns,
    worst_rolling_return,
)
from perfpath.performance.streaks import longest_down_streak, longest_streak, longest_up_streak
from perfpath.performance.validation import is_computable, validate_series

__all__ = [
    # Models
    "ReturnSeries",
    "Interval",
    "DrawdownResult",
    "GainResult",
    "StreakResult",
    "RollingResult",
    # Engine
    "log_cumulative",
    "find_max_drawdown",
    "find_max_gain",
    # Drawdown / gain
    "max_drawdown",
    "max_gain",
    "find_recovery",
    "annual_buckets",
    "average_drawdown",
    # Scanners
    "longest_streak",
    "longest_up_streak",
    "longest_down_streak",
    "best_or_worst_rolling",
    "best_rolling_return",
    "worst_rolling_return",
    "rolling_returns",
    # Ratios and annualization
    "annualized_return",
    "calmar_ratio",
    "sterling_ratio",
    "annual_multiplier",
    "annualize",
    "total_return",
    # Validation
    "validate_series",
    "is_computable",
]
