"""Rolling-window compounded returns.

Every full window of ``window_size`` consecutive periods is compounded as
``prod(1 + r / 100) - 1``. Unlike streaks there is no gap tolerance: one
non-finite sample makes the best/worst search not computable.
"""

import math
import operator
from typing import Callable, Sequence

from perfpath.errors import InvalidParameterError
from perfpath.performance.models import RollingResult
from perfpath.performance.validation import is_computable, validate_series
from perfpath.system.log_system import get_logger

logger = get_logger(__name__)


def _check_window(window_size: int, length: int) -> None:
    if window_size < 1:
        raise InvalidParameterError(f"Window size must be positive, got {window_size}")
    if window_size > length:
        raise InvalidParameterError(f"Window size {window_size} exceeds series length {length}")


def _compound(window: Sequence[float]) -> float:
    factor = 1.0
    for value in window:
        factor *= 1.0 + value / 100.0
    return (factor - 1.0) * 100.0


def rolling_returns(values: Sequence[float], window_size: int) -> list[float]:
    """
    Compounded return of every full window, in percent.

    Returns:
        ``len(values) - window_size + 1`` values; element ``k`` covers
        periods ``k .. k + window_size - 1``. Windows touching a non-finite
        sample are NaN.

    Raises:
        InvalidParameterError: Empty series or window size out of range
    """
    validate_series(values)
    _check_window(window_size, len(values))

    returns = []
    for first in range(len(values) - window_size + 1):
        window = values[first : first + window_size]
        returns.append(_compound(window) if is_computable(window) else math.nan)
    return returns


def best_or_worst_rolling(
    values: Sequence[float],
    window_size: int,
    better_than: Callable[[float, float], bool],
    dates: Sequence[int] | None = None,
) -> RollingResult:
    """
    Most extreme rolling-window compounded return.

    Args:
        values: Period returns in percent
        window_size: Number of periods per window
        better_than: ``better_than(a, b)`` is True when ``a`` should replace
            the current extreme ``b`` (``operator.gt`` for best)
        dates: Optional date serials paired with values

    Returns:
        RollingResult dated at the window's last period (first window wins
        ties). NaN result if any sample is non-finite.

    Raises:
        InvalidParameterError: Empty series, length mismatch or window size
            out of range
    """
    validate_series(values, dates)
    _check_window(window_size, len(values))

    if not is_computable(values):
        logger.warning("rolling.not_computable", periods=len(values), window_size=window_size)
        return RollingResult.not_computable()

    best_index = window_size - 1
    best_return = _compound(values[:window_size])
    for last in range(window_size, len(values)):
        current = _compound(values[last - window_size + 1 : last + 1])
        if better_than(current, best_return):
            best_index, best_return = last, current

    return RollingResult(
        date=dates[best_index] if dates is not None else None,
        compounded_return_percent=best_return,
        index=best_index,
    )


def best_rolling_return(
    values: Sequence[float], window_size: int, dates: Sequence[int] | None = None
) -> RollingResult:
    """Highest compounded return over any ``window_size`` consecutive periods."""
    return best_or_worst_rolling(values, window_size, operator.gt, dates)


def worst_rolling_return(
    values: Sequence[float], window_size: int, dates: Sequence[int] | None = None
) -> RollingResult:
    """Lowest compounded return over any ``window_size`` consecutive periods."""
    return best_or_worst_rolling(values, window_size, operator.lt, dates)
