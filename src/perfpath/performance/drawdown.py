"""Maximum drawdown and maximum gain of a return series.

Runs the accumulator and the extremum engine over the whole series, then
labels the located interval with dates, duration and (for drawdowns) the
recovery back to the peak level.

Index conventions: a located interval ``{start, end}`` indexes the
cumulative series, whose element ``i`` is the level after ``i`` periods.
The peak level therefore stands at period ``start - 1`` and the trough at
period ``end - 1``; a peak at ``start == 0`` is the opening level and is
dated with the first period.
"""

from typing import Sequence

from perfpath.errors import NotComputableError
from perfpath.performance.accumulator import log_cumulative, to_drawdown_percent, to_gain_percent
from perfpath.performance.extremum import find_max_drawdown, find_max_gain
from perfpath.performance.models import DrawdownResult, GainResult, Interval
from perfpath.performance.validation import validate_series
from perfpath.system.log_system import get_logger

logger = get_logger(__name__)


def max_drawdown(values: Sequence[float], dates: Sequence[int] | None = None) -> DrawdownResult:
    """
    Calculate maximum drawdown with peak/trough dates and recovery.

    Args:
        values: Period returns in percent
        dates: Optional date serials paired with values

    Returns:
        DrawdownResult. ``max_drawdown`` is negative, 0.0 when the series
        never declines, NaN when any sample is non-finite.

    Raises:
        InvalidParameterError: Empty series or values/dates length mismatch

    Example:
        >>> result = max_drawdown([10.0, -20.0, -10.0, 50.0], dates=[39478, 39507, 39538, 39568])
        >>> round(result.max_drawdown, 2), result.peak_date, result.trough_date
        (-28.0, 39478, 39538)
    """
    validate_series(values, dates)

    try:
        series = log_cumulative(values)
    except NotComputableError as e:
        logger.warning("drawdown.not_computable", reason=str(e), periods=len(values))
        return DrawdownResult.not_computable()

    interval = find_max_drawdown(series)
    if interval.is_degenerate:
        return DrawdownResult(max_drawdown=0.0)

    recovery = find_recovery(series, interval)

    result = DrawdownResult(
        max_drawdown=to_drawdown_percent(interval.magnitude),
        duration=interval.length,
        recovery_periods=recovery - interval.end if recovery is not None else 0,
        interval=interval,
    )
    if dates is not None:
        result = result.model_copy(
            update={
                "peak_date": _level_date(dates, interval.start),
                "trough_date": _level_date(dates, interval.end),
                "recovery_date": _level_date(dates, recovery) if recovery is not None else None,
            }
        )
    return result


def find_recovery(series: Sequence[float], interval: Interval) -> int | None:
    """
    First cumulative index after the trough back at or above the peak level.

    Returns:
        Index into ``series``, or None if the loss is never recovered
    """
    peak_level = series[interval.start]
    for i in range(interval.end + 1, len(series)):
        if series[i] >= peak_level:
            return i
    return None


def max_gain(values: Sequence[float], dates: Sequence[int] | None = None) -> GainResult:
    """
    Calculate maximum trough-to-peak gain with its dates.

    Args:
        values: Period returns in percent
        dates: Optional date serials paired with values

    Returns:
        GainResult. ``max_gain`` is positive, 0.0 when the series never
        rises, NaN when any sample is non-finite.

    Raises:
        InvalidParameterError: Empty series or values/dates length mismatch
    """
    validate_series(values, dates)

    try:
        series = log_cumulative(values)
    except NotComputableError as e:
        logger.warning("gain.not_computable", reason=str(e), periods=len(values))
        return GainResult.not_computable()

    interval = find_max_gain(series)
    if interval.is_degenerate:
        return GainResult(max_gain=0.0)

    return GainResult(
        max_gain=to_gain_percent(interval.magnitude),
        start_date=_level_date(dates, interval.start) if dates is not None else None,
        end_date=_level_date(dates, interval.end) if dates is not None else None,
        duration=interval.length,
        interval=interval,
    )


def _level_date(dates: Sequence[int], level_index: int) -> int:
    # Cumulative level i is reached at the end of period i - 1
    return dates[max(level_index - 1, 0)]
