"""Longest up/down streaks.

A streak is a run of consecutive periods whose returns share a sign. Gaps
(non-finite samples) neither break nor extend a run; a zero return or a
return of the opposite sign ends it.
"""

import math
from typing import Sequence

from perfpath.performance.models import StreakResult
from perfpath.performance.validation import validate_series
from perfpath.system.log_system import get_logger

logger = get_logger(__name__)


def longest_streak(
    values: Sequence[float],
    is_up: bool,
    dates: Sequence[int] | None = None,
) -> StreakResult:
    """
    Find the longest run of positive (``is_up``) or negative returns.

    The run with the greatest index span wins; the first one found wins
    ties. Its compounded return is reported in percent.

    Args:
        values: Period returns in percent
        is_up: Look for positive (True) or negative (False) runs
        dates: Optional date serials paired with values

    Returns:
        StreakResult with ``end`` exclusive. No qualifying period gives
        ``start == end == 0`` and a 0.0 return.

    Raises:
        InvalidParameterError: Empty series or values/dates length mismatch

    Example:
        >>> result = longest_streak([1.0, -2.0, -3.0, 4.0], is_up=False)
        >>> result.start, result.end, round(result.compounded_return_percent, 2)
        (1, 3, -4.94)
    """
    validate_series(values, dates)

    best_start, best_end, best_factor = 0, 0, 1.0
    run_start: int | None = None
    factor = 1.0

    for i, value in enumerate(values):
        if not math.isfinite(value):
            continue
        if (value > 0) if is_up else (value < 0):
            if run_start is None:
                run_start = i
                factor = 1.0
            factor *= 1.0 + value / 100.0
            if i + 1 - run_start > best_end - best_start:
                best_start, best_end, best_factor = run_start, i + 1, factor
        else:
            run_start = None

    result = StreakResult(
        start=best_start,
        end=best_end,
        compounded_return_percent=(best_factor - 1.0) * 100.0,
    )
    if dates is not None and best_end > best_start:
        result = result.model_copy(update={"start_date": dates[best_start], "end_date": dates[best_end - 1]})

    logger.debug("streaks.longest", is_up=is_up, start=best_start, end=best_end)
    return result


def longest_up_streak(values: Sequence[float], dates: Sequence[int] | None = None) -> StreakResult:
    """Longest run of positive returns."""
    return longest_streak(values, True, dates)


def longest_down_streak(values: Sequence[float], dates: Sequence[int] | None = None) -> StreakResult:
    """Longest run of negative returns."""
    return longest_streak(values, False, dates)
