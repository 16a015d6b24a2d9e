"""Extremum-interval engine.

Finds the sub-interval of a cumulative log-return series with the largest
decline (drawdown) or the largest rise (gain). Both searches run the same
divide-and-conquer routine; an orientation supplies the comparator pair
that decides which end of the range an interval starts from.

Search over ``[start, end]`` (drawdown wording, gain is the mirror):

1. Locate the global maximum and minimum, earliest index winning ties.
2. Same index: flat range, nothing to report.
3. Maximum before minimum: that pair is the answer.
4. Otherwise the range rose overall. Best candidates touching the extremes
   are the decline into the minimum and the decline out of the maximum.
   Anything better lies strictly inside, between the end of the rally out
   of the minimum and the start of the rally into the maximum, so the
   search continues on that narrower range.

Step 4 narrows the range by at least one index each round, so the search is
run as a loop instead of recursion. Inputs are never mutated and every
call builds its own Interval values.
"""

import operator
from dataclasses import dataclass
from typing import Callable, Sequence

from perfpath.errors import InvalidParameterError
from perfpath.performance.models import Interval
from perfpath.system.log_system import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Orientation:
    """Comparator pair for one search direction.

    ``higher(a, b)``: ``a`` is strictly further toward the side intervals
    start from (the peak for drawdowns, the trough for gains). ``lower`` is
    the opposite comparison. ``sign`` turns ``series[origin] - series[target]``
    into a non-negative magnitude.
    """

    name: str
    higher: Callable[[float, float], bool]
    lower: Callable[[float, float], bool]
    sign: float


_DRAWDOWN = _Orientation(name="drawdown", higher=operator.gt, lower=operator.lt, sign=1.0)
_GAIN = _Orientation(name="gain", higher=operator.lt, lower=operator.gt, sign=-1.0)


def find_max_drawdown(series: Sequence[float], start: int = 0, end: int | None = None) -> Interval:
    """
    Largest peak-to-trough decline of a cumulative log series.

    Args:
        series: Cumulative log-return series (see accumulator.log_cumulative)
        start: First index searched
        end: Last index searched, inclusive (defaults to the last element)

    Returns:
        Interval ``{peak, trough, series[peak] - series[trough]}``, or the
        zero-magnitude sentinel when the range never declines

    Raises:
        InvalidParameterError: Indices out of range or ``start > end``

    Example:
        >>> find_max_drawdown([0.0, -0.5, -1.0, -0.3, 0.8])
        Interval(start=0, end=2, magnitude=1.0)
    """
    return _find_extremum(series, start, end, _DRAWDOWN)


def find_max_gain(series: Sequence[float], start: int = 0, end: int | None = None) -> Interval:
    """
    Largest trough-to-peak rise of a cumulative log series.

    Mirror of find_max_drawdown(); the magnitude is
    ``series[peak] - series[trough]`` with the trough first.
    """
    return _find_extremum(series, start, end, _GAIN)


def _find_extremum(
    series: Sequence[float],
    start: int,
    end: int | None,
    orientation: _Orientation,
) -> Interval:
    if end is None:
        end = len(series) - 1
    if not 0 <= start <= end < len(series):
        raise InvalidParameterError(f"Invalid search range [{start}, {end}] for series of length {len(series)}")

    best = Interval.empty()
    pending: tuple[int, int] | None = (start, end)
    rounds = 0

    while pending is not None:
        rounds += 1
        candidate, pending = _search_range(series, pending[0], pending[1], orientation)
        if candidate.magnitude > best.magnitude:
            best = candidate

    logger.debug(
        "extremum.found",
        kind=orientation.name,
        start=best.start,
        end=best.end,
        magnitude=best.magnitude,
        rounds=rounds,
    )
    return best


def _search_range(
    series: Sequence[float],
    start: int,
    end: int,
    orientation: _Orientation,
) -> tuple[Interval, tuple[int, int] | None]:
    """One round of the search: best interval touching the extremes plus the interior range left to search."""
    start = _skip_leading_zeros(series, start, end)

    high = _extreme_index(series, start, end, orientation.higher)
    low = _extreme_index(series, start, end, orientation.lower)

    if high == low:
        return Interval.empty(), None

    if high < low:
        return _interval(series, high, low, orientation), None

    origin = _extreme_index(series, start, low, orientation.higher)
    before_low = _interval(series, origin, low, orientation)

    target = _extreme_index(series, high, end, orientation.lower)
    after_high = _interval(series, high, target, orientation)

    extern = before_low if before_low.magnitude >= after_high.magnitude else after_high

    rally_end = low
    while rally_end < end and orientation.higher(series[rally_end + 1], series[rally_end]):
        rally_end += 1

    rally_start = high
    while rally_start > start and orientation.lower(series[rally_start - 1], series[rally_start]):
        rally_start -= 1

    if rally_end > rally_start:
        return extern, None
    return extern, (rally_end, rally_start)


def _skip_leading_zeros(series: Sequence[float], start: int, end: int) -> int:
    # The opening 0.0 of a cumulative series is not a real peak or trough
    while start < end and series[start] == 0.0 and series[start + 1] == 0.0:
        start += 1
    return start


def _extreme_index(
    series: Sequence[float],
    start: int,
    end: int,
    better: Callable[[float, float], bool],
) -> int:
    best = start
    for i in range(start + 1, end + 1):
        if better(series[i], series[best]):
            best = i
    return best


def _interval(series: Sequence[float], origin: int, target: int, orientation: _Orientation) -> Interval:
    return Interval(
        start=origin,
        end=target,
        magnitude=orientation.sign * (series[origin] - series[target]),
    )
