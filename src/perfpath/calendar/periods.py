"""Period-boundary arithmetic on integer day serials.

Dates are integer day serials where serial 2 is 1900-01-01, the classic
spreadsheet epoch (so 2022-07-01 is 44743). Weeks run Sunday through
Saturday. Month arithmetic clamps to the last day of the target month
(2020-01-31 plus one month is 2020-02-29).

Usage:
    >>> from perfpath.calendar import Frequency, Anchor, periods
    >>> periods.period_end(Frequency.QUARTERLY, 44743)  # 2022-07-01
    44834
    >>> periods.advance_periods(Frequency.MONTHLY, -3, 44757, Anchor.END)  # 2022-07-15
    44681
"""

import calendar
from datetime import date, timedelta

from perfpath.calendar.enums import Anchor, Frequency
from perfpath.errors import InvalidParameterError

_EPOCH = date(1900, 1, 1)
_EPOCH_SERIAL = 2

# Months spanned by one period, for month-based frequencies
_MONTHS_PER_PERIOD = {
    Frequency.MONTHLY: 1,
    Frequency.QUARTERLY: 3,
    Frequency.SEMIANNUAL: 6,
    Frequency.ANNUAL: 12,
}


def to_serial(value: date) -> int:
    """Convert a calendar date to its day serial."""
    return (value - _EPOCH).days + _EPOCH_SERIAL


def from_serial(serial: int) -> date:
    """
    Convert a day serial to a calendar date.

    Raises:
        InvalidParameterError: If the serial precedes the epoch or overflows
    """
    if serial < _EPOCH_SERIAL:
        raise InvalidParameterError(f"Date serial {serial} precedes 1900-01-01")
    try:
        return _EPOCH + timedelta(days=serial - _EPOCH_SERIAL)
    except OverflowError as e:
        raise InvalidParameterError(f"Date serial {serial} is out of range") from e


def _days_from_sunday(value: date) -> int:
    # Sunday -> 0, Saturday -> 6
    return (value.weekday() + 1) % 7


def _last_day(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _begin_of(freq: Frequency, value: date) -> date:
    if freq == Frequency.WEEKLY:
        return value - timedelta(days=_days_from_sunday(value))
    if freq in _MONTHS_PER_PERIOD:
        span = _MONTHS_PER_PERIOD[freq]
        month = (value.month - 1) // span * span + 1
        return date(value.year, month, 1)
    return value


def _end_of(freq: Frequency, value: date) -> date:
    if freq == Frequency.WEEKLY:
        return value + timedelta(days=6 - _days_from_sunday(value))
    if freq in _MONTHS_PER_PERIOD:
        span = _MONTHS_PER_PERIOD[freq]
        month = (value.month - 1) // span * span + span
        return date(value.year, month, _last_day(value.year, month))
    return value


def _add_months(value: date, months: int) -> date:
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    if not 1 <= year <= 9999:
        raise InvalidParameterError(f"Moving {value.isoformat()} by {months} months leaves the calendar range")
    month += 1
    return date(year, month, min(value.day, _last_day(year, month)))


def period_begin(freq: Frequency, serial: int) -> int:
    """First day (serial) of the period containing ``serial``. Daily is identity."""
    return to_serial(_begin_of(freq, from_serial(serial)))


def period_end(freq: Frequency, serial: int) -> int:
    """Last day (serial) of the period containing ``serial``. Daily is identity."""
    return to_serial(_end_of(freq, from_serial(serial)))


def advance_periods(freq: Frequency, n: int, serial: int, anchor: Anchor = Anchor.NONE) -> int:
    """
    Move a date by ``n`` periods of ``freq`` (negative moves backward).

    Args:
        freq: Period length
        n: Number of periods to move
        serial: Start date serial
        anchor: Snap the result to its period begin/end, or leave it (NONE).
            Ignored for daily moves.

    Returns:
        Moved date serial

    Raises:
        InvalidParameterError: If the move leaves the supported calendar range

    Example:
        >>> advance_periods(Frequency.WEEKLY, -3, 44743, Anchor.END)  # 2022-07-01
        44723  # 2022-06-11, a Saturday
    """
    start = from_serial(serial)

    if freq == Frequency.DAILY:
        days = n
    elif freq == Frequency.WEEKLY:
        days = 7 * n
    else:
        days = None

    try:
        if days is not None:
            moved = start + timedelta(days=days)
        else:
            moved = _add_months(start, n * _MONTHS_PER_PERIOD[freq])
    except OverflowError as e:
        raise InvalidParameterError(f"Moving {start.isoformat()} by {n} {freq.value} periods overflows") from e

    if freq != Frequency.DAILY:
        if anchor == Anchor.BEGIN:
            moved = _begin_of(freq, moved)
        elif anchor == Anchor.END:
            moved = _end_of(freq, moved)

    if moved < _EPOCH:
        raise InvalidParameterError(f"Moving {start.isoformat()} by {n} {freq.value} periods precedes 1900-01-01")

    return to_serial(moved)
