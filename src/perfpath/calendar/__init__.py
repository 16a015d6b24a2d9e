"""Period-boundary service: day serials, period begin/end and N-period moves."""

from perfpath.calendar import periods
from perfpath.calendar.enums import Anchor, Frequency
from perfpath.calendar.periods import advance_periods, from_serial, period_begin, period_end, to_serial

__all__ = [
    "periods",
    "Anchor",
    "Frequency",
    "advance_periods",
    "from_serial",
    "period_begin",
    "period_end",
    "to_serial",
]
