"""Log-return accumulator.

Turns percent returns into the cumulative log-return series every extremum
search runs on: element 0 is 0.0 and element i + 1 adds ln(1 + r_i / 100),
so the log change between two elements is the log of the compounded return
of the periods in between.
"""

import math
from typing import Sequence

from perfpath.errors import NotComputableError


def log_cumulative(values: Sequence[float]) -> list[float]:
    """
    Build the cumulative log-return series (length ``len(values) + 1``).

    Raises:
        NotComputableError: On a non-finite sample or a return of -100% or
            worse. No partial series is returned.
    """
    series = [0.0] * (len(values) + 1)
    total = 0.0
    for i, value in enumerate(values):
        if not math.isfinite(value):
            raise NotComputableError(f"Non-finite return at index {i}")
        growth = 1.0 + value / 100.0
        if growth <= 0.0:
            raise NotComputableError(f"Return of {value}% at index {i} has no logarithm")
        total += math.log(growth)
        series[i + 1] = total
    return series


def to_drawdown_percent(magnitude: float) -> float:
    """Report a drawdown log magnitude as a (non-positive) percentage."""
    return (math.exp(-magnitude) - 1.0) * 100.0


def to_gain_percent(magnitude: float) -> float:
    """Report a gain log magnitude as a (non-negative) percentage."""
    return (math.exp(magnitude) - 1.0) * 100.0
