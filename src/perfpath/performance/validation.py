"""Structural validation and non-finite detection for return series."""

import math
from typing import Sequence

from perfpath.errors import InvalidParameterError


def validate_series(
    values: Sequence[float],
    dates: Sequence[int] | None = None,
    require_sorted: bool = False,
) -> None:
    """
    Reject structurally invalid input before any computation starts.

    Args:
        values: Period returns in percent
        dates: Optional date serials paired 1:1 with values
        require_sorted: Dates must be strictly ascending

    Raises:
        InvalidParameterError: Empty series, length mismatch, or unsorted dates
    """
    if len(values) == 0:
        raise InvalidParameterError("Return series is empty")

    if dates is None:
        if require_sorted:
            raise InvalidParameterError("Dates are required for this calculation")
        return

    if len(dates) != len(values):
        raise InvalidParameterError(f"Length mismatch: {len(values)} values vs {len(dates)} dates")

    if require_sorted and any(later <= earlier for earlier, later in zip(dates, dates[1:])):
        raise InvalidParameterError("Dates must be sorted in ascending order")


def is_computable(values: Sequence[float]) -> bool:
    """All samples finite."""
    return all(math.isfinite(v) for v in values)
