"""Performance-path data models.

Pydantic models for return series and the results produced by the
extremum engine, the scanners and the drawdown labeling pass.
"""

import math
from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from perfpath.calendar.periods import from_serial, to_serial

if TYPE_CHECKING:
    import pandas as pd


class ReturnSeries(BaseModel):
    """
    Ordered period returns (percent) paired 1:1 with date serials.

    Values may contain non-finite entries; the analytics functions decide
    how to treat them. Structure (non-empty, equal lengths) is enforced here.
    """

    model_config = ConfigDict(frozen=True)

    values: list[float]
    dates: list[int]

    @model_validator(mode="after")
    def check_shape(self) -> "ReturnSeries":
        """Reject empty series and value/date length mismatch."""
        if not self.values:
            raise ValueError("Return series is empty")
        if len(self.values) != len(self.dates):
            raise ValueError(
                f"Length mismatch: {len(self.values)} values vs {len(self.dates)} dates"
            )
        return self

    def __len__(self) -> int:
        """Number of periods."""
        return len(self.values)

    @property
    def is_sorted(self) -> bool:
        """Dates strictly ascending."""
        return all(a < b for a, b in zip(self.dates, self.dates[1:]))

    @classmethod
    def from_pandas(cls, series: "pd.Series") -> "ReturnSeries":
        """
        Build from a pandas Series of percent returns indexed by dates.

        The index may hold datetimes, dates or integer day serials.
        """
        import pandas as pd

        if isinstance(series.index, pd.DatetimeIndex):
            dates = [to_serial(ts.date()) for ts in series.index]
        else:
            dates = [to_serial(d) if isinstance(d, date) else int(d) for d in series.index]
        return cls(values=[float(v) for v in series.to_numpy()], dates=dates)

    def to_pandas(self) -> "pd.Series":
        """Convert to a pandas Series indexed by calendar date."""
        import pandas as pd

        index = pd.DatetimeIndex([pd.Timestamp(from_serial(d)) for d in self.dates], name="date")
        return pd.Series(self.values, index=index, name="return_pct")


class Interval(BaseModel):
    """
    A region of a cumulative series and its log change.

    ``start`` and ``end`` index the cumulative series; read as period
    indices, ``end`` is exclusive. ``magnitude`` is a non-negative log
    difference (peak minus trough for drawdowns, the reverse for gains).
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    magnitude: float

    @classmethod
    def empty(cls) -> "Interval":
        """Zero-magnitude sentinel: nothing observed."""
        return cls(start=0, end=0, magnitude=0.0)

    @property
    def is_degenerate(self) -> bool:
        """True when the interval carries no movement."""
        return self.start >= self.end or self.magnitude == 0.0

    @property
    def length(self) -> int:
        """Number of periods spanned."""
        return max(self.end - self.start, 0)


class DrawdownResult(BaseModel):
    """
    Maximum drawdown with its dates and recovery.

    ``max_drawdown`` is a negative percentage, 0.0 when no decline was
    observed, NaN when the series could not be computed. Date fields are
    None and counts are 0 unless a drawdown was observed.
    """

    max_drawdown: float
    peak_date: int | None = None
    trough_date: int | None = None
    duration: int = 0  # Periods from peak to trough
    recovery_periods: int = 0  # Periods from trough back to the peak level (0 if never)
    recovery_date: int | None = None
    interval: Interval = Field(default_factory=Interval.empty)

    @classmethod
    def not_computable(cls) -> "DrawdownResult":
        """NaN sentinel for series with non-finite samples."""
        return cls(max_drawdown=math.nan)

    @property
    def recovered(self) -> bool:
        """Loss recovered within the observed window."""
        return self.recovery_date is not None


class GainResult(BaseModel):
    """
    Maximum gain (trough to peak rise) with its dates.

    ``max_gain`` is a positive percentage, 0.0 when no rise was observed,
    NaN when the series could not be computed.
    """

    max_gain: float
    start_date: int | None = None
    end_date: int | None = None
    duration: int = 0
    interval: Interval = Field(default_factory=Interval.empty)

    @classmethod
    def not_computable(cls) -> "GainResult":
        """NaN sentinel for series with non-finite samples."""
        return cls(max_gain=math.nan)


class StreakResult(BaseModel):
    """
    Longest run of same-signed returns.

    ``start``/``end`` are period indices, ``end`` exclusive. An empty run
    (``start == end == 0``) means no qualifying period was seen.
    """

    start: int
    end: int
    compounded_return_percent: float
    start_date: int | None = None
    end_date: int | None = None

    @property
    def periods(self) -> int:
        """Index span of the run."""
        return self.end - self.start


class RollingResult(BaseModel):
    """
    Compounded return of one rolling window.

    ``index`` is the last period in the window and ``date`` its serial
    (when dates were supplied). NaN return with ``index`` None means the
    series could not be computed.
    """

    date: int | None
    compounded_return_percent: float
    index: int | None = None

    @classmethod
    def not_computable(cls) -> "RollingResult":
        """NaN sentinel for series with non-finite samples."""
        return cls(date=None, compounded_return_percent=math.nan)
