"""Calendar enumerations shared by the period-boundary helpers."""

from enum import Enum


class Frequency(str, Enum):
    """Sampling cadence of a return series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"
    SEMIANNUAL = "semiannual"


class Anchor(str, Enum):
    """Where a moved date lands inside its target period."""

    END = "end"
    BEGIN = "begin"
    NONE = "none"
