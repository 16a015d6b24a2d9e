"""Exception hierarchy for perfpath.

InvalidParameterError is raised to the caller. NotComputableError is raised
internally and converted to a NaN result at the boundary of each public
operation; it never escapes one.
"""


class PerfPathError(Exception):
    """Base class for all perfpath errors."""


class InvalidParameterError(PerfPathError, ValueError):
    """Malformed input: empty series, length mismatch, bad window or index, unsorted dates."""


class NotComputableError(PerfPathError, ArithmeticError):
    """A non-finite sample (or a return of -100% or worse) in the active data."""
