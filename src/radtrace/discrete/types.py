"""
Type definitions and exceptions for the RadTrace discrete time buffers.

Two kinds of errors live here:

- Contract violations (``AssertionError`` subclasses) signal programming
  errors such as mixing buffers from different time lines. They are only
  raised while ``__debug__`` is set and are never caught inside RadTrace.
- Recoverable errors derive from ``RadTraceError`` and are raised for
  invalid user input at the package boundary.
"""

from enum import IntEnum


class Slot(IntEnum):
    """
    Logical positions of the four-sample rolling window, oldest first.

    The value is the storage index of the slot.
    """
    OLD2 = 0    # t - 3
    OLD = 1     # t - 2
    NOW = 2     # t - 1
    FUTURE = 3  # t - 0


class TimeBaseMismatchError(AssertionError):
    """Raised when buffers bound to different time bases are combined."""
    pass


class MissingTimeBaseError(AssertionError):
    """Raised when a derivative is requested from a buffer with no time base."""
    pass


class DegenerateTimeBaseError(AssertionError):
    """Raised when a derivative would divide by a zero-length time span."""
    pass


class RadTraceError(Exception):
    """Base exception class for recoverable RadTrace errors."""
    pass


class ConfigurationError(RadTraceError):
    """Raised when settings are invalid or cannot be parsed."""
    pass


class TrackingError(RadTraceError):
    """Raised when a particle track receives invalid input or is queried too early."""
    pass
