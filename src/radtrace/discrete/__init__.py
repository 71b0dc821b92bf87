"""
Discrete time buffers and relativistic conversions.

This is the numerical core of RadTrace: the four-sample rolling window with
centered derivatives and the momentum to gamma/beta conversion built on it.
"""

from .types import (
    Slot,
    TimeBaseMismatchError,
    MissingTimeBaseError,
    DegenerateTimeBaseError,
    RadTraceError,
    ConfigurationError,
    TrackingError,
)
from .time_series import TimeSeries4
from .relativistic import RelativisticConverter, lorentz_factor, normalized_velocity

__all__ = [
    "TimeSeries4",
    "RelativisticConverter",
    "lorentz_factor",
    "normalized_velocity",
    "Slot",
    "TimeBaseMismatchError",
    "MissingTimeBaseError",
    "DegenerateTimeBaseError",
    "RadTraceError",
    "ConfigurationError",
    "TrackingError",
]
