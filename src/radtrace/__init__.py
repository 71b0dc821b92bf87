"""
RadTrace - discrete time buffers for retarded-field radiation calculations

Four-sample rolling buffers with centered derivatives and relativistic
momentum conversion for tracked charged particles.
"""

import logging

from .discrete import (
    TimeSeries4,
    RelativisticConverter,
    Slot,
    lorentz_factor,
    normalized_velocity,
    RadTraceError,
    ConfigurationError,
    TrackingError,
)
from .tracking import ParticleTrack, KinematicState
from .settings import SpectrumSettings

__version__ = "0.1.0"

__all__ = [
    'TimeSeries4',
    'RelativisticConverter',
    'Slot',
    'lorentz_factor',
    'normalized_velocity',
    'ParticleTrack',
    'KinematicState',
    'SpectrumSettings',
    'RadTraceError',
    'ConfigurationError',
    'TrackingError',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
