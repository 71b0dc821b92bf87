"""
Relativistic kinematics derived from momentum buffers.

Energy = sqrt(p^2 c^2 + m^2 c^4) = gamma m c^2, and the normalized velocity is
beta = v / c = p / (m c gamma). The converter applies these closed forms to
each of the four samples of a momentum buffer and returns gamma and beta
buffers bound to the same time base, ready for derivative evaluation.
"""

from typing import Optional
import numpy as np

from ..constants import SPEED_OF_LIGHT, ELECTRON_MASS
from ..vector import magnitude, as_vector
from .time_series import TimeSeries4


def lorentz_factor(momentum, mass: float = ELECTRON_MASS) -> float:
    """
    Lorentz factor for a momentum sample.

    Evaluated as ``hypot(1, |p| / (m c))``, which equals
    ``sqrt((|p| c)^2 + (m c^2)^2) / (m c^2)`` but is exactly 1.0 at rest and
    never drops below 1 through rounding.

    Args:
        momentum: Momentum 3-vector in kg m/s
        mass: Rest mass in kg

    Returns:
        Lorentz factor (>= 1)
    """
    return float(np.hypot(1.0, magnitude(as_vector(momentum)) / (mass * SPEED_OF_LIGHT)))


def normalized_velocity(momentum, gamma: float, mass: float = ELECTRON_MASS) -> np.ndarray:
    """
    Velocity in units of the speed of light, ``p / (c m gamma)``.

    Args:
        momentum: Momentum 3-vector in kg m/s
        gamma: Lorentz factor belonging to ``momentum`` (>= 1)
        mass: Rest mass in kg

    Zero momentum gives zero velocity whatever ``gamma`` holds.
    """
    momentum = as_vector(momentum)
    if not np.any(momentum):
        return np.zeros_like(momentum)
    return momentum * (1.0 / (SPEED_OF_LIGHT * mass * gamma))


class RelativisticConverter:
    """
    Converts momentum buffers into Lorentz factor and beta buffers.

    The converter is stateless apart from the shared time base it stamps on
    every result and the particle rest mass (electron by default).

    Example:
        >>> converter = RelativisticConverter(times)
        >>> gamma = converter.momentum_to_gamma(momentum)
        >>> beta = converter.momentum_to_beta(momentum, gamma)
        >>> beta.dot_now()  # acceleration / c at t-1
    """

    def __init__(self, time_base: Optional[TimeSeries4] = None,
                 mass: float = ELECTRON_MASS):
        """
        Args:
            time_base: Time buffer shared with the momentum buffers
            mass: Particle rest mass in kg
        """
        if not mass > 0:
            raise ValueError(f"Rest mass must be positive, got {mass}")
        self.time_base = time_base
        self.mass = mass

    def gamma(self, momentum) -> float:
        """Lorentz factor of a single momentum sample."""
        return lorentz_factor(momentum, self.mass)

    def beta(self, momentum, gamma: float) -> np.ndarray:
        """Normalized velocity of a single momentum sample with known gamma."""
        return normalized_velocity(momentum, gamma, self.mass)

    def momentum_to_gamma(self, momentum: TimeSeries4) -> TimeSeries4:
        """
        Lorentz factor for all four momentum samples.

        Args:
            momentum: Buffer of momentum 3-vectors

        Returns:
            Buffer of Lorentz factors bound to the converter's time base
        """
        return momentum.map(self.gamma, time_base=self.time_base)

    def momentum_to_beta(self, momentum: TimeSeries4, gamma: TimeSeries4) -> TimeSeries4:
        """
        Beta vectors for all four (momentum, gamma) sample pairs.

        The gamma buffer is supplied by the caller, normally the result of
        ``momentum_to_gamma`` on the same momentum buffer.

        Args:
            momentum: Buffer of momentum 3-vectors
            gamma: Buffer of Lorentz factors for the same samples

        Returns:
            Buffer of beta vectors bound to the converter's time base
        """
        return TimeSeries4(
            *(self.beta(p, g) for p, g in zip(momentum.samples(), gamma.samples())),
            time_base=self.time_base,
        )
