"""
Per-particle lockstep driver for the discrete time buffers.

A ``ParticleTrack`` owns the private time base of one particle together with
its position and momentum buffers, advances all three once per simulation
step, and produces the kinematic quantities a retarded-field detector needs at
the centered slot ``now`` (t-1).
"""

from typing import Optional
import logging
import numpy as np
from pydantic import Field, field_serializer, field_validator

from ..constants import ELECTRON_MASS
from ..models.base import PhysicsBaseModel
from ..models.validators import (
    validate_time_sequence, validate_three_vector, validate_lorentz_factor,
)
from ..discrete import TimeSeries4, RelativisticConverter, TrackingError

logger = logging.getLogger(__name__)


class KinematicState(PhysicsBaseModel):
    """
    Kinematics of one particle at a single time sample.

    All vectors are Cartesian 3-vectors in SI units; ``beta`` and
    ``beta_dot`` are normalized by the speed of light.
    """
    step: int = Field(ge=0, description="Index of the sample along the track")
    time: float = Field(description="Simulation time in s")
    position: np.ndarray = Field(description="Position in m")
    momentum: np.ndarray = Field(description="Momentum in kg m/s")
    gamma: float = Field(description="Lorentz factor")
    gamma_dot: float = Field(description="Time derivative of the Lorentz factor in 1/s")
    beta: np.ndarray = Field(description="Velocity in units of c")
    beta_dot: np.ndarray = Field(description="Time derivative of beta in 1/s")

    @field_validator('position', 'momentum', 'beta', 'beta_dot', mode='before')
    @classmethod
    def validate_vectors(cls, v):
        return validate_three_vector(v)

    @field_validator('gamma')
    @classmethod
    def validate_gamma(cls, v):
        return validate_lorentz_factor(v)

    @field_serializer('position', 'momentum', 'beta', 'beta_dot', when_used='json')
    def serialize_vectors(self, v):
        return v.tolist()

    @property
    def speed_fraction(self) -> float:
        """|beta|, the speed as a fraction of c."""
        return float(np.linalg.norm(self.beta))


class ParticleTrack:
    """
    Four-sample history of one tracked particle.

    Example:
        >>> track = ParticleTrack("electron_0")
        >>> for t, r, p in samples:
        ...     track.advance(t, r, p)
        ...     if track.is_primed:
        ...         state = track.kinematics()

    A track is not thread-safe; a parallel driver must hand each track to a
    single worker at a time.
    """

    def __init__(self, name: str = "track", mass: float = ELECTRON_MASS):
        """
        Args:
            name: Label used in log messages
            mass: Particle rest mass in kg
        """
        self.name = name
        self.times = TimeSeries4.empty()
        self.position = TimeSeries4.empty(self.times, fill=np.zeros(3))
        self.momentum = TimeSeries4.empty(self.times, fill=np.zeros(3))
        self.converter = RelativisticConverter(self.times, mass=mass)
        self.steps = 0

        self.logger = logging.getLogger(f"{__name__}.{name}")

    @property
    def is_primed(self) -> bool:
        """True once all four slots hold pushed samples."""
        return self.steps >= 4

    def advance(self, time: float, position, momentum) -> None:
        """
        Push one sample into the time, position and momentum buffers.

        Args:
            time: Simulation time in s, strictly after the previous sample
            position: Position 3-vector in m
            momentum: Momentum 3-vector in kg m/s

        Raises:
            TrackingError: If time does not increase or a vector is invalid
        """
        try:
            if self.steps > 0:
                validate_time_sequence((self.times.future, time))
            position = validate_three_vector(position)
            momentum = validate_three_vector(momentum)
        except ValueError as e:
            raise TrackingError(f"Track {self.name}: {e}") from e

        self.times.advance(float(time))
        self.position.advance(position)
        self.momentum.advance(momentum)
        self.steps += 1
        self.logger.debug(f"Step {self.steps}: t={time:.6e} s")

    def gamma(self) -> TimeSeries4:
        """Lorentz factor for the four stored momentum samples."""
        return self.converter.momentum_to_gamma(self.momentum)

    def beta(self, gamma: Optional[TimeSeries4] = None) -> TimeSeries4:
        """Beta vectors for the four stored momentum samples."""
        if gamma is None:
            gamma = self.gamma()
        return self.converter.momentum_to_beta(self.momentum, gamma)

    def kinematics(self) -> KinematicState:
        """
        Kinematic snapshot at slot ``now`` (t-1).

        Returns:
            KinematicState with centered derivatives of gamma and beta

        Raises:
            TrackingError: If fewer than four samples were pushed
        """
        if not self.is_primed:
            raise TrackingError(
                f"Track {self.name} needs 4 samples for derivatives, has {self.steps}"
            )
        gamma = self.gamma()
        beta = self.beta(gamma)
        state = KinematicState(
            step=self.steps - 2,
            time=self.times.now,
            position=self.position.now,
            momentum=self.momentum.now,
            gamma=gamma.now,
            gamma_dot=gamma.dot_now(),
            beta=beta.now,
            beta_dot=beta.dot_now(),
        )
        self.logger.debug(f"Snapshot at t={state.time:.6e} s: gamma={state.gamma:.6f}")
        return state

    def __repr__(self) -> str:
        return f"ParticleTrack(name={self.name!r}, steps={self.steps})"
