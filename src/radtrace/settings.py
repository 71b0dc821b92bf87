"""
Spectrum and detector settings for RadTrace.

The values describe the frequency/angle grid that detector backends evaluate
the radiated spectrum on, and which traces of a run are processed. They are
plain data: RadTrace itself never reads files, so settings are parsed from and
written to YAML text supplied by the caller.
"""

from typing import Optional
import logging
import numpy as np
import yaml
from pydantic import Field, ValidationError, field_validator, model_validator

from .models.base import PhysicsBaseModel
from .models.validators import validate_polar_angle_degrees
from .discrete.types import ConfigurationError

logger = logging.getLogger(__name__)


class SpectrumSettings(PhysicsBaseModel):
    """
    Frequency and direction grid for spectrum detectors.

    Defaults reproduce the reference run: 2048 frequencies up to 3e19 1/s,
    120 polar angles up to about 1.146 degrees, two azimuthal angles and up
    to 2000 traces.

    Example:
        >>> settings = SpectrumSettings(n_theta=60)
        >>> settings.theta_grid().shape
        (60,)
    """

    omega_max: float = Field(default=3.0e19, gt=0, description="Maximum angular frequency in 1/s")
    theta_max: float = Field(default=1.14594939, description="Maximum polar angle in degrees")
    n_spectrum: int = Field(default=2048, gt=0, description="Number of frequencies")
    n_theta: int = Field(default=120, gt=0, description="Number of polar directions")
    n_phi: int = Field(default=2, gt=0, description="Number of azimuthal directions")
    n_trace: int = Field(default=2000, gt=0, description="Maximum number of traces")
    fft_length_factor: int = Field(default=1, ge=1, description="FFT zero-padding factor")
    index_files_first: int = Field(default=0, ge=0, description="First trace index processed")
    index_files_last: Optional[int] = Field(
        default=None, ge=0, description="End of processed trace range (None for n_trace)"
    )

    @field_validator('theta_max')
    @classmethod
    def validate_theta_max(cls, v):
        return validate_polar_angle_degrees(v)

    @model_validator(mode='after')
    def validate_trace_range(self):
        """Processed trace range must lie inside the available traces."""
        last = self.last_trace_index
        if last > self.n_trace:
            raise ValueError(f"index_files_last {last} exceeds n_trace {self.n_trace}")
        if self.index_files_first > last:
            raise ValueError(
                f"index_files_first {self.index_files_first} exceeds index_files_last {last}"
            )
        return self

    def __setattr__(self, name, value):
        # The trace-range check runs after the field is written; restore it
        # when the check fails.
        if name not in type(self).model_fields:
            super().__setattr__(name, value)
            return
        old = self.__dict__[name]
        try:
            super().__setattr__(name, value)
        except ValidationError:
            self.__dict__[name] = old
            raise

    @property
    def last_trace_index(self) -> int:
        """End (exclusive) of the processed trace range."""
        return self.n_trace if self.index_files_last is None else self.index_files_last

    @property
    def n_omega(self) -> int:
        """Number of frequencies used when post-processing spectra."""
        return self.n_spectrum

    def frequencies(self) -> np.ndarray:
        """Angular frequencies from 0 to ``omega_max`` in 1/s."""
        return np.linspace(0.0, self.omega_max, self.n_spectrum)

    def theta_grid(self) -> np.ndarray:
        """Polar observation angles from 0 to ``theta_max`` in radians."""
        return np.deg2rad(np.linspace(0.0, self.theta_max, self.n_theta))

    def phi_grid(self) -> np.ndarray:
        """Azimuthal observation angles covering [0, 2 pi) in radians."""
        return np.linspace(0.0, 2.0 * np.pi, self.n_phi, endpoint=False)

    def trace_indices(self) -> range:
        """Indices of the traces to process."""
        return range(self.index_files_first, self.last_trace_index)

    def to_yaml(self) -> str:
        """Serialize to YAML text."""
        return yaml.safe_dump(self.to_yaml_dict(), sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> "SpectrumSettings":
        """
        Parse settings from YAML text.

        Missing keys take their defaults; an empty document gives the
        default settings.

        Args:
            text: YAML mapping of field names to values

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If the text is not a YAML mapping or a value
                fails validation
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid settings YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings YAML must be a mapping, got {type(data).__name__}"
            )

        try:
            settings = cls.from_dict(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid spectrum settings: {e}") from e

        logger.debug(f"Loaded spectrum settings: {settings.n_spectrum} frequencies, "
                     f"{settings.n_theta}x{settings.n_phi} directions")
        return settings
