"""
RadTrace Pydantic Models Package

This package contains the Pydantic base model and physics validators used by
the RadTrace settings and kinematics records.
"""

from .base import PhysicsBaseModel
from .validators import (
    validate_time_sequence, validate_three_vector,
    validate_polar_angle_degrees, validate_lorentz_factor
)

__all__ = [
    'PhysicsBaseModel',
    'validate_time_sequence',
    'validate_three_vector',
    'validate_polar_angle_degrees',
    'validate_lorentz_factor',
]
