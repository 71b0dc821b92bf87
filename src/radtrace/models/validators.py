"""
Custom validators for physics-specific constraints in RadTrace.

This module provides validation functions shared by the settings and
kinematics models, ensuring physical correctness of their values.
"""

from typing import Sequence
import math

import numpy as np


def validate_time_sequence(time_points: Sequence[float]) -> Sequence[float]:
    """
    Validate a time sequence is strictly increasing.
    
    Args:
        time_points: Sequence of time values
        
    Returns:
        Validated time points
        
    Raises:
        ValueError: If a time point does not exceed its predecessor
    """
    for earlier, later in zip(time_points, time_points[1:]):
        if not later > earlier:
            raise ValueError(f"Time points must be strictly increasing: {earlier} >= {later}")
    return time_points


def validate_three_vector(value) -> np.ndarray:
    """
    Validate and normalize a Cartesian 3-vector.
    
    Args:
        value: Sequence or array of three numbers
        
    Returns:
        Float numpy array of shape (3,)
        
    Raises:
        ValueError: If the shape is wrong or a component is not finite
    """
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise ValueError(f"Vector components must be finite, got {vector.tolist()}")
    return vector


def validate_polar_angle_degrees(angle: float) -> float:
    """
    Validate a polar observation angle given in degrees.
    
    Raises:
        ValueError: If angle is not in (0, 180]
    """
    if not (0.0 < angle <= 180.0):
        raise ValueError(f"Polar angle {angle} deg outside range (0, 180]")
    return angle


def validate_lorentz_factor(gamma: float) -> float:
    """Lorentz factor must be finite and at least one."""
    if not math.isfinite(gamma) or gamma < 1.0:
        raise ValueError(f"Lorentz factor {gamma} must be finite and >= 1")
    return gamma
