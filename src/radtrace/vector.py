"""
Small vector helpers shared by the discrete time buffers.

Vectors are plain float ``numpy`` arrays; scalars are Python floats.
"""

from typing import Union
import numpy as np

Sample = Union[float, np.ndarray]


def as_vector(value) -> np.ndarray:
    """Return a float numpy copy of ``value`` (never a view of the caller's data)."""
    return np.array(value, dtype=float)


def as_sample(value) -> Sample:
    """
    Normalize a sample for storage.

    Array-like values become independent float arrays, scalars pass through
    unchanged so that scalar buffers keep plain Python arithmetic.

    Args:
        value: Scalar, sequence or numpy array

    Returns:
        Value suitable for storing in a time buffer
    """
    if isinstance(value, (np.ndarray, list, tuple)):
        return as_vector(value)
    return value


def magnitude(value: Sample) -> float:
    """Euclidean norm of a vector, absolute value of a scalar."""
    if isinstance(value, np.ndarray):
        return float(np.linalg.norm(value))
    return abs(value)
