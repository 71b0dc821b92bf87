"""
RadTrace visualization components.
"""

from .kinematics_plotter import KinematicsPlotter

__all__ = [
    'KinematicsPlotter',
]
