"""
Physical constants used by RadTrace.

SI units throughout (CODATA 2018 values).
"""

SPEED_OF_LIGHT = 299792458.0  # m/s
ELECTRON_MASS = 9.1093837015e-31  # kg

# m_e * c^2 in J
ELECTRON_REST_ENERGY = ELECTRON_MASS * SPEED_OF_LIGHT ** 2

__all__ = [
    'SPEED_OF_LIGHT',
    'ELECTRON_MASS',
    'ELECTRON_REST_ENERGY',
]
