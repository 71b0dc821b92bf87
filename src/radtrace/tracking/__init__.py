"""
Per-particle tracking helpers built on the discrete time buffers.
"""

from .particle_track import ParticleTrack, KinematicState

__all__ = [
    'ParticleTrack',
    'KinematicState',
]
