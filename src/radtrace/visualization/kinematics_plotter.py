"""
Kinematics visualization components for RadTrace.

Reusable matplotlib plotter for recorded particle kinematics.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Optional, Any, Sequence, Tuple
import logging

from ..tracking.particle_track import KinematicState

logger = logging.getLogger(__name__)


class KinematicsPlotter:
    """Reusable component for plotting gamma and |beta| along a track."""
    
    def __init__(self, figsize: Tuple[float, float] = (12, 8)):
        """
        Initialize kinematics plotter.
        
        Args:
            figsize: Figure size (width, height) in inches
        """
        self.figsize = figsize
        self.fig = None
        self.axes = None
        
    def create_figure(self) -> Tuple[Figure, Any]:
        """Create matplotlib figure with two subplots."""
        self.fig, self.axes = plt.subplots(2, 1, figsize=self.figsize, sharex=True)
        return self.fig, self.axes
        
    def plot(self, states: Sequence[KinematicState], title: Optional[str] = None):
        """
        Plot Lorentz factor and speed against time.
        
        Args:
            states: Kinematic snapshots in time order
            title: Optional title for the plot
        """
        if not states:
            raise ValueError("No kinematic states to plot")
        
        if self.axes is None:
            self.create_figure()
            
        for ax in self.axes:
            ax.clear()
        
        ax1, ax2 = self.axes
        time = np.array([state.time for state in states])
        gamma = np.array([state.gamma for state in states])
        speed = np.array([state.speed_fraction for state in states])
        
        # Lorentz factor
        ax1.plot(time, gamma, 'b-', label='γ', linewidth=2)
        ax1.set_ylabel('Lorentz factor', fontsize=11)
        ax1.legend(loc='best', fontsize=10)
        ax1.grid(True, alpha=0.3)
        
        if title is None:
            title = f'Particle Kinematics (γ max = {gamma.max():.4f})'
        ax1.set_title(title, fontsize=12, fontweight='bold')
        
        # Speed
        ax2.plot(time, speed, 'r-', label='|β|', linewidth=2)
        ax2.set_xlabel('Time [s]', fontsize=11)
        ax2.set_ylabel('Speed [c]', fontsize=11)
        ax2.legend(loc='best', fontsize=10)
        ax2.grid(True, alpha=0.3)
        
        logger.debug(f"Plotted {len(states)} kinematic states")
        
        if self.fig is not None:
            self.fig.tight_layout()
