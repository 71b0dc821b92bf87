"""
Test suite for the kinematics plotter.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

import pytest
import numpy as np

from radtrace import ParticleTrack
from radtrace.visualization import KinematicsPlotter


@pytest.fixture
def states():
    track = ParticleTrack()
    recorded = []
    for step in range(8):
        track.advance(step * 1e-15, np.zeros(3), [0.0, 0.0, step * 1e-21])
        if track.is_primed:
            recorded.append(track.kinematics())
    return recorded


class TestKinematicsPlotter:
    """Test figure creation and plotting."""

    def test_plot_creates_two_axes(self, states):
        plotter = KinematicsPlotter(figsize=(6, 4))
        plotter.plot(states)
        assert len(plotter.axes) == 2
        gamma_line = plotter.axes[0].get_lines()[0]
        np.testing.assert_allclose(gamma_line.get_ydata(), [s.gamma for s in states])
        assert "γ max" in plotter.axes[0].get_title()
        plt.close(plotter.fig)

    def test_custom_title_and_replot(self, states):
        plotter = KinematicsPlotter()
        plotter.plot(states, title="Run 7")
        plotter.plot(states[:2], title="Run 7")
        assert plotter.axes[0].get_title() == "Run 7"
        assert len(plotter.axes[1].get_lines()) == 1
        plt.close(plotter.fig)

    def test_empty_states(self):
        with pytest.raises(ValueError):
            KinematicsPlotter().plot([])
