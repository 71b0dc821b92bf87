"""
Test suite for the vector helpers.
"""

import pytest
import numpy as np

from radtrace.vector import as_vector, as_sample, magnitude


class TestVectorHelpers:
    """Test scalar and vector handling."""

    def test_magnitude(self):
        assert magnitude(np.array([3.0, 4.0, 12.0])) == pytest.approx(13.0)
        assert magnitude(-2.5) == 2.5

    def test_as_vector_copies(self):
        source = np.array([1.0, 2.0])
        vector = as_vector(source)
        vector[0] = 9.0
        assert source[0] == 1.0

    def test_as_sample(self):
        assert as_sample(2.0) == 2.0
        assert isinstance(as_sample((1, 2, 3)), np.ndarray)
        assert as_sample([1, 2, 3]).dtype == float
