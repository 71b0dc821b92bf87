"""
Test suite for the Pydantic base model and physics validators.
"""

import pytest
import numpy as np
from pydantic import Field, ValidationError

from radtrace.models import (
    PhysicsBaseModel, validate_time_sequence, validate_three_vector,
    validate_polar_angle_degrees, validate_lorentz_factor,
)


class TestPhysicsBaseModel:
    """Test the base PhysicsBaseModel functionality."""

    class Sample(PhysicsBaseModel):
        energy: float = Field(gt=0, description="Test energy")
        values: np.ndarray = Field(description="Array payload")

    def test_from_dict(self):
        model = self.Sample.from_dict({"energy": 1e9, "values": np.arange(3.0)})
        data = model.model_dump()
        assert data["energy"] == 1e9
        np.testing.assert_array_equal(data["values"], [0.0, 1.0, 2.0])

    def test_yaml_dict_converts_numpy(self):
        model = self.Sample(energy=2.0, values=np.array([1.5, 2.5]))
        data = model.to_yaml_dict()
        assert data == {"energy": 2.0, "values": [1.5, 2.5]}
        assert isinstance(data["values"], list)

    def test_validation_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            self.Sample(energy=-1.0, values=np.zeros(1))
        assert "greater than 0" in str(exc_info.value)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            self.Sample(energy=1.0, values=np.zeros(1), mass=3.0)


class TestValidators:
    """Test physics-specific validators."""

    def test_time_sequence(self):
        assert validate_time_sequence([0.0, 0.1, 0.5]) == [0.0, 0.1, 0.5]
        assert validate_time_sequence([]) == []
        with pytest.raises(ValueError, match="strictly increasing"):
            validate_time_sequence([0.0, 0.1, 0.1])
        with pytest.raises(ValueError):
            validate_time_sequence([1.0, 0.0])

    def test_three_vector(self):
        vector = validate_three_vector([1, 2, 3])
        assert vector.dtype == float
        np.testing.assert_array_equal(vector, [1.0, 2.0, 3.0])
        with pytest.raises(ValueError, match="3-vector"):
            validate_three_vector([1.0, 2.0])
        with pytest.raises(ValueError, match="finite"):
            validate_three_vector([np.inf, 0.0, 0.0])

    def test_polar_angle(self):
        assert validate_polar_angle_degrees(180.0) == 180.0
        with pytest.raises(ValueError):
            validate_polar_angle_degrees(-1.0)

    def test_lorentz_factor(self):
        assert validate_lorentz_factor(1.0) == 1.0
        with pytest.raises(ValueError):
            validate_lorentz_factor(0.999)
        with pytest.raises(ValueError):
            validate_lorentz_factor(float("nan"))


class TestAssignment:
    """Test assignment validation inherited by every record."""

    class Sample(PhysicsBaseModel):
        energy: float = Field(gt=0, description="Test energy")

    def test_assignment_is_validated(self):
        model = self.Sample(energy=1.0)
        with pytest.raises(ValidationError):
            model.energy = -2.0
        model.energy = 3.0
        assert model.energy == 3.0
