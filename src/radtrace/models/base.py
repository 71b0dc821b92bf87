"""
Base Pydantic models for the RadTrace framework.

This module provides the foundational Pydantic model class with physics-specific
configuration shared by settings records and kinematic snapshots.
"""

from pydantic import BaseModel, ConfigDict
from typing import Dict, Any
import numpy as np


class PhysicsBaseModel(BaseModel):
    """
    Base Pydantic model for all physics-related records in RadTrace.
    
    This model provides:
    - Strict validation with assignment checking
    - Rejection of unknown fields
    - Numpy array payloads (converted by ``to_yaml_dict``)
    
    Example:
        >>> class Beam(PhysicsBaseModel):
        ...     energy: float = Field(gt=0, description="Beam energy in eV")
        
        >>> Beam(energy=1e9).energy
        1000000000.0
    """
    
    model_config = ConfigDict(
        validate_assignment=True,        # Validate on attribute assignment
        extra="forbid",                  # Reject unknown fields for safety
        arbitrary_types_allowed=True,    # Allow numpy arrays
    )
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create instance from a plain dictionary.
        
        Args:
            data: Dictionary with model field values
            
        Returns:
            Instance of the model
        """
        return cls(**data)
    
    def to_yaml_dict(self) -> Dict[str, Any]:
        """
        Convert to YAML-compatible dictionary.
        
        Numpy arrays and scalars are turned into plain Python lists and
        numbers so the result can be handed to ``yaml.safe_dump``.
        
        Returns:
            Dictionary suitable for YAML serialization
        """
        data = self.model_dump()
        
        def convert_numpy_types(obj):
            if isinstance(obj, np.ndarray):
                return obj.tolist()
            elif isinstance(obj, (np.float64, np.float32)):
                return float(obj)
            elif isinstance(obj, (np.int64, np.int32)):
                return int(obj)
            elif isinstance(obj, dict):
                return {k: convert_numpy_types(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert_numpy_types(item) for item in obj]
            return obj
        
        return convert_numpy_types(data)
