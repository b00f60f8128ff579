"""Base model for all qmkwrap Pydantic models.

This module provides a base model class that enforces consistent validation and
serialization behavior across all qmkwrap models.
"""

from pydantic import BaseModel, ConfigDict


class QmkWrapBaseModel(BaseModel):
    """Base model class for all qmkwrap Pydantic models."""

    model_config = ConfigDict(
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

