"""Base Pydantic models for credresolver.

This module provides the base model class that all credresolver Pydantic models
should inherit from. It establishes consistent configuration across all models:

- Strict field validation (no extra fields allowed)
- Immutable instances for thread safety

Example:
    >>> from credresolver.models import CredBaseModel
    >>>
    >>> class MyModel(CredBaseModel):
    ...     name: str
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test'}
"""

from pydantic import BaseModel, ConfigDict


class CredBaseModel(BaseModel):
    """Base model for all credresolver Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable so resolvers can be shared
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
