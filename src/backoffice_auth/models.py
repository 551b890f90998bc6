"""Base Pydantic models for backoffice-auth.

This module provides the base model class that all package Pydantic models inherit from.
It establishes consistent configuration across all models including:

- Strict field validation (no extra fields allowed)
- Immutable instances for thread safety

Example:
    >>> from backoffice_auth.models import SdkBaseModel
    >>>
    >>> class ProviderSummary(SdkBaseModel):
    ...     authentication_type: str
    ...     caption: str | None = None
    >>>
    >>> ProviderSummary(authentication_type="Umbraco.Google").model_dump()
    {'authentication_type': 'Umbraco.Google', 'caption': None}
"""

from pydantic import BaseModel, ConfigDict


class SdkBaseModel(BaseModel):
    """Base model for all backoffice-auth Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable for thread safety

    Config models that are merged or patched after loading override
    ``model_config`` with ``frozen=False``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
