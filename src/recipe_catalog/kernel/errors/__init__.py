"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── TokenError
    │   └── NotFoundError
    └── InfrastructureError  (infrastructure.py)
        └── StoreError
"""

from recipe_catalog.kernel.errors.base import BaseError
from recipe_catalog.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    TokenError,
    ValidationError,
)
from recipe_catalog.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "StoreError",
    "TokenError",
    "ValidationError",
]
