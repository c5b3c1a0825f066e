"""Infrastructure errors – backing-store failures."""

from __future__ import annotations

from typing import Any

from recipe_catalog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The document store failed a read or write.

    The message is generic. The driver exception travels as
    ``cause`` and is logged, never returned to the client.
    """

    default_code = "internal_error"

    def __init__(
        self,
        message: str = "Internal error, try again later",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = ["InfrastructureError", "StoreError"]
