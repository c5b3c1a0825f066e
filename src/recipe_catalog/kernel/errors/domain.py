"""Domain errors – caller-caused input problems and missing resources."""

from __future__ import annotations

from typing import Any

from recipe_catalog.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures; the message is
    the first one, verbatim, so it can be returned to the client as is.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        param: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.param = param
        if errors is None:
            errors = [{"param": param, "message": message}] if param else []
        self.errors: list[dict[str, Any]] = errors

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class TokenError(DomainError):
    """A continuation token was rejected by the store as unusable."""

    default_code = "invalid_token"

    def __init__(self, token: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f'Token "{token}" is not a valid searchSequenceToken',
            **kwargs,
        )
        self.token = token


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} with ID {identifier} not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "NotFoundError",
    "TokenError",
    "ValidationError",
]
