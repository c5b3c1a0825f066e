"""FastAPI adapter – RecipeExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from recipe_catalog.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    TokenError,
    ValidationError,
)


class RecipeExceptionMapper:
    """Register recipe_catalog error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "validation_error", "message": "...", "detail": {...}}

    Mappings
    --------
    ``ValidationError``     → 400
    ``TokenError``          → 400
    ``NotFoundError``       → 404
    ``DomainError``         → 422
    ``StoreError``          → 500
    ``InfrastructureError`` → 503
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (TokenError, 400),
            (NotFoundError, 404),
            (StoreError, 500),
            (InfrastructureError, 503),
            (DomainError, 422),
        ]

    def status_for(self, exc: BaseException) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""

        def make_handler(code: int) -> Callable[[Any, Any], Any]:
            def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                if isinstance(exc, BaseError):
                    body = exc.to_dict()
                else:
                    body = {"code": "error", "message": str(exc)}
                return JSONResponse(status_code=code, content=body)

            return handler

        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["RecipeExceptionMapper"]
