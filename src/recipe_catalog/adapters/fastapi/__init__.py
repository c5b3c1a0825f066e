"""FastAPI adapter – recipe routes, exception mapper and app factory."""
from recipe_catalog.adapters.fastapi.app import create_app, create_app_from_env
from recipe_catalog.adapters.fastapi.exception_mapper import RecipeExceptionMapper
from recipe_catalog.adapters.fastapi.routes import (
    RecipePatch,
    create_recipe_router,
    is_authenticated,
)

__all__ = [
    "RecipeExceptionMapper",
    "RecipePatch",
    "create_app",
    "create_app_from_env",
    "create_recipe_router",
    "is_authenticated",
]
