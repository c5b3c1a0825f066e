"""FastAPI adapter – application factory."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

from fastapi import FastAPI

from recipe_catalog.adapters.fastapi.exception_mapper import RecipeExceptionMapper
from recipe_catalog.adapters.fastapi.routes import create_recipe_router
from recipe_catalog.adapters.mongodb import connect
from recipe_catalog.application.ports import RecipeStore
from recipe_catalog.application.query import RecipeQueryExecutor
from recipe_catalog.application.recipes import RecipeCatalog
from recipe_catalog.config import CatalogSettings, load_settings
from recipe_catalog.observability.logging import JsonLoggerFactory


def create_app(
    store: RecipeStore,
    settings: CatalogSettings | None = None,
    lifespan: Callable[[FastAPI], Any] | None = None,
) -> FastAPI:
    """Build the catalog app around an already constructed *store*."""
    executor = (
        RecipeQueryExecutor.from_settings(store, settings)
        if settings is not None
        else RecipeQueryExecutor(store)
    )
    app = FastAPI(title="Recipe catalog", version="0.1.0", lifespan=lifespan)
    app.include_router(create_recipe_router(executor, RecipeCatalog(store)))
    RecipeExceptionMapper().register(app)
    return app


def create_app_from_env(env_file: str | None = ".env") -> FastAPI:
    """Build the app from ``RECIPES_*`` settings with a motor-backed store."""
    settings = load_settings(env_file)
    JsonLoggerFactory.configure(level=settings.log_level_number, json=settings.log_json)
    client, store = connect(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        await store.ensure_indexes()
        yield
        client.close()

    return create_app(store, settings, lifespan=lifespan)


__all__ = ["create_app", "create_app_from_env"]
