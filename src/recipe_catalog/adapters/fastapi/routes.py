"""FastAPI adapter – recipe routes.

Only the catalog's own endpoints live here; authentication is supplied by
the host application through the :func:`is_authenticated` dependency.
"""
from __future__ import annotations

from typing import Any

from bson import ObjectId
from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from recipe_catalog.application.query import RecipeQueryExecutor, parse_filter
from recipe_catalog.application.recipes import RecipeCatalog
from recipe_catalog.kernel.errors import NotFoundError


class RecipePatch(BaseModel):
    """Body of ``PATCH /recipes/{id}``."""

    rating: float | None = None
    oldRating: float | None = None
    view: bool = False


async def is_authenticated() -> bool:
    """Whether the caller is a signed-in chef. Override in the host app."""
    return False


def query_params(request: Request) -> dict[str, Any]:
    """Flatten the query string; repeated keys become lists."""
    params: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        params[key] = values[0] if len(values) == 1 else values
    return params


def to_json(data: Any) -> Any:
    return jsonable_encoder(data, custom_encoder={ObjectId: str})


def create_recipe_router(executor: RecipeQueryExecutor, catalog: RecipeCatalog) -> APIRouter:
    router = APIRouter(prefix="/recipes", tags=["Recipes"])

    @router.get("", summary="Filter, sort and paginate recipes")
    async def list_recipes(request: Request) -> Any:
        recipe_filter = parse_filter(query_params(request))
        return to_json(await executor.query(recipe_filter))

    @router.get("/{recipe_id}", summary="Get a recipe by its id")
    async def get_recipe(recipe_id: int) -> Any:
        recipe = await catalog.fetch_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        doc = recipe.to_document()
        doc["_id"] = recipe.row_id
        return to_json(doc)

    @router.patch("/{recipe_id}", status_code=204, summary="Rate or count a view of a recipe")
    async def patch_recipe(
        recipe_id: int,
        body: RecipePatch,
        authenticated: bool = Depends(is_authenticated),
    ) -> None:
        await catalog.update_recipe_stats(
            recipe_id,
            rating=body.rating,
            view=body.view,
            authenticated=authenticated,
            old_rating=body.oldRating,
        )

    return router


__all__ = ["RecipePatch", "create_recipe_router", "is_authenticated", "query_params"]
