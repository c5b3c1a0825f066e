"""Recipe catalog use cases – persistence and rating/view statistics."""
from __future__ import annotations

from typing import Any

from recipe_catalog.application.ports import RecipeStore
from recipe_catalog.application.query.filter import RATING_BOUNDS, sanitize_number
from recipe_catalog.kernel.errors import NotFoundError, StoreError
from recipe_catalog.kernel.recipe import Recipe
from recipe_catalog.observability.logging import get_logger

logger = get_logger(__name__)


def next_rating(
    average: float | None,
    total: int,
    rating: float,
    old_rating: float | None = None,
) -> tuple[float, int]:
    """Return the new ``(average, total)`` after a chef rates a recipe.

    A re-rating (``old_rating`` given on a recipe that already has ratings)
    keeps the total and shifts the average by the difference.
    """
    if old_rating is not None and average is not None and total > 0:
        return average + (rating - old_rating) / total, total
    new_total = total + 1
    if average is None:
        return rating, new_total
    return (average * total + rating) / new_total, new_total


class RecipeCatalog:
    """Reads and writes single recipes keyed by their upstream id."""

    def __init__(self, store: RecipeStore) -> None:
        self._store = store

    async def save_recipe(self, recipe: Recipe) -> Any:
        """Upsert *recipe* on its external id and return the stored row id."""
        try:
            return await self._store.upsert({"id": recipe.id}, recipe.to_document())
        except Exception as exc:
            logger.error("recipe.save_failed", recipe_id=recipe.id, name=recipe.name, exc_info=exc)
            raise StoreError(cause=exc) from exc

    async def fetch_recipe(self, recipe_id: int) -> Recipe | None:
        try:
            doc = await self._store.find_one({"id": recipe_id})
        except Exception as exc:
            logger.error("recipe.fetch_failed", recipe_id=recipe_id, exc_info=exc)
            raise StoreError(cause=exc) from exc
        return Recipe.from_document(doc) if doc is not None else None

    async def recipe_exists(self, recipe_id: int) -> bool:
        try:
            return await self._store.count({"id": recipe_id}) > 0
        except Exception as exc:
            logger.error("recipe.count_failed", recipe_id=recipe_id, exc_info=exc)
            raise StoreError(cause=exc) from exc

    async def update_recipe_stats(
        self,
        recipe_id: int,
        *,
        rating: Any = None,
        view: bool = False,
        authenticated: bool = False,
        old_rating: Any = None,
    ) -> None:
        """Record a rating and/or a view on a recipe.

        Ratings only count for authenticated chefs; views are anonymous.

        Raises
        ------
        ValidationError
            When ``rating`` or ``old_rating`` is outside 1-5.
        NotFoundError
            When no recipe has *recipe_id*.
        StoreError
            When the store read or write fails.
        """
        if rating is not None:
            rating = sanitize_number("rating", rating, RATING_BOUNDS)
        if old_rating is not None:
            old_rating = sanitize_number("oldRating", old_rating, RATING_BOUNDS)

        try:
            doc = await self._store.find_one({"id": recipe_id})
        except Exception as exc:
            logger.error("recipe.stats_read_failed", recipe_id=recipe_id, exc_info=exc)
            raise StoreError("Failed to update the recipe's stats", cause=exc) from exc
        if doc is None:
            logger.warning("recipe.not_found", recipe_id=recipe_id)
            raise NotFoundError("Recipe", recipe_id)

        update: dict[str, Any] = {}
        if rating is not None and authenticated:
            average, total = next_rating(
                doc.get("averageRating"), doc.get("totalRatings", 0), rating, old_rating
            )
            update["$set"] = {"averageRating": average, "totalRatings": total}
        if view:
            update["$inc"] = {"views": 1}
        if not update:
            return

        try:
            await self._store.update_one({"id": recipe_id}, update)
        except Exception as exc:
            logger.error("recipe.stats_write_failed", recipe_id=recipe_id, exc_info=exc)
            raise StoreError("Failed to update the recipe's stats", cause=exc) from exc


__all__ = ["RecipeCatalog", "next_rating"]
