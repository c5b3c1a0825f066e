"""Query compiler – RecipeFilter to a store predicate.

The predicate is the same for the find path and the search path; on the
search path it becomes the ``$match`` stage after ``$search``. The free-text
query never appears here.
"""
from __future__ import annotations

from typing import Any

from recipe_catalog.application.query.filter import RecipeFilter
from recipe_catalog.kernel.recipe import CALORIES_NUTRIENT

# (filter attribute, stored field)
FLAG_FIELDS: tuple[tuple[str, str], ...] = (
    ("vegetarian", "isVegetarian"),
    ("vegan", "isVegan"),
    ("gluten_free", "isGlutenFree"),
    ("healthy", "isHealthy"),
    ("cheap", "isCheap"),
    ("sustainable", "isSustainable"),
)

SET_FIELDS: tuple[tuple[str, str], ...] = (
    ("spice_levels", "spiceLevel"),
    ("types", "types"),
    ("cultures", "culture"),
)


def compile_predicate(recipe_filter: RecipeFilter) -> dict[str, Any]:
    """Return the structured predicate for *recipe_filter*, without any cursor."""
    predicate: dict[str, Any] = {}

    # Both calorie bounds share one $elemMatch on the Calories nutrient.
    amount: dict[str, Any] = {}
    if recipe_filter.min_cals is not None:
        amount["$gte"] = recipe_filter.min_cals
    if recipe_filter.max_cals is not None:
        amount["$lte"] = recipe_filter.max_cals
    if amount:
        predicate["nutrients"] = {
            "$elemMatch": {"name": CALORIES_NUTRIENT, "amount": amount}
        }

    for attr, field in FLAG_FIELDS:
        value = getattr(recipe_filter, attr)
        if value is not None:
            predicate[field] = value

    if recipe_filter.rating is not None:
        predicate["averageRating"] = {"$gte": recipe_filter.rating}

    for attr, field in SET_FIELDS:
        values = getattr(recipe_filter, attr)
        if values:
            predicate[field] = {"$in": list(values)}

    return predicate


__all__ = ["FLAG_FIELDS", "SET_FIELDS", "compile_predicate"]
