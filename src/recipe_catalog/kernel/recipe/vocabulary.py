"""Closed vocabularies for recipe tags and the sortable fields."""
from __future__ import annotations

from typing import Final, Literal, TypeGuard

SPICE_LEVELS: Final[tuple[str, ...]] = ("none", "mild", "spicy")

# Dish types as reported by the upstream recipe API.
MEAL_TYPES: Final[tuple[str, ...]] = (
    "main course",
    "side dish",
    "dessert",
    "appetizer",
    "salad",
    "bread",
    "breakfast",
    "soup",
    "beverage",
    "sauce",
    "marinade",
    "fingerfood",
    "snack",
    "drink",
    "lunch",
    "dinner",
    "main dish",
    "morning meal",
    "brunch",
    "starter",
    "antipasti",
    "antipasto",
    "hor d'oeuvre",
    "condiment",
    "dip",
    "spread",
)

CUISINES: Final[tuple[str, ...]] = (
    "African",
    "Asian",
    "American",
    "British",
    "Cajun",
    "Caribbean",
    "Chinese",
    "Eastern European",
    "European",
    "French",
    "German",
    "Greek",
    "Indian",
    "Irish",
    "Italian",
    "Japanese",
    "Jewish",
    "Korean",
    "Latin American",
    "Mediterranean",
    "Mexican",
    "Middle Eastern",
    "Nordic",
    "Southern",
    "Spanish",
    "Thai",
    "Vietnamese",
)

RecipeSortField = Literal["calories", "health-score", "rating", "views"]

# Calories is always the first element of ``nutrients``.
SORT_FIELD_PATHS: Final[dict[str, str]] = {
    "calories": "nutrients.0.amount",
    "health-score": "healthScore",
    "rating": "averageRating",
    "views": "views",
}

SORT_FIELDS: Final[tuple[str, ...]] = tuple(SORT_FIELD_PATHS)

CALORIES_NUTRIENT: Final[str] = "Calories"


def is_sort_field(value: str) -> TypeGuard[RecipeSortField]:
    return value in SORT_FIELD_PATHS


__all__ = [
    "CALORIES_NUTRIENT",
    "CUISINES",
    "MEAL_TYPES",
    "RecipeSortField",
    "SORT_FIELDS",
    "SORT_FIELD_PATHS",
    "SPICE_LEVELS",
    "is_sort_field",
]
