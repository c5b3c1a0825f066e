"""Testing support – in-memory store fake and recipe data generators."""

from recipe_catalog.testing.fakes import InMemoryRecipeStore
from recipe_catalog.testing.generators import RecipeBuilder, recipe_document_strategy

__all__ = ["InMemoryRecipeStore", "RecipeBuilder", "recipe_document_strategy"]
