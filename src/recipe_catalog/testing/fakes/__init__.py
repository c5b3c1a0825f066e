"""Testing fakes – in-memory doubles for application ports."""
from recipe_catalog.testing.fakes.recipe_store import InMemoryRecipeStore

__all__ = ["InMemoryRecipeStore"]
