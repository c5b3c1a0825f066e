"""Recipe use cases."""
from recipe_catalog.application.recipes.service import RecipeCatalog, next_rating

__all__ = ["RecipeCatalog", "next_rating"]
