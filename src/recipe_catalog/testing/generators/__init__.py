"""Testing generators – recipe builders and property-based strategies."""
from recipe_catalog.testing.generators.builder import Builder, RecipeBuilder
from recipe_catalog.testing.generators.strategies import recipe_document_strategy

__all__ = ["Builder", "RecipeBuilder", "recipe_document_strategy"]
