"""
recipe_catalog – recipe query engine and catalog backend.

Import path convention::

    from recipe_catalog.kernel.errors import ValidationError
    from recipe_catalog.application.query import RecipeQueryExecutor, parse_filter
    from recipe_catalog.adapters.mongodb import MotorRecipeStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
