"""Recipe domain model and vocabularies."""
from recipe_catalog.kernel.recipe.model import (
    Ingredient,
    Instruction,
    Nutrient,
    Recipe,
    Step,
    StepItem,
)
from recipe_catalog.kernel.recipe.vocabulary import (
    CALORIES_NUTRIENT,
    CUISINES,
    MEAL_TYPES,
    SORT_FIELD_PATHS,
    SORT_FIELDS,
    SPICE_LEVELS,
    RecipeSortField,
    is_sort_field,
)

__all__ = [
    "CALORIES_NUTRIENT",
    "CUISINES",
    "Ingredient",
    "Instruction",
    "MEAL_TYPES",
    "Nutrient",
    "Recipe",
    "RecipeSortField",
    "SORT_FIELDS",
    "SORT_FIELD_PATHS",
    "SPICE_LEVELS",
    "Step",
    "StepItem",
    "is_sort_field",
]
