"""Unit tests for the Recipe entity and its vocabularies."""
from __future__ import annotations

import pytest
from bson import ObjectId

from recipe_catalog.kernel.recipe import (
    CUISINES,
    SORT_FIELD_PATHS,
    SPICE_LEVELS,
    Ingredient,
    Instruction,
    Nutrient,
    Recipe,
    Step,
    StepItem,
    is_sort_field,
)


def _recipe(**kwargs) -> Recipe:
    defaults = dict(
        id=7,
        name="Pho",
        summary="Beef noodle soup",
        types=["soup"],
        culture=["Vietnamese"],
        is_gluten_free=True,
        nutrients=[Nutrient("Calories", 420.5, "kcal"), Nutrient("Fat", 12, "g")],
        ingredients=[Ingredient(1, "rice noodles", 200, "g")],
        instructions=[
            Instruction(
                name="",
                steps=(
                    Step(
                        number=1,
                        step="Simmer the broth.",
                        ingredients=(StepItem(2, "beef bones", "bones.png"),),
                        equipment=(StepItem(3, "pot", "pot.png"),),
                    ),
                ),
            )
        ],
        average_rating=4.5,
        total_ratings=2,
        views=10,
    )
    defaults.update(kwargs)
    return Recipe(**defaults)


class TestVocabulary:
    def test_spice_levels(self) -> None:
        assert SPICE_LEVELS == ("none", "mild", "spicy")

    def test_cuisines_contain_examples(self) -> None:
        assert {"Greek", "Vietnamese", "Mexican"} <= set(CUISINES)

    def test_sort_fields(self) -> None:
        assert set(SORT_FIELD_PATHS) == {"calories", "health-score", "rating", "views"}
        assert SORT_FIELD_PATHS["calories"] == "nutrients.0.amount"
        assert is_sort_field("views")
        assert not is_sort_field("relevance")


class TestRecipeDocument:
    def test_document_uses_camel_case_keys(self) -> None:
        doc = _recipe().to_document()
        assert doc["isGlutenFree"] is True
        assert doc["averageRating"] == 4.5
        assert doc["totalRatings"] == 2
        assert doc["nutrients"][0] == {"name": "Calories", "amount": 420.5, "unit": "kcal"}
        assert "_id" not in doc
        assert "row_id" not in doc

    def test_round_trip(self) -> None:
        recipe = _recipe()
        row_id = ObjectId()
        loaded = Recipe.from_document({**recipe.to_document(), "_id": row_id})
        assert loaded.row_id == row_id
        assert loaded.instructions == recipe.instructions
        assert loaded.to_document() == recipe.to_document()

    def test_from_document_ignores_unknown_subdocument_keys(self) -> None:
        doc = _recipe().to_document()
        doc["ingredients"][0]["_id"] = ObjectId()
        doc["instructions"][0]["steps"][0]["equipment"][0]["temperature"] = None
        loaded = Recipe.from_document(doc)
        assert loaded.ingredients[0].name == "rice noodles"
        assert loaded.instructions[0].steps[0].equipment[0].name == "pot"

    def test_from_minimal_document(self) -> None:
        loaded = Recipe.from_document({"id": 1, "name": "Toast"})
        assert loaded.views == 0
        assert loaded.average_rating is None
        assert loaded.calories is None


class TestRecipeInvariants:
    def test_calories_is_first_nutrient(self) -> None:
        assert _recipe().calories == 420.5

    def test_negative_views_rejected(self) -> None:
        with pytest.raises(ValueError):
            _recipe(views=-1)

    def test_negative_total_ratings_rejected(self) -> None:
        with pytest.raises(ValueError):
            _recipe(total_ratings=-1)
