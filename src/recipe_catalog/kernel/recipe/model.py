"""Recipe entity and its document mapping.

Stored documents use the camelCase keys the catalog has always used
(``isVegetarian``, ``averageRating`` …); the dataclasses use snake_case.
"""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Nutrient:
    name: str
    amount: float
    unit: str

    def to_document(self) -> dict[str, Any]:
        return {"name": self.name, "amount": self.amount, "unit": self.unit}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Nutrient":
        return cls(name=doc["name"], amount=doc["amount"], unit=doc["unit"])


@dataclasses.dataclass(frozen=True)
class Ingredient:
    id: int
    name: str
    amount: float
    unit: str


@dataclasses.dataclass(frozen=True)
class StepItem:
    """An ingredient or piece of equipment referenced by an instruction step."""

    id: int
    name: str
    image: str


@dataclasses.dataclass(frozen=True)
class Step:
    number: int
    step: str
    ingredients: tuple[StepItem, ...] = ()
    equipment: tuple[StepItem, ...] = ()


@dataclasses.dataclass(frozen=True)
class Instruction:
    name: str
    steps: tuple[Step, ...] = ()


def _list_values(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: list(v) if isinstance(v, tuple) else v for k, v in pairs}


def _step_item(doc: dict[str, Any]) -> StepItem:
    return StepItem(id=doc["id"], name=doc["name"], image=doc["image"])


# (dataclass attribute, document key) for every scalar field that is renamed.
_RENAMED: tuple[tuple[str, str], ...] = (
    ("source_url", "sourceUrl"),
    ("health_score", "healthScore"),
    ("spice_level", "spiceLevel"),
    ("is_vegetarian", "isVegetarian"),
    ("is_vegan", "isVegan"),
    ("is_gluten_free", "isGlutenFree"),
    ("is_healthy", "isHealthy"),
    ("is_cheap", "isCheap"),
    ("is_sustainable", "isSustainable"),
    ("average_rating", "averageRating"),
    ("total_ratings", "totalRatings"),
)
_PLAIN: tuple[str, ...] = (
    "id", "name", "url", "image", "credit", "time", "servings", "summary", "views",
)


@dataclasses.dataclass
class Recipe:
    """A catalog recipe.

    ``id`` is the upstream recipe API id and the upsert key; ``row_id`` is the
    store's own identifier (``_id``) and is ``None`` until persisted.
    """

    id: int
    name: str
    summary: str = ""
    url: str = ""
    image: str = ""
    credit: str = ""
    source_url: str = ""
    health_score: float = 0
    time: int = 0
    servings: int = 0
    types: list[str] = dataclasses.field(default_factory=list)
    spice_level: str = "none"
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    is_healthy: bool = False
    is_cheap: bool = False
    is_sustainable: bool = False
    culture: list[str] = dataclasses.field(default_factory=list)
    nutrients: list[Nutrient] = dataclasses.field(default_factory=list)
    ingredients: list[Ingredient] = dataclasses.field(default_factory=list)
    instructions: list[Instruction] = dataclasses.field(default_factory=list)
    average_rating: float | None = None
    total_ratings: int = 0
    views: int = 0
    row_id: Any = None

    def __post_init__(self) -> None:
        if self.views < 0:
            raise ValueError("views must be >= 0")
        if self.total_ratings < 0:
            raise ValueError("total_ratings must be >= 0")

    @property
    def calories(self) -> float | None:
        if not self.nutrients:
            return None
        return self.nutrients[0].amount

    def to_document(self) -> dict[str, Any]:
        """Return the stored form, without ``_id``."""
        doc: dict[str, Any] = {key: getattr(self, key) for key in _PLAIN}
        for attr, key in _RENAMED:
            doc[key] = getattr(self, attr)
        doc["types"] = list(self.types)
        doc["culture"] = list(self.culture)
        doc["nutrients"] = [n.to_document() for n in self.nutrients]
        doc["ingredients"] = [dataclasses.asdict(i) for i in self.ingredients]
        # asdict keeps tuples; stored arrays are lists.
        doc["instructions"] = [
            dataclasses.asdict(i, dict_factory=_list_values) for i in self.instructions
        ]
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Recipe":
        kwargs: dict[str, Any] = {key: doc[key] for key in _PLAIN if key in doc}
        for attr, key in _RENAMED:
            if key in doc:
                kwargs[attr] = doc[key]
        kwargs["types"] = list(doc.get("types", []))
        kwargs["culture"] = list(doc.get("culture", []))
        kwargs["nutrients"] = [Nutrient.from_document(n) for n in doc.get("nutrients", [])]
        kwargs["ingredients"] = [
            Ingredient(id=i["id"], name=i["name"], amount=i["amount"], unit=i["unit"])
            for i in doc.get("ingredients", [])
        ]
        kwargs["instructions"] = [
            Instruction(
                name=ins["name"],
                steps=tuple(
                    Step(
                        number=s["number"],
                        step=s["step"],
                        ingredients=tuple(_step_item(x) for x in s.get("ingredients", [])),
                        equipment=tuple(_step_item(x) for x in s.get("equipment", [])),
                    )
                    for s in ins.get("steps", [])
                ),
            )
            for ins in doc.get("instructions", [])
        ]
        kwargs["row_id"] = doc.get("_id")
        return cls(**kwargs)


__all__ = ["Ingredient", "Instruction", "Nutrient", "Recipe", "Step", "StepItem"]
