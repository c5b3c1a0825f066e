"""Sort compiler – ordered sort keys for the find and search paths."""
from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import Any

from recipe_catalog.application.query.cursor import cursor_path
from recipe_catalog.application.query.filter import RecipeFilter
from recipe_catalog.kernel.recipe import SORT_FIELD_PATHS

ID_FIELD = "_id"
SCORE_FIELD = "score"


class SortDirection(IntEnum):
    ASC = 1
    DESC = -1


@dataclasses.dataclass(frozen=True)
class SortKey:
    """One sort criterion. ``relevance`` keys sort on the search score."""

    field: str
    direction: SortDirection = SortDirection.ASC
    relevance: bool = False


TIE_BREAK = SortKey(ID_FIELD, SortDirection.ASC)
RELEVANCE = SortKey(SCORE_FIELD, SortDirection.DESC, relevance=True)


def compile_sort(recipe_filter: RecipeFilter) -> tuple[SortKey, ...]:
    """Return the sort keys for *recipe_filter*, always ending in the ``_id`` tie-break.

    ``sort=calories`` while searching orders on the materialized ``calories``
    field in a stage of its own; the relevance score takes no part there.
    """
    direction = SortDirection.ASC if recipe_filter.ascending else SortDirection.DESC

    if recipe_filter.sort is None:
        if recipe_filter.has_query:
            return (RELEVANCE, TIE_BREAK)
        return (TIE_BREAK,)

    if not recipe_filter.has_query:
        return (SortKey(SORT_FIELD_PATHS[recipe_filter.sort], direction), TIE_BREAK)

    if recipe_filter.uses_compound_cursor:
        path = cursor_path(recipe_filter.sort, has_query=True)
        return (SortKey(path, direction), TIE_BREAK)

    return (SortKey(SORT_FIELD_PATHS[recipe_filter.sort], direction), RELEVANCE, TIE_BREAK)


def to_mongo_sort(keys: tuple[SortKey, ...]) -> list[tuple[str, int]]:
    """Render plain keys as ``find().sort()`` pairs."""
    if any(key.relevance for key in keys):
        raise ValueError("relevance can only be sorted on inside the search stage")
    return [(key.field, int(key.direction)) for key in keys]


def to_sort_stage(keys: tuple[SortKey, ...]) -> dict[str, int]:
    """Render plain keys as a ``$sort`` stage body."""
    return dict(to_mongo_sort(keys))


def to_search_sort(keys: tuple[SortKey, ...]) -> dict[str, Any]:
    """Render keys as the ``sort`` option of a ``$search`` stage."""
    rendered: dict[str, Any] = {}
    for key in keys:
        if key.relevance:
            meta: dict[str, Any] = {"$meta": "searchScore"}
            if key.direction is SortDirection.ASC:
                meta["order"] = 1
            rendered[key.field] = meta
        else:
            rendered[key.field] = int(key.direction)
    return rendered


__all__ = [
    "ID_FIELD",
    "RELEVANCE",
    "SCORE_FIELD",
    "SortDirection",
    "SortKey",
    "TIE_BREAK",
    "compile_sort",
    "to_mongo_sort",
    "to_search_sort",
    "to_sort_stage",
]
