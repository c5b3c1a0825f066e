"""Query plans – the find path and the search path as one tagged variant.

A request with free text always becomes a :class:`SearchQuery`; everything
else becomes a :class:`PlainQuery`. The choice is made once in
:func:`build_plan` and nothing downstream re-derives it.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Union

from recipe_catalog.application.query.cursor import (
    MATERIALIZED_PATHS,
    cursor_clause,
    simple_clause,
)
from recipe_catalog.application.query.filter import RecipeFilter
from recipe_catalog.application.query.predicate import compile_predicate
from recipe_catalog.application.query.sort import (
    SortKey,
    compile_sort,
    to_mongo_sort,
    to_search_sort,
    to_sort_stage,
)

MAX_DOCS = 100
DEFAULT_SEARCH_INDEX = "recipe-name"


@dataclasses.dataclass(frozen=True)
class PlainQuery:
    predicate: dict[str, Any]
    sort: tuple[SortKey, ...]
    limit: int = MAX_DOCS

    def mongo_sort(self) -> list[tuple[str, int]]:
        return to_mongo_sort(self.sort)


@dataclasses.dataclass(frozen=True)
class SearchQuery:
    """``$search`` followed by the optional materialize/match/sort stages.

    ``sequence_tokens`` is true when pagination uses the search index's own
    ``searchSequenceToken`` rather than a compound cursor.
    """

    search: dict[str, Any]
    match: dict[str, Any]
    materialize: dict[str, Any] | None = None
    sort: tuple[SortKey, ...] | None = None
    limit: int = MAX_DOCS
    sequence_tokens: bool = True

    def pipeline(self) -> list[dict[str, Any]]:
        stages: list[dict[str, Any]] = [{"$search": self.search}]
        if self.materialize:
            stages.append({"$addFields": self.materialize})
        if self.match:
            stages.append({"$match": self.match})
        if self.sort:
            stages.append({"$sort": to_sort_stage(self.sort)})
        stages.append({"$limit": self.limit})
        if self.sequence_tokens:
            stages.append({"$addFields": {"token": {"$meta": "searchSequenceToken"}}})
        if self.materialize:
            stages.append({"$project": {field: 0 for field in self.materialize}})
        return stages


QueryPlan = Union[PlainQuery, SearchQuery]


def _materialize(sort_field: str) -> dict[str, Any]:
    # Only calories lives inside an array; it is read from the first nutrient.
    return {MATERIALIZED_PATHS[sort_field]: {"$arrayElemAt": ["$nutrients.amount", 0]}}


def build_plan(
    recipe_filter: RecipeFilter,
    *,
    index: str = DEFAULT_SEARCH_INDEX,
    limit: int = MAX_DOCS,
) -> QueryPlan:
    """Compile *recipe_filter* into the plan for its execution path."""
    predicate = compile_predicate(recipe_filter)
    sort = compile_sort(recipe_filter)
    cursor = recipe_filter.cursor()

    if not recipe_filter.has_query:
        if cursor is not None:
            predicate.update(
                cursor_clause(cursor, has_query=False, ascending=recipe_filter.ascending)
            )
        elif recipe_filter.token is not None:
            predicate.update(simple_clause(recipe_filter.token))
        return PlainQuery(predicate=predicate, sort=sort, limit=limit)

    search: dict[str, Any] = {
        "index": index,
        "text": {"query": recipe_filter.query, "path": {"wildcard": "*"}},
    }

    if recipe_filter.uses_compound_cursor:
        assert recipe_filter.sort is not None
        if cursor is not None:
            predicate.update(
                cursor_clause(cursor, has_query=True, ascending=recipe_filter.ascending)
            )
        return SearchQuery(
            search=search,
            match=predicate,
            materialize=_materialize(recipe_filter.sort),
            sort=sort,
            limit=limit,
            sequence_tokens=False,
        )

    search["sort"] = to_search_sort(sort)
    if recipe_filter.token is not None:
        search["searchAfter"] = recipe_filter.token
    return SearchQuery(search=search, match=predicate, limit=limit)


__all__ = [
    "DEFAULT_SEARCH_INDEX",
    "MAX_DOCS",
    "PlainQuery",
    "QueryPlan",
    "SearchQuery",
    "build_plan",
]
