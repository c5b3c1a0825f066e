"""Recipe query engine – filter model, compilers, cursors and executor."""
from recipe_catalog.application.query.cursor import (
    CursorToken,
    cursor_clause,
    encode_next_token,
    simple_clause,
)
from recipe_catalog.application.query.executor import (
    QueryState,
    RecipeQueryExecutor,
    filter_recipes,
)
from recipe_catalog.application.query.filter import RecipeFilter, parse_filter
from recipe_catalog.application.query.plan import (
    MAX_DOCS,
    PlainQuery,
    QueryPlan,
    SearchQuery,
    build_plan,
)
from recipe_catalog.application.query.predicate import compile_predicate
from recipe_catalog.application.query.sort import (
    SortDirection,
    SortKey,
    compile_sort,
    to_mongo_sort,
    to_search_sort,
)

__all__ = [
    "CursorToken",
    "MAX_DOCS",
    "PlainQuery",
    "QueryPlan",
    "QueryState",
    "RecipeFilter",
    "RecipeQueryExecutor",
    "SearchQuery",
    "SortDirection",
    "SortKey",
    "build_plan",
    "compile_predicate",
    "compile_sort",
    "cursor_clause",
    "encode_next_token",
    "filter_recipes",
    "parse_filter",
    "simple_clause",
    "to_mongo_sort",
    "to_search_sort",
]
