"""Query executor – runs a recipe filter against the store.

States per request::

    determine-path -> compile -> execute -> paginate-append -> done
                         \\          \\
                          +-> failed <+
"""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Mapping

from recipe_catalog.application.ports import Document, RecipeStore, SearchTokenRejected
from recipe_catalog.application.query.cursor import encode_next_token
from recipe_catalog.application.query.filter import RecipeFilter, parse_filter, validate_token
from recipe_catalog.application.query.plan import (
    DEFAULT_SEARCH_INDEX,
    MAX_DOCS,
    PlainQuery,
    QueryPlan,
    build_plan,
)
from recipe_catalog.kernel.errors import StoreError, TokenError, ValidationError
from recipe_catalog.observability.logging import get_logger

if TYPE_CHECKING:
    from recipe_catalog.config import CatalogSettings

logger = get_logger(__name__)


class QueryState(str, enum.Enum):
    DETERMINE_PATH = "determine-path"
    COMPILE = "compile"
    EXECUTE = "execute"
    PAGINATE_APPEND = "paginate-append"
    DONE = "done"
    FAILED = "failed"


class RecipeQueryExecutor:
    """Run filtered, sorted, cursor-paginated recipe queries.

    Holds no per-request state; one instance can serve concurrent requests.
    Nothing here retries: store failures surface as :class:`StoreError`, a
    search position the store refuses surfaces as :class:`TokenError`.
    """

    def __init__(
        self,
        store: RecipeStore,
        *,
        search_index: str = DEFAULT_SEARCH_INDEX,
        max_docs: int = MAX_DOCS,
    ) -> None:
        self._store = store
        self._search_index = search_index
        self._max_docs = max_docs

    @classmethod
    def from_settings(cls, store: RecipeStore, settings: "CatalogSettings") -> "RecipeQueryExecutor":
        return cls(store, search_index=settings.search_index, max_docs=settings.max_docs)

    async def query(self, recipe_filter: RecipeFilter) -> list[Document]:
        """Return one page of recipe documents for *recipe_filter*.

        The last document carries the continuation ``token`` when there is one.
        """
        log = logger.bind(
            path="search" if recipe_filter.has_query else "find",
            sort=recipe_filter.sort,
        )
        log.debug("recipe_query.state", state=QueryState.DETERMINE_PATH.value)

        log.debug("recipe_query.state", state=QueryState.COMPILE.value)
        try:
            validate_token(recipe_filter)
            plan = build_plan(recipe_filter, index=self._search_index, limit=self._max_docs)
        except ValidationError:
            log.warning(
                "recipe_query.invalid",
                state=QueryState.FAILED.value,
                token=recipe_filter.token,
            )
            raise

        log.debug("recipe_query.state", state=QueryState.EXECUTE.value)
        rows = await self._execute(plan, recipe_filter, log)

        log.debug("recipe_query.state", state=QueryState.PAGINATE_APPEND.value)
        self._paginate(rows, recipe_filter)

        log.info("recipe_query.done", state=QueryState.DONE.value, count=len(rows))
        return rows

    async def _execute(self, plan: QueryPlan, recipe_filter: RecipeFilter, log: Any) -> list[Document]:
        try:
            if isinstance(plan, PlainQuery):
                log.debug("recipe_query.find", predicate=plan.predicate, sort=plan.mongo_sort())
                return await self._store.find(plan.predicate, plan.mongo_sort(), plan.limit)
            pipeline = plan.pipeline()
            log.debug("recipe_query.aggregate", pipeline=pipeline)
            return await self._store.aggregate(pipeline)
        except SearchTokenRejected as exc:
            log.warning(
                "recipe_query.token_rejected",
                state=QueryState.FAILED.value,
                token=recipe_filter.token,
            )
            raise TokenError(recipe_filter.token or "", cause=exc) from exc
        except Exception as exc:
            log.error("recipe_query.failed", state=QueryState.FAILED.value, exc_info=exc)
            raise StoreError(cause=exc) from exc

    @staticmethod
    def _paginate(rows: list[Document], recipe_filter: RecipeFilter) -> None:
        if recipe_filter.uses_compound_cursor:
            assert recipe_filter.sort is not None
            encode_next_token(rows, recipe_filter.sort)
        elif recipe_filter.uses_search_token:
            # Sequence tokens come back on every row; only the last one is kept.
            for row in rows[:-1]:
                row.pop("token", None)


async def filter_recipes(store: RecipeStore, params: Mapping[str, Any]) -> list[Document]:
    """Parse raw *params* and run them with a default executor."""
    return await RecipeQueryExecutor(store).query(parse_filter(params))


__all__ = ["QueryState", "RecipeQueryExecutor", "filter_recipes"]
