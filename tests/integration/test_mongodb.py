"""Integration tests for the motor-backed recipe store.

Run with::

    pytest -m integration tests/integration/test_mongodb.py -v

Requires Docker (used automatically via ``testcontainers``). A plain MongoDB
container has no Atlas Search, so only the find path and the single-recipe
operations are covered here.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from testcontainers.mongodb import MongoDbContainer

from recipe_catalog.adapters.mongodb import MotorRecipeStore
from recipe_catalog.application.query import RecipeQueryExecutor, parse_filter
from recipe_catalog.application.recipes import RecipeCatalog
from recipe_catalog.testing import RecipeBuilder


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


recipe = RecipeBuilder()


# ---------------------------------------------------------------------------
# MongoDB fixture (one container per module)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def mongo_uri() -> str:  # type: ignore[return]
    with MongoDbContainer("mongo:7.0") as mongo:
        yield mongo.get_connection_url()


@pytest.fixture()
def collection_name(request: Any) -> str:
    safe_name = request.node.nodeid.replace("/", "_").replace("::", "_").replace(".", "_")
    return safe_name[-60:]


def _with_store(mongo_uri: str, name: str, body: Any) -> Any:
    """Run ``body(store)`` on a fresh motor client inside one event loop."""
    import motor.motor_asyncio as motor_async

    async def run() -> Any:
        client = motor_async.AsyncIOMotorClient(mongo_uri)
        try:
            store = MotorRecipeStore(client["recipes_it"][name])
            await store.ensure_indexes()
            return await body(store)
        finally:
            client.close()

    return _run(run())


@pytest.mark.integration
class TestMotorRecipeStore:
    def test_save_fetch_and_upsert(self, mongo_uri: str, collection_name: str) -> None:
        async def body(store: MotorRecipeStore) -> Any:
            catalog = RecipeCatalog(store)
            first = await catalog.save_recipe(recipe(id=1, name="v1"))
            second = await catalog.save_recipe(recipe(id=1, name="v2"))
            return first, second, await catalog.fetch_recipe(1), await store.count({})

        first, second, loaded, count = _with_store(mongo_uri, collection_name, body)
        assert first == second
        assert loaded.name == "v2"
        assert loaded.row_id == first
        assert count == 1

    def test_update_stats(self, mongo_uri: str, collection_name: str) -> None:
        async def body(store: MotorRecipeStore) -> Any:
            catalog = RecipeCatalog(store)
            await catalog.save_recipe(recipe(id=3))
            await catalog.update_recipe_stats(3, rating=4, view=True, authenticated=True)
            await catalog.update_recipe_stats(3, view=True)
            return await catalog.fetch_recipe(3)

        loaded = _with_store(mongo_uri, collection_name, body)
        assert (loaded.average_rating, loaded.total_ratings, loaded.views) == (4, 1, 2)

    def test_sorted_pagination(self, mongo_uri: str, collection_name: str) -> None:
        views = [4, None, 7, 4, 1, None, 9]

        async def body(store: MotorRecipeStore) -> Any:
            for i, v in enumerate(views):
                doc = recipe.document(id=100 + i)
                if v is None:
                    del doc["views"]
                else:
                    doc["views"] = v
                await store.upsert({"id": doc["id"]}, doc)

            executor = RecipeQueryExecutor(store, max_docs=2)
            seen: list[Any] = []
            params: dict[str, Any] = {"sort": "views", "asc": ""}
            for _ in range(10):
                page = await executor.query(parse_filter(params))
                if not page:
                    break
                seen.extend(page)
                params = {"sort": "views", "asc": "", "token": page[-1]["token"]}
            return seen

        seen = _with_store(mongo_uri, collection_name, body)
        assert [r.get("views") for r in seen] == [None, None, 1, 4, 4, 7, 9]
        assert len({r["_id"] for r in seen}) == len(views)

    def test_filters_and_cap(self, mongo_uri: str, collection_name: str) -> None:
        async def body(store: MotorRecipeStore) -> Any:
            for i in range(5):
                await store.upsert({"id": i}, recipe.document(id=i, is_vegan=i % 2 == 0, calories=100 * i))
            executor = RecipeQueryExecutor(store, max_docs=2)
            return await executor.query(parse_filter({"vegan": "", "maxCals": "400"}))

        rows = _with_store(mongo_uri, collection_name, body)
        assert [r["id"] for r in rows] == [0, 2]
