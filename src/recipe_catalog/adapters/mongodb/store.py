"""MongoDB adapter — MotorRecipeStore."""

from __future__ import annotations

from typing import Any, Sequence

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import OperationFailure

from recipe_catalog.application.ports import Document, SearchTokenRejected
from recipe_catalog.config import CatalogSettings
from recipe_catalog.observability.logging import get_logger

logger = get_logger(__name__)


class MotorRecipeStore:
    """:class:`~recipe_catalog.application.ports.RecipeStore` on a motor collection.

    Full-text search needs an Atlas Search index (``recipe-name`` by
    default) on the collection; plain finds work on any deployment.

    Usage::

        client = AsyncIOMotorClient(uri)
        store = MotorRecipeStore(client["recipes"]["recipes"])
        rows = await store.find({"isVegan": True}, [("_id", 1)], 100)
    """

    def __init__(self, collection: Any) -> None:
        self._col = collection

    async def ensure_indexes(self) -> None:
        """Create the unique index on the upstream recipe id."""
        await self._col.create_index([("id", ASCENDING)], unique=True)

    async def find(
        self, predicate: Document, sort: Sequence[tuple[str, int]], limit: int
    ) -> list[Document]:
        cursor = self._col.find(predicate)
        if sort:
            cursor = cursor.sort(list(sort))
        return await cursor.limit(limit).to_list(length=limit)

    async def aggregate(self, pipeline: list[Document]) -> list[Document]:
        try:
            return await self._col.aggregate(pipeline).to_list(length=None)
        except OperationFailure as exc:
            # The server names the option it could not use in the message.
            if "searchAfter" in str(exc):
                raise SearchTokenRejected(str(exc)) from exc
            raise

    async def find_one(self, predicate: Document) -> Document | None:
        return await self._col.find_one(predicate)

    async def count(self, predicate: Document) -> int:
        return await self._col.count_documents(predicate)

    async def upsert(self, key: Document, document: Document) -> Any:
        """Update the document matching *key* or insert it; return its ``_id``."""
        doc = await self._col.find_one_and_update(
            key,
            {"$set": document},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return doc["_id"]

    async def update_one(self, predicate: Document, update: Document) -> int:
        result = await self._col.update_one(predicate, update)
        return result.matched_count


def connect(settings: CatalogSettings) -> tuple[AsyncIOMotorClient, MotorRecipeStore]:
    """Create the motor client and the recipe store described by *settings*.

    The client connects lazily; the caller owns it and must ``close()`` it.
    """
    client: AsyncIOMotorClient = AsyncIOMotorClient(settings.mongo_uri)
    collection = client[settings.database][settings.collection]
    logger.info(
        "mongodb.configured",
        mongo_uri=settings.mongo_uri,
        database=settings.database,
        collection=settings.collection,
    )
    return client, MotorRecipeStore(collection)


__all__ = ["MotorRecipeStore", "connect"]
