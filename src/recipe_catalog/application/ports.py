"""Application ports – the document-store interface the catalog consumes."""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

Document = dict[str, Any]


class SearchTokenRejected(Exception):
    """The store refused a ``searchAfter`` position as structurally invalid."""


@runtime_checkable
class RecipeStore(Protocol):
    """Minimal document-store surface used by the query engine.

    ``sort`` is an ordered sequence of ``(field, direction)`` pairs, direction
    being ``1`` or ``-1``.  Implementations raise :class:`SearchTokenRejected`
    when a ``$search`` stage's ``searchAfter`` cannot be used; any other
    failure propagates as the driver's own exception.
    """

    async def find(
        self, predicate: Document, sort: Sequence[tuple[str, int]], limit: int
    ) -> list[Document]: ...

    async def aggregate(self, pipeline: list[Document]) -> list[Document]: ...

    async def find_one(self, predicate: Document) -> Document | None: ...

    async def count(self, predicate: Document) -> int: ...

    async def upsert(self, key: Document, document: Document) -> Any: ...

    async def update_one(self, predicate: Document, update: Document) -> int: ...


__all__ = ["Document", "RecipeStore", "SearchTokenRejected"]
