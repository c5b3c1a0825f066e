"""Continuation tokens – decoding into predicates, encoding from result pages.

Two token shapes exist:

* a bare row id (``_id`` hex string) for unsorted, unsearched pagination;
* a compound ``sortField:lastValue:rowId`` string whenever a sort field is
  active outside the search index, ``lastValue`` being ``null`` when the
  last row had no value for that field.

Searches sorted inside the search stage use the store's own opaque
search-sequence tokens, which are passed through untouched.
"""
from __future__ import annotations

import dataclasses
import enum
import math
from typing import Any

from bson import ObjectId

from recipe_catalog.kernel.errors import ValidationError
from recipe_catalog.kernel.recipe import SORT_FIELD_PATHS

NULL_LITERAL = "null"

# Sort fields that are materialized as a top-level field while searching.
MATERIALIZED_PATHS: dict[str, str] = {"calories": "calories"}


@dataclasses.dataclass(frozen=True)
class CursorToken:
    """Decoded compound token."""

    field: str
    value: int | float | None
    row_id: ObjectId

    def encode(self) -> str:
        value = NULL_LITERAL if self.value is None else _format_number(self.value)
        return f"{self.field}:{value}:{self.row_id}"

    @classmethod
    def decode(cls, text: str) -> "CursorToken":
        field, sep, rest = text.partition(":")
        value_text, sep2, row_text = rest.rpartition(":")
        if not (sep and sep2 and field and value_text) or field not in SORT_FIELD_PATHS:
            raise ValidationError(f'Token "{text}" is not a valid cursor', param="token")
        if not ObjectId.is_valid(row_text):
            raise ValidationError(
                f'Token "{text}" does not end with a valid ObjectId', param="token"
            )
        if value_text == NULL_LITERAL:
            value = None
        else:
            value = _parse_number(value_text)
            if value is None:
                raise ValidationError(
                    f'Token "{text}" has a non-numeric sort value', param="token"
                )
        return cls(field=field, value=value, row_id=ObjectId(row_text))


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_number(text: str) -> int | float | None:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


class _Beyond(enum.Enum):
    """Shape of the "strictly past the last value" branch."""

    GT_VALUE = "gt_value"
    GT_ZERO = "gt_zero"
    LT_VALUE_OR_NULL = "lt_value_or_null"
    OMIT = "omit"


class _PathSource(enum.Enum):
    STORED = "stored"
    MATERIALIZED = "materialized"


# (has_query, last value is null, ascending) -> (field path, beyond branch).
# Nulls sort lowest: ascending past a null starts at the first value above 0,
# descending past a null there is nothing but more nulls, and descending
# past a value the nulls still follow it.
_CLAUSE_TABLE: dict[tuple[bool, bool, bool], tuple[_PathSource, _Beyond]] = {
    (False, False, True): (_PathSource.STORED, _Beyond.GT_VALUE),
    (False, False, False): (_PathSource.STORED, _Beyond.LT_VALUE_OR_NULL),
    (False, True, True): (_PathSource.STORED, _Beyond.GT_ZERO),
    (False, True, False): (_PathSource.STORED, _Beyond.OMIT),
    (True, False, True): (_PathSource.MATERIALIZED, _Beyond.GT_VALUE),
    (True, False, False): (_PathSource.MATERIALIZED, _Beyond.LT_VALUE_OR_NULL),
    (True, True, True): (_PathSource.MATERIALIZED, _Beyond.GT_ZERO),
    (True, True, False): (_PathSource.MATERIALIZED, _Beyond.OMIT),
}


def cursor_path(field: str, *, has_query: bool) -> str:
    """Return the document path the cursor compares for sort *field*."""
    if has_query and field in MATERIALIZED_PATHS:
        return MATERIALIZED_PATHS[field]
    return SORT_FIELD_PATHS[field]


def cursor_clause(token: CursorToken, *, has_query: bool, ascending: bool) -> dict[str, Any]:
    """Return the ``$or`` clause resuming strictly after *token*."""
    source, beyond = _CLAUSE_TABLE[(has_query, token.value is None, ascending)]
    path = cursor_path(token.field, has_query=source is _PathSource.MATERIALIZED)

    branches: list[dict[str, Any]] = []
    if beyond is _Beyond.GT_VALUE:
        branches.append({path: {"$gt": token.value}})
    elif beyond is _Beyond.LT_VALUE_OR_NULL:
        branches.append({path: {"$lt": token.value}})
        branches.append({path: None})
    elif beyond is _Beyond.GT_ZERO:
        branches.append({path: {"$gt": 0}})
    branches.append({path: token.value, "_id": {"$gt": token.row_id}})
    return {"$or": branches}


def simple_clause(token: str) -> dict[str, Any]:
    """Return the clause resuming after row id *token* in insertion order."""
    return {"_id": {"$gt": ObjectId(token)}}


def read_sort_value(row: dict[str, Any], field: str) -> int | float | None:
    """Read the value of sort *field* from a stored recipe document."""
    if field == "calories":
        nutrients = row.get("nutrients") or []
        if not nutrients:
            return None
        return nutrients[0].get("amount")
    return row.get(SORT_FIELD_PATHS[field])


def encode_next_token(rows: list[dict[str, Any]], field: str) -> str | None:
    """Attach the compound token for the page *rows* to its last row.

    Returns the token, or ``None`` when the page is empty.
    """
    if not rows:
        return None
    last = rows[-1]
    token = CursorToken(
        field=field, value=read_sort_value(last, field), row_id=last["_id"]
    ).encode()
    last["token"] = token
    return token


__all__ = [
    "CursorToken",
    "MATERIALIZED_PATHS",
    "NULL_LITERAL",
    "cursor_clause",
    "cursor_path",
    "encode_next_token",
    "read_sort_value",
    "simple_clause",
]
