"""Recipe filter model – parsing and validation of raw query parameters."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Iterable, Mapping

from bson import ObjectId

from recipe_catalog.application.query.cursor import CursorToken
from recipe_catalog.kernel.errors import ValidationError
from recipe_catalog.kernel.recipe import CUISINES, MEAL_TYPES, SPICE_LEVELS, RecipeSortField, is_sort_field

CALORIE_BOUNDS: tuple[int, int] = (0, 2000)
RATING_BOUNDS: tuple[int, int] = (1, 5)

# (request parameter, filter attribute)
FLAG_PARAMS: tuple[tuple[str, str], ...] = (
    ("vegetarian", "vegetarian"),
    ("vegan", "vegan"),
    ("glutenFree", "gluten_free"),
    ("healthy", "healthy"),
    ("cheap", "cheap"),
    ("sustainable", "sustainable"),
)

# (accepted request parameters, filter attribute, vocabulary, label)
ENUM_PARAMS: tuple[tuple[tuple[str, ...], str, tuple[str, ...], str], ...] = (
    (("spiceLevels", "spiceLevel"), "spice_levels", SPICE_LEVELS, "spice level"),
    (("types", "type"), "types", MEAL_TYPES, "meal type"),
    (("cultures", "culture"), "cultures", CUISINES, "cuisine"),
)


@dataclasses.dataclass(frozen=True)
class RecipeFilter:
    """Validated query intent for one recipe listing request.

    ``None`` means "not filtered" for every field; boolean flags are
    tri-state for that reason.
    """

    query: str | None = None
    min_cals: float | None = None
    max_cals: float | None = None
    vegetarian: bool | None = None
    vegan: bool | None = None
    gluten_free: bool | None = None
    healthy: bool | None = None
    cheap: bool | None = None
    sustainable: bool | None = None
    rating: float | None = None
    spice_levels: tuple[str, ...] | None = None
    types: tuple[str, ...] | None = None
    cultures: tuple[str, ...] | None = None
    sort: RecipeSortField | None = None
    asc: bool | None = None
    token: str | None = None

    @property
    def has_query(self) -> bool:
        return self.query is not None

    @property
    def ascending(self) -> bool:
        return self.asc is True

    @property
    def uses_compound_cursor(self) -> bool:
        """Whether pagination runs on ``sortField:lastValue:rowId`` tokens."""
        if self.sort is None:
            return False
        return not self.has_query or self.sort == "calories"

    @property
    def uses_search_token(self) -> bool:
        """Whether pagination runs on the search index's own sequence tokens."""
        return self.has_query and not self.uses_compound_cursor

    def cursor(self) -> CursorToken | None:
        if self.token is None or not self.uses_compound_cursor:
            return None
        return CursorToken.decode(self.token)


def _format_bound(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)


def sanitize_number(param: str, raw: Any, bounds: tuple[float, float]) -> int | float:
    """Return *raw* as a number inside the closed *bounds*."""
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ValidationError(f"{param} is not numeric", param=param)
    if isinstance(raw, str):
        text = raw.strip()
        try:
            number = float(text) if text else math.nan
        except ValueError:
            number = math.nan
    else:
        number = float(raw)
    if math.isnan(number):
        raise ValidationError(f"{param} is not numeric", param=param)

    low, high = bounds
    if number < low:
        raise ValidationError(f"{param} must be >= {_format_bound(low)}", param=param)
    if number > high:
        raise ValidationError(f"{param} must be <= {_format_bound(high)}", param=param)
    return int(number) if number.is_integer() else number


def sanitize_enum(
    param: str, raw: Any, vocabulary: Iterable[str], label: str
) -> tuple[str, ...]:
    """Return *raw* (one value or a list) checked against *vocabulary*.

    The first unknown value, in input order, is the one reported.
    """
    values = list(raw) if isinstance(raw, (list, tuple)) else [raw]
    allowed = set(vocabulary)
    for value in values:
        if not isinstance(value, str) or value not in allowed:
            raise ValidationError(f"Unknown {label} received: {value}", param=param)
    return tuple(values)


def _first(params: Mapping[str, Any], names: Iterable[str]) -> tuple[str, Any] | None:
    for name in names:
        if name in params:
            return name, params[name]
    return None


def _scalar(raw: Any) -> Any:
    if isinstance(raw, (list, tuple)):
        return raw[0] if len(raw) == 1 else raw
    return raw


def parse_filter(params: Mapping[str, Any]) -> RecipeFilter:
    """Build a :class:`RecipeFilter` from raw request parameters.

    Accepts the client's camelCase names (``minCals``, ``glutenFree``,
    ``spiceLevel`` …). Values may be strings, numbers or lists of strings.

    Raises
    ------
    ValidationError
        On the first malformed, out-of-range or unknown value.
    """
    kwargs: dict[str, Any] = {}

    for param, attr, bounds in (
        ("minCals", "min_cals", CALORIE_BOUNDS),
        ("maxCals", "max_cals", CALORIE_BOUNDS),
        ("rating", "rating", RATING_BOUNDS),
    ):
        if param in params:
            kwargs[attr] = sanitize_number(param, _scalar(params[param]), bounds)

    for param, attr in FLAG_PARAMS:
        if param in params:
            kwargs[attr] = True

    for names, attr, vocabulary, label in ENUM_PARAMS:
        found = _first(params, names)
        if found is not None:
            kwargs[attr] = sanitize_enum(found[0], found[1], vocabulary, label)

    if "query" in params:
        query = _scalar(params["query"])
        if not isinstance(query, str):
            raise ValidationError("query must be a string", param="query")
        if query.strip():
            kwargs["query"] = query.strip()

    if "sort" in params:
        sort = _scalar(params["sort"])
        if not isinstance(sort, str) or not is_sort_field(sort):
            raise ValidationError(f"Unknown sort field received: {sort}", param="sort")
        kwargs["sort"] = sort

    if "asc" in params:
        kwargs["asc"] = True

    if "token" in params:
        token = _scalar(params["token"])
        if not isinstance(token, str) or not token:
            raise ValidationError("token must be a non-empty string", param="token")
        kwargs["token"] = token

    recipe_filter = RecipeFilter(**kwargs)
    validate_token(recipe_filter)
    return recipe_filter


def validate_token(recipe_filter: RecipeFilter) -> None:
    """Check that ``recipe_filter.token`` has the shape its query and sort expect."""
    token = recipe_filter.token
    if token is None:
        return
    if recipe_filter.uses_compound_cursor:
        cursor = CursorToken.decode(token)
        if cursor.field != recipe_filter.sort:
            raise ValidationError(
                f'Token "{token}" was issued for sort field "{cursor.field}", not "{recipe_filter.sort}"',
                param="token",
            )
    elif not recipe_filter.has_query and not ObjectId.is_valid(token):
        raise ValidationError(f'Token "{token}" is not a valid ObjectId', param="token")


__all__ = [
    "CALORIE_BOUNDS",
    "RATING_BOUNDS",
    "RecipeFilter",
    "parse_filter",
    "sanitize_enum",
    "sanitize_number",
    "validate_token",
]
