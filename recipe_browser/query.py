"""
Query Serializer: FilterModel <-> URL query string.

Pure functions that convert the filter model to and from the browser's query
string. Parsing never raises: each parameter is validated on its own and any
malformed or out-of-range value falls back to the field default.

URL parameters:
- search: free text (at most 255 chars as given, then trimmed and non-empty)
- tags: comma-separated tag identifiers (36 hex-and-hyphen characters each)
- maxCalories: integer in [1, 10000]
- maxPrepTime: integer minutes in [1, 1440]
- sortBy: createdAt | updatedAt | title | prepTime
- sortOrder: asc | desc
- page: integer >= 1

serialize_query() omits every field equal to its default, so the default
model serializes to an empty string.
"""

import logging
import re
from typing import Any, Dict, Iterable, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from recipe_browser.models import (
    DEFAULT_PAGE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    MAX_CALORIES_RANGE,
    MAX_PREP_TIME_RANGE,
    SEARCH_MAX_LENGTH,
    SORT_BY_VALUES,
    SORT_ORDER_VALUES,
    TAG_ID_PATTERN,
    FilterModel,
)

logger = logging.getLogger(__name__)

PARAM_SEARCH = "search"
PARAM_TAGS = "tags"
PARAM_MAX_CALORIES = "maxCalories"
PARAM_MAX_PREP_TIME = "maxPrepTime"
PARAM_SORT_BY = "sortBy"
PARAM_SORT_ORDER = "sortOrder"
PARAM_PAGE = "page"
PARAM_LIMIT = "limit"

# Leading-digits integer parse: "30min" -> 30, "abc" -> invalid.
# ASCII digits only; other Unicode digits are not numbers in a URL.
_LEADING_INT = re.compile(r"^\s*([+-]?)([0-9]+)")

# Longer digit runs are far outside every accepted range
MAX_INT_DIGITS = 12


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an integer the lenient way a query-string value is usually read.

    Accepts ints directly (bools excluded) and strings starting with an
    optionally signed run of ASCII digits. Returns None for anything else,
    including digit runs longer than MAX_INT_DIGITS.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    sign, digits = match.groups()
    if len(digits) > MAX_INT_DIGITS:
        logger.debug("Dropping oversized integer: %d digits", len(digits))
        return None
    return int(sign + digits)


def sanitize_search(value: Any) -> Optional[str]:
    """Trim a search term; None when empty, not a string, or longer than 255 chars."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed or len(trimmed) > SEARCH_MAX_LENGTH:
        return None
    return trimmed


def is_valid_tag_id(value: Any) -> bool:
    """Check a single tag identifier against the 36-character id pattern."""
    return isinstance(value, str) and TAG_ID_PATTERN.match(value) is not None


def sanitize_tag_ids(values: Optional[Iterable[Any]]) -> Optional[Tuple[str, ...]]:
    """
    Keep the valid tag identifiers, in order and without duplicates.

    Returns None (not an empty tuple) when nothing valid remains.
    """
    if values is None:
        return None
    if isinstance(values, str):
        values = values.split(",")

    kept = []
    for raw in values:
        tag_id = raw.strip() if isinstance(raw, str) else raw
        if not is_valid_tag_id(tag_id):
            logger.debug("Dropping invalid tag id: %r", raw)
            continue
        if tag_id not in kept:
            kept.append(tag_id)
    return tuple(kept) if kept else None


def _sanitize_range(value: Any, bounds: Tuple[int, int]) -> Optional[int]:
    parsed = parse_int(value)
    if parsed is None:
        return None
    low, high = bounds
    if parsed < low or parsed > high:
        return None
    return parsed


def sanitize_max_calories(value: Any) -> Optional[int]:
    """Integer calories in [1, 10000], else None."""
    return _sanitize_range(value, MAX_CALORIES_RANGE)


def sanitize_max_prep_time(value: Any) -> Optional[int]:
    """Integer minutes in [1, 1440], else None."""
    return _sanitize_range(value, MAX_PREP_TIME_RANGE)


def sanitize_sort_by(value: Any) -> str:
    """Known sort field, else the default (createdAt)."""
    return value if value in SORT_BY_VALUES else DEFAULT_SORT_BY


def sanitize_sort_order(value: Any) -> str:
    """asc or desc, else the default (desc)."""
    return value if value in SORT_ORDER_VALUES else DEFAULT_SORT_ORDER


def sanitize_page(value: Any) -> int:
    """Page number >= 1, else the default (1)."""
    parsed = parse_int(value)
    if parsed is None or parsed < 1:
        return DEFAULT_PAGE
    return parsed


def _first_values(raw_query: str) -> Dict[str, str]:
    """Decode a query string keeping the first value of each repeated key."""
    query = raw_query or ""
    if query.startswith("?"):
        query = query[1:]
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def parse_query(raw_query: str) -> FilterModel:
    """
    Parse a raw URL query string into a FilterModel.

    Every recognized parameter is validated independently; invalid values are
    dropped and the field keeps its default. Unknown parameters are ignored.

    Args:
        raw_query: Query string with or without the leading "?"

    Returns:
        A fully valid FilterModel (never raises)
    """
    params = _first_values(raw_query)

    fields: Dict[str, Any] = {}

    # The length limit applies to the raw value, before trimming
    raw_search = params.get(PARAM_SEARCH)
    if raw_search is not None and len(raw_search) <= SEARCH_MAX_LENGTH:
        search = sanitize_search(raw_search)
        if search is not None:
            fields["search"] = search

    if params.get(PARAM_TAGS):
        tag_ids = sanitize_tag_ids(params[PARAM_TAGS])
        if tag_ids is not None:
            fields["tag_ids"] = tag_ids

    max_calories = sanitize_max_calories(params.get(PARAM_MAX_CALORIES))
    if max_calories is not None:
        fields["max_calories"] = max_calories

    max_prep_time = sanitize_max_prep_time(params.get(PARAM_MAX_PREP_TIME))
    if max_prep_time is not None:
        fields["max_prep_time"] = max_prep_time

    fields["sort_by"] = sanitize_sort_by(params.get(PARAM_SORT_BY))
    fields["sort_order"] = sanitize_sort_order(params.get(PARAM_SORT_ORDER))
    fields["page"] = sanitize_page(params.get(PARAM_PAGE))

    return FilterModel(**fields)


def _encode(params: Iterable[Tuple[str, str]]) -> str:
    # Commas stay literal so tag lists remain readable in the address bar
    return urlencode(list(params), safe=",")


def serialize_query(filters: FilterModel) -> str:
    """
    Serialize a FilterModel into a query string (without the leading "?").

    Fields equal to their default are omitted. Parameter order is fixed:
    search, tags, maxCalories, maxPrepTime, sortBy, sortOrder, page.
    """
    params = []

    if filters.search:
        params.append((PARAM_SEARCH, filters.search))
    if filters.tag_ids:
        params.append((PARAM_TAGS, ",".join(filters.tag_ids)))
    if filters.max_calories is not None:
        params.append((PARAM_MAX_CALORIES, str(filters.max_calories)))
    if filters.max_prep_time is not None:
        params.append((PARAM_MAX_PREP_TIME, str(filters.max_prep_time)))
    if filters.sort_by != DEFAULT_SORT_BY:
        params.append((PARAM_SORT_BY, filters.sort_by))
    if filters.sort_order != DEFAULT_SORT_ORDER:
        params.append((PARAM_SORT_ORDER, filters.sort_order))
    if filters.page != DEFAULT_PAGE:
        params.append((PARAM_PAGE, str(filters.page)))

    return _encode(params)


def build_url(path: str, filters: FilterModel) -> str:
    """Join a path and the serialized filters; bare path when the query is empty."""
    query = serialize_query(filters)
    return f"{path}?{query}" if query else path


def build_api_params(filters: FilterModel, limit: int = 20) -> Dict[str, str]:
    """
    Build the request parameters for GET /api/recipes.

    Unlike serialize_query(), paging and sorting are always sent so the
    service never has to guess defaults.
    """
    params: Dict[str, str] = {}

    if filters.search:
        params[PARAM_SEARCH] = filters.search
    if filters.tag_ids:
        params[PARAM_TAGS] = ",".join(filters.tag_ids)
    if filters.max_calories is not None:
        params[PARAM_MAX_CALORIES] = str(filters.max_calories)
    if filters.max_prep_time is not None:
        params[PARAM_MAX_PREP_TIME] = str(filters.max_prep_time)

    params[PARAM_PAGE] = str(filters.page)
    params[PARAM_LIMIT] = str(limit)
    params[PARAM_SORT_BY] = filters.sort_by
    params[PARAM_SORT_ORDER] = filters.sort_order

    return params
