"""
Filter, pagination and recipe models for the recipe browser.

This module defines the canonical data shapes shared by the query serializer,
the filter store and the recipe service client.

FilterModel is immutable. Every change produces a new instance via
model_copy(update=...), so listeners can compare old and new models safely.

Field conventions:
- Python attributes are snake_case (tag_ids, max_calories, ...)
- URL parameters and service JSON keep their camelCase names (see the
  aliases on the response models and recipe_browser.query for URL keys)
"""

import re
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

SortBy = Literal["createdAt", "updatedAt", "title", "prepTime"]
SortOrder = Literal["asc", "desc"]

SORT_BY_VALUES: Tuple[str, ...] = ("createdAt", "updatedAt", "title", "prepTime")
SORT_ORDER_VALUES: Tuple[str, ...] = ("asc", "desc")

DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = "desc"
DEFAULT_PAGE = 1

SEARCH_MAX_LENGTH = 255
MAX_CALORIES_RANGE = (1, 10000)
MAX_PREP_TIME_RANGE = (1, 1440)

TAG_ID_PATTERN = re.compile(r"^[0-9a-f-]{36}$", re.IGNORECASE)


class FilterModel(BaseModel):
    """
    In-memory representation of all active recipe search/sort/paging criteria.

    Optional filters are None when inactive. Construction validates ranges,
    the tag id format and uniqueness, and that search is already trimmed; use
    recipe_browser.query sanitizers for untrusted input, which drop invalid
    values instead of raising.
    """
    search: Optional[str] = Field(None, min_length=1, max_length=SEARCH_MAX_LENGTH, description="Free-text query, trimmed")
    tag_ids: Optional[Tuple[str, ...]] = Field(None, min_length=1, description="Selected tag identifiers, in selection order")
    max_calories: Optional[int] = Field(None, ge=MAX_CALORIES_RANGE[0], le=MAX_CALORIES_RANGE[1], description="Max calories per serving")
    max_prep_time: Optional[int] = Field(None, ge=MAX_PREP_TIME_RANGE[0], le=MAX_PREP_TIME_RANGE[1], description="Max prep time in minutes")
    sort_by: SortBy = Field(default=DEFAULT_SORT_BY, description="Sort field")
    sort_order: SortOrder = Field(default=DEFAULT_SORT_ORDER, description="Sort direction")
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="1-indexed page number")

    model_config = ConfigDict(frozen=True)

    @field_validator("search")
    @classmethod
    def _check_search_trimmed(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value != value.strip():
            raise ValueError("search must be trimmed")
        return value

    @field_validator("tag_ids")
    @classmethod
    def _check_tag_ids(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if value is None:
            return value
        for tag_id in value:
            if not TAG_ID_PATTERN.match(tag_id):
                raise ValueError(f"invalid tag id: {tag_id!r}")
        if len(set(value)) != len(value):
            raise ValueError("tag ids must be unique")
        return value

    def is_default(self) -> bool:
        """True when every field equals its default (serializes to an empty query)."""
        return self == FilterModel()


class PaginationModel(BaseModel):
    """Pagination metadata returned by the recipe service."""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    total: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0, alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class Tag(BaseModel):
    """Recipe tag as exposed by the tag listing endpoint."""
    id: str
    name: str
    slug: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Nutrition(BaseModel):
    """Per-serving nutrition values; all optional since recipes may omit them."""
    calories: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    fiber: Optional[float] = None
    salt: Optional[float] = None

    model_config = ConfigDict(extra="ignore")


class RecipeListItem(BaseModel):
    """A single recipe row in the paginated recipe list."""
    id: str
    title: str
    description: Optional[str] = None
    servings: Optional[int] = None
    prep_time_minutes: Optional[int] = Field(None, alias="prepTimeMinutes")
    is_public: bool = Field(default=False, alias="isPublic")
    featured: bool = False
    nutrition_per_serving: Nutrition = Field(default_factory=Nutrition, alias="nutritionPerServing")
    tags: List[Tag] = Field(default_factory=list)
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RecipeListResponse(BaseModel):
    """Response envelope of GET /api/recipes."""
    recipes: List[RecipeListItem] = Field(default_factory=list)
    pagination: Optional[PaginationModel] = None

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RecipeListResponse":
        """Build a response from decoded JSON, treating missing keys as empty."""
        return cls.model_validate({
            "recipes": data.get("recipes") or [],
            "pagination": data.get("pagination"),
        })
