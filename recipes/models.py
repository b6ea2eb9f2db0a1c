"""
Recipe models for the Recipe Ideas client.

This module defines the canonical recipe schemas used throughout the client.
The catalog connector validates raw TheMealDB records into these models; the
search pipeline, favorites store and detail loader only ever see the models.

# NOTE: MealSummary is serialized with the catalog's field names (idMeal, strMeal,
    strMealThumb). The favorites store persists that shape, so a stored favorite
    looks exactly like a list record returned by the catalog.

Current field expectations:
- filter.php (ingredient/category/area) returns: idMeal, strMeal, strMealThumb
- search.php returns full records, projected down to MealSummary
- lookup.php returns one full record with strIngredient1..20 / strMeasure1..20 slots
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MEAL_PAGE_URL = "https://www.themealdb.com/meal/{id}"

# The catalog exposes numbered ingredient/measure slots strIngredient1..20
MAX_INGREDIENT_SLOTS = 20


def _clean_optional_text(value: Any) -> Optional[str]:
    """Normalize catalog text: None, blank and whitespace-only values become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class SearchMode(str, Enum):
    """How the free-text query is interpreted."""
    INGREDIENT = "ingredient"
    NAME = "name"


class SearchStatus(str, Enum):
    """Outcome of the most recently applied search round."""
    IDLE = "idle"
    LOADING = "loading"
    OK = "ok"
    NO_MATCHES = "no_matches"
    ERROR = "error"


class DetailStatus(str, Enum):
    """State of the detail overlay."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchState:
    """
    Everything that determines the next search round.

    Attributes:
        mode: Ingredient or name search for the free-text query
        query: Raw free-text query as typed (trimmed only when queries are built)
        category: Category filter, empty string means unfiltered
        area: Area filter, empty string means unfiltered
    """
    mode: SearchMode = SearchMode.INGREDIENT
    query: str = ""
    category: str = ""
    area: str = ""


class MealSummary(BaseModel):
    """
    Minimal recipe record used for cards, set operations and favorites.

    The id is the identity key for intersection, deduplication and favorites.
    """
    id: str = Field(..., alias="idMeal", description="Unique catalog identifier")
    name: str = Field(..., alias="strMeal", description="Recipe name")
    thumbnail_url: str = Field("", alias="strMealThumb", description="Thumbnail image URL")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("idMeal is required")
        return str(value).strip()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("thumbnail_url", mode="before")
    @classmethod
    def _coerce_thumbnail(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def source_page_url(self) -> str:
        """Link to the recipe page on the catalog website."""
        return MEAL_PAGE_URL.format(id=self.id)

    def to_record(self) -> Dict[str, str]:
        """Serialize with the catalog's field names."""
        return self.model_dump(by_alias=True)


class IngredientLine(BaseModel):
    """One non-empty ingredient slot of a recipe, with its optional measurement."""
    name: str = Field(..., description="Ingredient name")
    measure: Optional[str] = Field(None, description="Measurement text, None when absent")

    model_config = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        """Render as 'name - measure', or just 'name' when there is no measurement."""
        if self.measure:
            return f"{self.name} - {self.measure}"
        return self.name


def extract_ingredients(record: Dict[str, Any]) -> List[IngredientLine]:
    """
    Extract the ingredient lines of a raw catalog record.

    Slots 1..20 are scanned in ascending order. A slot is included only when its
    ingredient name is non-empty after trimming; blank measurements are dropped.

    Args:
        record: Raw lookup.php record with strIngredientN / strMeasureN keys

    Returns:
        List of IngredientLine in slot order

    Examples:
        >>> extract_ingredients({"strIngredient1": "Rice", "strMeasure1": "1 cup",
        ...                      "strIngredient2": " ", "strIngredient3": "Salt"})
        [IngredientLine(name='Rice', measure='1 cup'), IngredientLine(name='Salt', measure=None)]
    """
    lines: List[IngredientLine] = []
    for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = _clean_optional_text(record.get(f"strIngredient{slot}"))
        if not name:
            continue
        measure = _clean_optional_text(record.get(f"strMeasure{slot}"))
        lines.append(IngredientLine(name=name, measure=measure))
    return lines


class MealDetail(BaseModel):
    """
    Full recipe record shown in the detail overlay.

    Validating a raw lookup.php record fills `ingredients` from the numbered slots.
    """
    id: str = Field(..., alias="idMeal", description="Unique catalog identifier")
    name: str = Field(..., alias="strMeal", description="Recipe name")
    thumbnail_url: str = Field("", alias="strMealThumb", description="Thumbnail image URL")
    category: Optional[str] = Field(None, alias="strCategory", description="Category name")
    area: Optional[str] = Field(None, alias="strArea", description="Cuisine area")
    tags: Optional[str] = Field(None, alias="strTags", description="Comma separated tags")
    source_url: Optional[str] = Field(None, alias="strSource", description="Original recipe URL")
    video_url: Optional[str] = Field(None, alias="strYoutube", description="Video URL")
    instructions: str = Field("", alias="strInstructions", description="Preparation instructions")
    ingredients: List[IngredientLine] = Field(default_factory=list, description="Ordered ingredient lines")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        if isinstance(data, dict) and "ingredients" not in data:
            data = dict(data)
            data["ingredients"] = extract_ingredients(data)
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("idMeal is required")
        return str(value).strip()

    @field_validator("name", "thumbnail_url", "instructions", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("category", "area", "tags", "source_url", "video_url", mode="before")
    @classmethod
    def _coerce_optional(cls, value: Any) -> Optional[str]:
        return _clean_optional_text(value)

    def summary(self) -> MealSummary:
        """Project down to the list shape, e.g. to favorite a recipe from its detail view."""
        return MealSummary(id=self.id, name=self.name, thumbnail_url=self.thumbnail_url)
