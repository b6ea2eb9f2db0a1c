"""
Favorites Store.

Keeps the user's saved recipes as an insertion-ordered set of MealSummary keyed by
id, persisted to durable key-value storage under a fixed, schema-versioned key.

The stored value is a JSON array of catalog-shaped records:
    [{"idMeal": "52772", "strMeal": "Teriyaki Chicken Casserole", "strMealThumb": "..."}]

# NOTE: A future change to the stored format must use a new key (e.g. "favorites:v2")
    instead of rewriting "favorites:v1" in place.

Failure handling:
- Missing or unparsable stored data loads as an empty set; startup never fails
- Individual invalid records are skipped with a warning
- Write failures are logged and swallowed; the in-memory set stays authoritative

Re-adding the most recently removed recipe puts it back at its old position, so
toggling a recipe twice leaves both membership and the stored list unchanged.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from recipes.models import MealSummary
from recipes.storage import JsonFileStorage, StorageError

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites:v1"


class FavoritesStore:
    """
    Persisted set of favorite recipes.

    Args:
        storage: Object with get_item(key) / set_item(key, value), e.g. JsonFileStorage
        key: Storage key holding the serialized list (default: "favorites:v1")
    """

    def __init__(self, storage, key: str = FAVORITES_KEY) -> None:
        self.storage = storage
        self.key = key
        self._items: Dict[str, MealSummary] = self._load()
        self._last_removed: Optional[Tuple[str, int]] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FavoritesStore":
        """Create a store persisted in a JSON file."""
        return cls(JsonFileStorage(path))

    def _load(self) -> Dict[str, MealSummary]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return {}

        try:
            records = json.loads(raw)
        except ValueError as e:
            logger.warning("Stored favorites under %r are not valid JSON, starting empty: %s", self.key, e)
            return {}

        if not isinstance(records, list):
            logger.warning("Stored favorites under %r are not a list, starting empty", self.key)
            return {}

        items: Dict[str, MealSummary] = {}
        for record in records:
            try:
                meal = MealSummary.model_validate(record)
            except ValidationError as e:
                logger.warning("Skipping invalid stored favorite %r: %s", str(record)[:200], e)
                continue
            items.setdefault(meal.id, meal)

        logger.info("Loaded %d favorites from storage", len(items))
        return items

    def _persist(self) -> None:
        payload = json.dumps([meal.to_record() for meal in self._items.values()], ensure_ascii=False)
        try:
            self.storage.set_item(self.key, payload)
        except StorageError as e:
            logger.error("Failed to persist favorites: %s", e)

    @property
    def items(self) -> List[MealSummary]:
        """Favorites in insertion order."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MealSummary]:
        return iter(self.items)

    def __contains__(self, meal_id: object) -> bool:
        return meal_id in self._items

    def is_favorite(self, meal_id: str) -> bool:
        return meal_id in self._items

    def toggle(self, meal: MealSummary) -> bool:
        """
        Add the recipe if absent, remove it if present, then persist.

        Returns:
            True if the recipe is a favorite after the call
        """
        if meal.id in self._items:
            self._last_removed = (meal.id, list(self._items).index(meal.id))
            del self._items[meal.id]
            now_favorite = False
        else:
            self._add(meal)
            now_favorite = True
        self._persist()
        logger.debug("Toggled favorite %s -> %s", meal.id, now_favorite)
        return now_favorite

    def _add(self, meal: MealSummary) -> None:
        restore, self._last_removed = self._last_removed, None
        if restore is None or restore[0] != meal.id or restore[1] >= len(self._items):
            self._items[meal.id] = meal
            return
        entries = list(self._items.items())
        entries.insert(restore[1], (meal.id, meal))
        self._items = dict(entries)

    def clear(self) -> None:
        """Remove every favorite and persist the empty list."""
        self._items.clear()
        self._last_removed = None
        self._persist()
